"""
Hard filters for candidate query cleaning.

Applies deterministic filters, in order:
- Generic single-word removal
- Generic-term disambiguation (descriptor prefix, randomized)
- Case/whitespace-insensitive deduplication
"""

from typing import AbstractSet, List

from ..models.queries import SearchQuery
from .builders import build_enhanced_keyword_query
from .descriptors import DescriptorPicker, enhancement_descriptors, uniform_picker
from .query_config import QueryGenerationConfig

# Queries shorter than this that contain a generic term get a descriptor
GENERIC_ENHANCE_MAX_WORDS = 3


def filter_generic_queries(
    queries: List[SearchQuery],
    generic_terms: AbstractSet[str],
) -> List[SearchQuery]:
    """
    Drop single-word queries whose only word is a generic term.

    "thing" is dropped when "thing" is generic; "red thing" is kept (and later
    enhanced).
    """
    filtered = []
    for query in queries:
        words = query.query.lower().split()
        if len(words) == 1 and words[0] in generic_terms:
            continue
        filtered.append(query)
    return filtered


def enhance_generic_query(
    query: SearchQuery,
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> SearchQuery:
    """
    Prefix a descriptor to short queries that contain a generic term.

    Returns the query unchanged when it has no generic term or already has
    three or more words.
    """
    words = query.query.lower().split()
    has_generic = any(word in config.generic_terms for word in words)
    if not has_generic or len(words) >= GENERIC_ENHANCE_MAX_WORDS:
        return query

    descriptor = picker(enhancement_descriptors(config))
    components = query.components.model_copy(
        update={"descriptors": [descriptor] + (query.components.descriptors or [])}
    )
    enhanced = build_enhanced_keyword_query(query.query, descriptor)
    return query.model_copy(update={"query": enhanced, "components": components})


def enhance_generic_queries(
    queries: List[SearchQuery],
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> List[SearchQuery]:
    return [enhance_generic_query(query, config, picker) for query in queries]


def deduplicate_queries(queries: List[SearchQuery]) -> List[SearchQuery]:
    """Keep the first candidate for each lower-cased, trimmed query text."""
    seen = set()
    unique = []
    for query in queries:
        if query.normalized in seen:
            continue
        seen.add(query.normalized)
        unique.append(query)
    return unique
