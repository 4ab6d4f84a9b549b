"""
Basic query builder used when optimized generation fails.

No descriptors, scoring or configuration: just the strongest analysis signals
as bare queries.
"""

from typing import List

from ..models.analysis import TextAnalysis
from .builders import build_theme_keyword_query

# Maximum queries returned by the basic builder
BASIC_MAX_QUERIES = 6


def generate_basic_queries(analysis: TextAnalysis) -> List[str]:
    """
    Build plain queries from keywords, themes and entities.

    Order: top-3 keywords, every theme, the first two entities, the top two
    keywords joined, then the first theme with the top keyword. Duplicates are
    removed keeping the first occurrence, and at most six queries are returned.
    """
    words = analysis.keyword_words
    queries = list(words[:3])
    queries.extend(analysis.themes)
    queries.extend(analysis.entities[:2])

    if len(words) >= 2:
        queries.append(f"{words[0]} {words[1]}")

    if analysis.themes and words:
        queries.append(build_theme_keyword_query(analysis.themes[0], words[0]))

    return list(dict.fromkeys(queries))[:BASIC_MAX_QUERIES]
