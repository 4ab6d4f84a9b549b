"""
Style-specific query strategy generators.

Three independent generators turn a TextAnalysis into unscored candidate
queries, each with descriptor vocabulary suited to one writing style:

- narrative: atmospheric moods and lighting around keywords, entities, themes
- technical: clean, professional, abstract framing
- descriptive: concrete colors, settings and lighting

mix_strategy_queries() blends them according to the detected content type.
"""

import math
from typing import List

import structlog

from ..models.analysis import ContentType, TextAnalysis
from ..models.queries import QueryComponents, SearchQuery
from .builders import (
    build_descriptive_query,
    build_enhanced_keyword_query,
    build_entity_context_query,
    build_theme_keyword_query,
)
from .descriptors import (
    PROFESSIONAL_MODIFIERS,
    DescriptorPicker,
    emotional_descriptors,
    uniform_picker,
)
from .query_config import QueryGenerationConfig


logger = structlog.get_logger(__name__)

# Share of a non-dominant generator's candidates kept (rounded up)
SECONDARY_STRATEGY_SHARE = 0.3

# Bare keyword candidates always appended for diversity
DIVERSITY_KEYWORD_COUNT = 2


# ============================================================================
# GENERATORS
# ============================================================================

def generate_narrative_queries(
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> List[SearchQuery]:
    """
    Emotional and atmospheric queries for story-like text.

    - top-2 keywords with a mood or lighting descriptor (contextual)
    - first entity with a mood and the first theme (entity)
    - every theme with a lighting descriptor (theme)
    """
    descriptors = config.visual_descriptors
    queries = []

    for kw in analysis.keywords[:2]:
        descriptor = picker(emotional_descriptors(config))
        queries.append(SearchQuery(
            query=build_enhanced_keyword_query(kw.word, descriptor),
            strategy="contextual",
            components=QueryComponents(keywords=[kw.word], descriptors=[descriptor]),
        ))

    if analysis.entities and analysis.themes:
        entity, theme = analysis.entities[0], analysis.themes[0]
        mood = picker(descriptors.moods)
        queries.append(SearchQuery(
            query=f"{mood} {entity} {theme}",
            strategy="entity",
            components=QueryComponents(entities=[entity], themes=[theme], descriptors=[mood]),
        ))

    for theme in analysis.themes:
        lighting = picker(descriptors.lighting)
        queries.append(SearchQuery(
            query=build_theme_keyword_query(theme, lighting),
            strategy="theme",
            components=QueryComponents(themes=[theme], descriptors=[lighting]),
        ))

    return queries


def generate_technical_queries(
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> List[SearchQuery]:
    """
    Clean, professional queries for technical text.

    - top-2 keywords with a professional modifier (keyword)
    - every theme with a minimal/modern setting (theme)
    - "abstract kw0 kw1" when two keywords exist (combined)
    """
    queries = []

    for kw in analysis.keywords[:2]:
        modifier = picker(PROFESSIONAL_MODIFIERS)
        queries.append(SearchQuery(
            query=build_enhanced_keyword_query(kw.word, modifier),
            strategy="keyword",
            components=QueryComponents(keywords=[kw.word], descriptors=[modifier]),
        ))

    setting = "minimal" if "minimal" in config.visual_descriptors.settings else "modern"
    for theme in analysis.themes:
        queries.append(SearchQuery(
            query=f"{setting} {theme}",
            strategy="theme",
            components=QueryComponents(themes=[theme], descriptors=[setting]),
        ))

    if len(analysis.keywords) >= 2:
        first, second = analysis.keywords[0].word, analysis.keywords[1].word
        queries.append(SearchQuery(
            query=f"abstract {first} {second}",
            strategy="combined",
            components=QueryComponents(keywords=[first, second], descriptors=["abstract"]),
        ))

    return queries


def generate_descriptive_queries(
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> List[SearchQuery]:
    """
    Concrete scene queries for descriptive text.

    - top-3 keywords framed by a color and a setting (contextual)
    - first entity with a setting (entity)
    - every theme with a color and lighting (theme)
    """
    descriptors = config.visual_descriptors
    queries = []

    for kw in analysis.keywords[:3]:
        color = picker(descriptors.colors)
        setting = picker(descriptors.settings)
        queries.append(SearchQuery(
            query=build_descriptive_query(kw.word, color, setting),
            strategy="contextual",
            components=QueryComponents(keywords=[kw.word], descriptors=[color, setting]),
        ))

    if analysis.entities:
        entity = analysis.entities[0]
        setting = picker(descriptors.settings)
        queries.append(SearchQuery(
            query=build_entity_context_query(entity, setting),
            strategy="entity",
            components=QueryComponents(entities=[entity], descriptors=[setting]),
        ))

    for theme in analysis.themes:
        color = picker(descriptors.colors)
        lighting = picker(descriptors.lighting)
        queries.append(SearchQuery(
            query=f"{color} {theme} {lighting}",
            strategy="theme",
            components=QueryComponents(themes=[theme], descriptors=[color, lighting]),
        ))

    return queries


def keyword_diversity_queries(analysis: TextAnalysis) -> List[SearchQuery]:
    """Bare top keywords, appended to every candidate pool."""
    return [
        SearchQuery(
            query=kw.word,
            strategy="keyword",
            components=QueryComponents(keywords=[kw.word]),
        )
        for kw in analysis.keywords[:DIVERSITY_KEYWORD_COUNT]
    ]


# ============================================================================
# MIXING
# ============================================================================

def secondary_share(queries: List[SearchQuery]) -> List[SearchQuery]:
    """First ceil(30%) of a non-dominant generator's candidates."""
    # round() keeps 10 * 0.3 from ceiling to 4
    return queries[: math.ceil(round(len(queries) * SECONDARY_STRATEGY_SHARE, 9))]


def mix_strategy_queries(
    content_type: ContentType,
    narrative: List[SearchQuery],
    technical: List[SearchQuery],
    descriptive: List[SearchQuery],
) -> List[SearchQuery]:
    """
    Blend generator outputs so the dominant style leads.

    The dominant generator contributes every candidate, the other two only
    their first ceil(30%). Mixed content takes all three in full.

    Args:
        content_type: Detected content type
        narrative, technical, descriptive: Generator outputs

    Returns:
        Merged candidate pool (dominant first)
    """
    if content_type == ContentType.NARRATIVE:
        pool = narrative + secondary_share(technical) + secondary_share(descriptive)
    elif content_type == ContentType.TECHNICAL:
        pool = technical + secondary_share(narrative) + secondary_share(descriptive)
    elif content_type == ContentType.DESCRIPTIVE:
        pool = descriptive + secondary_share(narrative) + secondary_share(technical)
    else:
        pool = narrative + technical + descriptive

    logger.debug(
        "strategies_mixed",
        content_type=content_type.value,
        narrative=len(narrative),
        technical=len(technical),
        descriptive=len(descriptive),
        pool=len(pool),
    )

    return pool


def generate_candidate_pool(
    analysis: TextAnalysis,
    content_type: ContentType,
    config: QueryGenerationConfig,
    picker: DescriptorPicker = uniform_picker,
) -> List[SearchQuery]:
    """Run all three generators, mix them and append the diversity keywords."""
    pool = mix_strategy_queries(
        content_type,
        generate_narrative_queries(analysis, config, picker),
        generate_technical_queries(analysis, config, picker),
        generate_descriptive_queries(analysis, config, picker),
    )
    return pool + keyword_diversity_queries(analysis)
