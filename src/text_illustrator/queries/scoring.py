"""
Relevance scoring for candidate queries.

Combines three signals with the configured weights:
- Keyword importance - mean salience of the keywords a query uses
- Theme strength - share of the analysis themes a query covers
- Query specificity - longer queries are more specific

The result is clipped to [0.0, 1.0].
"""

from typing import List

import numpy as np
import structlog

from ..models.analysis import TextAnalysis
from ..models.queries import SearchQuery
from .query_config import QueryGenerationConfig


logger = structlog.get_logger(__name__)

# Raw keyword importance rarely exceeds 0.5; doubling maps it onto [0, 1]
KEYWORD_IMPORTANCE_SCALE = 2.0

# Word count at which specificity saturates is SPECIFICITY_WORDS + 1
SPECIFICITY_WORDS = 4


def keyword_importance_component(query: SearchQuery, analysis: TextAnalysis) -> float:
    """
    Mean importance of the query's keywords, rescaled to [0, 1].

    Keywords absent from the analysis count as 0. Queries without keywords
    score 0.
    """
    words = query.components.keywords
    if not words:
        return 0.0

    importance = {kw.word: kw.importance for kw in analysis.keywords}
    mean = np.mean([importance.get(word, 0.0) for word in words])
    return float(np.clip(mean * KEYWORD_IMPORTANCE_SCALE, 0.0, 1.0))


def theme_strength_component(query: SearchQuery, analysis: TextAnalysis) -> float:
    """Fraction of the analysis themes referenced by the query."""
    themes = query.components.themes
    if not themes or not analysis.themes:
        return 0.0

    matching = sum(1 for theme in themes if theme in analysis.themes)
    return matching / len(analysis.themes)


def specificity_component(query: SearchQuery) -> float:
    """(word_count - 1) / 4, clipped to [0, 1]."""
    return float(np.clip((query.word_count - 1) / SPECIFICITY_WORDS, 0.0, 1.0))


def calculate_relevance_score(
    query: SearchQuery,
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
) -> float:
    """
    Score one candidate query against the analysis.

    Args:
        query: Candidate query
        analysis: TextAnalysis the candidate was built from
        config: Configuration providing the component weights

    Returns:
        Relevance score in [0.0, 1.0]
    """
    weights = config.weights
    score = (
        keyword_importance_component(query, analysis) * weights.keyword_importance
        + theme_strength_component(query, analysis) * weights.theme_strength
        + specificity_component(query) * weights.query_specificity
    )
    return float(np.clip(score, 0.0, 1.0))


def score_queries(
    queries: List[SearchQuery],
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
) -> List[SearchQuery]:
    """
    Return copies of the candidates with relevance_score assigned.

    The input candidates are left untouched.
    """
    scored = [
        query.model_copy(update={"relevance_score": calculate_relevance_score(query, analysis, config)})
        for query in queries
    ]

    if scored:
        logger.debug(
            "queries_scored",
            count=len(scored),
            max_score=round(max(q.relevance_score for q in scored), 3),
        )

    return scored
