"""
Query ranking, truncation and result-size clamping.

The optimizer scores candidates, drops those below the relevance threshold,
ranks the rest and truncates to max_queries. Scores within RANKING_TIE_WINDOW
of each other are treated as tied, and ties prefer longer (more specific)
queries.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List

import structlog

from ..config import settings
from ..models.analysis import TextAnalysis
from ..models.queries import SearchQuery
from .builders import build_enhanced_keyword_query
from .descriptors import enhancement_descriptors
from .query_config import QueryGenerationConfig
from .scoring import score_queries


logger = structlog.get_logger(__name__)

# Scores closer than this rank by word count instead
RANKING_TIE_WINDOW = 0.1


@dataclass
class OptimizerLimits:
    """
    Output bounds and degradation-ladder parameters.

    min_results/max_results clamp the final list when optimized results exist;
    keyword_fallback_count bounds the keyword-only fallback; relaxation_step is
    subtracted from min_relevance_score for the single retry.
    """
    min_results: int = 6
    max_results: int = 10
    keyword_fallback_count: int = 6
    relaxation_step: float = 0.1

    @classmethod
    def from_config(cls) -> "OptimizerLimits":
        """Load limits from settings."""
        return cls(
            min_results=settings.query_min_results,
            max_results=settings.query_max_results,
            keyword_fallback_count=settings.query_keyword_fallback_count,
            relaxation_step=settings.query_threshold_relaxation_step,
        )


def _compare(a: SearchQuery, b: SearchQuery) -> int:
    if abs(a.relevance_score - b.relevance_score) > RANKING_TIE_WINDOW:
        return -1 if a.relevance_score > b.relevance_score else 1
    return b.word_count - a.word_count


def rank_queries(queries: List[SearchQuery]) -> List[SearchQuery]:
    """Sort scored queries best-first using the tie window rule."""
    return sorted(queries, key=cmp_to_key(_compare))


def optimize_search_queries(
    queries: List[SearchQuery],
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
) -> List[SearchQuery]:
    """
    Score, threshold, rank and truncate candidate queries.

    Args:
        queries: Filtered, deduplicated candidates
        analysis: TextAnalysis the candidates were built from
        config: Configuration (weights and thresholds)

    Returns:
        At most config.thresholds.max_queries scored queries, best first.
        Empty when nothing reaches min_relevance_score.
    """
    thresholds = config.thresholds
    scored = score_queries(queries, analysis, config)
    kept = [q for q in scored if q.relevance_score >= thresholds.min_relevance_score]

    logger.debug(
        "queries_optimized",
        candidates=len(scored),
        above_threshold=len(kept),
        min_relevance_score=thresholds.min_relevance_score,
    )

    return rank_queries(kept)[: thresholds.max_queries]


def relax_thresholds(config: QueryGenerationConfig, step: float) -> QueryGenerationConfig:
    """Copy of config with min_relevance_score lowered by step (floored at 0)."""
    thresholds = config.thresholds.model_copy(
        update={"min_relevance_score": max(0.0, config.thresholds.min_relevance_score - step)}
    )
    return config.model_copy(update={"thresholds": thresholds})


def clamp_results(
    selected: List[SearchQuery],
    ranked_pool: List[SearchQuery],
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
    limits: OptimizerLimits,
) -> List[str]:
    """
    Bound the final query list to [min_results, max_results].

    Short lists are padded, skipping duplicates, first with ranked candidates
    that missed the cut, then with descriptor + keyword queries.

    Args:
        selected: Optimizer output (non-empty)
        ranked_pool: Every scored candidate, ranked
        analysis: TextAnalysis (keywords feed the padding)
        config: Configuration (descriptor vocabulary)
        limits: Output bounds

    Returns:
        Query strings, best first
    """
    results: List[str] = []
    seen = set()

    def add(query: str) -> None:
        key = query.strip().lower()
        if key not in seen and len(results) < limits.max_results:
            seen.add(key)
            results.append(query)

    for query in selected:
        add(query.query)

    if len(results) < limits.min_results:
        for query in ranked_pool:
            add(query.query)
            if len(results) >= limits.min_results:
                break

    if len(results) < limits.min_results:
        for kw in analysis.keywords:
            for descriptor in enhancement_descriptors(config):
                add(build_enhanced_keyword_query(kw.word, descriptor))
                if len(results) >= limits.min_results:
                    return results

    return results
