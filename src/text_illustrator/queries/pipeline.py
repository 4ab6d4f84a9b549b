"""
Photo search query generation pipeline.

generate_queries() is the entry point: it resolves configuration, detects the
content type, builds and cleans the candidate pool, optimizes it and walks the
degradation ladder when optimization leaves nothing. It never raises.
"""

from typing import Any, List, Optional, Tuple

import structlog

from ..classification import default_content_type, detect_content_type
from ..models.analysis import ContentTypeAnalysis, TextAnalysis
from .basic import generate_basic_queries
from .descriptors import DescriptorPicker, uniform_picker
from .filters import deduplicate_queries, enhance_generic_queries, filter_generic_queries
from .optimizer import (
    OptimizerLimits,
    clamp_results,
    optimize_search_queries,
    rank_queries,
    relax_thresholds,
)
from .query_config import QueryGenerationConfig, load_query_config
from .scoring import score_queries
from .strategies import generate_candidate_pool


logger = structlog.get_logger(__name__)


def _resolve_content_type(analysis: TextAnalysis) -> ContentTypeAnalysis:
    try:
        content_type = detect_content_type(analysis)
    except Exception as e:
        logger.warning("content_type_detection_failed", error=str(e))
        return default_content_type()

    logger.debug(
        "content_type_detected",
        type=content_type.type.value,
        confidence=round(content_type.confidence, 2),
    )
    return content_type


def _generate_optimized(
    analysis: TextAnalysis,
    config: QueryGenerationConfig,
    picker: DescriptorPicker,
    limits: OptimizerLimits,
    content_type: Optional[ContentTypeAnalysis],
) -> Tuple[List[str], str]:
    """Run the optimized path. Returns (queries, mode) where mode is "optimized" or "keyword"."""
    if content_type is None:
        content_type = _resolve_content_type(analysis)

    candidates = generate_candidate_pool(analysis, content_type.type, config, picker)
    candidates = filter_generic_queries(candidates, config.generic_terms)
    candidates = enhance_generic_queries(candidates, config, picker)
    candidates = deduplicate_queries(candidates)

    active_config = config
    selected = optimize_search_queries(candidates, analysis, active_config)

    if not selected:
        active_config = relax_thresholds(config, limits.relaxation_step)
        logger.warning(
            "queries_below_threshold_retrying",
            min_relevance_score=active_config.thresholds.min_relevance_score,
        )
        selected = optimize_search_queries(candidates, analysis, active_config)

    if not selected:
        fallback = analysis.keyword_words[: limits.keyword_fallback_count]
        logger.warning("queries_keyword_fallback", count=len(fallback))
        return fallback, "keyword"

    ranked_pool = rank_queries(score_queries(candidates, analysis, active_config))
    results = clamp_results(selected, ranked_pool, analysis, active_config, limits)

    for query in selected:
        logger.debug(
            "query_selected",
            query=query.query,
            score=round(query.relevance_score, 3),
            strategy=query.strategy,
        )

    return results, "optimized"


def generate_queries(
    analysis: TextAnalysis,
    config: Any = None,
    picker: Optional[DescriptorPicker] = None,
    limits: Optional[OptimizerLimits] = None,
    content_type: Optional[ContentTypeAnalysis] = None,
) -> List[str]:
    """
    Generate ranked photo search queries for an analyzed text.

    Args:
        analysis: TextAnalysis from analyze_text()
        config: None, a partial override mapping or a full QueryGenerationConfig.
            Invalid overrides fall back to the defaults.
        picker: Descriptor picker (default: uniform random choice)
        limits: Output bounds (default: from settings)
        content_type: Pre-computed content type, detected when omitted

    Returns:
        Unique query strings, best first. Between 6 and 10 queries when the
        optimizer selects anything, at most 6 bare keywords when it selects
        nothing, empty when the analysis has no keywords or is not a TextAnalysis.
    """
    if not isinstance(analysis, TextAnalysis):
        logger.warning("query_generation_invalid_input", input_type=type(analysis).__name__)
        return []

    resolved = load_query_config(config)
    picker = picker or uniform_picker
    limits = limits or OptimizerLimits.from_config()

    try:
        queries, mode = _generate_optimized(analysis, resolved, picker, limits, content_type)
    except Exception as e:
        logger.error("query_generation_failed", error=str(e), exc_info=True)
        queries = generate_basic_queries(analysis)
        logger.info("queries_generated", count=len(queries), mode="basic")
        return queries

    logger.info("queries_generated", count=len(queries), mode=mode)
    return queries
