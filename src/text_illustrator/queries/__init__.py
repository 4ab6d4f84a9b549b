"""
Photo search query generation module.

Public API for turning a TextAnalysis into ranked, deduplicated search queries
and for loading the configuration that drives it.
"""

from .basic import generate_basic_queries
from .descriptors import DescriptorPicker, seeded_picker, uniform_picker
from .optimizer import OptimizerLimits, optimize_search_queries, rank_queries
from .pipeline import generate_queries
from .query_config import (
    DEFAULT_QUERY_CONFIG,
    ContentTypeMix,
    QueryGenerationConfig,
    QueryThresholds,
    ScoringWeights,
    VisualDescriptors,
    load_query_config,
    merge_query_config,
    validate_query_config,
)
from .scoring import calculate_relevance_score, score_queries

__all__ = [
    "generate_queries",
    "generate_basic_queries",
    "optimize_search_queries",
    "rank_queries",
    "calculate_relevance_score",
    "score_queries",
    "load_query_config",
    "merge_query_config",
    "validate_query_config",
    "DEFAULT_QUERY_CONFIG",
    "QueryGenerationConfig",
    "ScoringWeights",
    "QueryThresholds",
    "VisualDescriptors",
    "ContentTypeMix",
    "OptimizerLimits",
    "DescriptorPicker",
    "seeded_picker",
    "uniform_picker",
]
