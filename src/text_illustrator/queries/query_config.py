"""
Query generation configuration: defaults, validation and merging.

Configuration is resolved in two separate stages so the fallback behaviour can
be audited and tested on its own:

1. validate_query_config(partial) -> bool
2. merge_query_config(partial, defaults) -> QueryGenerationConfig

load_query_config() chains them and falls back to the built-in defaults when
validation fails. A malformed override is never partially applied.

Both snake_case field names and their camelCase aliases (keywordImportance,
minRelevanceScore, visualDescriptors, ...) are accepted.
"""

from typing import Annotated, Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, Strict, ValidationError
from pydantic.alias_generators import to_camel


logger = structlog.get_logger(__name__)


# ============================================================================
# DEFAULT VOCABULARY
# ============================================================================

DEFAULT_GENERIC_TERMS = (
    "thing", "stuff", "item", "object", "place", "area", "way", "time",
    "person", "people", "work", "life", "world", "day", "year", "part",
    "number", "group", "problem", "fact", "hand", "eye", "case", "point",
)

DEFAULT_COLORS = (
    "vibrant", "muted", "warm", "cool", "bright", "dark", "colorful", "monochrome",
)
DEFAULT_MOODS = (
    "peaceful", "dramatic", "energetic", "calm", "mysterious", "serene", "dynamic",
    "contemplative",
)
DEFAULT_SETTINGS = (
    "natural", "urban", "indoor", "outdoor", "minimal", "rustic", "modern", "vintage",
)
DEFAULT_LIGHTING = (
    "sunset", "sunrise", "golden hour", "soft light", "dramatic light", "natural light",
    "backlit", "silhouette",
)


# ============================================================================
# RESOLVED CONFIGURATION
# ============================================================================

class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ScoringWeights(_ConfigModel):
    """Weights of the three relevance components (need not sum to 1)."""

    keyword_importance: float = 0.4
    theme_strength: float = 0.3
    query_specificity: float = 0.3


class QueryThresholds(_ConfigModel):
    """Optimizer thresholds."""

    min_relevance_score: float = 0.3
    max_queries: int = 8
    min_query_words: int = 2


class VisualDescriptors(_ConfigModel):
    """Descriptor vocabulary buckets used to decorate queries."""

    colors: Tuple[str, ...] = DEFAULT_COLORS
    moods: Tuple[str, ...] = DEFAULT_MOODS
    settings: Tuple[str, ...] = DEFAULT_SETTINGS
    lighting: Tuple[str, ...] = DEFAULT_LIGHTING


class ContentTypeMix(_ConfigModel):
    """Relative preference for each writing style, reported with the config."""

    narrative: float = 0.33
    technical: float = 0.33
    descriptive: float = 0.34


class QueryGenerationConfig(_ConfigModel):
    """
    Complete, immutable configuration for one query generation run.

    QueryGenerationConfig() is the built-in default configuration.
    """

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    thresholds: QueryThresholds = Field(default_factory=QueryThresholds)
    generic_terms: FrozenSet[str] = frozenset(DEFAULT_GENERIC_TERMS)
    visual_descriptors: VisualDescriptors = Field(default_factory=VisualDescriptors)
    content_type_weights: ContentTypeMix = Field(default_factory=ContentTypeMix)


DEFAULT_QUERY_CONFIG = QueryGenerationConfig()


# ============================================================================
# PARTIAL OVERRIDE SHAPE
# ============================================================================

UnitInterval = Annotated[float, Strict(), Field(ge=0.0, le=1.0)]
NonNegative = Annotated[float, Strict(), Field(ge=0.0)]
AtLeastOne = Annotated[int, Strict(), Field(ge=1)]
Vocabulary = Annotated[List[str], Field(min_length=1)]


class _OverrideModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class WeightsOverride(_OverrideModel):
    # A weights block must carry all three weights
    keyword_importance: UnitInterval
    theme_strength: UnitInterval
    query_specificity: UnitInterval


class ThresholdsOverride(_OverrideModel):
    min_relevance_score: Optional[UnitInterval] = None
    max_queries: Optional[AtLeastOne] = None
    min_query_words: Optional[AtLeastOne] = None


class VisualDescriptorsOverride(_OverrideModel):
    colors: Optional[Vocabulary] = None
    moods: Optional[Vocabulary] = None
    settings: Optional[Vocabulary] = None
    lighting: Optional[Vocabulary] = None


class ContentTypeMixOverride(_OverrideModel):
    narrative: Optional[NonNegative] = None
    technical: Optional[NonNegative] = None
    descriptive: Optional[NonNegative] = None


class QueryConfigOverride(_OverrideModel):
    """Shape of a partial QueryGenerationConfig supplied by a caller."""

    weights: Optional[WeightsOverride] = None
    thresholds: Optional[ThresholdsOverride] = None
    generic_terms: Optional[List[str]] = None
    visual_descriptors: Optional[VisualDescriptorsOverride] = None
    content_type_weights: Optional[ContentTypeMixOverride] = None


# ============================================================================
# VALIDATE / MERGE / LOAD
# ============================================================================

def validate_query_config(partial: Any) -> bool:
    """
    Check that a partial override has a valid shape and values.

    Args:
        partial: Candidate override (mapping), or None

    Returns:
        True when the override can be merged, False otherwise
    """
    if partial is None:
        return True

    if not isinstance(partial, Mapping):
        logger.warning("query_config_invalid", reason="not_a_mapping", type=type(partial).__name__)
        return False

    try:
        QueryConfigOverride.model_validate(dict(partial))
    except ValidationError as e:
        logger.warning(
            "query_config_invalid",
            reason="validation_failed",
            error_count=e.error_count(),
            fields=[".".join(str(part) for part in err["loc"]) for err in e.errors()],
        )
        return False

    return True


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _deep_merge(dict(merged[key]), value)
        else:
            merged[key] = value
    return merged


def merge_query_config(
    partial: Optional[Mapping[str, Any]],
    defaults: QueryGenerationConfig = DEFAULT_QUERY_CONFIG,
) -> QueryGenerationConfig:
    """
    Deep-merge a validated partial override onto defaults.

    Callers must run validate_query_config() first; an invalid override raises
    pydantic.ValidationError here.

    Args:
        partial: Validated override (or None)
        defaults: Base configuration

    Returns:
        New QueryGenerationConfig
    """
    if not partial:
        return defaults

    override = QueryConfigOverride.model_validate(dict(partial))
    merged = _deep_merge(defaults.model_dump(), override.model_dump(exclude_none=True))
    return QueryGenerationConfig.model_validate(merged)


def load_query_config(partial: Any = None) -> QueryGenerationConfig:
    """
    Resolve the configuration for one query generation run.

    Args:
        partial: None, a full QueryGenerationConfig, or a partial override mapping

    Returns:
        Defaults when partial is None or invalid, otherwise the merged config
    """
    if partial is None:
        logger.debug("query_config_defaults")
        return DEFAULT_QUERY_CONFIG

    if isinstance(partial, QueryGenerationConfig):
        return partial

    if not validate_query_config(partial):
        logger.warning("query_config_fallback_to_defaults")
        return DEFAULT_QUERY_CONFIG

    config = merge_query_config(partial)
    logger.debug("query_config_loaded", override_keys=sorted(partial.keys()))
    return config
