# Data models for the text illustration pipeline

from .pipeline_version import PipelineVersion
from .analysis import (
    ContentType,
    ContentTypeAnalysis,
    ContentTypeIndicators,
    KeywordData,
    TextAnalysis,
)
from .queries import QueryComponents, QueryStrategy, SearchQuery
from .plan import IllustrationPlan

__all__ = [
    "PipelineVersion",
    "ContentType",
    "ContentTypeAnalysis",
    "ContentTypeIndicators",
    "KeywordData",
    "TextAnalysis",
    "QueryComponents",
    "QueryStrategy",
    "SearchQuery",
    "IllustrationPlan",
]
