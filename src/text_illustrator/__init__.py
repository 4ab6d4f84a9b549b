"""
text_illustrator - photo search query generation for prose.

Analyzes a block of text (keywords, entities, themes, writing style) and turns
it into ranked stock-photo search queries.
"""

from .analysis import analyze_text
from .classification import detect_content_type
from .plan import build_illustration_plan
from .queries import generate_queries, load_query_config, merge_query_config, validate_query_config
from .version import __version__

__all__ = [
    "analyze_text",
    "detect_content_type",
    "generate_queries",
    "load_query_config",
    "merge_query_config",
    "validate_query_config",
    "build_illustration_plan",
    "__version__",
]
