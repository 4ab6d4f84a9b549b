"""
Classification package: writing-style detection.

Main components:
- content_type: rule-based narrative / technical / descriptive / mixed classifier
"""

from text_illustrator.classification.content_type import (
    ContentTypeClassifier,
    ContentTypeThresholds,
    ContentTypeWeights,
    default_content_type,
    detect_content_type,
)
from text_illustrator.models.analysis import ContentType, ContentTypeAnalysis

__all__ = [
    "ContentType",
    "ContentTypeAnalysis",
    "ContentTypeClassifier",
    "ContentTypeThresholds",
    "ContentTypeWeights",
    "default_content_type",
    "detect_content_type",
]
