"""
Version constants for the text illustration pipeline.

This module defines all version constants used throughout the pipeline to ensure
deterministic analysis and a complete audit trail.
"""

from .models.pipeline_version import PipelineVersion

# Package version
__version__ = "1.0.0"

# Component versions (update these when implementations change)
ANALYZER_VERSION = "analyzer-1.0.0"
STOPLIST_VERSION = "stopwords-en-1.0"
TAXONOMY_VERSION = "themes-v1.0"  # 8-category topical taxonomy
CONTENT_CLASSIFIER_VERSION = "content-type-1.0.0"
QUERY_GENERATOR_VERSION = "query-gen-1.0.0"


def get_current_pipeline_version() -> PipelineVersion:
    """
    Get current pipeline version configuration.

    Returns:
        PipelineVersion instance with current versions
    """
    return PipelineVersion(
        analyzer_version=ANALYZER_VERSION,
        stoplist_version=STOPLIST_VERSION,
        taxonomy_version=TAXONOMY_VERSION,
        content_classifier_version=CONTENT_CLASSIFIER_VERSION,
        query_generator_version=QUERY_GENERATOR_VERSION,
    )
