"""
Pipeline version model for deterministic processing.

This module defines the PipelineVersion model that tracks all component versions
so that an illustration plan can be traced back to the exact stoplist, taxonomy
and scoring rules that produced it.
"""

from pydantic import BaseModel, Field


class PipelineVersion(BaseModel):
    """
    Immutable version contract for the analysis and query pipeline.

    Same version parameters + same input text = same analysis. Query strings may
    still vary between runs because descriptor selection is randomized.
    """

    analyzer_version: str = Field(
        description="Keyword/entity/theme analyzer version", examples=["analyzer-1.0.0"]
    )
    stoplist_version: str = Field(
        description="English stopwords list version", examples=["stopwords-en-1.0"]
    )
    taxonomy_version: str = Field(
        description="Theme taxonomy version", examples=["themes-v1.0"]
    )
    content_classifier_version: str = Field(
        description="Content-type classifier version", examples=["content-type-1.0.0"]
    )
    query_generator_version: str = Field(
        description="Query strategy/optimizer version", examples=["query-gen-1.0.0"]
    )

    model_config = {"frozen": True}
