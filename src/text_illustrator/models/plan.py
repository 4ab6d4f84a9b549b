"""
End-to-end result model handed to article storage/rendering.
"""

from typing import List

from pydantic import BaseModel, Field

from .analysis import ContentTypeAnalysis
from .pipeline_version import PipelineVersion


class IllustrationPlan(BaseModel):
    """
    Everything an article consumer needs to illustrate a block of prose.

    Includes the ranked photo search queries, the extracted signals and
    processing metadata.
    """

    title: str = Field(description="Article title derived from the text")
    keywords: List[str] = Field(default_factory=list, description="Keyword words, ranked")
    themes: List[str] = Field(default_factory=list)
    entities: List[str] = Field(default_factory=list)
    content_type: ContentTypeAnalysis
    queries: List[str] = Field(
        default_factory=list, description="Ranked, deduplicated photo search queries"
    )

    pipeline_version: PipelineVersion
    processing_time_ms: float = Field(description="End-to-end time in milliseconds", ge=0.0)
