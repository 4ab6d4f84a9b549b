"""
Data models for text analysis.

This module defines the structures produced by keyword, entity and theme
extraction, and by the content-type classifier. They are the single shared
artifact consumed by every query-generation stage.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """Writing-style classes used to bias query strategy selection."""

    NARRATIVE = "narrative"
    TECHNICAL = "technical"
    DESCRIPTIVE = "descriptive"
    MIXED = "mixed"


class KeywordData(BaseModel):
    """
    A single salient keyword extracted from the text.

    Importance is a TF-IDF-like score computed within one document.
    """

    word: str = Field(description="Normalized (lower-cased) keyword")
    frequency: int = Field(description="Occurrences in the normalized token stream", ge=1)
    importance: float = Field(description="TF-IDF-like salience score", ge=0.0)

    model_config = {"frozen": True}


class TextAnalysis(BaseModel):
    """
    Complete result of analyzing one block of prose.

    Immutable once produced.
    """

    keywords: List[KeywordData] = Field(
        default_factory=list, description="Keywords, importance-descending"
    )
    themes: List[str] = Field(
        default_factory=list, description="Taxonomy categories, declaration order (max 3)"
    )
    entities: List[str] = Field(
        default_factory=list, description="Capitalization-based entity phrases (max 5)"
    )
    sentences: List[str] = Field(
        default_factory=list, description="First sentences longer than 10 characters (max 10)"
    )

    model_config = {"frozen": True}

    @property
    def keyword_words(self) -> List[str]:
        return [kw.word for kw in self.keywords]

    def is_empty(self) -> bool:
        return not (self.keywords or self.themes or self.entities)


class ContentTypeIndicators(BaseModel):
    """Per-style evidence scores, each in [0, 1]."""

    narrative_score: float = Field(ge=0.0, le=1.0)
    technical_score: float = Field(ge=0.0, le=1.0)
    descriptive_score: float = Field(ge=0.0, le=1.0)


class ContentTypeAnalysis(BaseModel):
    """Dominant writing style with a confidence and the raw indicators."""

    type: ContentType = Field(description="Dominant style or 'mixed'")
    confidence: float = Field(ge=0.0, le=1.0)
    indicators: ContentTypeIndicators
