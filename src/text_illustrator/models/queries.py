"""
Data models for candidate search queries.

Candidates are transient: they are created by the strategy generators, scored
and filtered by the optimizer, and discarded once the final query strings are
extracted.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# How a candidate was assembled
QueryStrategy = Literal["keyword", "theme", "entity", "combined", "contextual"]


class QueryComponents(BaseModel):
    """Analysis signals and descriptor vocabulary used to build a query."""

    keywords: Optional[List[str]] = None
    themes: Optional[List[str]] = None
    entities: Optional[List[str]] = None
    descriptors: Optional[List[str]] = None


class SearchQuery(BaseModel):
    """
    A candidate photo search query.

    relevance_score is 0.0 until the scoring stage assigns it.
    """

    query: str = Field(description="Search string sent to the photo provider")
    relevance_score: float = Field(default=0.0, ge=0.0, le=1.0)
    strategy: QueryStrategy
    components: QueryComponents = Field(default_factory=QueryComponents)

    @property
    def word_count(self) -> int:
        return len(self.query.split())

    @property
    def normalized(self) -> str:
        return self.query.strip().lower()
