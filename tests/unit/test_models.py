"""
Unit tests for the data models.
"""

import pytest
from pydantic import ValidationError

from text_illustrator.models import (
    ContentType,
    KeywordData,
    PipelineVersion,
    QueryComponents,
    SearchQuery,
    TextAnalysis,
)
from text_illustrator.version import get_current_pipeline_version


@pytest.mark.unit
class TestKeywordData:
    """Tests for KeywordData."""

    def test_frequency_at_least_one(self):
        with pytest.raises(ValidationError):
            KeywordData(word="forest", frequency=0, importance=0.1)

    def test_importance_non_negative(self):
        with pytest.raises(ValidationError):
            KeywordData(word="forest", frequency=1, importance=-0.1)


@pytest.mark.unit
class TestTextAnalysis:
    """Tests for TextAnalysis."""

    def test_defaults_empty(self):
        analysis = TextAnalysis()

        assert analysis.is_empty()
        assert analysis.keyword_words == []

    def test_keyword_words(self):
        analysis = TextAnalysis(keywords=[KeywordData(word="forest", frequency=1, importance=0.1)])

        assert analysis.keyword_words == ["forest"]
        assert not analysis.is_empty()


@pytest.mark.unit
class TestSearchQuery:
    """Tests for SearchQuery."""

    def test_word_count_ignores_extra_spaces(self):
        assert SearchQuery(query="  misty   forest ", strategy="keyword").word_count == 2

    def test_normalized(self):
        assert SearchQuery(query=" Misty Forest ", strategy="theme").normalized == "misty forest"

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            SearchQuery(query="forest", strategy="random")

    def test_default_components(self):
        query = SearchQuery(query="forest", strategy="keyword")

        assert query.relevance_score == 0.0
        assert query.components == QueryComponents()


@pytest.mark.unit
class TestPipelineVersion:
    """Tests for pipeline version stamping."""

    def test_current_version(self):
        version = get_current_pipeline_version()

        assert isinstance(version, PipelineVersion)
        assert version.taxonomy_version == "themes-v1.0"

    def test_content_type_values(self):
        assert [t.value for t in ContentType] == ["narrative", "technical", "descriptive", "mixed"]
