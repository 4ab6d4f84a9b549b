"""
Unit tests for the basic fallback query builder.
"""

import pytest

from text_illustrator.models.analysis import KeywordData, TextAnalysis
from text_illustrator.queries.basic import BASIC_MAX_QUERIES, generate_basic_queries


@pytest.mark.unit
class TestGenerateBasicQueries:
    """Tests for generate_basic_queries."""

    def test_nature_example(self, nature_analysis):
        assert generate_basic_queries(nature_analysis) == [
            "forest", "beneath", "golden", "nature", "Mountain", "Lodge",
        ]

    def test_combinations_when_room(self):
        analysis = TextAnalysis(
            keywords=[
                KeywordData(word="forest", frequency=1, importance=0.2),
                KeywordData(word="river", frequency=1, importance=0.1),
            ],
            themes=["nature"],
        )
        assert generate_basic_queries(analysis) == [
            "forest", "river", "nature", "forest river", "nature forest",
        ]

    def test_duplicates_removed(self):
        analysis = TextAnalysis(
            keywords=[KeywordData(word="denver", frequency=1, importance=0.2)],
            entities=["denver", "Colorado"],
        )
        assert generate_basic_queries(analysis) == ["denver", "Colorado"]

    def test_bounded(self, nature_analysis):
        assert len(generate_basic_queries(nature_analysis)) <= BASIC_MAX_QUERIES

    def test_empty(self):
        assert generate_basic_queries(TextAnalysis()) == []
