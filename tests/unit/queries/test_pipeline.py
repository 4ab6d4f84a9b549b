"""
Unit tests for the generate_queries pipeline.

With the first-option picker the nature example yields 15 candidates, 8 of
which reach the default 0.3 relevance threshold.
"""

import pytest
from unittest.mock import patch

from text_illustrator.analysis import analyze_text
from text_illustrator.classification import default_content_type
from text_illustrator.models.analysis import ContentType, ContentTypeAnalysis
from text_illustrator.queries import generate_queries, seeded_picker
from text_illustrator.queries.optimizer import OptimizerLimits
from text_illustrator.queries.query_config import QueryGenerationConfig
from tests.fixtures.texts import NATURE_KEYWORDS, SAMPLE_TEXTS, TOO_SHORT_TEXT


NATURE_QUERIES = {
    "peaceful Mountain nature",
    "vibrant nature sunset",
    "nature sunset",
    "minimal nature",
    "abstract forest beneath",
    "vibrant forest natural",
    "vibrant beneath natural",
    "vibrant golden natural",
}

NATURE_CANDIDATES = NATURE_QUERIES | {
    "peaceful forest",
    "peaceful beneath",
    "modern forest",
    "modern beneath",
    "Mountain natural",
    "forest",
    "beneath",
}


@pytest.mark.unit
class TestGenerateQueries:
    """Tests for the optimized path."""

    def test_nature_example(self, nature_analysis, first_picker):
        queries = generate_queries(nature_analysis, picker=first_picker)

        assert set(queries) == NATURE_QUERIES
        assert len(queries) == 8

    def test_no_duplicates(self, nature_analysis, first_picker):
        queries = generate_queries(nature_analysis, picker=first_picker)
        normalized = [q.strip().lower() for q in queries]
        assert len(normalized) == len(set(normalized))

    def test_empty_analysis(self, first_picker):
        assert generate_queries(analyze_text(TOO_SHORT_TEXT), picker=first_picker) == []

    def test_invalid_config_uses_defaults(self, nature_analysis, first_picker):
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"minRelevanceScore": 2.0}},
            picker=first_picker,
        )
        assert set(queries) == NATURE_QUERIES

    def test_full_config_accepted(self, nature_analysis, first_picker):
        queries = generate_queries(nature_analysis, QueryGenerationConfig(), picker=first_picker)
        assert set(queries) == NATURE_QUERIES

    def test_given_content_type_used(self, nature_analysis, first_picker):
        narrative = ContentTypeAnalysis(
            type=ContentType.NARRATIVE,
            confidence=0.9,
            indicators=default_content_type().indicators,
        )
        queries = generate_queries(nature_analysis, picker=first_picker, content_type=narrative)

        # Narrative leads; only 2 technical and 2 descriptive candidates join
        assert set(queries[:4]) == {
            "peaceful Mountain nature",
            "nature sunset",
            "vibrant forest natural",
            "vibrant beneath natural",
        }
        assert len(queries) == 6
        assert "minimal nature" not in queries

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_random_descriptors_stay_in_bounds(self, nature_analysis, seed):
        queries = generate_queries(nature_analysis, picker=seeded_picker(seed))

        assert 6 <= len(queries) <= 10
        assert len({q.lower() for q in queries}) == len(queries)

    @pytest.mark.parametrize("name", ["nature", "technical", "narrative", "descriptive"])
    def test_sample_texts_in_bounds(self, name, first_picker):
        analysis = analyze_text(SAMPLE_TEXTS[name])
        queries = generate_queries(analysis, picker=first_picker)

        assert len(queries) == len(set(queries))
        assert analysis.keywords
        assert 6 <= len(queries) <= 10


@pytest.mark.unit
class TestDegradationLadder:
    """Tests for threshold relaxation, keyword fallback and result clamping."""

    def test_relaxed_threshold_recovers(self, nature_analysis, first_picker):
        """Nothing reaches 0.5, two candidates reach the relaxed 0.4."""
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"minRelevanceScore": 0.5}},
            picker=first_picker,
        )

        assert queries[:2] == ["peaceful Mountain nature", "vibrant nature sunset"]
        assert len(queries) == 6
        assert set(queries) <= NATURE_CANDIDATES

    def test_keyword_fallback(self, nature_analysis, first_picker):
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"minRelevanceScore": 1.0}},
            picker=first_picker,
        )
        assert queries == NATURE_KEYWORDS[:6]

    def test_keyword_fallback_logged_as_keyword_mode(self, nature_analysis, first_picker):
        with patch("text_illustrator.queries.pipeline.logger") as mock_logger:
            generate_queries(
                nature_analysis,
                {"thresholds": {"minRelevanceScore": 1.0}},
                picker=first_picker,
            )

        mock_logger.info.assert_called_once_with("queries_generated", count=6, mode="keyword")

    def test_optimized_path_logged_as_optimized_mode(self, nature_analysis, first_picker):
        with patch("text_illustrator.queries.pipeline.logger") as mock_logger:
            queries = generate_queries(nature_analysis, picker=first_picker)

        mock_logger.info.assert_called_once_with(
            "queries_generated", count=len(queries), mode="optimized"
        )

    def test_keyword_fallback_count_from_limits(self, nature_analysis, first_picker):
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"minRelevanceScore": 1.0}},
            picker=first_picker,
            limits=OptimizerLimits(keyword_fallback_count=3),
        )
        assert queries == NATURE_KEYWORDS[:3]

    def test_padded_to_minimum(self, nature_analysis, first_picker):
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"maxQueries": 3}},
            picker=first_picker,
        )

        assert len(queries) == 6
        assert len(set(queries)) == 6
        assert set(queries) <= NATURE_CANDIDATES

    def test_truncated_to_maximum(self, nature_analysis, first_picker):
        queries = generate_queries(
            nature_analysis,
            {"thresholds": {"minRelevanceScore": 0.0, "maxQueries": 20}},
            picker=first_picker,
        )

        assert len(queries) == 10
        assert set(queries) <= NATURE_CANDIDATES


@pytest.mark.unit
class TestFailureHandling:
    """Tests for failures inside the pipeline."""

    def test_pipeline_failure_uses_basic_queries(self, nature_analysis, first_picker):
        with patch(
            "text_illustrator.queries.pipeline.generate_candidate_pool",
            side_effect=RuntimeError("boom"),
        ):
            queries = generate_queries(nature_analysis, picker=first_picker)

        assert queries == ["forest", "beneath", "golden", "nature", "Mountain", "Lodge"]

    def test_content_type_failure_defaults_to_mixed(self, nature_analysis, first_picker):
        with patch(
            "text_illustrator.queries.pipeline.detect_content_type",
            side_effect=RuntimeError("boom"),
        ):
            queries = generate_queries(nature_analysis, picker=first_picker)

        assert set(queries) == NATURE_QUERIES

    def test_generators_patched_through_module(self, nature_analysis, first_picker):
        """A failing generator is caught at the pipeline boundary."""
        with patch(
            "text_illustrator.queries.strategies.generate_technical_queries",
            side_effect=ValueError("bad"),
        ):
            queries = generate_queries(nature_analysis, picker=first_picker)

        assert queries[0] == "forest"
        assert len(queries) == 6

    @pytest.mark.parametrize("bad_input", [None, "forest river", {"keywords": []}])
    def test_non_analysis_input(self, bad_input, first_picker):
        """Anything other than a TextAnalysis yields no queries instead of raising."""
        assert generate_queries(bad_input, picker=first_picker) == []

    def test_basic_fallback_not_reached_for_invalid_input(self):
        with patch("text_illustrator.queries.pipeline.generate_basic_queries") as mock_basic:
            assert generate_queries(None) == []

        mock_basic.assert_not_called()
