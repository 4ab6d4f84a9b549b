"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Sample texts and their analyses
- Deterministic descriptor pickers
- Query configuration
"""

import os
from typing import Sequence

import pytest

from text_illustrator.analysis import analyze_text
from text_illustrator.models.analysis import KeywordData, TextAnalysis
from text_illustrator.queries.query_config import DEFAULT_QUERY_CONFIG, QueryGenerationConfig
from tests.fixtures.texts import NATURE_TEXT, SAMPLE_TEXTS


def _first(options: Sequence[str]) -> str:
    return options[0]


@pytest.fixture
def first_picker():
    """
    Descriptor picker that always returns the first option.

    With the default vocabulary: mood "peaceful", lighting "sunset", color
    "vibrant", setting "natural", professional modifier "modern".
    """
    return _first


@pytest.fixture
def default_config() -> QueryGenerationConfig:
    return DEFAULT_QUERY_CONFIG


@pytest.fixture
def nature_text() -> str:
    return NATURE_TEXT


@pytest.fixture
def nature_analysis() -> TextAnalysis:
    """Analysis of NATURE_TEXT (10 keywords, theme 'nature', 3 entities)."""
    return analyze_text(NATURE_TEXT)


@pytest.fixture
def sample_texts() -> dict:
    return SAMPLE_TEXTS


@pytest.fixture
def simple_analysis() -> TextAnalysis:
    """
    Hand-built analysis with known importances.

    Returns:
        TextAnalysis with keywords forest/river/lodge, themes nature/travel
        and one entity
    """
    return TextAnalysis(
        keywords=[
            KeywordData(word="forest", frequency=2, importance=0.25),
            KeywordData(word="river", frequency=1, importance=0.2),
            KeywordData(word="lodge", frequency=1, importance=0.1),
        ],
        themes=["nature", "travel"],
        entities=["Denver"],
        sentences=["The forest river ran past the lodge near Denver"],
    )


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (end-to-end pipeline, CLI)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests that may take longer to run"
    )
