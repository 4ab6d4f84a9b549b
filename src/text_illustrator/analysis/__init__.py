"""
Text analysis module.

Public API for extracting keywords, entity-like phrases, themes and sentences
from a raw block of prose.
"""

import time
from typing import List, Optional

import structlog

from ..config import settings
from ..models.analysis import KeywordData, TextAnalysis
from ..version import ANALYZER_VERSION
from .entities import extract_entities
from .keywords import extract_keywords
from .stopwords import STOPWORDS_EN, STOPLIST_VERSION
from .themes import THEME_NAMES, THEME_TAXONOMY, extract_themes
from .tokenizer import normalize_tokens, split_sentences


logger = structlog.get_logger(__name__)

__all__ = [
    "analyze_text",
    "extract_keywords",
    "extract_entities",
    "extract_themes",
    "extract_sentences",
    "normalize_tokens",
    "split_sentences",
    "KeywordData",
    "TextAnalysis",
    "STOPWORDS_EN",
    "STOPLIST_VERSION",
    "THEME_NAMES",
    "THEME_TAXONOMY",
]


def extract_sentences(
    text: str,
    max_sentences: Optional[int] = None,
    min_length: Optional[int] = None,
) -> List[str]:
    """
    Keep the first sentences whose stripped length exceeds min_length.

    Examples:
        >>> extract_sentences("Short. This one is long enough to keep!")
        ['This one is long enough to keep']
    """
    if max_sentences is None:
        max_sentences = settings.analysis_max_sentences
    if min_length is None:
        min_length = settings.analysis_min_sentence_length

    stripped = (s.strip() for s in split_sentences(text))
    return [s for s in stripped if len(s) > min_length][:max_sentences]


def analyze_text(text: str, max_keywords: Optional[int] = None) -> TextAnalysis:
    """
    Complete text analysis pipeline.

    Pipeline stages:
    1. Sentence splitting
    2. Keyword extraction (TF-IDF-like)
    3. Entity extraction (capitalization heuristic)
    4. Theme classification (taxonomy overlap with text and keywords)

    Degenerate input (empty text, no content tokens, non-string input) yields
    an analysis with empty lists; this function never raises.

    Args:
        text: Raw input text
        max_keywords: Keyword cap (default: settings.analysis_max_keywords)

    Returns:
        Immutable TextAnalysis

    Examples:
        >>> analysis = analyze_text("The old Mountain Lodge welcomed every weary traveler.")
        >>> "Mountain Lodge" in analysis.entities
        True
    """
    if max_keywords is None:
        max_keywords = settings.analysis_max_keywords

    if not isinstance(text, str):
        logger.warning("analysis_input_not_text", input_type=type(text).__name__)
        return TextAnalysis()

    start_time = time.time()

    try:
        sentences = extract_sentences(text)
        keywords = extract_keywords(text, max_keywords=max_keywords)
        entities = extract_entities(text, max_entities=settings.analysis_max_entities)
        themes = extract_themes(text, keywords, max_themes=settings.analysis_max_themes)
    except Exception as e:
        logger.error("analysis_failed", error=str(e), text_length=len(text), exc_info=True)
        return TextAnalysis()

    analysis = TextAnalysis(
        keywords=keywords,
        themes=themes,
        entities=entities,
        sentences=sentences,
    )

    logger.info(
        "text_analyzed",
        analyzer_version=ANALYZER_VERSION,
        text_length=len(text),
        keywords=len(keywords),
        themes=themes,
        entities=len(entities),
        sentences=len(sentences),
        processing_time_ms=round((time.time() - start_time) * 1000, 2),
    )

    return analysis
