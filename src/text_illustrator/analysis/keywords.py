"""
Keyword extraction with TF-IDF-like importance scoring.

Scores each distinct normalized token by term frequency, an in-document
inverse-frequency approximation and a small boost for longer words.
Ordering is deterministic: importance descending, ties in first-occurrence order.
"""

import math
from collections import Counter
from typing import List

import structlog

from ..models.analysis import KeywordData
from .tokenizer import normalize_tokens

logger = structlog.get_logger(__name__)

# Default number of keywords kept per analysis
DEFAULT_MAX_KEYWORDS = 10

# Words longer than this get the length boost
LONG_WORD_LENGTH = 5
LONG_WORD_BOOST = 1.2


def keyword_importance(frequency: int, total_tokens: int, unique_words: int, word: str) -> float:
    """
    Compute the importance score for one word.

    importance = tf * (1 + idf) * boost, with
    tf = frequency / total_tokens and idf = ln(unique_words / (1 + frequency)).

    The idf term goes negative for words that dominate a tiny vocabulary, so
    the result is floored at 0.

    Args:
        frequency: Occurrences of the word
        total_tokens: Total normalized tokens in the document
        unique_words: Number of distinct normalized tokens
        word: The word itself (for the length boost)

    Returns:
        Non-negative importance score
    """
    tf = frequency / total_tokens
    idf = math.log(unique_words / (1 + frequency))
    boost = LONG_WORD_BOOST if len(word) > LONG_WORD_LENGTH else 1.0
    return max(0.0, tf * (1 + idf) * boost)


def extract_keywords(text: str, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> List[KeywordData]:
    """
    Extract the most salient keywords from text.

    Args:
        text: Raw input text
        max_keywords: Maximum keywords to return

    Returns:
        KeywordData list sorted by importance descending (stable), at most
        max_keywords long. Empty when the text has no content tokens.

    Examples:
        >>> [k.word for k in extract_keywords("Forest trails. Forest lakes.")]
        ['forest', 'trails', 'lakes']
    """
    tokens = normalize_tokens(text)
    if not tokens:
        return []

    # Counter preserves first-occurrence order
    frequencies = Counter(tokens)
    total = len(tokens)
    unique = len(frequencies)

    keywords = [
        KeywordData(
            word=word,
            frequency=freq,
            importance=keyword_importance(freq, total, unique, word),
        )
        for word, freq in frequencies.items()
    ]

    # sorted() is stable: equal scores keep first-occurrence order
    keywords = sorted(keywords, key=lambda k: k.importance, reverse=True)[:max_keywords]

    logger.debug(
        "keywords_extracted",
        total_tokens=total,
        unique_words=unique,
        kept=len(keywords),
    )

    return keywords
