"""
Lexical normalizer for English prose.

Provides stable tokenization shared by every analysis stage:
- Lower-casing and punctuation stripping
- Short-token, stopword and pure-number removal
- Naive sentence splitting on terminal punctuation
"""

import re
from typing import FrozenSet, List, Optional

from .stopwords import STOPWORDS_EN

# Minimum token length kept by the normalizer (tokens must be strictly longer)
MIN_TOKEN_LENGTH = 2

_NON_WORD = re.compile(r"[^\w\s]")
_PURE_DIGITS = re.compile(r"^\d+$")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def normalize_tokens(text: str, stopwords: Optional[FrozenSet[str]] = None) -> List[str]:
    """
    Tokenize text into normalized content words.

    Args:
        text: Input text (any case)
        stopwords: Custom stopword set (default: STOPWORDS_EN)

    Returns:
        List of tokens in text order (lowercased)

    Examples:
        >>> normalize_tokens("The quiet forest, in 2024!")
        ['quiet', 'forest']
        >>> normalize_tokens("ok")
        []
    """
    if stopwords is None:
        stopwords = STOPWORDS_EN

    cleaned = _NON_WORD.sub(" ", text.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) > MIN_TOKEN_LENGTH
        and token not in stopwords
        and not _PURE_DIGITS.match(token)
    ]


def split_sentences(text: str) -> List[str]:
    """
    Split text into naive sentences on runs of '.', '!' and '?'.

    Fragments are returned unstripped and may be empty; callers decide what
    to keep.

    Examples:
        >>> split_sentences("Hello there. How are you?")
        ['Hello there', ' How are you', '']
    """
    return _SENTENCE_BOUNDARY.split(text)
