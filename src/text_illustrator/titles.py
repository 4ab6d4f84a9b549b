"""
Article title derivation.
"""

from typing import List, Sequence

from .analysis.tokenizer import split_sentences
from .models.analysis import KeywordData

# First sentences at least this long are not used as titles
MAX_TITLE_LENGTH = 100

# First sentences containing this phrase introduce a list, not a topic
LIST_INTRO_PHRASE = "the following"

UNTITLED = "Untitled Article"


def title_from_keywords(keywords: Sequence[KeywordData]) -> str:
    """
    Examples:
        >>> title_from_keywords([KeywordData(word="forest", frequency=1, importance=0.2)])
        'Exploring Forest'
    """
    words: List[str] = [kw.word[:1].upper() + kw.word[1:] for kw in keywords[:3]]
    return f"Exploring {', '.join(words)}"


def generate_title(text: str, keywords: Sequence[KeywordData]) -> str:
    """
    Pick a title for an article.

    Uses the first non-empty sentence when it is short and does not introduce
    a list, otherwise "Exploring <top keywords>", otherwise "Untitled Article".
    """
    sentences = [s.strip() for s in split_sentences(text) if s.strip()]

    if sentences:
        first = sentences[0]
        if len(first) < MAX_TITLE_LENGTH and LIST_INTRO_PHRASE not in first.lower():
            return first

    if keywords:
        return title_from_keywords(keywords)

    return UNTITLED
