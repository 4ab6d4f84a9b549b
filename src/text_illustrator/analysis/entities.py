"""
Capitalization-based entity extraction.

A lightweight proxy for named-entity recognition: no model, just two passes
over each naive sentence.

1. Single capitalized words that do not open the sentence and are not stopwords
2. Runs of consecutive capitalized words (multi-word runs only)

Over- and under-generation are expected.
"""

import re
from typing import Dict, List

import structlog

from .stopwords import STOPWORDS_EN
from .tokenizer import split_sentences

logger = structlog.get_logger(__name__)

# Default number of entities kept per analysis
DEFAULT_MAX_ENTITIES = 5

_CAPITALIZED = re.compile(r"[A-Z][a-z]+")
_NON_WORD = re.compile(r"[^\w]")


def _clean(word: str) -> str:
    return _NON_WORD.sub("", word)


def _single_word_entities(words: List[str]) -> List[str]:
    found = []
    for index, word in enumerate(words):
        clean = _clean(word)
        if (
            index > 0
            and len(clean) > 2
            and _CAPITALIZED.match(clean)
            and clean.lower() not in STOPWORDS_EN
        ):
            found.append(clean)
    return found


def _multi_word_entities(words: List[str]) -> List[str]:
    found = []
    run: List[str] = []
    for word in words:
        clean = _clean(word)
        if _CAPITALIZED.match(clean):
            run.append(clean)
            continue
        if len(run) > 1:
            found.append(" ".join(run))
        run = []
    if len(run) > 1:
        found.append(" ".join(run))
    return found


def extract_entities(text: str, max_entities: int = DEFAULT_MAX_ENTITIES) -> List[str]:
    """
    Extract entity-like phrases from text using capitalization patterns.

    Args:
        text: Raw input text (original casing)
        max_entities: Maximum entities to return

    Returns:
        Deduplicated entity phrases in discovery order, at most max_entities

    Examples:
        >>> extract_entities("We stayed at the Mountain Lodge near Denver.")
        ['Mountain', 'Lodge', 'Denver', 'Mountain Lodge']
    """
    seen: Dict[str, None] = {}

    for sentence in split_sentences(text):
        words = sentence.split()
        for entity in _single_word_entities(words) + _multi_word_entities(words):
            seen.setdefault(entity, None)

    entities = list(seen)[:max_entities]

    logger.debug("entities_extracted", found=len(seen), kept=len(entities))

    return entities
