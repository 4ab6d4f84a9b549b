"""
Theme classification over a fixed topical taxonomy.

A category is selected when at least two of its vocabulary words occur in the
text (substring match on the lower-cased text) or among the extracted keywords.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

import structlog

from ..models.analysis import KeywordData
from ..version import TAXONOMY_VERSION

logger = structlog.get_logger(__name__)


# Declaration order is the output order
THEME_TAXONOMY: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "nature": (
            "tree", "forest", "mountain", "river", "ocean", "sky", "flower",
            "animal", "wildlife", "landscape", "sunset", "sunrise",
        ),
        "technology": (
            "computer", "software", "digital", "internet", "data", "algorithm",
            "artificial", "intelligence", "robot", "innovation",
        ),
        "business": (
            "company", "market", "finance", "money", "investment", "strategy",
            "growth", "profit", "economy", "entrepreneur",
        ),
        "health": (
            "medical", "doctor", "patient", "treatment", "medicine", "hospital",
            "fitness", "nutrition", "wellness", "therapy",
        ),
        "education": (
            "student", "teacher", "school", "university", "learning", "knowledge",
            "study", "research", "academic", "course",
        ),
        "travel": (
            "journey", "destination", "adventure", "culture", "country", "city",
            "explore", "vacation", "tourism", "flight",
        ),
        "food": (
            "cooking", "recipe", "restaurant", "chef", "ingredient", "cuisine",
            "meal", "taste", "flavor", "dining",
        ),
        "art": (
            "creative", "design", "painting", "music", "artist", "gallery",
            "exhibition", "performance", "cultural", "aesthetic",
        ),
    }
)

THEME_NAMES: Tuple[str, ...] = tuple(THEME_TAXONOMY)

# Vocabulary hits needed to select a category
MIN_THEME_MATCHES = 2

# Default number of themes kept per analysis
DEFAULT_MAX_THEMES = 3


def theme_matches(
    theme_words: Sequence[str], text_lower: str, keyword_words: Sequence[str]
) -> List[str]:
    """Return the vocabulary words of one category found in the text or keywords."""
    return [word for word in theme_words if word in text_lower or word in keyword_words]


def extract_themes(
    text: str,
    keywords: Sequence[KeywordData],
    max_themes: int = DEFAULT_MAX_THEMES,
    taxonomy: Optional[Mapping[str, Sequence[str]]] = None,
) -> List[str]:
    """
    Map text and keyword evidence onto the theme taxonomy.

    Args:
        text: Raw input text
        keywords: Keywords already extracted from the same text
        max_themes: Maximum themes to return
        taxonomy: Custom taxonomy (default: THEME_TAXONOMY)

    Returns:
        Selected category names in taxonomy order, at most max_themes

    Examples:
        >>> extract_themes("A forest under the sunset sky.", [])
        ['nature']
    """
    if taxonomy is None:
        taxonomy = THEME_TAXONOMY

    text_lower = text.lower()
    keyword_words = [kw.word for kw in keywords]

    themes = []
    for theme, theme_words in taxonomy.items():
        matches = theme_matches(theme_words, text_lower, keyword_words)
        if len(matches) >= MIN_THEME_MATCHES:
            themes.append(theme)

    logger.debug(
        "themes_extracted",
        taxonomy_version=TAXONOMY_VERSION,
        selected=themes,
        kept=min(len(themes), max_themes),
    )

    return themes[:max_themes]
