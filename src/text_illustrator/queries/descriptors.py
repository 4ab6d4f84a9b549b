"""
Descriptor vocabulary selection.

Strategy generators never call the random module directly: they receive a
DescriptorPicker, a callable that returns one element of a non-empty sequence.
Production code uses a uniform random choice; tests inject a seeded or fixed
picker for reproducible query strings.
"""

import random
from typing import Callable, Optional, Sequence, Tuple

from .query_config import QueryGenerationConfig

DescriptorPicker = Callable[[Sequence[str]], str]

# Modifiers used for technical content instead of the mood/lighting buckets
PROFESSIONAL_MODIFIERS: Tuple[str, ...] = (
    "modern", "minimal", "abstract", "clean", "professional", "conceptual",
)


def uniform_picker(options: Sequence[str]) -> str:
    """Default picker: uniform choice from the process-wide random source."""
    return random.choice(options)


def seeded_picker(seed: Optional[int] = None) -> DescriptorPicker:
    """
    Build a picker backed by its own random.Random instance.

    Examples:
        >>> a, b = seeded_picker(7), seeded_picker(7)
        >>> a(["warm", "cool", "dark"]) == b(["warm", "cool", "dark"])
        True
    """
    rng = random.Random(seed)

    def pick(options: Sequence[str]) -> str:
        return rng.choice(options)

    return pick


def enhancement_descriptors(config: QueryGenerationConfig) -> Tuple[str, ...]:
    """Colors, moods and settings: the pool used to disambiguate queries."""
    descriptors = config.visual_descriptors
    return descriptors.colors + descriptors.moods + descriptors.settings


def emotional_descriptors(config: QueryGenerationConfig) -> Tuple[str, ...]:
    """Moods and lighting: the atmospheric pool used for narrative content."""
    descriptors = config.visual_descriptors
    return descriptors.moods + descriptors.lighting
