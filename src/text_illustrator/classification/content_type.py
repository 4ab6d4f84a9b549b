"""
Rule-based writing-style classification.

Scores three independent styles from regex evidence densities (matches per
sentence) and picks a dominant style or "mixed":

- Narrative: past-tense verbs, emotional adjectives, quoted dialogue, entities
- Technical: present-tense/modal verbs, technical nouns, abstract concepts
- Descriptive: sensory adjectives, unit measurements, spatial words, adjective ratio

The dominant style decides which query strategy generator leads downstream.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Tuple

import structlog

from ..config import settings
from ..models.analysis import (
    ContentType,
    ContentTypeAnalysis,
    ContentTypeIndicators,
    TextAnalysis,
)
from ..version import CONTENT_CLASSIFIER_VERSION


logger = structlog.get_logger(__name__)


# ============================================================================
# EVIDENCE PATTERNS
# ============================================================================

# Narrative
PAST_TENSE = re.compile(
    r"\b(was|were|had|did|went|came|saw|felt|thought|said|told|walked|ran|looked)\b"
)
EMOTIONAL_ADJECTIVES = re.compile(
    r"\b(happy|sad|angry|lonely|peaceful|anxious|excited|worried|joyful|fearful|hopeful|desperate)\b"
)
DIALOGUE_MARKERS = re.compile(r"\"[^\"]*\"|'[^']*'")

# Technical
PRESENT_TENSE = re.compile(
    r"\b(is|are|can|will|should|must|enables|provides|allows|supports|implements)\b"
)
TECHNICAL_TERMS = re.compile(
    r"\b(system|process|method|function|algorithm|data|software|hardware|interface|protocol|framework|architecture)\b"
)
ABSTRACT_CONCEPTS = re.compile(
    r"\b(concept|principle|theory|approach|methodology|strategy|optimization|efficiency|performance)\b"
)

# Descriptive
SENSORY_WORDS = re.compile(
    r"\b(bright|dark|soft|rough|smooth|loud|quiet|warm|cold|sweet|bitter|fragrant|colorful|vivid)\b"
)
MEASUREMENTS = re.compile(
    r"\b\d+\s*(feet|meters|inches|cm|mm|miles|km|pounds|kg|degrees|celsius|fahrenheit)\b"
)
LOCATION_WORDS = re.compile(
    r"\b(above|below|beside|near|far|left|right|front|back|top|bottom|inside|outside|north|south|east|west)\b"
)
COMMON_ADJECTIVES = re.compile(
    r"\b(beautiful|large|small|old|new|good|bad|great|little|long|short|high|low|big|young)\b"
)

# Argmax tie order
STYLE_ORDER = (ContentType.NARRATIVE, ContentType.TECHNICAL, ContentType.DESCRIPTIVE)


def count_matches(pattern: Pattern[str], text: str) -> int:
    """Count non-overlapping matches of pattern in text."""
    return sum(1 for _ in pattern.finditer(text))


# ============================================================================
# CLASSIFIER
# ============================================================================

@dataclass
class ContentTypeWeights:
    """
    Per-signal weights inside each style score.

    Every style score is capped at 1.0 after weighting.
    """
    past_tense: float = 0.4
    emotional: float = 0.3
    dialogue: float = 0.2
    entity_bonus: float = 0.1

    present_tense: float = 0.3
    technical_terms: float = 0.4
    abstract_concepts: float = 0.3

    sensory: float = 0.3
    measurements: float = 0.2
    location: float = 0.2
    adjective_ratio: float = 0.3
    adjective_ratio_cap: float = 0.3


@dataclass
class ContentTypeThresholds:
    """
    Decision thresholds for picking the dominant style.

    mixed_floor: below this best score the text is "mixed" (confidence 0.5)
    tie_margin: when the top two scores are closer than this the text is
        "mixed" (confidence 0.6), whatever the numeric winner
    """
    mixed_floor: float = 0.3
    tie_margin: float = 0.15
    mixed_confidence: float = 0.5
    tie_confidence: float = 0.6
    epsilon: float = 0.01

    @classmethod
    def from_config(cls) -> "ContentTypeThresholds":
        """Load thresholds from settings."""
        return cls(
            mixed_floor=settings.content_type_mixed_floor,
            tie_margin=settings.content_type_tie_margin,
        )


class ContentTypeClassifier:
    """
    Rule-based content-type classifier with configurable weights.

    Computes three style scores from evidence densities and buckets them into
    narrative | technical | descriptive | mixed.
    """

    def __init__(
        self,
        weights: Optional[ContentTypeWeights] = None,
        thresholds: Optional[ContentTypeThresholds] = None
    ):
        self.weights = weights or ContentTypeWeights()
        self.thresholds = thresholds or ContentTypeThresholds.from_config()

        self.logger = logger.bind(component="content_type_classifier")

    def score(self, analysis: TextAnalysis) -> ContentTypeIndicators:
        """
        Compute the three style scores for an analysis.

        Args:
            analysis: TextAnalysis (sentences, keywords and entities are used)

        Returns:
            ContentTypeIndicators with each score in [0, 1]
        """
        w = self.weights
        text = " ".join(analysis.sentences).lower()
        per_sentence = max(1, len(analysis.sentences))

        def density(pattern: Pattern[str]) -> float:
            return count_matches(pattern, text) / per_sentence

        narrative = (
            density(PAST_TENSE) * w.past_tense
            + density(EMOTIONAL_ADJECTIVES) * w.emotional
            + density(DIALOGUE_MARKERS) * w.dialogue
            + (w.entity_bonus if analysis.entities else 0.0)
        )

        technical = (
            density(PRESENT_TENSE) * w.present_tense
            + density(TECHNICAL_TERMS) * w.technical_terms
            + density(ABSTRACT_CONCEPTS) * w.abstract_concepts
        )

        # Adjective-to-noun ratio, with keyword count standing in for nouns
        noun_count = len(analysis.keywords)
        adjective_ratio = (
            count_matches(COMMON_ADJECTIVES, text) / noun_count if noun_count > 0 else 0.0
        )
        descriptive = (
            density(SENSORY_WORDS) * w.sensory
            + density(MEASUREMENTS) * w.measurements
            + density(LOCATION_WORDS) * w.location
            + min(w.adjective_ratio_cap, adjective_ratio * w.adjective_ratio)
        )

        return ContentTypeIndicators(
            narrative_score=min(1.0, narrative),
            technical_score=min(1.0, technical),
            descriptive_score=min(1.0, descriptive),
        )

    def classify(self, analysis: TextAnalysis) -> ContentTypeAnalysis:
        """
        Classify the dominant writing style of an analysis.

        Args:
            analysis: TextAnalysis to classify

        Returns:
            ContentTypeAnalysis with type, confidence and indicators
        """
        indicators = self.score(analysis)
        content_type, confidence = self._pick_type(indicators)

        self.logger.debug(
            "content_type_detected",
            classifier_version=CONTENT_CLASSIFIER_VERSION,
            type=content_type.value,
            confidence=round(confidence, 3),
            narrative=round(indicators.narrative_score, 3),
            technical=round(indicators.technical_score, 3),
            descriptive=round(indicators.descriptive_score, 3),
        )

        return ContentTypeAnalysis(
            type=content_type,
            confidence=confidence,
            indicators=indicators,
        )

    def _pick_type(self, indicators: ContentTypeIndicators) -> Tuple[ContentType, float]:
        """
        Bucket style scores into a content type with confidence.

        Args:
            indicators: Style scores

        Returns:
            (content_type, confidence) tuple
        """
        scores: Dict[ContentType, float] = {
            ContentType.NARRATIVE: indicators.narrative_score,
            ContentType.TECHNICAL: indicators.technical_score,
            ContentType.DESCRIPTIVE: indicators.descriptive_score,
        }
        max_score = max(scores.values())
        total = sum(scores.values())

        if max_score < self.thresholds.mixed_floor or total == 0:
            return ContentType.MIXED, self.thresholds.mixed_confidence

        # First style in STYLE_ORDER wins exact ties
        winner = next(style for style in STYLE_ORDER if scores[style] == max_score)
        confidence = max_score / max(self.thresholds.epsilon, total)

        ranked: List[float] = sorted(scores.values(), reverse=True)
        if ranked[0] - ranked[1] < self.thresholds.tie_margin:
            return ContentType.MIXED, self.thresholds.tie_confidence

        return winner, min(1.0, confidence)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def default_content_type() -> ContentTypeAnalysis:
    """Content type used when classification cannot run."""
    return ContentTypeAnalysis(
        type=ContentType.MIXED,
        confidence=0.5,
        indicators=ContentTypeIndicators(
            narrative_score=0.33,
            technical_score=0.33,
            descriptive_score=0.34,
        ),
    )


def detect_content_type(
    analysis: TextAnalysis,
    classifier: Optional[ContentTypeClassifier] = None
) -> ContentTypeAnalysis:
    """
    Detect the writing style using default or provided classifier.

    Args:
        analysis: TextAnalysis to classify
        classifier: Optional custom classifier (default: from config)

    Returns:
        ContentTypeAnalysis result
    """
    if classifier is None:
        classifier = ContentTypeClassifier()

    return classifier.classify(analysis)
