"""
English stopword list used by the lexical normalizer and entity extractor.

Covers articles, prepositions, pronouns, auxiliaries/modals and common
intensifiers. Frozen at import time and shared by reference.
"""

from ..version import STOPLIST_VERSION

STOPWORDS_EN = frozenset(
    [
        # Articles / conjunctions
        "the", "a", "an", "and", "or", "but",
        # Prepositions
        "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "about",
        "into", "through", "during", "before", "after", "above", "below",
        "between", "among",
        # Demonstratives
        "this", "that", "these", "those",
        # Personal pronouns
        "i", "me", "my", "myself", "we", "our", "ours", "ourselves",
        "you", "your", "yours", "yourself", "yourselves",
        "he", "him", "his", "himself", "she", "her", "hers", "herself",
        "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
        # Interrogatives / relatives
        "what", "which", "who", "whom", "whose",
        # Auxiliaries
        "am", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "having", "do", "does", "did", "doing",
        # Modals
        "will", "would", "could", "should", "may", "might", "must", "can", "shall",
        # Adverbs / intensifiers
        "very", "really", "just", "too", "only", "now", "then", "here", "there",
        "where", "when", "why", "how",
        # Quantifiers
        "all", "any", "both", "each", "few", "more", "most", "other", "some",
        "such", "than", "so", "also",
    ]
)

__all__ = ["STOPWORDS_EN", "STOPLIST_VERSION"]
