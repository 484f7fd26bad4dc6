"""
Vocabulary storage for VocabDeck.
"""

from .vocabulary_store import (
    VocabEntry,
    VocabularyStore,
    VocabValidationError,
    Subscription,
)
from .feed import VocabularyFeed

__all__ = [
    'VocabEntry',
    'VocabularyStore',
    'VocabValidationError',
    'Subscription',
    'VocabularyFeed',
]
