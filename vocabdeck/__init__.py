"""
VocabDeck - Vocabulary Flashcards

A small web tool to:
1. ADD vocabulary entries (word, meaning, example, subject)
2. BROWSE entries live, filtered by subject
3. LOOK UP a suggested meaning from public dictionaries

Dictionary sources are tried in order; the first with results wins.
"""

from .config import VERSION

__version__ = VERSION
__all__ = ['app', 'VERSION']
