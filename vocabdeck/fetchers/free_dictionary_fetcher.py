"""
Free Dictionary API fetcher (first fallback).

Response is a list of entries; only the first is read. Each meaning
is one part of speech and contributes its first definition.
"""

from typing import Any, List

from ..config import URLS, LOOKUP_LIMITS, LOOKUP_TIMEOUT, DEFAULT_PART_OF_SPEECH
from .base import DefinitionCandidate, DefinitionFetcher


class FreeDictionaryFetcher(DefinitionFetcher):
    """Fetches definitions from dictionaryapi.dev."""

    name = "free_dictionary"

    def __init__(self, timeout: float = LOOKUP_TIMEOUT):
        super().__init__(timeout=timeout)
        self.max_meanings = LOOKUP_LIMITS['free_dictionary']['max_meanings']

    def build_url(self, word: str) -> str:
        return URLS['free_dictionary'].format(word=self.encode_word(word))

    def parse(self, payload: Any) -> List[DefinitionCandidate]:
        if not payload or not isinstance(payload, list):
            return []

        entry = payload[0]
        candidates = []

        for meaning in (entry.get('meanings') or [])[:self.max_meanings]:
            definitions = meaning.get('definitions') or []
            if not definitions:
                continue

            first = definitions[0]
            text = first.get('definition') or ''
            if not text:
                continue

            candidates.append(DefinitionCandidate(
                definition=text,
                partOfSpeech=meaning.get('partOfSpeech') or DEFAULT_PART_OF_SPEECH,
                example=first.get('example') or None,
            ))

        return candidates
