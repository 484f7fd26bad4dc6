"""
WordsAPI fetcher (last fallback).

Requires a RapidAPI key (WORDSAPI_KEY). Results come as a flat list:

    {"results": [{"definition": "...", "partOfSpeech": "noun",
                  "examples": ["..."]}]}
"""

from typing import Any, Dict, List

from ..config import (
    URLS, LOOKUP_LIMITS, LOOKUP_TIMEOUT, DEFAULT_PART_OF_SPEECH,
    WORDSAPI_KEY, WORDSAPI_HOST,
)
from .base import DefinitionCandidate, DefinitionFetcher


class WordsApiFetcher(DefinitionFetcher):
    """Fetches definitions from WordsAPI via RapidAPI."""

    name = "wordsapi"

    def __init__(self, api_key: str = None, timeout: float = LOOKUP_TIMEOUT):
        """
        Initialize WordsAPI fetcher.

        Args:
            api_key: RapidAPI key; defaults to the WORDSAPI_KEY env var
            timeout: Seconds before a request is abandoned
        """
        super().__init__(timeout=timeout)
        self.api_key = api_key if api_key is not None else WORDSAPI_KEY
        self.max_results = LOOKUP_LIMITS['wordsapi']['max_results']

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_headers(self) -> Dict[str, str]:
        return {
            'X-RapidAPI-Key': self.api_key,
            'X-RapidAPI-Host': WORDSAPI_HOST,
        }

    def build_url(self, word: str) -> str:
        return URLS['wordsapi'].format(word=self.encode_word(word))

    def parse(self, payload: Any) -> List[DefinitionCandidate]:
        candidates = []

        for result in (payload.get('results') or [])[:self.max_results]:
            text = result.get('definition')
            if not text:
                continue

            examples = result.get('examples') or []
            candidates.append(DefinitionCandidate(
                definition=text,
                partOfSpeech=result.get('partOfSpeech') or DEFAULT_PART_OF_SPEECH,
                example=examples[0] if examples else None,
            ))

        return candidates
