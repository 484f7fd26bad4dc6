"""
Wiktionary definition fetcher (primary source).

Uses the Wikimedia REST "page/definition" endpoint, which groups
entries by language code:

    {"en": [{"partOfSpeech": "Noun",
             "definitions": [{"definition": "<b>A</b> ...",
                              "examples": ["..."]}]}],
     "fr": [...]}

Definitions are HTML fragments, so tags are stripped and very short
leftovers (usually bare cross-references) are discarded.
"""

import re
from typing import Any, List

from ..config import (
    URLS, LOOKUP_LIMITS, LOOKUP_TIMEOUT, DEFAULT_PART_OF_SPEECH,
    WIKTIONARY_EDITION, WIKTIONARY_LANGUAGE,
)
from .base import DefinitionCandidate, DefinitionFetcher

TAG_RE = re.compile(r'<[^>]*>')


class WiktionaryFetcher(DefinitionFetcher):
    """
    Fetches definitions from Wiktionary.

    Scans the first few entries of one language section and the first
    couple of definitions of each, stopping once enough candidates
    have been collected.
    """

    name = "wiktionary"

    def __init__(self, edition: str = WIKTIONARY_EDITION,
                 language: str = WIKTIONARY_LANGUAGE,
                 timeout: float = LOOKUP_TIMEOUT):
        """
        Initialize Wiktionary fetcher.

        Args:
            edition: Wiktionary edition subdomain (e.g. "en")
            language: Language section to read from the payload
            timeout: Seconds before a request is abandoned
        """
        super().__init__(timeout=timeout)
        self.edition = edition
        self.language = language

        limits = LOOKUP_LIMITS['wiktionary']
        self.max_entries = limits['max_entries']
        self.max_definitions_per_entry = limits['max_definitions_per_entry']
        self.max_candidates = limits['max_candidates']
        self.min_definition_length = limits['min_definition_length']

    def build_url(self, word: str) -> str:
        return URLS['wiktionary'].format(edition=self.edition, word=self.encode_word(word))

    @staticmethod
    def clean_text(text: str) -> str:
        """Remove markup tags and surrounding whitespace."""
        if not text:
            return ""
        return TAG_RE.sub('', text).strip()

    def parse(self, payload: Any) -> List[DefinitionCandidate]:
        candidates = []

        entries = payload.get(self.language) or []

        for entry in entries[:self.max_entries]:
            pos = entry.get('partOfSpeech') or DEFAULT_PART_OF_SPEECH

            for defn in (entry.get('definitions') or [])[:self.max_definitions_per_entry]:
                if len(candidates) >= self.max_candidates:
                    return candidates

                text = self.clean_text(defn.get('definition', ''))
                if len(text) < self.min_definition_length:
                    continue

                examples = defn.get('examples') or []
                candidates.append(DefinitionCandidate(
                    definition=text,
                    partOfSpeech=pos,
                    example=examples[0] if examples else None,
                ))

        return candidates
