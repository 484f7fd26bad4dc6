"""
Definition lookup with ordered fallback.

Tries sources in order:
1. Wiktionary
2. Free Dictionary
3. WordsAPI (only when a key is configured)

The first source that yields any candidates wins; results are never
merged across sources.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .base import DefinitionCandidate, DefinitionFetcher, FetchResult, FetchStatus
from .wiktionary_fetcher import WiktionaryFetcher
from .free_dictionary_fetcher import FreeDictionaryFetcher
from .wordsapi_fetcher import WordsApiFetcher
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class LookupReport:
    """Everything a single lookup did, in order."""
    word: str
    attempts: List[FetchResult] = field(default_factory=list)

    @property
    def answer(self) -> Optional[FetchResult]:
        for attempt in self.attempts:
            if attempt.has_results:
                return attempt
        return None

    @property
    def candidates(self) -> List[DefinitionCandidate]:
        answer = self.answer
        return answer.candidates if answer else []

    @property
    def source(self) -> Optional[str]:
        answer = self.answer
        return answer.source if answer else None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'word': self.word,
            'source': self.source,
            'candidates': [c.to_dict() for c in self.candidates],
            'attempts': [a.to_dict() for a in self.attempts],
        }


class DefinitionLookup:
    """
    Looks a word up across dictionary sources with short-circuit fallback.
    """

    def __init__(self, fetchers: Sequence[DefinitionFetcher] = None):
        """
        Initialize lookup.

        Args:
            fetchers: Sources in priority order. Defaults to
                      Wiktionary -> Free Dictionary -> WordsAPI.
        """
        if fetchers is None:
            fetchers = [WiktionaryFetcher(), FreeDictionaryFetcher(), WordsApiFetcher()]
        self.fetchers = list(fetchers)

    def lookup(self, word: str) -> List[DefinitionCandidate]:
        """
        Get definition candidates for a word.

        Args:
            word: Word to look up (callers trim and validate it)

        Returns:
            Candidates from the first source that had any, else []
        """
        return self.lookup_detailed(word).candidates

    def lookup_detailed(self, word: str) -> LookupReport:
        """Like lookup(), but reports every source attempt made."""
        report = LookupReport(word=word)

        for fetcher in self.fetchers:
            try:
                result = fetcher.fetch(word)
            except Exception as e:
                logger.exception(f"{fetcher.name} raised while looking up {word!r}")
                result = FetchResult.failed(fetcher.name, str(e))

            report.attempts.append(result)

            if result.has_results:
                logger.info(f"{word!r}: {len(result.candidates)} definition(s) from {fetcher.name}")
                return report

            if result.status == FetchStatus.FAILED:
                logger.warning(f"{word!r}: {fetcher.name} failed ({result.error})")
            else:
                logger.debug(f"{word!r}: no definitions from {fetcher.name}")

        logger.info(f"{word!r}: no definitions from any source")
        return report
