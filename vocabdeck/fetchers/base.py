"""
Common result types and base class for dictionary definition sources.

Every source returns a FetchResult:
- OK: at least one usable candidate
- EMPTY: the source answered but had nothing usable (including 404)
- FAILED: transport error, bad status, timeout or malformed payload

Callers that only care about "any results?" use fetch_definitions(),
which never raises.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..config import DEFAULT_PART_OF_SPEECH, LOOKUP_TIMEOUT
from ..utils.logging import get_logger

logger = get_logger(__name__)


class FetchStatus(Enum):
    """Outcome of a single source request."""
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class DefinitionCandidate:
    """One normalized dictionary result."""
    definition: str
    partOfSpeech: str = DEFAULT_PART_OF_SPEECH
    example: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'partOfSpeech': self.partOfSpeech,
            'definition': self.definition,
            'example': self.example,
        }


@dataclass
class FetchResult:
    """Discriminated result of one source request."""
    source: str
    status: FetchStatus
    candidates: List[DefinitionCandidate] = field(default_factory=list)
    error: str = ""

    @classmethod
    def from_candidates(cls, source: str, candidates: List[DefinitionCandidate]) -> 'FetchResult':
        """OK when there is anything to show, EMPTY otherwise."""
        if candidates:
            return cls(source=source, status=FetchStatus.OK, candidates=list(candidates))
        return cls(source=source, status=FetchStatus.EMPTY)

    @classmethod
    def empty(cls, source: str) -> 'FetchResult':
        return cls(source=source, status=FetchStatus.EMPTY)

    @classmethod
    def failed(cls, source: str, error: str) -> 'FetchResult':
        return cls(source=source, status=FetchStatus.FAILED, error=error)

    @property
    def has_results(self) -> bool:
        return self.status == FetchStatus.OK

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'source': self.source,
            'status': self.status.value,
            'count': len(self.candidates),
            'error': self.error,
        }


class DefinitionFetcher(ABC):
    """
    Base class for a single dictionary source.

    Subclasses provide the endpoint (build_url) and the payload
    normalization (parse). Transport and parse faults are converted
    to FAILED results here, so subclasses may let KeyError/TypeError
    escape from parse() on unexpected shapes.
    """

    name = "base"

    def __init__(self, timeout: float = LOOKUP_TIMEOUT):
        """
        Initialize fetcher.

        Args:
            timeout: Seconds before a request is abandoned
        """
        self.timeout = timeout

    @staticmethod
    def encode_word(word: str) -> str:
        """Percent-encode a word for use as a URL path segment."""
        return quote(word, safe='')

    @abstractmethod
    def build_url(self, word: str) -> str:
        """Build the request URL for a word."""

    @abstractmethod
    def parse(self, payload: Any) -> List[DefinitionCandidate]:
        """Normalize a decoded JSON payload into candidates."""

    def get_headers(self) -> Dict[str, str]:
        """Extra request headers (e.g. API keys)."""
        return {}

    def is_configured(self) -> bool:
        """Whether the source can be queried at all."""
        return True

    def fetch(self, word: str) -> FetchResult:
        """
        Query the source for a word.

        Args:
            word: Word as typed (already trimmed by the caller)

        Returns:
            FetchResult; never raises for transport or payload problems
        """
        if not self.is_configured():
            return FetchResult.failed(self.name, "not configured")

        url = self.build_url(word)

        try:
            resp = requests.get(url, headers=self.get_headers(), timeout=self.timeout)
        except requests.exceptions.Timeout:
            return FetchResult.failed(self.name, "Request timeout")
        except requests.exceptions.ConnectionError:
            return FetchResult.failed(self.name, "Connection error")
        except requests.exceptions.RequestException as e:
            return FetchResult.failed(self.name, str(e))

        if resp.status_code == 404:
            return FetchResult.empty(self.name)

        if not 200 <= resp.status_code < 300:
            return FetchResult.failed(self.name, f"HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError:
            return FetchResult.failed(self.name, "Invalid JSON")

        try:
            candidates = self.parse(payload)
        except (KeyError, TypeError, AttributeError, IndexError) as e:
            return FetchResult.failed(self.name, f"Unexpected payload: {e!r}")

        return FetchResult.from_candidates(self.name, candidates)

    def fetch_definitions(self, word: str) -> List[DefinitionCandidate]:
        """Fetch candidates for a word; empty list on any failure."""
        result = self.fetch(word)
        if result.status == FetchStatus.FAILED:
            logger.debug(f"{self.name} failed for {word!r}: {result.error}")
        return result.candidates
