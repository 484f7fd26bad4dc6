import os
import tempfile

import pytest

os.environ.setdefault("VOCABDECK_DATA_DIR", tempfile.mkdtemp(prefix="vocabdeck-test-"))
os.environ.setdefault("WORDSAPI_KEY", "")

import requests

from vocabdeck import app as app_module
from vocabdeck.fetchers.base import DefinitionCandidate, FetchResult
from vocabdeck.store.vocabulary_store import VocabularyStore


class FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeGet:
    """Stands in for requests.get; records every call."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else FakeResponse()
        self.error = error
        self.calls = []

    def __call__(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({'url': url, 'headers': headers or {}, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; set .response or .error on the returned object."""
    fake = FakeGet()
    monkeypatch.setattr(requests, "get", fake)
    return fake


class StubFetcher:
    """Source double returning a fixed FetchResult or raising."""

    def __init__(self, name, candidates=None, error=None, raises=None, configured=True):
        self.name = name
        self.timeout = 10
        self.candidates = candidates or []
        self.error = error
        self.raises = raises
        self.configured = configured
        self.calls = []

    def is_configured(self):
        return self.configured

    def fetch(self, word):
        self.calls.append(word)
        if self.raises is not None:
            raise self.raises
        if self.error:
            return FetchResult.failed(self.name, self.error)
        return FetchResult.from_candidates(self.name, self.candidates)


def candidate(definition, pos="noun", example=None):
    return DefinitionCandidate(definition=definition, partOfSpeech=pos, example=example)


@pytest.fixture
def store(tmp_path):
    return VocabularyStore(str(tmp_path / "vocabulary.json"))


@pytest.fixture
def client(monkeypatch, store):
    from vocabdeck.fetchers.definition_lookup import DefinitionLookup

    lookup = DefinitionLookup([
        StubFetcher("wiktionary"),
        StubFetcher("free_dictionary", candidates=[candidate("a small domesticated feline", example="the cat sat")]),
        StubFetcher("wordsapi", configured=False, error="not configured"),
    ])

    monkeypatch.setattr(app_module, "_vocabulary_store", store)
    monkeypatch.setattr(app_module, "_definition_lookup", lookup)
    app_module.app.config['TESTING'] = True

    with app_module.app.test_client() as test_client:
        yield test_client
