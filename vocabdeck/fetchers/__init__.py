"""
Dictionary fetcher modules for VocabDeck.

API Sources (in lookup order):
- Wiktionary REST API: Definitions with examples
- Free Dictionary: Fallback
- WordsAPI (RapidAPI key required): Last fallback
"""

from .base import DefinitionCandidate, DefinitionFetcher, FetchResult, FetchStatus
from .wiktionary_fetcher import WiktionaryFetcher
from .free_dictionary_fetcher import FreeDictionaryFetcher
from .wordsapi_fetcher import WordsApiFetcher
from .definition_lookup import DefinitionLookup, LookupReport

__all__ = [
    'DefinitionCandidate',
    'DefinitionFetcher',
    'FetchResult',
    'FetchStatus',
    'WiktionaryFetcher',
    'FreeDictionaryFetcher',
    'WordsApiFetcher',
    'DefinitionLookup',
    'LookupReport',
]
