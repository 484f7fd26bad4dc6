"""
Configuration settings for VocabDeck.
"""

from pathlib import Path
import logging
import os
from dotenv import load_dotenv


def env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on a bad value."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Ignoring invalid {name}={raw!r}; using {default}"
        )
        return default


VERSION = "2.0.0"

# Directory paths
BASE_DIR = Path(__file__).parent
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.environ.get("VOCABDECK_DATA_DIR", str(BASE_DIR / "data")))
VOCAB_FILE = Path(os.environ.get("VOCAB_FILE", str(DATA_DIR / "vocabulary.json")))
LOG_FILE = DATA_DIR / "vocabdeck.log"

# Create directories
DATA_DIR.mkdir(parents=True, exist_ok=True)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Seconds before a single dictionary request is abandoned
LOOKUP_TIMEOUT = env_float("LOOKUP_TIMEOUT", 10.0)

# Wiktionary edition (subdomain) and the language section read from it
WIKTIONARY_EDITION = os.environ.get("WIKTIONARY_EDITION", "en")
WIKTIONARY_LANGUAGE = os.environ.get("WIKTIONARY_LANGUAGE", "en")

# Data source URLs ({word} is percent-encoded before substitution)
URLS = {
    "wiktionary": "https://{edition}.wiktionary.org/api/rest_v1/page/definition/{word}",
    "free_dictionary": "https://api.dictionaryapi.dev/api/v2/entries/en/{word}",
    "wordsapi": "https://wordsapiv1.p.rapidapi.com/words/{word}",
}

# API Keys (should be set via environment variables in production)
WORDSAPI_KEY = os.environ.get("WORDSAPI_KEY", "")
WORDSAPI_HOST = "wordsapiv1.p.rapidapi.com"

# Label used when a source gives no part of speech
DEFAULT_PART_OF_SPEECH = "definition"

# Per-source limits
LOOKUP_LIMITS = {
    'wiktionary': {
        'max_entries': 3,
        'max_definitions_per_entry': 2,
        'max_candidates': 3,
        'min_definition_length': 11,
    },
    'free_dictionary': {
        'max_meanings': 3,
    },
    'wordsapi': {
        'max_results': 3,
    },
}

# Subject tags offered by the entry form; "all" is the unfiltered view
ALL_SUBJECTS = "all"
SUBJECTS = ['general', 'english', 'science', 'history', 'technology']

# Field length limits for submitted entries
MAX_WORD_LENGTH = 100
MAX_MEANING_LENGTH = 1000
MAX_EXAMPLE_LENGTH = 1000

# Seconds between keep-alive comments on the live feed
STREAM_KEEPALIVE = 15
