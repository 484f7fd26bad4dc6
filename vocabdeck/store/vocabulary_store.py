"""
Vocabulary file store and data structures.

Entries live in one JSON file. Subscribers receive the full ordered
snapshot (newest first, optionally filtered by subject) as soon as
they subscribe and again after every change.
"""

import json
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..config import (
    VOCAB_FILE, SUBJECTS, ALL_SUBJECTS,
    MAX_WORD_LENGTH, MAX_MEANING_LENGTH, MAX_EXAMPLE_LENGTH,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


class VocabValidationError(ValueError):
    """Raised when a submitted entry is incomplete or malformed."""


@dataclass
class VocabEntry:
    """A single flashcard."""

    word: str
    meaning: str
    example: str = ""
    subject: str = "general"
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    createdAt: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "word": self.word,
            "meaning": self.meaning,
            "example": self.example,
            "subject": self.subject,
            "createdAt": self.createdAt,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'VocabEntry':
        """Create from dictionary."""
        return cls(
            id=data.get('id') or uuid.uuid4().hex,
            word=data.get('word', ''),
            meaning=data.get('meaning', ''),
            example=data.get('example') or '',
            subject=data.get('subject', 'general'),
            createdAt=data.get('createdAt') or datetime.now().isoformat(),
        )

    @classmethod
    def from_form(cls, data: Dict) -> 'VocabEntry':
        """
        Build a new entry from submitted form fields.

        Raises:
            VocabValidationError: if a required field is missing or too long,
                                  or the subject is not one of SUBJECTS
        """
        if not isinstance(data, dict):
            raise VocabValidationError("Entry must be an object")

        word = str(data.get('word') or '').strip()
        meaning = str(data.get('meaning') or '').strip()
        example = str(data.get('example') or '').strip()
        subject = str(data.get('subject') or '').strip().lower()

        if not word:
            raise VocabValidationError("Word is required")
        if not meaning:
            raise VocabValidationError("Meaning is required")
        if subject not in SUBJECTS:
            raise VocabValidationError(f"Unknown subject: {subject or '(none)'}")
        if len(word) > MAX_WORD_LENGTH:
            raise VocabValidationError(f"Word is longer than {MAX_WORD_LENGTH} characters")
        if len(meaning) > MAX_MEANING_LENGTH:
            raise VocabValidationError(f"Meaning is longer than {MAX_MEANING_LENGTH} characters")
        if len(example) > MAX_EXAMPLE_LENGTH:
            raise VocabValidationError(f"Example is longer than {MAX_EXAMPLE_LENGTH} characters")

        return cls(word=word, meaning=meaning, example=example, subject=subject)


Snapshot = List[VocabEntry]
Listener = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by VocabularyStore.subscribe()."""

    def __init__(self, store: 'VocabularyStore', listener: Listener, subject: Optional[str]):
        self._store = store
        self.listener = listener
        self.subject = subject
        self.active = True

    def unsubscribe(self):
        """Stop receiving snapshots. Calling it again does nothing."""
        if self.active:
            self.active = False
            self._store._remove_subscription(self)


def normalize_subject(subject: Optional[str]) -> Optional[str]:
    """Map "all"/blank to None (no filter)."""
    if not subject:
        return None
    subject = subject.strip().lower()
    if not subject or subject == ALL_SUBJECTS:
        return None
    return subject


class VocabularyStore:
    """
    Manages the vocabulary JSON file and live subscriptions.
    """

    def __init__(self, filepath: str = None):
        """
        Initialize vocabulary store.

        Args:
            filepath: Path to vocabulary file (created on first save);
                      defaults to VOCAB_FILE
        """
        self.filepath = Path(filepath) if filepath else VOCAB_FILE
        self.entries: List[VocabEntry] = []
        self.backup_path: Optional[Path] = None
        self.read_only = False
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()

        if self.filepath.exists():
            self.load()

    def load(self) -> bool:
        """
        Load entries from file.

        Malformed items are skipped. A file that cannot be read as a
        vocabulary file is moved aside before the store starts empty;
        if it cannot be moved, the store refuses to save over it.
        """
        with self._lock:
            try:
                with open(self.filepath, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                items = data['entries'] if isinstance(data, dict) else None
                if not isinstance(items, list):
                    raise ValueError("no 'entries' list")

            except (IOError, KeyError, ValueError) as e:
                logger.error(f"Error loading {self.filepath}: {e}")
                self.entries = []
                self._set_aside()
                return False

            entries = []
            for index, item in enumerate(items):
                if not isinstance(item, dict):
                    logger.warning(f"Skipping malformed entry #{index} in {self.filepath}: {item!r}")
                    continue
                entries.append(VocabEntry.from_dict(item))

            self.entries = entries
            logger.info(f"Loaded {len(self.entries)} entries from {self.filepath}")
            return True

    def _set_aside(self):
        """Move an unreadable file out of the way so a save cannot overwrite it."""
        stamp = datetime.now().strftime('%Y%m%d-%H%M%S')
        backup = self.filepath.with_name(f"{self.filepath.stem}.corrupt-{stamp}{self.filepath.suffix}")

        try:
            self.filepath.replace(backup)
            self.backup_path = backup
            logger.warning(f"Moved unreadable {self.filepath} to {backup}")
        except OSError as e:
            self.read_only = True
            logger.error(f"Could not back up {self.filepath} ({e}); saving disabled")

    def save(self) -> bool:
        """Save entries to file."""
        with self._lock:
            if self.read_only:
                logger.error(f"Not saving {self.filepath}: store is read-only")
                return False

            data = {
                "version": "1.0",
                "savedAt": datetime.now().isoformat(),
                "totalEntries": len(self.entries),
                "entries": [e.to_dict() for e in self.entries],
            }

            try:
                self.filepath.parent.mkdir(parents=True, exist_ok=True)
                with open(self.filepath, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                return True

            except (IOError, OSError) as e:
                logger.error(f"Error saving {self.filepath}: {e}")
                return False

    def add_entry(self, entry: VocabEntry) -> bool:
        """
        Add an entry, persist it and notify subscribers.

        The entry is only kept (and subscribers only notified) when the
        file was written.

        Args:
            entry: VocabEntry to add

        Returns:
            True if the file was written
        """
        with self._lock:
            self.entries.append(entry)
            if not self.save():
                self.entries.remove(entry)
                return False

        logger.info(f"Added '{entry.word}' [{entry.subject}]")
        self._notify()
        return True

    def list_entries(self, subject: Optional[str] = None) -> Snapshot:
        """Entries newest first, optionally limited to one subject."""
        subject = normalize_subject(subject)
        with self._lock:
            entries = [
                e for e in self.entries
                if subject is None or e.subject == subject
            ]
        return sorted(entries, key=lambda e: e.createdAt, reverse=True)

    def count(self, subject: Optional[str] = None) -> int:
        """Get entry count."""
        return len(self.list_entries(subject))

    def subscribe(self, listener: Listener, subject: Optional[str] = None) -> Subscription:
        """
        Receive the ordered snapshot now and after every change.

        Args:
            listener: Called with a list of VocabEntry
            subject: Only entries with this subject ("all"/None = every entry)

        Returns:
            Subscription handle; call unsubscribe() to stop
        """
        subscription = Subscription(self, listener, normalize_subject(subject))
        with self._lock:
            self._subscriptions.append(subscription)

        self._deliver(subscription)
        return subscription

    @property
    def subscription_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def _remove_subscription(self, subscription: Subscription):
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def _notify(self):
        with self._lock:
            subscriptions = list(self._subscriptions)

        for subscription in subscriptions:
            self._deliver(subscription)

    def _deliver(self, subscription: Subscription):
        if not subscription.active:
            return

        snapshot = self.list_entries(subscription.subject)
        try:
            subscription.listener(snapshot)
        except Exception:
            logger.exception("Vocabulary listener raised; continuing")
