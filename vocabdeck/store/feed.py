"""
Live vocabulary feed for one view.

A view shows one subject tab at a time, so it owns at most one store
subscription. Switching tabs releases the old subscription before the
new one is taken.
"""

from typing import Callable, List, Optional

from ..config import ALL_SUBJECTS
from .vocabulary_store import Snapshot, Subscription, VocabEntry, VocabularyStore


class VocabularyFeed:
    """Keeps a view's snapshot current for the selected subject."""

    def __init__(self, store: VocabularyStore, on_change: Callable[[Snapshot], None] = None):
        """
        Args:
            store: Store to subscribe to
            on_change: Optional callback for every snapshot the feed receives
        """
        self.store = store
        self.on_change = on_change
        self.subject = ALL_SUBJECTS
        self.entries: List[VocabEntry] = []
        self._subscription: Optional[Subscription] = None

    def show(self, subject: str = ALL_SUBJECTS):
        """Switch to a subject ("all" for every entry)."""
        self.close()
        self.subject = subject or ALL_SUBJECTS
        self._subscription = self.store.subscribe(self._receive, subject=self.subject)

    def close(self):
        """Release the active subscription, if any."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    @property
    def is_active(self) -> bool:
        return self._subscription is not None and self._subscription.active

    @property
    def count(self) -> int:
        return len(self.entries)

    def _receive(self, snapshot: Snapshot):
        self.entries = snapshot
        if self.on_change:
            self.on_change(snapshot)
