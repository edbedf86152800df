"""
Review deck: the practice-side view of the scheduler.

The deck owns nothing persistent itself. It loads the mapping through an
injected ReviewStore, applies review outcomes with the pure scheduler and
saves after every change.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..vocabulary import SignEntry
from .scheduler import DateLike, ReviewItem, as_date, is_due, new_item, review_outcome
from .store import ReviewStore

logger = logging.getLogger(__name__)


DEFAULT_QUEUE_LIMIT = 8


class ReviewDeck:
    """Due-sign selection and review recording over a store."""

    def __init__(
        self,
        store: ReviewStore,
        vocabulary: Iterable[SignEntry],
        queue_limit: int = DEFAULT_QUEUE_LIMIT
    ):
        """
        Initialize the deck.

        Args:
            store: Where review state is loaded from and saved to
            vocabulary: Signs in display order
            queue_limit: Default number of signs offered per session
        """
        self.store = store
        self.vocabulary = list(vocabulary)
        self.queue_limit = queue_limit
        self._items: Optional[Dict[str, ReviewItem]] = None

    def load(self, today: DateLike) -> Dict[str, ReviewItem]:
        """
        Load the stored state, adding a fresh item for any unseen sign.

        Args:
            today: Due date given to newly added signs

        Returns:
            Copy of the current mapping
        """
        items = self.store.load()

        added = [entry.id for entry in self.vocabulary if entry.id not in items]
        for sign_id in added:
            items[sign_id] = new_item(today)

        if added:
            logger.info(f"Added {len(added)} new sign(s) to the review deck")
            self.store.save(items)
        self._items = items

        return dict(self._items)

    @property
    def items(self) -> Dict[str, ReviewItem]:
        if self._items is None:
            raise RuntimeError("Review deck not loaded. Call load() first.")
        return self._items

    def item(self, sign_id: str) -> Optional[ReviewItem]:
        return self.items.get(sign_id)

    def due_signs(self, on_date: DateLike, limit: Optional[int] = None) -> List[str]:
        """
        Vocabulary signs due on ``on_date``, in vocabulary order.

        Args:
            on_date: Date to check against
            limit: Maximum number of signs; defaults to the deck's queue limit,
                0 or a negative number means no limit

        Returns:
            List of sign ids
        """
        if limit is None:
            limit = self.queue_limit

        on = as_date(on_date)
        due = [entry.id for entry in self.vocabulary if is_due(self.items.get(entry.id), on)]

        if limit > 0:
            due = due[:limit]
        return due

    def record_review(self, sign_id: str, success: bool, on_date: DateLike) -> ReviewItem:
        """
        Apply a review outcome and persist it.

        Signs outside the vocabulary are accepted and stored as well. If the
        store fails to save, the deck keeps its previous state.

        Returns:
            The updated item
        """
        updated = review_outcome(self.items.get(sign_id), success, on_date)
        items = dict(self.items)
        items[sign_id] = updated
        self.store.save(items)
        self._items = items
        return updated

    def mark_known(self, sign_id: str, on_date: DateLike) -> ReviewItem:
        """Record a successful review without practising."""
        return self.record_review(sign_id, True, on_date)
