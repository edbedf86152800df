"""
Spaced-repetition scheduling and review state persistence.
"""

from .scheduler import ReviewItem, review_outcome, is_due, new_item, today_iso
from .store import ReviewStore, InMemoryReviewStore, JsonFileReviewStore
from .deck import ReviewDeck

__all__ = [
    "ReviewItem",
    "review_outcome",
    "is_due",
    "new_item",
    "today_iso",
    "ReviewStore",
    "InMemoryReviewStore",
    "JsonFileReviewStore",
    "ReviewDeck",
]
