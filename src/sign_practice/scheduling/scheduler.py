"""
Spaced-repetition scheduling for practised signs.

Each sign carries a small memory record. A successful review stretches the
interval until the next review (1 day, then 3 days, then multiplied by the
ease factor); a failed review resets it to one day and lowers the ease.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)


DEFAULT_EASE = 2.3
MIN_EASE = 1.3
MAX_EASE = 2.8
EASE_STEP_UP = 0.08
EASE_STEP_DOWN = 0.2

DateLike = Union[date, datetime, str]


def as_date(value: DateLike) -> date:
    """
    Coerce a date, datetime or ISO ``yyyy-mm-dd`` string to a calendar date.

    Raises:
        ValueError: If a string is not an ISO date
        TypeError: If the value is none of the accepted types
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")


def today_iso(today: Optional[date] = None) -> str:
    """Local calendar date as ``yyyy-mm-dd``."""
    return (today or date.today()).isoformat()


@dataclass
class ReviewItem:
    """Memory state of one vocabulary entry."""
    ease: float = DEFAULT_EASE
    interval_days: int = 0
    due: date = None
    streak: int = 0

    def __post_init__(self):
        if self.due is None:
            self.due = date.today()
        else:
            self.due = as_date(self.due)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the persisted JSON field names."""
        return {
            'ease': self.ease,
            'intervalDays': self.interval_days,
            'due': self.due.isoformat(),
            'streak': self.streak,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReviewItem":
        """
        Build an item from its persisted form.

        Missing fields take the defaults. A non-finite ease is replaced by the
        default. Other values are not range-checked; the next review brings
        them back into bounds.

        Raises:
            ValueError: If ``due`` is not an ISO date or a number is unreadable
        """
        due = data.get('due')
        return cls(
            ease=_finite_ease(float(data.get('ease', DEFAULT_EASE))),
            interval_days=int(data.get('intervalDays', 0)),
            due=as_date(due) if due is not None else None,
            streak=int(data.get('streak', 0)),
        )


def new_item(reference_date: DateLike) -> ReviewItem:
    """A never-reviewed item, due on ``reference_date``."""
    return ReviewItem(ease=DEFAULT_EASE, interval_days=0, due=as_date(reference_date), streak=0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _finite_ease(ease: float) -> float:
    return ease if math.isfinite(ease) else DEFAULT_EASE


def _clamp_ease(ease: float) -> float:
    return min(MAX_EASE, max(MIN_EASE, ease))


def _max_interval(reference: date) -> int:
    """Longest interval whose due date is still representable."""
    return (date.max - reference).days


def review_outcome(item: Optional[ReviewItem], success: bool, reference_date: DateLike) -> ReviewItem:
    """
    Apply one review outcome and return the updated item.

    The input item is not modified.

    Args:
        item: Current state, or None for a sign never seen before
        success: Whether the learner produced the sign correctly
        reference_date: Date of the review; the new due date counts from it

    Returns:
        New ReviewItem with ``due = reference_date + interval_days``
    """
    reference = as_date(reference_date)
    base = item if item is not None else new_item(reference)

    ease = _clamp_ease(_finite_ease(base.ease))
    max_interval = _max_interval(reference)
    interval_days = min(base.interval_days, max_interval)
    streak = base.streak

    if success:
        streak = max(0, streak) + 1
        if interval_days == 0:
            interval_days = 1
        elif interval_days == 1:
            interval_days = 3
        else:
            interval_days = max(1, _round_half_up(interval_days * ease))
        ease = _clamp_ease(ease + EASE_STEP_UP)
    else:
        streak = 0
        ease = _clamp_ease(ease - EASE_STEP_DOWN)
        interval_days = 1

    interval_days = min(interval_days, max_interval)
    updated = ReviewItem(
        ease=ease,
        interval_days=interval_days,
        due=reference + timedelta(days=interval_days),
        streak=streak,
    )
    logger.debug(
        f"Review {'passed' if success else 'failed'}: interval {base.interval_days} -> {interval_days} days, "
        f"ease {base.ease:.2f} -> {ease:.2f}, due {updated.due.isoformat()}"
    )
    return updated


def is_due(item: Optional[ReviewItem], on_date: DateLike) -> bool:
    """True iff the item exists and its due date is on or before ``on_date``."""
    if item is None:
        return False
    return item.due <= as_date(on_date)
