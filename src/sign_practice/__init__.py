"""
Sign Practice

Spaced-repetition practice for a fixed sign vocabulary, with heuristic
single-frame recognition of hand signs from pose-model landmarks.
"""

__version__ = "1.0.0"

from .recognition import GestureResult, Sign, recognize, supported_signs
from .scheduling import ReviewDeck, ReviewItem, is_due, review_outcome
from .vocabulary import SignEntry, default_vocabulary
from .utils import ConfigManager, Logger

__all__ = [
    "GestureResult",
    "Sign",
    "recognize",
    "supported_signs",
    "ReviewDeck",
    "ReviewItem",
    "is_due",
    "review_outcome",
    "SignEntry",
    "default_vocabulary",
    "ConfigManager",
    "Logger",
]
