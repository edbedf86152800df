"""
Signs the recognizer can check automatically.
"""

from enum import Enum
from typing import Any, Optional


class Sign(str, Enum):
    I_LOVE_YOU = "I Love You"
    STOP = "Stop"
    MORE = "More"
    HELP = "Help"

    @classmethod
    def from_label(cls, label: Any) -> Optional["Sign"]:
        """Exact-label lookup; None for anything that is not a supported sign."""
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            return None
        for sign in cls:
            if sign.value == label:
                return sign
        return None
