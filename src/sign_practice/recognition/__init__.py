"""
Single-frame sign recognition.
"""

from .signs import Sign
from .classifiers import GestureResult
from .dispatcher import recognize, supported_signs

__all__ = [
    "Sign",
    "GestureResult",
    "recognize",
    "supported_signs",
]
