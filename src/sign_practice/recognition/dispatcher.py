"""
Route a target sign to its classifier.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..core.landmarks import as_frame
from .classifiers import (
    Frame,
    GestureResult,
    recognize_help,
    recognize_i_love_you,
    recognize_more,
    recognize_stop,
)
from .signs import Sign

logger = logging.getLogger(__name__)


CLASSIFIERS: Dict[Sign, Callable[[Frame], Optional[GestureResult]]] = {
    Sign.I_LOVE_YOU: recognize_i_love_you,
    Sign.STOP: recognize_stop,
    Sign.MORE: recognize_more,
    Sign.HELP: recognize_help,
}


def supported_signs() -> List[str]:
    """Labels the recognizer can check."""
    return [sign.value for sign in Sign]


def recognize(target: Union[Sign, str], hands: Any) -> Optional[GestureResult]:
    """
    Classify one frame against a target sign.

    Args:
        target: Sign or its exact label, e.g. "I Love You"
        hands: Detected hands for the frame, in any shape ``as_frame`` accepts

    Returns:
        GestureResult, or None for no match or an unsupported target
    """
    sign = Sign.from_label(target)
    if sign is None:
        logger.debug(f"No classifier for target {target!r}")
        return None

    frame = as_frame(hands)
    result = CLASSIFIERS[sign](frame)

    if result:
        logger.debug(f"{sign.value}: matched with confidence {result.confidence:.2f} ({len(frame)} hands)")
    return result
