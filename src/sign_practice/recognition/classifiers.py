"""
Heuristic single-frame classifiers, one per supported sign.

Each classifier takes a frame (list of HandLandmarkSet) and returns a
GestureResult or None. Fewer hands than a sign needs is simply no match.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from ..core.features import HandFeatureExtractor, HandFeatures
from ..core.geometry import distance
from ..core.landmarks import HandLandmarkSet, LANDMARK_INDICES
from .signs import Sign

logger = logging.getLogger(__name__)


ILY_MIN_SCORE = 0.8
STOP_MIN_CONFIDENCE = 0.85
# Thumb-tip to index-tip distance, in palm sizes, that still counts as closed
O_SHAPE_MAX_PINCH = 0.35
# Max centre separation of two hands, in average palm sizes
HANDS_NEAR_DISTANCE = 1.2
MORE_CONFIDENCE = 0.9
HELP_CONFIDENCE = 0.85

LONG_FINGERS = ['index', 'middle', 'ring', 'pinky']

Frame = List[HandLandmarkSet]


@dataclass(frozen=True)
class GestureResult:
    """Recognition verdict for one frame."""
    label: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_extractor = HandFeatureExtractor()


def _count_long_fingers(states: Dict[str, bool]) -> int:
    return sum(1 for name in LONG_FINGERS if states[name])


def _average_palm_size(a: HandFeatures, b: HandFeatures) -> float:
    return (a.palm_size + b.palm_size) / 2 or 1.0


def is_fist(features: HandFeatures) -> bool:
    """At least three of the four long fingers curled."""
    return _count_long_fingers(_extractor.curled_fingers(features)) >= 3


def is_flat_palm(features: HandFeatures) -> bool:
    """At least three of the four long fingers extended."""
    return _count_long_fingers(_extractor.extended_fingers(features)) >= 3


def is_o_shape(hand: HandLandmarkSet, features: HandFeatures) -> bool:
    """Thumb tip touching the index tip, relative to palm size."""
    thumb_tip = hand.get(LANDMARK_INDICES['thumb_tip'])
    index_tip = hand.get(LANDMARK_INDICES['index_tip'])
    if thumb_tip is None or index_tip is None:
        return False
    pinch = distance(thumb_tip, index_tip) / (features.palm_size or 1.0)
    return pinch < O_SHAPE_MAX_PINCH


def recognize_i_love_you(frame: Frame) -> Optional[GestureResult]:
    """Thumb, index and pinky out; middle and ring curled. Any hand may match."""
    if len(frame) < 1:
        return None

    for hand in frame:
        features = _extractor.extract_features(hand)
        extended = _extractor.extended_fingers(features)
        curled = _extractor.curled_fingers(features)
        checks = [
            extended['thumb'],
            extended['index'],
            curled['middle'],
            curled['ring'],
            extended['pinky'],
        ]
        score = sum(checks) / len(checks)
        if score > ILY_MIN_SCORE:
            return GestureResult(Sign.I_LOVE_YOU.value, score)

    return None


def recognize_stop(frame: Frame) -> Optional[GestureResult]:
    """Open palm: all four long fingers of the first hand extended."""
    if len(frame) < 1:
        return None

    features = _extractor.extract_features(frame[0])
    confidence = _count_long_fingers(_extractor.extended_fingers(features)) / len(LONG_FINGERS)
    if confidence > STOP_MIN_CONFIDENCE:
        return GestureResult(Sign.STOP.value, confidence)
    return None


def recognize_more(frame: Frame) -> Optional[GestureResult]:
    """Both hands in an O shape with their centres close together."""
    if len(frame) < 2:
        return None

    first, second = frame[0], frame[1]
    first_features = _extractor.extract_features(first)
    second_features = _extractor.extract_features(second)

    if not (is_o_shape(first, first_features) and is_o_shape(second, second_features)):
        return None

    palm = _average_palm_size(first_features, second_features)
    separation = distance(first_features.hand_center, second_features.hand_center) / palm
    if separation < HANDS_NEAR_DISTANCE:
        return GestureResult(Sign.MORE.value, MORE_CONFIDENCE)
    return None


def recognize_help(frame: Frame) -> Optional[GestureResult]:
    """A fist resting above a flat palm; either hand may be the fist."""
    if len(frame) < 2:
        return None

    a = _extractor.extract_features(frame[0])
    b = _extractor.extract_features(frame[1])

    palm = _average_palm_size(a, b)
    dx = abs(a.hand_center.x - b.hand_center.x) / palm
    dy = abs(a.hand_center.y - b.hand_center.y) / palm
    if not (dx < HANDS_NEAR_DISTANCE and dy < HANDS_NEAR_DISTANCE):
        return None

    # Image y grows downwards
    if is_fist(a) and is_flat_palm(b) and a.hand_center.y < b.hand_center.y:
        return GestureResult(Sign.HELP.value, HELP_CONFIDENCE)
    if is_fist(b) and is_flat_palm(a) and b.hand_center.y < a.hand_center.y:
        return GestureResult(Sign.HELP.value, HELP_CONFIDENCE)

    logger.debug("Help: hands near but roles not satisfied")
    return None
