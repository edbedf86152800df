"""
Hand landmark containers and tolerant input normalization.

A frame arrives from the pose model as a list of detected hands. Each hand is
an ordered list of up to 21 points in pixel space:

    0        wrist
    1 - 4    thumb (CMC, MCP, IP, tip)
    5 - 8    index (MCP, PIP, DIP, tip)
    9 - 12   middle
    13 - 16  ring
    17 - 20  pinky

Hands may be short or contain missing entries. Nothing in this module raises on
malformed input; unreadable points become ``None`` and unreadable hands become
empty landmark sets.
"""

import math
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Sequence

import numpy as np


NUM_LANDMARKS = 21

# MediaPipe hand landmark indices (21 landmarks per hand)
LANDMARK_INDICES = {
    'wrist': 0,
    'thumb_cmc': 1, 'thumb_mcp': 2, 'thumb_ip': 3, 'thumb_tip': 4,
    'index_mcp': 5, 'index_pip': 6, 'index_dip': 7, 'index_tip': 8,
    'middle_mcp': 9, 'middle_pip': 10, 'middle_dip': 11, 'middle_tip': 12,
    'ring_mcp': 13, 'ring_pip': 14, 'ring_dip': 15, 'ring_tip': 16,
    'pinky_mcp': 17, 'pinky_pip': 18, 'pinky_dip': 19, 'pinky_tip': 20
}


class Point(NamedTuple):
    """A single 2-D landmark."""
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def _coordinate(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise TypeError("boolean is not a coordinate")
    number = float(value)
    return number if math.isfinite(number) else 0.0


def as_point(raw: Any) -> Optional[Point]:
    """
    Convert a raw landmark into a Point.

    Accepts a Point, an (x, y) or (x, y, z) sequence, a mapping with ``x``/``y``
    keys or an object with ``x``/``y`` attributes. A missing, NaN or infinite
    coordinate counts as 0.

    Returns:
        Point, or None if the landmark is missing or unreadable
    """
    if raw is None:
        return None
    if isinstance(raw, Point):
        return raw

    try:
        if isinstance(raw, Mapping):
            if 'x' not in raw and 'y' not in raw:
                return None
            return Point(_coordinate(raw.get('x')), _coordinate(raw.get('y')))

        if isinstance(raw, (str, bytes)):
            return None

        if isinstance(raw, (Sequence, np.ndarray)):
            if len(raw) < 2:
                return None
            return Point(_coordinate(raw[0]), _coordinate(raw[1]))

        if hasattr(raw, 'x') or hasattr(raw, 'y'):
            return Point(_coordinate(getattr(raw, 'x', None)), _coordinate(getattr(raw, 'y', None)))

    except (TypeError, ValueError, OverflowError):
        return None

    return None


class HandLandmarkSet:
    """Ordered landmarks of one detected hand, possibly partial."""

    def __init__(self, points: Optional[Iterable] = None):
        self.points: List[Optional[Point]] = []
        if points is not None:
            for raw in points:
                if len(self.points) >= NUM_LANDMARKS:
                    break
                self.points.append(as_point(raw))

    @classmethod
    def from_raw(cls, hand: Any) -> "HandLandmarkSet":
        """
        Build a landmark set from whatever the detector produced.

        Supports an existing HandLandmarkSet, a mapping or object carrying a
        ``keypoints`` or ``landmarks`` list, and a bare list of points.
        """
        if isinstance(hand, HandLandmarkSet):
            return hand

        points = None
        if isinstance(hand, Mapping):
            points = hand.get('keypoints')
            if points is None:
                points = hand.get('landmarks')
        elif isinstance(hand, (list, tuple, np.ndarray)):
            points = hand
        elif hand is not None:
            points = getattr(hand, 'keypoints', None)
            if points is None:
                points = getattr(hand, 'landmarks', None)

        if isinstance(points, (str, bytes, Mapping)) or not isinstance(points, Iterable):
            return cls()
        try:
            return cls(points)
        except TypeError:
            return cls()

    def get(self, index: int) -> Optional[Point]:
        """Landmark at ``index``, or None if absent."""
        if 0 <= index < len(self.points):
            return self.points[index]
        return None

    def safe(self, index: int) -> Point:
        """Landmark at ``index``, falling back to the wrist and then the origin."""
        point = self.get(index)
        if point is None:
            point = self.get(LANDMARK_INDICES['wrist'])
        if point is None:
            point = ORIGIN
        return point

    def present(self, indices: Iterable[int]) -> List[Point]:
        """The landmarks among ``indices`` that are present, in order."""
        return [p for p in (self.get(i) for i in indices) if p is not None]

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        missing = sum(1 for p in self.points if p is None)
        return f"HandLandmarkSet(points={len(self.points)}, missing={missing})"


def as_frame(hands: Any) -> List[HandLandmarkSet]:
    """Normalize a detector output into a list of landmark sets; never raises."""
    if hands is None or isinstance(hands, (str, bytes, Mapping)):
        return []
    if not isinstance(hands, Iterable):
        return []
    try:
        return [HandLandmarkSet.from_raw(hand) for hand in hands]
    except TypeError:
        return []


def from_mediapipe(results: Any, image_width: int, image_height: int) -> List[HandLandmarkSet]:
    """
    Convert a MediaPipe Hands result into a pixel-space frame.

    Args:
        results: Object returned by ``mp.solutions.hands.Hands.process``
        image_width: Width of the processed image in pixels
        image_height: Height of the processed image in pixels

    Returns:
        List of HandLandmarkSet objects (empty if no hands were detected)
    """
    multi_hand_landmarks = getattr(results, 'multi_hand_landmarks', None)
    if not multi_hand_landmarks:
        return []

    frame = []
    for hand_landmarks in multi_hand_landmarks:
        points = []
        for landmark in getattr(hand_landmarks, 'landmark', []):
            # Convert normalized coordinates to pixel coordinates
            points.append(Point(landmark.x * image_width, landmark.y * image_height))
        frame.append(HandLandmarkSet(points))

    return frame
