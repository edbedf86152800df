"""
Joint-angle features of a single hand for heuristic sign classification.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .geometry import angle_at, distance
from .landmarks import HandLandmarkSet, Point, ORIGIN, LANDMARK_INDICES


# Joint angle above which a finger counts as straight, below which it counts as bent
EXTENDED_ANGLE = 160.0
CURLED_ANGLE = 100.0

# Wrist plus the four finger MCP joints
CENTER_INDICES = [
    LANDMARK_INDICES['wrist'],
    LANDMARK_INDICES['index_mcp'],
    LANDMARK_INDICES['middle_mcp'],
    LANDMARK_INDICES['ring_mcp'],
    LANDMARK_INDICES['pinky_mcp'],
]


@dataclass
class FingerAngles:
    """Joint angles of one finger, in degrees."""
    pip: float
    dip: Optional[float] = None
    mcp: Optional[float] = None


@dataclass
class HandFeatures:
    """Container for extracted hand features."""
    palm_size: float
    finger_angles: Dict[str, FingerAngles]
    hand_center: Point


def is_extended(pip: float, dip: Optional[float] = None) -> bool:
    return pip > EXTENDED_ANGLE and (dip is None or dip > EXTENDED_ANGLE)


def is_curled(pip: float, dip: Optional[float] = None) -> bool:
    return pip < CURLED_ANGLE and (dip is None or dip < CURLED_ANGLE)


def palm_size(hand: HandLandmarkSet) -> float:
    """Wrist to middle-finger MCP distance; 1 when either point is missing."""
    wrist = hand.get(LANDMARK_INDICES['wrist'])
    middle_mcp = hand.get(LANDMARK_INDICES['middle_mcp'])
    if wrist is None or middle_mcp is None:
        return 1.0
    return distance(wrist, middle_mcp)


def hand_center(hand: HandLandmarkSet) -> Point:
    """Mean of the wrist and MCP joints that are present; the origin if none are."""
    points = hand.present(CENTER_INDICES)
    if not points:
        return ORIGIN
    x = sum(p.x for p in points) / len(points)
    y = sum(p.y for p in points) / len(points)
    return Point(x, y)


def finger_angles(hand: HandLandmarkSet) -> Dict[str, FingerAngles]:
    """
    Joint angles for every finger.

    The thumb reports its IP joint as ``pip`` and its MCP joint as ``mcp``.
    The other fingers report PIP and DIP. Missing landmarks fall back to the
    wrist, then to the origin.
    """
    safe = hand.safe

    angles = {
        'thumb': FingerAngles(
            pip=angle_at(safe(2), safe(3), safe(4)),
            mcp=angle_at(safe(1), safe(2), safe(3)),
        )
    }

    # MCP index of each long finger; PIP, DIP and tip follow it
    for name, mcp in (('index', 5), ('middle', 9), ('ring', 13), ('pinky', 17)):
        angles[name] = FingerAngles(
            pip=angle_at(safe(mcp), safe(mcp + 1), safe(mcp + 2)),
            dip=angle_at(safe(mcp + 1), safe(mcp + 2), safe(mcp + 3)),
        )

    return angles


class HandFeatureExtractor:
    """Extract palm size, joint angles and centre from a landmark set."""

    def extract_features(self, hand: HandLandmarkSet) -> HandFeatures:
        """
        Extract features from hand landmarks.

        Args:
            hand: HandLandmarkSet, possibly partial

        Returns:
            HandFeatures object
        """
        return HandFeatures(
            palm_size=palm_size(hand),
            finger_angles=finger_angles(hand),
            hand_center=hand_center(hand),
        )

    def extended_fingers(self, features: HandFeatures) -> Dict[str, bool]:
        """Extension state per finger; the thumb is judged on its IP joint alone."""
        return {
            name: is_extended(angles.pip, angles.dip)
            for name, angles in features.finger_angles.items()
        }

    def curled_fingers(self, features: HandFeatures) -> Dict[str, bool]:
        return {
            name: is_curled(angles.pip, angles.dip)
            for name, angles in features.finger_angles.items()
        }
