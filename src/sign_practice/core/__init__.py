"""
Landmark geometry and hand features.
"""

from .landmarks import HandLandmarkSet, Point, as_frame, as_point, from_mediapipe
from .geometry import angle_at, distance
from .features import HandFeatureExtractor, HandFeatures, FingerAngles, is_curled, is_extended

__all__ = [
    "HandLandmarkSet",
    "Point",
    "as_frame",
    "as_point",
    "from_mediapipe",
    "angle_at",
    "distance",
    "HandFeatureExtractor",
    "HandFeatures",
    "FingerAngles",
    "is_curled",
    "is_extended",
]
