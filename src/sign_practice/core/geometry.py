"""
Primitive 2-D geometry over hand landmarks.
"""

import numpy as np
from typing import Optional

from .landmarks import Point, ORIGIN


def _vec(p: Optional[Point]) -> np.ndarray:
    if p is None:
        p = ORIGIN
    return np.array([p.x, p.y], dtype=float)


def distance(p: Optional[Point], q: Optional[Point]) -> float:
    """Euclidean distance between two points; a missing point counts as the origin."""
    return float(np.linalg.norm(_vec(p) - _vec(q)))


def angle_at(a: Optional[Point], b: Optional[Point], c: Optional[Point]) -> float:
    """
    Angle in degrees at vertex ``b`` between rays b->a and b->c.

    Args:
        a: End of the first ray
        b: Vertex
        c: End of the second ray

    Returns:
        Angle in [0, 180], or 0 when either ray has zero length
    """
    v1 = _vec(a) - _vec(b)
    v2 = _vec(c) - _vec(b)

    magnitude = np.linalg.norm(v1) * np.linalg.norm(v2)
    if magnitude == 0:
        return 0.0

    cos_angle = np.dot(v1, v2) / magnitude
    cos_angle = np.clip(cos_angle, -1.0, 1.0)  # Avoid numerical errors

    return float(np.degrees(np.arccos(cos_angle)))
