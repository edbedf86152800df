"""
Shared fixtures: synthetic hand landmarks in pixel space (y grows downwards).

Fingers point up from their MCP joints. An extended finger is a straight line
(180 degree joints); a curled finger bends 90 degrees at both PIP and DIP.
"""

import pytest


SEGMENT = 25.0

# MCP offsets from the wrist for index, middle, ring, pinky
MCP_OFFSETS = {
    'index': (5, (-30.0, -80.0)),
    'middle': (9, (-10.0, -85.0)),
    'ring': (13, (10.0, -80.0)),
    'pinky': (17, (30.0, -70.0)),
}

# Wrist to middle MCP
PALM_SIZE = (10.0 ** 2 + 85.0 ** 2) ** 0.5


def make_hand(wrist=(300.0, 300.0), fingers=None, thumb='extended', pinch=False):
    """
    Build a 21-point hand as a list of {x, y} dicts.

    Args:
        wrist: Wrist position
        fingers: Mapping finger name -> 'extended' | 'curled' (default all extended)
        thumb: 'extended' or 'bent'
        pinch: Move the thumb tip next to the index tip (O shape)
    """
    wx, wy = wrist
    states = {'index': 'extended', 'middle': 'extended', 'ring': 'extended', 'pinky': 'extended'}
    states.update(fingers or {})

    points = [None] * 21
    points[0] = (wx, wy)

    # Thumb runs left from near the wrist
    cmc = (wx - 20.0, wy - 10.0)
    points[1] = cmc
    points[2] = (cmc[0] - SEGMENT, cmc[1])
    points[3] = (cmc[0] - 2 * SEGMENT, cmc[1])
    if thumb == 'extended':
        points[4] = (cmc[0] - 3 * SEGMENT, cmc[1])
    else:
        points[4] = (cmc[0] - 2 * SEGMENT, cmc[1] + SEGMENT)

    for name, (mcp_index, (dx, dy)) in MCP_OFFSETS.items():
        mx, my = wx + dx, wy + dy
        points[mcp_index] = (mx, my)
        points[mcp_index + 1] = (mx, my - SEGMENT)
        if states[name] == 'extended':
            points[mcp_index + 2] = (mx, my - 2 * SEGMENT)
            points[mcp_index + 3] = (mx, my - 3 * SEGMENT)
        else:
            points[mcp_index + 2] = (mx + SEGMENT, my - SEGMENT)
            points[mcp_index + 3] = (mx + SEGMENT, my)

    if pinch:
        ix, iy = points[8]
        points[4] = (ix + 5.0, iy)

    return [{'x': x, 'y': y} for x, y in points]


def hand_center(wrist=(300.0, 300.0)):
    """Expected centre of a make_hand() hand."""
    wx, wy = wrist
    xs = [wx] + [wx + dx for _, (dx, _) in MCP_OFFSETS.values()]
    ys = [wy] + [wy + dy for _, (_, dy) in MCP_OFFSETS.values()]
    return sum(xs) / len(xs), sum(ys) / len(ys)


@pytest.fixture
def hand_factory():
    return make_hand


@pytest.fixture
def open_hand():
    return make_hand()


@pytest.fixture
def fist_hand():
    return make_hand(fingers={'index': 'curled', 'middle': 'curled', 'ring': 'curled', 'pinky': 'curled'},
                     thumb='bent')


@pytest.fixture
def ily_hand():
    return make_hand(fingers={'middle': 'curled', 'ring': 'curled'})
