from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

NUM_ORIENTATIONS = 4

# Grid-vertex offsets (dx, dy) of each orientation's three corners.
CORNERS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 1), (1, 0), (0, 0)),
    ((0, 0), (0, 1), (1, 1)),
    ((1, 1), (0, 1), (1, 0)),
    ((1, 0), (0, 0), (1, 1)),
)

LEFT = "left"
RIGHT = "right"
TOP = "top"
BOTTOM = "bottom"

# Cell edges each orientation lies against.
EDGES: Tuple[Tuple[str, str], ...] = (
    (LEFT, TOP),
    (LEFT, BOTTOM),
    (RIGHT, BOTTOM),
    (RIGHT, TOP),
)

OPPOSITE_EDGE: Dict[str, str] = {LEFT: RIGHT, RIGHT: LEFT, TOP: BOTTOM, BOTTOM: TOP}

# (dx, dy) to the neighbouring cell across an edge.
EDGE_OFFSETS: Dict[str, Tuple[int, int]] = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    TOP: (0, -1),
    BOTTOM: (0, 1),
}

OPPOSITE_ORIENTATION: Tuple[int, ...] = (2, 3, 0, 1)


def diagonal_group(orientation: int) -> int:
    return orientation % 2


def _facing(edge: str) -> FrozenSet[int]:
    back = OPPOSITE_EDGE[edge]
    return frozenset(o for o in range(NUM_ORIENTATIONS) if back in EDGES[o])


# Orientations in the neighbour across an edge that seal that edge.
FACING_ORIENTATIONS: Dict[str, FrozenSet[int]] = {edge: _facing(edge) for edge in EDGE_OFFSETS}


def triangle_corners(x: int, y: int, orientation: int) -> Tuple[Tuple[int, int], ...]:
    """Absolute grid vertices of the triangle at cell (x, y)."""
    return tuple((x + dx, y + dy) for dx, dy in CORNERS[orientation])


def is_valid_orientation(orientation: int) -> bool:
    return 0 <= orientation < NUM_ORIENTATIONS


def same_cut(a: int, b: int) -> bool:
    """True when a and b are the two complementary halves of one diagonal cut."""
    return diagonal_group(a) == diagonal_group(b) and a != b


def wrap(x: int, y: int, rows: int, cols: int) -> Tuple[int, int]:
    return x % cols, y % rows


def neighbour(x: int, y: int, edge: str, rows: int, cols: int) -> Tuple[int, int]:
    dx, dy = EDGE_OFFSETS[edge]
    return wrap(x + dx, y + dy, rows, cols)
