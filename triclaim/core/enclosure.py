from __future__ import annotations

import logging
from typing import List

import numpy as np

from .geometry import EDGES, FACING_ORIENTATIONS, OPPOSITE_ORIENTATION, neighbour
from .state import Board, PlayerId, Slot

logger = logging.getLogger(__name__)


def is_slot_enclosed(board: Board, x: int, y: int, orientation: int) -> bool:
    """Whether the empty slot's two edge walls and its diagonal are all occupied.

    Edge walls are sealed by a triangle of either owner in the neighbouring
    cell (with wraparound) that lies against the shared edge. The diagonal is
    sealed by the complementary half of this cell.
    """
    if board.owners[y, x, OPPOSITE_ORIENTATION[orientation]] == 0:
        return False
    for edge in EDGES[orientation]:
        nx, ny = neighbour(x, y, edge, board.rows, board.cols)
        if not any(board.owners[ny, nx, o] != 0 for o in FACING_ORIENTATIONS[edge]):
            return False
    return True


def claim_enclosed_slots(board: Board, player: PlayerId) -> List[Slot]:
    """Fill every enclosed slot for ``player`` in one row-major pass.

    Only cells holding exactly one triangle are candidates. Fills made earlier
    in the pass count as walls for cells scanned later; a filled cell is
    not revisited. Returns the claimed slots in scan order.
    """
    claimed: List[Slot] = []
    counts = board.triangle_counts()
    for y in range(board.rows):
        for x in range(board.cols):
            if counts[y, x] != 1:
                continue
            occupant = int(np.flatnonzero(board.owners[y, x])[0])
            slot = OPPOSITE_ORIENTATION[occupant]
            if is_slot_enclosed(board, x, y, slot):
                board.place_triangle(x, y, slot, player)
                claimed.append((x, y, slot))
    if claimed:
        logger.debug("Player %d claimed %d enclosed slot(s): %s", int(player), len(claimed), claimed)
    return claimed


def claim_enclosed(board: Board, player: PlayerId) -> int:
    """Claim enclosed slots for ``player`` and return how many were filled."""
    return len(claim_enclosed_slots(board, player))
