from __future__ import annotations

import numpy as np

from triclaim.core import Board, BoardInvariantError, PlayerId
from triclaim.core.geometry import NUM_ORIENTATIONS, diagonal_group


def check_cell(board: Board, x: int, y: int) -> None:
    occupied = np.flatnonzero(board.owners[y, x])
    if len(occupied) > 2:
        raise BoardInvariantError(f"cell ({x}, {y}) holds {len(occupied)} triangles")
    if len(occupied) == 2 and diagonal_group(int(occupied[0])) != diagonal_group(int(occupied[1])):
        raise BoardInvariantError(f"cell ({x}, {y}) mixes diagonal groups {occupied.tolist()}")


def check_board_invariants(board: Board) -> None:
    """Raise BoardInvariantError if the board is in a state no legal play reaches."""
    if board.owners.shape != (board.rows, board.cols, NUM_ORIENTATIONS):
        raise BoardInvariantError(f"owners has shape {board.owners.shape}")
    valid_owners = {0} | {int(p) for p in PlayerId}
    if not np.isin(board.owners, list(valid_owners)).all():
        raise BoardInvariantError("owners contain ids outside {0, 1, 2}")
    if board.pending_extra_turns < 0:
        raise BoardInvariantError("pending_extra_turns is negative")
    if not 0 <= board.selected_orientation < NUM_ORIENTATIONS:
        raise BoardInvariantError("selected_orientation outside 0..3")
    if any(count < 0 for count in board.rounds_won.values()):
        raise BoardInvariantError("rounds_won holds a negative count")
    for y, x in zip(*np.nonzero(board.triangle_counts() >= 2)):
        check_cell(board, int(x), int(y))
