from __future__ import annotations

from typing import List

import numpy as np

from .errors import (
    BoardInvariantError,
    CapacityExceeded,
    DuplicateOrientation,
    GroupMismatch,
    IllegalPlacement,
    OutOfBounds,
    PlacementError,
)
from .geometry import NUM_ORIENTATIONS, diagonal_group, is_valid_orientation, triangle_corners
from .state import Board, ExtraTurnRule, Move

DEFAULT_ROWS = 10
DEFAULT_COLS = 10


def action_space_size(rows: int, cols: int) -> int:
    return rows * cols * NUM_ORIENTATIONS


def encode_move(move: Move, cols: int) -> int:
    return (move.y * cols + move.x) * NUM_ORIENTATIONS + move.orientation


def decode_move(index: int, rows: int, cols: int) -> Move:
    if not 0 <= index < action_space_size(rows, cols):
        raise ValueError("Move index out of range.")
    orientation = index % NUM_ORIENTATIONS
    cell_index = index // NUM_ORIENTATIONS
    return Move(cell_index % cols, cell_index // cols, orientation)


def initialize_board(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    *,
    extra_turn_rule: ExtraTurnRule = ExtraTurnRule.PER_MOVE,
) -> Board:
    return Board.empty(rows, cols, extra_turn_rule=extra_turn_rule)


def check_placement(board: Board, x: int, y: int, orientation: int) -> None:
    """Raise the matching PlacementError if the triangle may not be placed."""
    if not board.in_bounds(x, y):
        raise OutOfBounds("Cell outside the board", x=x, y=y, orientation=orientation)
    if not is_valid_orientation(orientation):
        raise OutOfBounds("Orientation outside 0..3", x=x, y=y, orientation=orientation)

    occupants = np.flatnonzero(board.owners[y, x])
    if len(occupants) > 2:
        raise BoardInvariantError(f"Cell ({x}, {y}) holds {len(occupants)} triangles.")
    if len(occupants) >= 2:
        raise CapacityExceeded("Cell already holds two triangles", x=x, y=y, orientation=orientation)
    if len(occupants) == 1:
        existing = int(occupants[0])
        if diagonal_group(existing) != diagonal_group(orientation):
            raise GroupMismatch(
                f"Orientation {orientation} does not share a diagonal with {existing}",
                x=x,
                y=y,
                orientation=orientation,
            )
        if existing == orientation:
            raise DuplicateOrientation("Orientation already occupied", x=x, y=y, orientation=orientation)

    if board.is_empty():
        return
    if not any(has_corner(board, vx, vy) for vx, vy in triangle_corners(x, y, orientation)):
        raise IllegalPlacement(
            "Triangle does not touch any placed triangle", x=x, y=y, orientation=orientation
        )


def is_legal(board: Board, x: int, y: int, orientation: int) -> bool:
    try:
        check_placement(board, x, y, orientation)
    except PlacementError:
        return False
    return True


def has_corner(board: Board, vx: int, vy: int) -> bool:
    """True if some placed triangle has grid vertex (vx, vy) among its corners."""
    for cy in (vy - 1, vy):
        for cx in (vx - 1, vx):
            if not board.in_bounds(cx, cy):
                continue
            for orientation in np.flatnonzero(board.owners[cy, cx]):
                if (vx, vy) in triangle_corners(cx, cy, int(orientation)):
                    return True
    return False


def enumerate_legal_moves(board: Board) -> List[Move]:
    legal: List[Move] = []
    for y in range(board.rows):
        for x in range(board.cols):
            for orientation in range(NUM_ORIENTATIONS):
                if is_legal(board, x, y, orientation):
                    legal.append(Move(x, y, orientation))
    return legal


def legal_move_mask(board: Board) -> np.ndarray:
    mask = np.zeros(action_space_size(board.rows, board.cols), dtype=np.int8)
    for move in enumerate_legal_moves(board):
        mask[encode_move(move, board.cols)] = 1
    return mask
