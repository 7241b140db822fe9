from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import BoardInvariantError, CapacityExceeded, DuplicateOrientation, OutOfBounds
from .geometry import NUM_ORIENTATIONS, is_valid_orientation

OwnerArray = NDArray[np.int8]


class PlayerId(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "PlayerId":
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE


class Phase(Enum):
    PLAYING = "playing"
    ROUND_OVER = "round_over"


class RoundResult(Enum):
    PLAYER_ONE_WIN = "player_one_win"
    PLAYER_TWO_WIN = "player_two_win"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[PlayerId]:
        if self is RoundResult.PLAYER_ONE_WIN:
            return PlayerId.ONE
        if self is RoundResult.PLAYER_TWO_WIN:
            return PlayerId.TWO
        return None

    @staticmethod
    def won_by(player: PlayerId) -> "RoundResult":
        return RoundResult.PLAYER_ONE_WIN if player == PlayerId.ONE else RoundResult.PLAYER_TWO_WIN


class ExtraTurnRule(Enum):
    """How many extra turns a move earns from the triangles it auto-claimed."""

    PER_MOVE = "per_move"  # one extra turn whenever anything was claimed
    HALF_CLAIMED = "half_claimed"  # (1 + claimed) // 2

    def credit(self, claimed: int) -> int:
        if claimed <= 0:
            return 0
        if self is ExtraTurnRule.PER_MOVE:
            return 1
        return (1 + claimed) // 2


@dataclass(frozen=True)
class Triangle:
    owner: PlayerId
    orientation: int


Cell = Tuple[Triangle, ...]
Slot = Tuple[int, int, int]  # (x, y, orientation)


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    orientation: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.orientation)


@dataclass(frozen=True)
class MoveRecord:
    move: Move
    player: PlayerId
    claimed: Tuple[Slot, ...] = field(default_factory=tuple)
    extra_turns_credited: int = 0
    repeat_turn: bool = False
    result: Optional[RoundResult] = None

    @property
    def claimed_count(self) -> int:
        return len(self.claimed)


def _empty_rounds() -> Dict[PlayerId, int]:
    return {PlayerId.ONE: 0, PlayerId.TWO: 0}


@dataclass
class Board:
    rows: int
    cols: int
    owners: OwnerArray  # shape (rows, cols, 4), 0 = empty slot, else owning player id
    current_player: PlayerId = PlayerId.ONE
    pending_extra_turns: int = 0
    rounds_won: Dict[PlayerId, int] = field(default_factory=_empty_rounds)
    selected_orientation: int = 0
    phase: Phase = Phase.PLAYING
    extra_turn_rule: ExtraTurnRule = ExtraTurnRule.PER_MOVE
    move_count: int = 0
    last_move: Optional[MoveRecord] = None
    last_result: Optional[RoundResult] = None

    @classmethod
    def empty(
        cls,
        rows: int = 10,
        cols: int = 10,
        *,
        extra_turn_rule: ExtraTurnRule = ExtraTurnRule.PER_MOVE,
    ) -> "Board":
        if rows <= 0 or cols <= 0:
            raise ValueError("Board dimensions must be positive.")
        owners = np.zeros((rows, cols, NUM_ORIENTATIONS), dtype=np.int8)
        return cls(rows=rows, cols=cols, owners=owners, extra_turn_rule=extra_turn_rule)

    def copy(self) -> "Board":
        return Board(
            rows=self.rows,
            cols=self.cols,
            owners=self.owners.copy(),
            current_player=self.current_player,
            pending_extra_turns=self.pending_extra_turns,
            rounds_won=dict(self.rounds_won),
            selected_orientation=self.selected_orientation,
            phase=self.phase,
            extra_turn_rule=self.extra_turn_rule,
            move_count=self.move_count,
            last_move=self.last_move,
            last_result=self.last_result,
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBounds("Cell outside the board", x=x, y=y)
        slots = self.owners[y, x]
        cell = tuple(
            Triangle(PlayerId(int(owner)), orientation)
            for orientation, owner in enumerate(slots)
            if owner != 0
        )
        if len(cell) > 2:
            raise BoardInvariantError(f"Cell ({x}, {y}) holds {len(cell)} triangles.")
        return cell

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield x, y, self.cell_at(x, y)

    def triangle_counts(self) -> NDArray[np.int64]:
        """Per-cell triangle counts, shape (rows, cols)."""
        return np.count_nonzero(self.owners, axis=2)

    def triangle_count(self) -> int:
        return int(np.count_nonzero(self.owners))

    def is_full(self) -> bool:
        return bool(np.all(self.triangle_counts() == 2))

    def is_empty(self) -> bool:
        return not bool(self.owners.any())

    def place_triangle(self, x: int, y: int, orientation: int, player: PlayerId) -> None:
        """Insert a triangle without checking the placement rules."""
        if not self.in_bounds(x, y):
            raise OutOfBounds("Cell outside the board", x=x, y=y, orientation=orientation)
        if not is_valid_orientation(orientation):
            raise OutOfBounds("Orientation outside 0..3", x=x, y=y, orientation=orientation)
        occupied = int(np.count_nonzero(self.owners[y, x]))
        if occupied >= 2:
            raise CapacityExceeded("Cell already holds two triangles", x=x, y=y, orientation=orientation)
        if self.owners[y, x, orientation] != 0:
            raise DuplicateOrientation("Orientation already occupied", x=x, y=y, orientation=orientation)
        self.owners[y, x, orientation] = int(PlayerId(player))

    def owner_at(self, x: int, y: int, orientation: int) -> Optional[PlayerId]:
        value = int(self.owners[y, x, orientation])
        return PlayerId(value) if value else None

    def reset(self) -> None:
        """Empty the grid for a new round; dimensions and rounds_won survive."""
        self.owners[:] = 0
        self.pending_extra_turns = 0
        self.phase = Phase.PLAYING
        self.move_count = 0
        self.last_move = None

    def rotate_selection(self, direction: int = 1) -> int:
        self.selected_orientation = (self.selected_orientation + direction) % NUM_ORIENTATIONS
        return self.selected_orientation

    @property
    def is_round_over(self) -> bool:
        return self.phase is Phase.ROUND_OVER

    def to_snapshot(self) -> Dict[str, object]:
        cells: List[List[List[Dict[str, int]]]] = []
        for y in range(self.rows):
            row = []
            for x in range(self.cols):
                row.append(
                    [{"owner": int(t.owner), "orientation": t.orientation} for t in self.cell_at(x, y)]
                )
            cells.append(row)
        return {"rows": self.rows, "cols": self.cols, "cells": cells}

    def __repr__(self) -> str:
        counts = self.triangle_counts()
        grid = "\n".join(" ".join(str(int(c)) for c in row) for row in counts)
        return (
            f"Board({self.rows}x{self.cols}, current={self.current_player.name}, "
            f"extra={self.pending_extra_turns}, phase={self.phase.value})\n{grid}"
        )
