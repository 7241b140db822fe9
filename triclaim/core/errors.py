from __future__ import annotations

from typing import Optional


class TriclaimError(Exception):
    """Base class for recoverable rule errors."""


class PlacementError(TriclaimError, ValueError):
    """A candidate placement was rejected; the board is left unchanged."""

    def __init__(self, message: str, *, x: int, y: int, orientation: Optional[int] = None) -> None:
        where = f"x={x}, y={y}" if orientation is None else f"x={x}, y={y}, orientation={orientation}"
        super().__init__(f"{message} ({where})")
        self.x = x
        self.y = y
        self.orientation = orientation


class OutOfBounds(PlacementError):
    """Coordinates outside the grid, or an orientation outside 0..3."""


class CapacityExceeded(PlacementError):
    pass


class GroupMismatch(PlacementError):
    pass


class DuplicateOrientation(PlacementError):
    pass


class IllegalPlacement(PlacementError):
    """The triangle does not share a grid vertex with any placed triangle."""


class RoundOverError(TriclaimError):
    pass


class BoardInvariantError(RuntimeError):
    """The board was observed in a state the rules can never produce."""
