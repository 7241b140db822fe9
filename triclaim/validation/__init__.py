"""Board invariant checks."""

from .board_checks import check_board_invariants, check_cell

__all__ = ["check_board_invariants", "check_cell"]
