"""Board-state engine for Triclaim."""

from .errors import (
    BoardInvariantError,
    CapacityExceeded,
    DuplicateOrientation,
    GroupMismatch,
    IllegalPlacement,
    OutOfBounds,
    PlacementError,
    RoundOverError,
    TriclaimError,
)
from .state import (
    Board,
    Cell,
    ExtraTurnRule,
    Move,
    MoveRecord,
    Phase,
    PlayerId,
    RoundResult,
    Triangle,
)
from .rules import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    action_space_size,
    check_placement,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    initialize_board,
    is_legal,
    legal_move_mask,
)
from .enclosure import claim_enclosed, claim_enclosed_slots, is_slot_enclosed
from .scoring import cluster_scores, cluster_sizes, compare_clusters, largest_cluster
from .turns import advance_turn, end_round, forfeit, play_move, selected_move, start_next_round

__all__ = [
    "Board",
    "Cell",
    "ExtraTurnRule",
    "Move",
    "MoveRecord",
    "Phase",
    "PlayerId",
    "RoundResult",
    "Triangle",
    "TriclaimError",
    "PlacementError",
    "OutOfBounds",
    "CapacityExceeded",
    "GroupMismatch",
    "DuplicateOrientation",
    "IllegalPlacement",
    "RoundOverError",
    "BoardInvariantError",
    "DEFAULT_ROWS",
    "DEFAULT_COLS",
    "action_space_size",
    "check_placement",
    "is_legal",
    "encode_move",
    "decode_move",
    "enumerate_legal_moves",
    "legal_move_mask",
    "initialize_board",
    "claim_enclosed",
    "claim_enclosed_slots",
    "is_slot_enclosed",
    "largest_cluster",
    "cluster_sizes",
    "cluster_scores",
    "compare_clusters",
    "play_move",
    "selected_move",
    "advance_turn",
    "end_round",
    "forfeit",
    "start_next_round",
]
