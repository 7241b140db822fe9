"""Triclaim: a two-player triangle-placement board game engine."""

from . import core, env, evaluation, features, validation
from .config import GameConfig, load_game_config
from .core import (
    Board,
    ExtraTurnRule,
    Move,
    MoveRecord,
    Phase,
    PlayerId,
    RoundResult,
    Triangle,
    claim_enclosed,
    forfeit,
    initialize_board,
    is_legal,
    largest_cluster,
    play_move,
    start_next_round,
)
from .env import TriclaimEnv
from .evaluation import EvaluationResult, GreedyClusterPolicy, Policy, RandomPolicy, evaluate_policies
from .features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    build_flat_vector,
    state_to_numpy,
    state_to_torch,
)
from .validation import check_board_invariants

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "validation",
    "GameConfig",
    "load_game_config",
    "Board",
    "ExtraTurnRule",
    "Move",
    "MoveRecord",
    "Phase",
    "PlayerId",
    "RoundResult",
    "Triangle",
    "claim_enclosed",
    "forfeit",
    "initialize_board",
    "is_legal",
    "largest_cluster",
    "play_move",
    "start_next_round",
    "TriclaimEnv",
    "EvaluationResult",
    "GreedyClusterPolicy",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_aux_vector",
    "build_board_tensor",
    "build_flat_vector",
    "state_to_numpy",
    "state_to_torch",
    "check_board_invariants",
]
