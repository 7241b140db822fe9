from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from triclaim.config import GameConfig
from triclaim.core import (
    Board,
    PlayerId,
    RoundResult,
    action_space_size,
    decode_move,
    legal_move_mask,
    play_move,
    start_next_round,
)
from triclaim.features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor
from triclaim.validation import check_board_invariants


class TriclaimEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        enforce_legal_actions: bool = True,
        check_invariants: bool = False,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self._enforce_legal = enforce_legal_actions
        self._check_invariants = check_invariants
        self.render_mode = render_mode

        rows, cols = self.config.rows, self.config.cols
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=(BOARD_CHANNELS, rows, cols), dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(action_space_size(rows, cols))

        self._board = self.config.new_board()
        self._last_claimed = 0

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        starting = options.get("starting_player", PlayerId.ONE) if options else PlayerId.ONE
        start_next_round(self._board, starting_player=starting)
        self._last_claimed = 0
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        move = decode_move(int(action_index), self._board.rows, self._board.cols)
        record = play_move(self._board, move)
        self._last_claimed = record.claimed_count
        if self._check_invariants:
            check_board_invariants(self._board)

        reward = self._compute_reward(record.result)
        terminated = record.result is not None
        truncated = False
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        if self._board.is_round_over:
            return np.zeros(self.action_space.n, dtype=np.int8)
        return legal_move_mask(self._board)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_ascii(self._board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self._board), "aux": build_aux_vector(self._board)}

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": int(self._board.current_player),
            "claimed": self._last_claimed,
            "rounds_won": {int(p): n for p, n in self._board.rounds_won.items()},
        }

    def _compute_reward(self, result: Optional[RoundResult]) -> float:
        if result == RoundResult.PLAYER_ONE_WIN:
            return 1.0
        if result == RoundResult.PLAYER_TWO_WIN:
            return -1.0
        return 0.0


def render_ascii(board: Board) -> str:
    """One four-character token per cell, slot order 0..3, owner id or '.' when empty."""
    rows = []
    for y in range(board.rows):
        tokens = []
        for x in range(board.cols):
            tokens.append("".join(str(int(owner)) if owner else "." for owner in board.owners[y, x]))
        rows.append(" ".join(tokens))
    return "\n".join(rows)
