from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from triclaim.core import PlayerId, RoundResult
from triclaim.env import TriclaimEnv

from .policies import Policy, select_action

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    player_one_wins: int
    player_two_wins: int
    draws: int
    average_length: float

    def winrate_player_one(self) -> float:
        return self.player_one_wins / max(1, self.games_played)

    def winrate_player_two(self) -> float:
        return self.player_two_wins / max(1, self.games_played)

    def as_dict(self) -> dict:
        return {
            "games_played": self.games_played,
            "player_one_wins": self.player_one_wins,
            "player_two_wins": self.player_two_wins,
            "draws": self.draws,
            "average_length": self.average_length,
            "winrate_player_one": self.winrate_player_one(),
        }


def evaluate_policies(
    policy_one: Policy,
    policy_two: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], TriclaimEnv]] = None,
    temperature: float = 1.0,
    seed: Optional[int] = None,
) -> EvaluationResult:
    """Play ``episodes`` rounds between two policies, player one moving first."""
    env_factory = env_factory or TriclaimEnv
    rng = np.random.default_rng(seed)

    player_one_wins = 0
    player_two_wins = 0
    draws = 0
    total_moves = 0

    for episode in range(episodes):
        env = env_factory()
        _, info = env.reset(options={"starting_player": PlayerId.ONE})
        terminated = False
        moves = 0

        while not terminated:
            board = env.board
            legal_mask = info["legal_action_mask"]
            policy = policy_one if board.current_player == PlayerId.ONE else policy_two
            probs = policy.act(board.copy(), legal_mask) * legal_mask
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            probs = probs / probs.sum()
            action_index = select_action(probs, temperature, rng)
            _, _, terminated, truncated, info = env.step(action_index)
            moves += 1
            if truncated:
                terminated = True

        total_moves += moves
        result = env.board.last_result
        if result == RoundResult.PLAYER_ONE_WIN:
            player_one_wins += 1
        elif result == RoundResult.PLAYER_TWO_WIN:
            player_two_wins += 1
        else:
            draws += 1
        logger.debug("Episode %d finished after %d moves: %s", episode, moves, result)

    return EvaluationResult(
        games_played=episodes,
        player_one_wins=player_one_wins,
        player_two_wins=player_two_wins,
        draws=draws,
        average_length=total_moves / max(1, episodes),
    )
