from __future__ import annotations

from typing import Optional

import numpy as np

from triclaim.core import Board, decode_move, largest_cluster, play_move


class Policy:
    """Policy interface producing move probabilities over legal moves."""

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    """Puts all mass on one legal move drawn from the policy's own generator."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(legal_mask.shape, dtype=np.float32)
        indices = np.flatnonzero(legal_mask)
        if len(indices) == 0:
            return probs
        probs[int(self.rng.choice(indices))] = 1.0
        return probs


class GreedyClusterPolicy(Policy):
    """Heuristic baseline: favour moves that claim slots and grow the mover's cluster."""

    def __init__(self, claim_weight: float = 2.0, sharpness: float = 4.0) -> None:
        self.claim_weight = claim_weight
        self.sharpness = sharpness

    def act(self, board: Board, legal_mask: np.ndarray) -> np.ndarray:
        indices = np.flatnonzero(legal_mask)
        result = np.zeros_like(legal_mask, dtype=np.float32)
        if len(indices) == 0:
            return result

        mover = board.current_player
        scores = np.empty(len(indices), dtype=np.float64)
        for i, idx in enumerate(indices):
            trial = board.copy()
            record = play_move(trial, decode_move(int(idx), board.rows, board.cols))
            scores[i] = (
                largest_cluster(trial, mover)
                - largest_cluster(trial, mover.opponent)
                + self.claim_weight * record.claimed_count
            )

        scores = self.sharpness * (scores - scores.max())
        probs = np.exp(scores)
        probs /= probs.sum()
        result[indices] = probs
        return result


def select_action(probabilities: np.ndarray, temperature: float, rng: np.random.Generator) -> int:
    if probabilities.sum() <= 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
