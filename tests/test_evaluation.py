import numpy as np
import pytest

from triclaim.config import GameConfig
from triclaim.core import Move, PlayerId, encode_move, initialize_board, legal_move_mask
from triclaim.env import TriclaimEnv
from triclaim.evaluation import GreedyClusterPolicy, RandomPolicy, evaluate_policies, select_action


def test_evaluate_random_vs_random_small():
    policy_a = RandomPolicy(np.random.default_rng(0))
    policy_b = RandomPolicy(np.random.default_rng(1))
    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=2,
        env_factory=lambda: TriclaimEnv(GameConfig(rows=3, cols=3)),
        seed=0,
    )
    assert result.games_played == 2
    assert result.player_one_wins + result.player_two_wins + result.draws == 2
    assert 0 < result.average_length <= 18
    assert result.as_dict()["games_played"] == 2


def test_random_policy_picks_one_legal_move():
    board = initialize_board(3, 3)
    board.place_triangle(1, 1, 0, PlayerId.ONE)
    mask = legal_move_mask(board)
    probs = RandomPolicy(np.random.default_rng(0)).act(board, mask)
    assert np.isclose(probs.sum(), 1.0)
    assert np.count_nonzero(probs) == 1
    assert mask[int(np.argmax(probs))] == 1


def test_random_policy_follows_its_seed():
    board = initialize_board(4, 4)
    mask = legal_move_mask(board)

    def stream(seed):
        policy = RandomPolicy(np.random.default_rng(seed))
        return [int(np.argmax(policy.act(board, mask))) for _ in range(20)]

    assert stream(0) == stream(0)
    assert stream(0) != stream(1)


def test_greedy_policy_distribution():
    board = initialize_board(3, 3)
    board.place_triangle(1, 1, 0, PlayerId.ONE)
    mask = legal_move_mask(board)
    probs = GreedyClusterPolicy().act(board, mask)
    assert np.all(probs >= 0)
    assert np.isclose(probs.sum(), 1.0)
    assert np.all(probs[mask == 0] == 0)
    # scoring trial moves leaves the caller's board alone
    assert board.triangle_count() == 1


def test_greedy_policy_prefers_claiming_move():
    board = initialize_board(4, 4)
    board.place_triangle(2, 1, 2, PlayerId.TWO)
    board.place_triangle(2, 0, 1, PlayerId.TWO)
    board.place_triangle(1, 2, 1, PlayerId.TWO)
    board.place_triangle(2, 2, 0, PlayerId.TWO)
    probs = GreedyClusterPolicy().act(board, legal_move_mask(board))
    assert int(np.argmax(probs)) == encode_move(Move(1, 1, 2), 4)


def test_select_action():
    rng = np.random.default_rng(0)
    probs = np.array([0.1, 0.7, 0.2], dtype=np.float32)
    assert select_action(probs, 0.0, rng) == 1
    assert select_action(np.array([0.0, 0.0, 1.0]), 1.0, rng) == 2
    with pytest.raises(ValueError):
        select_action(np.zeros(3), 1.0, rng)
