import numpy as np
import pytest

from triclaim.core import (
    Board,
    Phase,
    PlayerId,
    RoundResult,
    cluster_scores,
    cluster_sizes,
    compare_clusters,
    end_round,
    initialize_board,
    largest_cluster,
)


def chain_board() -> Board:
    """Full 10x10 board: player one holds one chain of 150, player two 50 singles.

    Every cell is cut 0/2. Player one owns every orientation 0. Orientation 2
    goes to player two in each odd-row cell off column 0 and in column 1 of
    the even rows; column 0 and the rest of the even rows stay with player one
    and tie the chain together.
    """
    board = initialize_board(10, 10)
    for y in range(10):
        for x in range(10):
            board.place_triangle(x, y, 0, PlayerId.ONE)
            single = x >= 1 and (y % 2 == 1 or x == 1)
            board.place_triangle(x, y, 2, PlayerId.TWO if single else PlayerId.ONE)
    return board


def test_edge_sharing_triangles_form_one_cluster() -> None:
    board = initialize_board(4, 4)
    board.place_triangle(1, 1, 2, PlayerId.ONE)  # right, bottom
    board.place_triangle(2, 1, 0, PlayerId.ONE)  # left, top
    assert largest_cluster(board, PlayerId.ONE) == 2
    assert largest_cluster(board, PlayerId.TWO) == 0


def test_edge_must_be_used_by_both_triangles() -> None:
    board = initialize_board(4, 4)
    board.place_triangle(1, 1, 0, PlayerId.ONE)  # left, top
    board.place_triangle(2, 1, 0, PlayerId.ONE)  # left, top
    assert sorted(cluster_sizes(board, PlayerId.ONE)) == [1, 1]
    assert largest_cluster(board, PlayerId.ONE) == 1


def test_halves_of_one_cut_touch_along_the_diagonal() -> None:
    board = initialize_board(3, 3)
    board.place_triangle(1, 1, 1, PlayerId.TWO)
    board.place_triangle(1, 1, 3, PlayerId.TWO)
    assert largest_cluster(board, PlayerId.TWO) == 2


def test_other_owner_breaks_the_chain() -> None:
    board = initialize_board(4, 4)
    board.place_triangle(0, 1, 2, PlayerId.ONE)
    board.place_triangle(1, 1, 0, PlayerId.TWO)
    board.place_triangle(1, 1, 2, PlayerId.ONE)
    board.place_triangle(2, 1, 0, PlayerId.ONE)
    assert sorted(cluster_sizes(board, PlayerId.ONE)) == [1, 2]
    assert largest_cluster(board, PlayerId.TWO) == 1


def test_clusters_wrap_around_the_grid() -> None:
    board = initialize_board(3, 3)
    board.place_triangle(0, 0, 0, PlayerId.ONE)  # left edge
    board.place_triangle(2, 0, 2, PlayerId.ONE)  # right edge, through the wrap
    board.place_triangle(0, 2, 1, PlayerId.ONE)  # bottom edge, above row 0 through the wrap
    assert largest_cluster(board, PlayerId.ONE) == 3


def test_largest_cluster_is_deterministic() -> None:
    board = chain_board()
    first = cluster_scores(board)
    second = cluster_scores(board)
    assert first == second
    assert sum(cluster_sizes(board, PlayerId.TWO)) == 50


@pytest.mark.parametrize("shift", [(1, 0), (0, 3), (7, 4)])
def test_cluster_scores_do_not_depend_on_scan_order(shift) -> None:
    board = chain_board()
    board.owners[4, 6, 2] = 0
    board.owners[0, 0, 2] = 0
    expected = cluster_scores(board)
    shifted = board.copy()
    shifted.owners = np.roll(board.owners, shift, axis=(0, 1))
    assert cluster_scores(shifted) == expected
    assert sorted(cluster_sizes(shifted, PlayerId.ONE)) == sorted(cluster_sizes(board, PlayerId.ONE))


def test_chain_of_150_beats_isolated_singles() -> None:
    board = chain_board()
    assert board.is_full()
    assert largest_cluster(board, PlayerId.ONE) == 150
    assert largest_cluster(board, PlayerId.TWO) == 1
    assert cluster_sizes(board, PlayerId.TWO) == [1] * 50
    assert compare_clusters(board) is RoundResult.PLAYER_ONE_WIN

    assert end_round(board) is RoundResult.PLAYER_ONE_WIN
    assert board.rounds_won[PlayerId.ONE] == 1
    assert board.rounds_won[PlayerId.TWO] == 0
    assert board.phase is Phase.ROUND_OVER


def test_equal_clusters_draw() -> None:
    board = initialize_board(1, 1)
    board.place_triangle(0, 0, 0, PlayerId.ONE)
    board.place_triangle(0, 0, 2, PlayerId.TWO)
    assert board.is_full()
    assert end_round(board) is RoundResult.DRAW
    assert board.rounds_won == {PlayerId.ONE: 0, PlayerId.TWO: 0}
