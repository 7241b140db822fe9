import numpy as np
import pytest

from triclaim.core import (
    CapacityExceeded,
    DuplicateOrientation,
    GroupMismatch,
    IllegalPlacement,
    Move,
    OutOfBounds,
    PlayerId,
    action_space_size,
    check_placement,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    initialize_board,
    is_legal,
    legal_move_mask,
)


def test_every_placement_legal_on_empty_board() -> None:
    board = initialize_board(3, 4)
    for y in range(3):
        for x in range(4):
            for orientation in range(4):
                assert is_legal(board, x, y, orientation)
    assert legal_move_mask(board).sum() == action_space_size(3, 4)


def test_second_triangle_in_cell_must_complete_the_cut() -> None:
    board = initialize_board(10, 10)
    assert is_legal(board, 0, 0, 0)
    board.place_triangle(0, 0, 0, PlayerId.ONE)

    with pytest.raises(GroupMismatch):
        check_placement(board, 0, 0, 1)
    with pytest.raises(GroupMismatch):
        check_placement(board, 0, 0, 3)
    with pytest.raises(DuplicateOrientation):
        check_placement(board, 0, 0, 0)
    assert is_legal(board, 0, 0, 2)

    board.place_triangle(0, 0, 2, PlayerId.TWO)
    with pytest.raises(CapacityExceeded):
        check_placement(board, 0, 0, 2)


def test_placement_must_touch_an_existing_corner() -> None:
    board = initialize_board(5, 5)
    board.place_triangle(0, 0, 0, PlayerId.ONE)  # corners (0,0), (1,0), (0,1)

    # Shares vertex (1,0).
    assert is_legal(board, 1, 0, 0)
    assert is_legal(board, 1, 0, 1)
    # The diagonal neighbour only meets at (1,1), which orientation 0 does not cover.
    for orientation in range(4):
        assert not is_legal(board, 1, 1, orientation)
    with pytest.raises(IllegalPlacement):
        check_placement(board, 3, 3, 2)


def test_corner_touch_needs_the_vertex_on_the_placed_triangle() -> None:
    board = initialize_board(5, 5)
    board.place_triangle(2, 2, 2, PlayerId.ONE)  # corners (3,3), (2,3), (3,2)

    # (1,1) orientation 2 reaches vertex (2,2), which the placed triangle lacks.
    assert not is_legal(board, 1, 1, 2)
    # (3,3) orientation 0 reaches vertex (3,3).
    assert is_legal(board, 3, 3, 0)


def test_corner_touch_does_not_wrap() -> None:
    board = initialize_board(3, 3)
    board.place_triangle(0, 0, 0, PlayerId.ONE)
    # Vertex (3,0) is the right boundary; it is not the same point as (0,0).
    assert not is_legal(board, 2, 0, 3)
    assert not is_legal(board, 0, 2, 1)


def test_out_of_bounds_is_rejected() -> None:
    board = initialize_board(3, 3)
    for x, y, orientation in [(-1, 0, 0), (3, 0, 0), (0, 3, 1), (0, 0, 4)]:
        with pytest.raises(OutOfBounds):
            check_placement(board, x, y, orientation)
        assert not is_legal(board, x, y, orientation)


def test_bad_orientation_is_out_of_bounds_for_validator_and_board() -> None:
    board = initialize_board(3, 3)
    for orientation in (-1, 4):
        with pytest.raises(OutOfBounds) as checked:
            check_placement(board, 1, 1, orientation)
        with pytest.raises(OutOfBounds) as placed:
            board.place_triangle(1, 1, orientation, PlayerId.ONE)
        assert checked.value.orientation == placed.value.orientation == orientation
    assert board.is_empty()


def test_is_legal_is_pure() -> None:
    board = initialize_board(4, 4)
    board.place_triangle(1, 1, 1, PlayerId.ONE)
    before = board.owners.copy()
    first = [is_legal(board, x, y, o) for y in range(4) for x in range(4) for o in range(4)]
    second = [is_legal(board, x, y, o) for y in range(4) for x in range(4) for o in range(4)]
    assert first == second
    assert np.array_equal(board.owners, before)
    assert board.current_player == PlayerId.ONE


def test_move_codec() -> None:
    move = Move(3, 2, 1)
    index = encode_move(move, cols=5)
    assert index == (2 * 5 + 3) * 4 + 1
    assert decode_move(index, rows=4, cols=5) == move
    with pytest.raises(ValueError):
        decode_move(action_space_size(4, 5), rows=4, cols=5)


def test_legal_mask_matches_enumeration() -> None:
    board = initialize_board(4, 4)
    board.place_triangle(2, 1, 3, PlayerId.TWO)
    legal = enumerate_legal_moves(board)
    mask = legal_move_mask(board)
    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_move(move, board.cols)] == 1
    assert Move(2, 1, 1) in legal
    assert Move(2, 1, 0) not in legal
