from __future__ import annotations

import logging
from typing import Optional

from .enclosure import claim_enclosed_slots
from .errors import RoundOverError
from .rules import check_placement
from .scoring import cluster_scores, result_from_scores
from .state import Board, Move, MoveRecord, Phase, PlayerId, RoundResult

logger = logging.getLogger(__name__)


def play_move(board: Board, move: Move) -> MoveRecord:
    """Play one move for the current player.

    The placement is validated first and a rejected move raises the matching
    PlacementError without touching the board. A legal move is placed, then
    enclosed slots are claimed for the mover, extra turns are credited, and
    the round either ends (full board) or the turn advances.
    """
    if board.phase is Phase.ROUND_OVER:
        raise RoundOverError("The round is over; start the next round first.")

    check_placement(board, move.x, move.y, move.orientation)
    player = board.current_player
    board.place_triangle(move.x, move.y, move.orientation, player)
    board.move_count += 1
    logger.debug("Player %d placed orientation %d at (%d, %d)", int(player), move.orientation, move.x, move.y)

    claimed = tuple(claim_enclosed_slots(board, player))
    credited = board.extra_turn_rule.credit(len(claimed))
    if credited:
        board.pending_extra_turns += credited
        logger.debug("Player %d earned %d extra turn(s)", int(player), credited)

    result: Optional[RoundResult] = None
    repeat_turn = False
    if board.is_full():
        result = end_round(board)
    else:
        repeat_turn = advance_turn(board)

    record = MoveRecord(
        move=move,
        player=player,
        claimed=claimed,
        extra_turns_credited=credited,
        repeat_turn=repeat_turn,
        result=result,
    )
    board.last_move = record
    return record


def selected_move(board: Board, x: int, y: int) -> Move:
    """Move at (x, y) using the board's currently selected orientation."""
    return Move(x, y, board.selected_orientation)


def advance_turn(board: Board) -> bool:
    """Hand the turn on; returns True when the same player moves again."""
    if board.pending_extra_turns > 0:
        board.pending_extra_turns -= 1
        logger.debug(
            "Player %d takes an extra turn (%d remaining)",
            int(board.current_player),
            board.pending_extra_turns,
        )
        return True
    board.current_player = board.current_player.opponent
    logger.debug("Switching to player %d", int(board.current_player))
    return False


def end_round(board: Board) -> RoundResult:
    """Score a full board and record the round winner."""
    scores = cluster_scores(board)
    result = result_from_scores(scores)
    _finish_round(board, result)
    logger.info(
        "Round over: %s (P1 cluster %d, P2 cluster %d)",
        result.value,
        scores[PlayerId.ONE],
        scores[PlayerId.TWO],
    )
    return result


def forfeit(board: Board, player: Optional[PlayerId] = None) -> RoundResult:
    """End the round early; the non-forfeiting player takes it."""
    if board.phase is Phase.ROUND_OVER:
        raise RoundOverError("The round is already over.")
    loser = board.current_player if player is None else PlayerId(player)
    result = RoundResult.won_by(loser.opponent)
    _finish_round(board, result)
    logger.info("Player %d forfeits; %s", int(loser), result.value)
    return result


def start_next_round(board: Board, starting_player: Optional[PlayerId] = None) -> None:
    """Clear the grid for a new round, keeping dimensions and rounds won.

    Without ``starting_player`` whoever is current at reset time starts.
    """
    board.reset()
    if starting_player is not None:
        board.current_player = PlayerId(starting_player)


def _finish_round(board: Board, result: RoundResult) -> None:
    winner = result.winner
    if winner is not None:
        board.rounds_won[winner] += 1
    board.phase = Phase.ROUND_OVER
    board.pending_extra_turns = 0
    board.last_result = result
