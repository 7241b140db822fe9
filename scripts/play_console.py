#!/usr/bin/env python3
"""Play Triclaim in the console against a policy, with optional logging & replay."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from triclaim import GameConfig, GreedyClusterPolicy, RandomPolicy, load_game_config
from triclaim.core import (
    Board,
    Move,
    PlacementError,
    PlayerId,
    RoundResult,
    cluster_scores,
    decode_move,
    encode_move,
    forfeit,
    legal_move_mask,
    play_move,
    selected_move,
)
from triclaim.env import render_ascii
from triclaim.evaluation import Policy, select_action

ORIENTATION_NAMES = {0: "top-left", 1: "bottom-left", 2: "bottom-right", 3: "top-right"}


def format_board(board: Board) -> str:
    scores = cluster_scores(board)
    header = (
        f"P1 cluster {scores[PlayerId.ONE]} (wins {board.rounds_won[PlayerId.ONE]}) | "
        f"P2 cluster {scores[PlayerId.TWO]} (wins {board.rounds_won[PlayerId.TWO]})"
    )
    return header + "\n" + render_ascii(board)


def make_policy(name: str, seed: Optional[int]) -> Policy:
    if name == "greedy":
        return GreedyClusterPolicy()
    return RandomPolicy(np.random.default_rng(seed))


def select_ai_move(policy: Policy, board: Board, temperature: float, rng: np.random.Generator) -> Move:
    legal_mask = legal_move_mask(board)
    probs = policy.act(board.copy(), legal_mask) * legal_mask
    if probs.sum() <= 0:
        probs = legal_mask.astype(np.float32)
    probs = probs / probs.sum()
    index = select_action(probs, temperature, rng)
    return decode_move(index, board.rows, board.cols)


def prompt_human_move(board: Board) -> Optional[Move]:
    """Read a move; returns None when the human forfeits."""
    while True:
        current = ORIENTATION_NAMES[board.selected_orientation]
        raw = input(f"x y [orientation] (r rotate, f forfeit, q quit) [selected {current}]: ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Leaving the game.")
            sys.exit(0)
        if raw.lower() == "f":
            return None
        if raw.lower() == "r":
            board.rotate_selection()
            continue
        parts = raw.split()
        if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
            print("Enter two or three non-negative integers.")
            continue
        x, y = int(parts[0]), int(parts[1])
        if len(parts) == 3:
            return Move(x, y, int(parts[2]))
        return selected_move(board, x, y)


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    config = GameConfig.from_dict(data.get("metadata", {}).get("config", {}))
    board = config.new_board()
    moves = data.get("moves", [])
    if verbose:
        print("Replaying logged game.")
    for entry in moves:
        if entry.get("forfeit"):
            forfeit(board, PlayerId(entry["player"]))
            break
        x, y, orientation = entry["move"]
        record = play_move(board, Move(x, y, orientation))
        if verbose:
            print(f"Player {int(record.player)}: ({x},{y}) orientation {orientation}, claimed {record.claimed_count}")
            print(format_board(board))
    result = board.last_result
    summary = {
        "result": result.value if isinstance(result, RoundResult) else None,
        "moves": len(moves),
        "current_player": int(board.current_player),
        "board": board.to_snapshot(),
    }
    if verbose:
        print(f"Replay finished. Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = load_game_config(args.config) if args.config else GameConfig()
    if args.rows is not None:
        config.rows = args.rows
    if args.cols is not None:
        config.cols = args.cols
    board = config.new_board()
    policy_ai = make_policy(args.opponent, args.seed)
    rng = np.random.default_rng(args.seed)
    human = PlayerId(args.human_player)
    log_records: List[Dict] = []

    while not board.is_round_over:
        print("\nBoard:")
        print(format_board(board))
        player = board.current_player
        print(f"To move: player {int(player)}")

        if player == human:
            move = prompt_human_move(board)
            if move is None:
                forfeit(board)
                log_records.append({"player": int(player), "forfeit": True})
                break
            actor = "human"
        else:
            move = select_ai_move(policy_ai, board, args.temperature, rng)
            actor = "ai"
            print(f"AI plays ({move.x},{move.y}) orientation {move.orientation}")

        try:
            record = play_move(board, move)
        except PlacementError as exc:
            print(f"Illegal move: {exc}")
            continue

        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "player": int(player),
                "move": list(move.as_tuple()),
                "action_index": encode_move(move, board.cols),
                "claimed": record.claimed_count,
            }
        )
        if record.claimed_count:
            print(f"Player {int(player)} claimed {record.claimed_count} enclosed triangle(s).")

    print("\nFinal board:")
    print(format_board(board))
    result = board.last_result
    if result is not None and result.winner is not None:
        print(f"Player {int(result.winner)} wins the round!")
    else:
        print("The round is a draw.")

    if args.log_file:
        metadata = {
            "human_player": args.human_player,
            "opponent": args.opponent,
            "temperature": args.temperature,
            "config": config.to_dict(),
            "result": result.value if result is not None else None,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Triclaim in the console against a policy.")
    parser.add_argument("--config", type=str, help="YAML game config")
    parser.add_argument("--rows", type=int)
    parser.add_argument("--cols", type=int)
    parser.add_argument("--human-player", type=int, choices=[1, 2], default=1)
    parser.add_argument("--opponent", choices=["random", "greedy"], default="greedy")
    parser.add_argument("--temperature", type=float, default=0.5)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
