#!/usr/bin/env python3
"""Play two baseline policies against each other and report the results as JSON."""

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

import numpy as np

from triclaim import GreedyClusterPolicy, Policy, RandomPolicy, TriclaimEnv
from triclaim.config import game_config_from, load_config_file
from triclaim.evaluation import evaluate_policies

POLICY_NAMES = ("greedy", "random")


def make_policy(name: str, seed: Optional[int]) -> Policy:
    if name == "greedy":
        return GreedyClusterPolicy()
    return RandomPolicy(np.random.default_rng(seed))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/evaluate.yaml")
    parser.add_argument("--player-one", choices=POLICY_NAMES)
    parser.add_argument("--player-two", choices=POLICY_NAMES)
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--check-invariants", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = {}
    if args.config and Path(args.config).exists():
        cfg = load_config_file(args.config)
    game = game_config_from(cfg)
    player_one = args.player_one or cfg.get("player_one", "greedy")
    player_two = args.player_two or cfg.get("player_two", "random")
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 10)
    temperature = args.temperature if args.temperature is not None else cfg.get("temperature", 1.0)
    seed = args.seed if args.seed is not None else cfg.get("seed")

    # separate streams so the two random players never mirror each other
    seeds = (None, None) if seed is None else (seed + 1, seed + 2)
    result = evaluate_policies(
        make_policy(player_one, seeds[0]),
        make_policy(player_two, seeds[1]),
        episodes=episodes,
        env_factory=lambda: TriclaimEnv(game, check_invariants=args.check_invariants),
        temperature=temperature,
        seed=seed,
    )
    output = {"player_one": player_one, "player_two": player_two, "game": game.to_dict(), **result.as_dict()}
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
