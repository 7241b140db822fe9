from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from triclaim.core import DEFAULT_COLS, DEFAULT_ROWS, Board, ExtraTurnRule, initialize_board


@dataclass
class GameConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    extra_turn_rule: ExtraTurnRule = field(default=ExtraTurnRule.PER_MOVE)

    def __post_init__(self) -> None:
        if isinstance(self.extra_turn_rule, str):
            self.extra_turn_rule = ExtraTurnRule(self.extra_turn_rule)
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("rows and cols must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {key: data[key] for key in ("rows", "cols", "extra_turn_rule") if key in data}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols, "extra_turn_rule": self.extra_turn_rule.value}

    def new_board(self) -> Board:
        return initialize_board(self.rows, self.cols, extra_turn_rule=self.extra_turn_rule)


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    return yaml.safe_load(Path(path).read_text()) or {}


def game_config_from(cfg: Dict[str, Any]) -> GameConfig:
    """GameConfig from a parsed config; the ``game`` section is used when present."""
    return GameConfig.from_dict(cfg.get("game", cfg))


def load_game_config(path: Union[str, Path]) -> GameConfig:
    return game_config_from(load_config_file(path))
