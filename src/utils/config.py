"""YAML configuration loading.

Example file:

    search:
      trials_per_deck: 10
      selection_constant: 10.0
    game:
      point_system: american
      millis_per_game: 60000
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

import yaml

from ..mcts.search import SearchConfig

T = TypeVar("T")


@dataclass
class GameConfig:
    """Configuration for running games."""
    point_system: Union[str, Dict[str, int]] = "american"
    millis_per_game: float = 60000.0
    num_games: int = 1
    seed: Optional[int] = None

    def __post_init__(self):
        if self.num_games < 1:
            raise ValueError("num_games must be at least 1")


def _build(cls: Type[T], section: Optional[Dict[str, Any]], name: str) -> T:
    section = section or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown keys in '{name}' section: {sorted(unknown)}")
    return cls(**section)


def config_from_dict(raw: Optional[Dict[str, Any]]) -> Tuple[SearchConfig, GameConfig]:
    """Build configs from a parsed mapping with ``search``/``game`` sections."""
    raw = raw or {}
    unknown = set(raw) - {"search", "game"}
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")
    return (
        _build(SearchConfig, raw.get("search"), "search"),
        _build(GameConfig, raw.get("game"), "game"),
    )


def load_config(path: Union[str, Path]) -> Tuple[SearchConfig, GameConfig]:
    """Load search and game configuration from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)
    return config_from_dict(raw)
