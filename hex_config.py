# hex_config.py
#
# Tunables for the game and the Monte Carlo player.
# Environment variables give the defaults, command line flags override them:
#   HEX_SIZE        board size n              (default 11)
#   HEX_MC_REPEATS  random playouts per move  (default 1000)
#   HEX_WORKERS     playout processes         (default 1)
#   HEX_SEED        RNG seed                  (default: fresh entropy)
#
# Fewer repeats make the computer faster and weaker, more make it slower and
# stronger; the cost of a decision grows linearly with the repeat count.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_REPEATS = 1000
DEFAULT_SIZE = 11
QUICK_SIZE = 4
DEFAULT_WORKERS = 1


def _env_int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    size: int = DEFAULT_SIZE
    repeats: int = DEFAULT_REPEATS
    workers: int = DEFAULT_WORKERS
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        if env is None:
            env = os.environ
        cfg = cls(
            size=_env_int(env, "HEX_SIZE", DEFAULT_SIZE),
            repeats=_env_int(env, "HEX_MC_REPEATS", DEFAULT_REPEATS),
            workers=_env_int(env, "HEX_WORKERS", DEFAULT_WORKERS),
            seed=_env_int(env, "HEX_SEED", None),
        )
        cfg.validate()
        return cfg

    def validate(self) -> "GameConfig":
        if self.size <= 0:
            raise ValueError("Board size must be a positive integer.")
        if self.repeats <= 0:
            raise ValueError("Number of Monte Carlo repeats is not positive.")
        if self.workers <= 0:
            raise ValueError("Number of workers is not positive.")
        return self
