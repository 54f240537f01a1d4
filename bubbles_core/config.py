from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigError
from .geometry import PLAYGROUND_HEIGHT, PLAYGROUND_WIDTH
from .grid import Color

FILLED_ROWS = 5
RADIUS = 1.0
# A bullet collides a bit before the two circles actually touch.
COLLISION_RADIUS = 2 * RADIUS * 0.85
REWARD = 10
PENALTY = 10
TICK_INTERVAL_MS = 10
STEP_SCALE = 0.75
MAX_DIMENSION = 200
DEFAULT_PALETTE: Tuple[Color, ...] = (Color.ORANGE, Color.WHITE, Color.BLUE)


@dataclass(frozen=True)
class GameConfig:
    """Playfield dimensions, palette and engine constants for one session."""
    width: int = PLAYGROUND_WIDTH
    height: int = PLAYGROUND_HEIGHT
    filled_rows: int = FILLED_ROWS
    palette: Tuple[Color, ...] = DEFAULT_PALETTE
    collision_radius: float = COLLISION_RADIUS
    reward: int = REWARD
    penalty: int = PENALTY
    tick_interval_ms: int = TICK_INTERVAL_MS
    step_scale: float = STEP_SCALE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "filled_rows"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("grid dimensions must be >= 1")
        if self.width > MAX_DIMENSION or self.height > MAX_DIMENSION:
            raise ConfigError(f"grid dimensions must be <= {MAX_DIMENSION}")
        if self.filled_rows < 0 or self.filled_rows > self.height:
            raise ConfigError("filled_rows must be in [0, height]")
        if not self.palette:
            raise ConfigError("palette must not be empty")
        if self.collision_radius <= 0:
            raise ConfigError("collision_radius must be > 0")
        if self.step_scale <= 0:
            raise ConfigError("step_scale must be > 0")
        if self.reward < 0 or self.penalty < 0:
            raise ConfigError("reward and penalty must be >= 0")
        if self.tick_interval_ms < 0:
            raise ConfigError("tick_interval_ms must be >= 0")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def config_from_env(**overrides) -> GameConfig:
    """Builds a GameConfig from BUBBLES_* environment variables.

    Keyword overrides win over the environment; anything unset falls back to
    the dataclass defaults.
    """
    values = {
        "width": _env_int("BUBBLES_WIDTH", PLAYGROUND_WIDTH),
        "height": _env_int("BUBBLES_HEIGHT", PLAYGROUND_HEIGHT),
        "filled_rows": _env_int("BUBBLES_FILLED_ROWS", FILLED_ROWS),
        "reward": _env_int("BUBBLES_REWARD", REWARD),
        "penalty": _env_int("BUBBLES_PENALTY", PENALTY),
        "seed": _env_int("BUBBLES_SEED", None),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**values)
