"""
Flock State - Settings and per-step configuration for the flock

FlockSettings is the user-facing configuration (loaded from flock.json).
StepConfig is the small immutable struct handed to every Flock.step call,
so the interaction mode never lives in ambient global state.
"""

import json
import math
import os
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

from tadpoles.config import (
    BASE_MAX_FORCE,
    BASE_MAX_SPEED,
    DEFAULT_BOID_COUNT,
    FRAMES_PER_LAP,
    MAX_BOID_COUNT,
    MIN_BOID_COUNT,
)
from tadpoles.flock.vector import Vector2
from tadpoles.utils.app_paths import get_settings_path
from tadpoles.utils.logger import logger


@dataclass(frozen=True)
class Viewport:
    """Visible area the flock lives in."""
    width: float
    height: float

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)


@dataclass(frozen=True)
class StepConfig:
    """Per-frame simulation switches."""
    group_mode: bool = False
    frames_per_lap: float = FRAMES_PER_LAP


@dataclass
class FlockSettings:
    """
    Configuration for a flock session.

    Loaded from the settings file at startup; group_mode is toggled live
    by the host.
    """

    boid_count: int = DEFAULT_BOID_COUNT
    max_speed: float = BASE_MAX_SPEED
    max_force: float = BASE_MAX_FORCE
    frames_per_lap: float = FRAMES_PER_LAP

    # Seed state
    seed: int = 0
    seed_locked: bool = False

    # Interaction mode (False = scatter/flock, True = group/align)
    group_mode: bool = False

    def __post_init__(self):
        self.boid_count = clamp_boid_count(self.boid_count)

    def step_config(self) -> StepConfig:
        """Snapshot of the switches the next step should use."""
        return StepConfig(group_mode=self.group_mode, frames_per_lap=self.frames_per_lap)

    def toggle_group_mode(self) -> bool:
        self.group_mode = not self.group_mode
        return self.group_mode

    def get_active_seed(self) -> int:
        """
        Get the seed to use for initialization.

        If seed_locked, returns stored seed.
        Otherwise, generates and stores a new random seed.
        """
        if not self.seed_locked:
            self.seed = generate_random_seed()
        return self.seed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "boid_count": self.boid_count,
            "max_speed": self.max_speed,
            "max_force": self.max_force,
            "frames_per_lap": self.frames_per_lap,
            "seed": self.seed,
            "seed_locked": self.seed_locked,
            "group_mode": self.group_mode,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlockSettings":
        return cls(
            boid_count=int(data.get("boid_count", DEFAULT_BOID_COUNT)),
            max_speed=_positive(data.get("max_speed"), BASE_MAX_SPEED),
            max_force=_positive(data.get("max_force"), BASE_MAX_FORCE),
            frames_per_lap=_positive(data.get("frames_per_lap"), FRAMES_PER_LAP),
            seed=int(data.get("seed", 0)),
            seed_locked=_flag(data.get("seed_locked"), "seed_locked"),
            group_mode=_flag(data.get("group_mode"), "group_mode"),
        )

    @classmethod
    def load(cls, path: Optional[str] = None) -> "FlockSettings":
        """
        Load settings from a JSON file.

        Returns defaults if the file is missing or unreadable.
        """
        if path is None:
            path = str(get_settings_path())

        if not os.path.exists(path):
            logger.debug(f"No settings file at {path}, using defaults", component="CONFIG")
            return cls()

        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings root must be an object")
            settings = cls.from_dict(data)
        except (json.JSONDecodeError, IOError, ValueError, TypeError, OverflowError) as e:
            logger.warning("Failed to load flock settings, using defaults",
                           component="CONFIG", details=str(e))
            return cls()

        logger.info(f"Loaded flock settings from {path}", component="CONFIG")
        return settings


def clamp_boid_count(count: int) -> int:
    return max(MIN_BOID_COUNT, min(MAX_BOID_COUNT, int(count)))


def generate_random_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 0x7FFFFFFF)


def _positive(value: Any, default: float) -> float:
    """Finite positive float, or the default when missing or out of range."""
    if value is None:
        return default
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        return default
    return value


def _flag(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be true or false, got {value!r}")
    return value
