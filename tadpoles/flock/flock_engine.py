"""
Flock Engine - Fixed-size population and the per-frame step

Key behaviors:
- Seeded scatter of boids over the viewport (deterministic per seed)
- Scatter mode: separation + alignment + cohesion
- Group mode: boids arrive at evenly spaced, slowly advancing points
  along the guide path, with alignment only
- Wrap-around borders that carry the tail across the seam
- O(N^2) neighbour scan, boids updated in list order
"""

from typing import List, Optional, Tuple

from tadpoles.config import (
    BASE_MAX_FORCE,
    BASE_MAX_SPEED,
    DEFAULT_BOID_COUNT,
    DEFAULT_VIEW_HEIGHT,
    DEFAULT_VIEW_WIDTH,
)
from tadpoles.flock.boid import Boid, create_boid, run
from tadpoles.flock.flock_state import StepConfig, Viewport, clamp_boid_count
from tadpoles.flock.guide_path import GuidePath
from tadpoles.flock.steering import arrive
from tadpoles.flock.vector import Vector2
from tadpoles.utils.logger import logger


class XorShift32:
    """Deterministic PRNG using xorshift32 algorithm."""

    def __init__(self, seed: int):
        self._state = (seed & 0xFFFFFFFF) or 1

    def next_uint32(self) -> int:
        x = self._state
        x ^= (x << 13) & 0xFFFFFFFF
        x ^= (x >> 17) & 0xFFFFFFFF
        x ^= (x << 5) & 0xFFFFFFFF
        self._state = x
        return x

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        return self.next_uint32() * 2.3283064365386963e-10


class Flock:
    """
    Population of tadpole boids.

    The population is built once by initialize() and never grows or
    shrinks between initializations.
    """

    def __init__(self, viewport: Optional[Viewport] = None):
        self._viewport = viewport or Viewport(DEFAULT_VIEW_WIDTH, DEFAULT_VIEW_HEIGHT)
        self._boids: List[Boid] = []
        self._boid_count = DEFAULT_BOID_COUNT
        self._max_speed = BASE_MAX_SPEED
        self._max_force = BASE_MAX_FORCE
        self._guide_path: Optional[GuidePath] = None
        self._initialized = False

    def initialize(self, seed: int) -> None:
        """Scatter a fresh population over the viewport."""
        rng = XorShift32(seed)
        self._boids = []
        for _ in range(self._boid_count):
            position = Vector2(
                rng.next_float() * self._viewport.width,
                rng.next_float() * self._viewport.height,
            )
            self._boids.append(create_boid(position, self._max_speed, self._max_force, rng))

        self._initialized = True
        logger.info(f"Flock initialized: {len(self._boids)} boids, seed {seed}", component="FLOCK")

    def set_boids(self, boids: List[Boid]) -> None:
        """Install a hand-built population."""
        self._boids = list(boids)
        self._boid_count = len(self._boids)
        self._initialized = True

    def set_boid_count(self, count: int) -> None:
        """Population size used by the next initialize()."""
        self._boid_count = clamp_boid_count(count)

    def set_limits(self, max_speed: float, max_force: float) -> None:
        """Base limits used by the next initialize()."""
        self._max_speed = max_speed
        self._max_force = max_force

    def set_viewport(self, width: float, height: float) -> None:
        self._viewport = Viewport(width, height)

    def set_guide_path(self, path: Optional[GuidePath]) -> None:
        self._guide_path = path

    def guide_target(self, index: int, frame_count: int, config: StepConfig) -> Optional[Vector2]:
        """
        Point on the guide path assigned to boid `index` this frame.

        Boids are spread evenly along the path and the whole formation
        advances one slot every frames_per_lap frames.
        """
        path = self._guide_path
        n = len(self._boids)
        if path is None or path.is_empty or n == 0:
            return None
        fraction = ((index + frame_count / config.frames_per_lap) % n) / n
        return path.point_at_fraction(fraction)

    def step(self, frame_count: int, config: StepConfig) -> None:
        """Advance every boid by one frame."""
        if not self._initialized:
            return

        boids = self._boids
        for i, boid in enumerate(boids):
            if config.group_mode:
                target = self.guide_target(i, frame_count, config)
                if target is not None:
                    arrive(boid, target)
            run(boid, boids, config, self._viewport)

    # === Accessors ===

    @property
    def boids(self) -> List[Boid]:
        return self._boids

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def guide_path(self) -> Optional[GuidePath]:
        return self._guide_path

    @property
    def boid_count(self) -> int:
        return self._boid_count

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get_positions(self) -> List[Tuple[float, float]]:
        """Current head positions."""
        return [b.position.to_tuple() for b in self._boids]

    def chains(self) -> List[Tuple[List[Tuple[float, float]], List[Tuple[float, float]]]]:
        """(full chain, short chain) per boid, as plain tuples for the renderer."""
        return [
            ([p.to_tuple() for p in b.chain_points], [p.to_tuple() for p in b.short_chain])
            for b in self._boids
        ]
