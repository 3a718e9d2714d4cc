"""
Boid - Agent state and the per-frame run sequence

A boid is a plain dataclass; behaviour lives in free functions
(steering, motion, tail) that read and replace its fields.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence

from tadpoles.config import (
    BOID_RADIUS,
    MAX_STRENGTH,
    MIN_TAIL_LENGTH,
    SHORT_CHAIN_LENGTH,
    TAIL_STRENGTH_SCALE,
)
from tadpoles.flock.flock_state import StepConfig, Viewport
from tadpoles.flock.motion import borders, update
from tadpoles.flock.steering import align, flock
from tadpoles.flock.tail import calculate_tail
from tadpoles.flock.vector import Vector2


@dataclass
class Boid:
    """Single steering agent with its trailing chain."""
    position: Vector2
    velocity: Vector2
    max_speed: float
    max_force: float
    tail_length: int = MIN_TAIL_LENGTH
    acceleration: Vector2 = field(default_factory=Vector2)
    radius: float = BOID_RADIUS
    strength: float = 0.0
    phase: float = 0.0
    chain_points: List[Vector2] = field(default_factory=list)
    short_chain: List[Vector2] = field(default_factory=list)

    def __post_init__(self):
        # Chain starts collapsed on the head
        if not self.chain_points:
            self.chain_points = [self.position] * self.tail_length
        if not self.short_chain:
            self.short_chain = [self.position] * min(SHORT_CHAIN_LENGTH, self.tail_length)


def tail_length_for(strength: float) -> int:
    """Number of chain points for a given strength (never below 10)."""
    return int(math.ceil(strength * TAIL_STRENGTH_SCALE + MIN_TAIL_LENGTH))


def create_boid(position: Vector2, max_speed: float, max_force: float, rng) -> Boid:
    """
    Create a boid with its own random strength and heading.

    rng must provide next_float() in [0, 1). Strength is added to both
    limits so the flock is heterogeneous.
    """
    strength = rng.next_float() * MAX_STRENGTH
    velocity = Vector2(rng.next_float() * 2 - 1, rng.next_float() * 2 - 1)
    return Boid(
        position=position,
        velocity=velocity,
        max_speed=max_speed + strength,
        max_force=max_force + strength,
        tail_length=tail_length_for(strength),
        strength=strength,
    )


def run(boid: Boid, neighbors: Sequence[Boid], config: StepConfig, viewport: Viewport) -> None:
    """Advance one frame: steer, wrap, integrate, rebuild tail."""
    if config.group_mode:
        boid.acceleration = boid.acceleration + align(boid, neighbors)
    else:
        flock(boid, neighbors)
    borders(boid, viewport)
    update(boid)
    calculate_tail(boid)
