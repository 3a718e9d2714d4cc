"""
Tail - Lagging, swaying chain of points behind each boid

Each link is placed one piece length behind its predecessor, along the
direction the *previous* link had last frame, plus a sideways sway from a
phase-shifted sine. That one-frame lag is what makes the tail whip.
"""

import math
from typing import TYPE_CHECKING

from tadpoles.config import (
    PHASE_SPEED_FACTOR,
    PIECE_LENGTH_BASE,
    PIECE_LENGTH_SPEED_DIVISOR,
    SHORT_CHAIN_LENGTH,
    SWAY_ANGLE,
    WAVE_LINK_OFFSET,
    WAVE_PERIOD_DIVISOR,
)

if TYPE_CHECKING:
    from tadpoles.flock.boid import Boid


def piece_length(speed: float) -> float:
    """Spacing between links grows with speed."""
    return PIECE_LENGTH_BASE + speed / PIECE_LENGTH_SPEED_DIVISOR


def calculate_tail(boid: 'Boid') -> None:
    """Rebuild chain_points and short_chain from the current head."""
    chain = boid.chain_points
    short = boid.short_chain

    speed = boid.velocity.length
    spacing = piece_length(speed)
    point = boid.position
    chain[0] = point
    short[0] = point

    # Chain goes the other way than the movement
    last_vector = -boid.velocity
    for i in range(1, boid.tail_length):
        # Captured before this link moves
        vector = chain[i] - point

        boid.phase += speed * PHASE_SPEED_FACTOR
        wave = math.sin((boid.phase + i * WAVE_LINK_OFFSET) / WAVE_PERIOD_DIVISOR)
        sway = last_vector.rotate(SWAY_ANGLE).normalize(wave)
        point = point + last_vector.normalize(spacing) + sway

        chain[i] = point
        if i < SHORT_CHAIN_LENGTH:
            short[i] = point
        last_vector = vector
