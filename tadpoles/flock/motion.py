"""
Motion - Integration and wrap-around borders
"""

from typing import TYPE_CHECKING

from tadpoles.flock.flock_state import Viewport
from tadpoles.flock.vector import Vector2

if TYPE_CHECKING:
    from tadpoles.flock.boid import Boid


def update(boid: 'Boid') -> None:
    """
    Integrate one frame.

    Order matters: velocity picks up acceleration, gets clamped, moves the
    boid, then acceleration is cleared for the next frame.
    """
    velocity = boid.velocity + boid.acceleration
    boid.velocity = velocity.limit(boid.max_speed)
    boid.position = boid.position + boid.velocity
    boid.acceleration = Vector2()


def wrap_offset(position: Vector2, radius: float, viewport: Viewport) -> Vector2:
    """
    Offset that carries a position across the seam.

    The wrapped world spans [-radius, size + radius] on each axis, so the
    period is size + 2 * radius. Returns zero while inside.
    """
    dx = 0.0
    dy = 0.0
    span_x = viewport.width + 2 * radius
    span_y = viewport.height + 2 * radius
    if position.x < -radius:
        dx = span_x
    elif position.x > viewport.width + radius:
        dx = -span_x
    if position.y < -radius:
        dy = span_y
    elif position.y > viewport.height + radius:
        dy = -span_y
    return Vector2(dx, dy)


def borders(boid: 'Boid', viewport: Viewport) -> None:
    """Wrap the boid and shift its whole chain by the same offset."""
    offset = wrap_offset(boid.position, boid.radius, viewport)
    if offset.is_zero():
        return
    boid.position = boid.position + offset
    boid.chain_points = [point + offset for point in boid.chain_points]
    boid.short_chain = [point + offset for point in boid.short_chain]
