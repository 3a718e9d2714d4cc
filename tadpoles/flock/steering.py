"""
Steering - Reynolds-style steering forces

Every function here returns (or adds) a force whose magnitude is clamped
to the boid's max_force. Neighbour scans are plain O(N^2) loops over the
whole flock; a boid never counts itself because its distance is zero.

Key behaviors:
- separate: repel from neighbours closer than SEPARATION_DISTANCE
- align: match average heading within ALIGNMENT_DISTANCE
- cohesion: steer toward average position within COHESION_DISTANCE
- seek/arrive: steer toward a target, arrive slows down near it
"""

from typing import TYPE_CHECKING, Sequence

from tadpoles.config import (
    ALIGNMENT_DISTANCE,
    ARRIVE_DISTANCE,
    COHESION_DISTANCE,
    SEPARATION_DISTANCE,
    SEPARATION_WEIGHT,
)
from tadpoles.flock.vector import Vector2

if TYPE_CHECKING:
    from tadpoles.flock.boid import Boid


def steer(boid: 'Boid', target: Vector2, slowdown: bool = False) -> Vector2:
    """
    Steering force toward target.

    With slowdown, the desired speed ramps down linearly inside
    ARRIVE_DISTANCE so the boid eases in instead of overshooting.
    """
    desired = target - boid.position
    distance = desired.length
    if slowdown and distance < ARRIVE_DISTANCE:
        desired = desired.with_length(boid.max_speed * (distance / ARRIVE_DISTANCE))
    else:
        desired = desired.with_length(boid.max_speed)
    return (desired - boid.velocity).limit(boid.max_force)


def seek(boid: 'Boid', target: Vector2) -> None:
    boid.acceleration = boid.acceleration + steer(boid, target, False)


def arrive(boid: 'Boid', target: Vector2) -> None:
    boid.acceleration = boid.acceleration + steer(boid, target, True)


def _reynolds(boid: 'Boid', desired: Vector2) -> Vector2:
    # Steering = Desired - Velocity
    if desired.is_zero():
        return desired
    return (desired.with_length(boid.max_speed) - boid.velocity).limit(boid.max_force)


def separate(boid: 'Boid', neighbors: Sequence['Boid']) -> Vector2:
    """Push away from close neighbours, nearer ones harder."""
    total = Vector2()
    count = 0
    for other in neighbors:
        away = boid.position - other.position
        distance = away.length
        if 0 < distance < SEPARATION_DISTANCE:
            total = total + away.normalize(1 / distance)
            count += 1

    if count > 0:
        total = total / count
    return _reynolds(boid, total)


def align(boid: 'Boid', neighbors: Sequence['Boid']) -> Vector2:
    """Steer toward the average velocity of nearby boids."""
    total = Vector2()
    count = 0
    for other in neighbors:
        distance = boid.position.distance_to(other.position)
        if 0 < distance < ALIGNMENT_DISTANCE:
            total = total + other.velocity
            count += 1

    if count > 0:
        total = total / count
    return _reynolds(boid, total)


def cohesion(boid: 'Boid', neighbors: Sequence['Boid']) -> Vector2:
    """Steer toward the centre of nearby boids."""
    total = Vector2()
    count = 0
    for other in neighbors:
        distance = boid.position.distance_to(other.position)
        if 0 < distance < COHESION_DISTANCE:
            total = total + other.position
            count += 1

    if count > 0:
        return steer(boid, total / count, False)
    return total


def flock(boid: 'Boid', neighbors: Sequence['Boid']) -> None:
    """Accumulate the three classic rules into acceleration."""
    separation = separate(boid, neighbors) * SEPARATION_WEIGHT
    alignment = align(boid, neighbors)
    coherence = cohesion(boid, neighbors)
    boid.acceleration = boid.acceleration + separation + alignment + coherence
