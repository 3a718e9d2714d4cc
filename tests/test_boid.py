"""
Tests for boid construction and the run sequence (mode switch).
"""

import pytest

from tadpoles.flock.boid import Boid, create_boid, run, tail_length_for
from tadpoles.flock.flock_state import StepConfig, Viewport
from tadpoles.flock.steering import align, cohesion, separate
from tadpoles.flock.vector import Vector2

BIG_VIEW = Viewport(10000, 10000)


class FixedRng:
    """Replays a fixed list of floats."""

    def __init__(self, values):
        self._values = list(values)

    def next_float(self):
        return self._values.pop(0)


class TestConstruction:

    def test_tail_length_from_strength(self):
        assert tail_length_for(0.0) == 10
        assert tail_length_for(0.25) == 13
        assert tail_length_for(0.499) == 15

    def test_create_boid_adds_strength_to_limits(self):
        rng = FixedRng([0.5, 0.75, 0.25])
        b = create_boid(Vector2(10, 20), 10, 0.05, rng)

        assert b.strength == pytest.approx(0.25)
        assert b.max_speed == pytest.approx(10.25)
        assert b.max_force == pytest.approx(0.3)
        assert b.velocity == Vector2(0.5, -0.5)
        assert b.tail_length == 13
        assert b.radius == 30

    def test_new_chain_starts_on_head(self):
        b = create_boid(Vector2(10, 20), 10, 0.05, FixedRng([0.0, 0.5, 0.5]))
        assert len(b.chain_points) == 10
        assert all(p == Vector2(10, 20) for p in b.chain_points)
        assert len(b.short_chain) == 3
        assert b.chain_points[0] == b.position

    def test_each_boid_owns_its_chain(self):
        a = Boid(position=Vector2(), velocity=Vector2(), max_speed=1, max_force=1)
        b = Boid(position=Vector2(), velocity=Vector2(), max_speed=1, max_force=1)
        assert a.chain_points is not b.chain_points


class TestRunModes:
    """Group mode keeps only alignment from the neighbourhood rules."""

    def _pair(self, make_boid):
        a = make_boid(x=500, y=500, vx=1, vy=0, max_force=0.5)
        other = make_boid(x=510, y=505, vx=-1, vy=2)
        return a, other

    def test_scatter_mode_uses_all_three_rules(self, make_boid):
        a, other = self._pair(make_boid)
        boids = [a, other]
        expected = a.velocity + separate(a, boids) * 3 + align(a, boids) + cohesion(a, boids)

        run(a, boids, StepConfig(group_mode=False), BIG_VIEW)

        assert a.velocity.x == pytest.approx(expected.x)
        assert a.velocity.y == pytest.approx(expected.y)

    def test_group_mode_uses_alignment_only(self, make_boid):
        a, other = self._pair(make_boid)
        boids = [a, other]
        expected = a.velocity + align(a, boids)
        assert not separate(a, boids).is_zero()
        assert not cohesion(a, boids).is_zero()

        run(a, boids, StepConfig(group_mode=True), BIG_VIEW)

        assert a.velocity.x == pytest.approx(expected.x)
        assert a.velocity.y == pytest.approx(expected.y)

    def test_run_clears_acceleration(self, make_boid):
        a, other = self._pair(make_boid)
        run(a, [a, other], StepConfig(), BIG_VIEW)
        assert a.acceleration.is_zero()
