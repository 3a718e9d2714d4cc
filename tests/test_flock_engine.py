"""
Tests for the flock driver.

Covers:
- XorShift32 determinism
- Seeded scatter over the viewport
- Speed clamp and head invariant across many frames
- Guide-path target spacing in group mode
- Mode switch on the next frame
"""

import pytest

from tadpoles.flock.flock_engine import Flock, XorShift32
from tadpoles.flock.flock_state import StepConfig, Viewport
from tadpoles.flock.guide_path import GuidePath
from tadpoles.flock.vector import Vector2


def make_flock(count=30, seed=1234, width=400, height=300):
    flock = Flock(Viewport(width, height))
    flock.set_boid_count(count)
    flock.initialize(seed)
    return flock


class TestXorShift32:

    def test_same_seed_same_sequence(self):
        a = XorShift32(42)
        b = XorShift32(42)
        assert [a.next_uint32() for _ in range(10)] == [b.next_uint32() for _ in range(10)]

    def test_floats_in_unit_range(self):
        rng = XorShift32(7)
        for _ in range(1000):
            f = rng.next_float()
            assert 0.0 <= f < 1.0

    def test_zero_seed_is_usable(self):
        rng = XorShift32(0)
        assert rng.next_uint32() != 0


class TestInitialize:

    def test_population_size(self):
        flock = make_flock(count=25)
        assert len(flock.boids) == 25
        assert flock.initialized

    def test_positions_cover_viewport(self):
        flock = make_flock(count=100, width=400, height=300)
        for x, y in flock.get_positions():
            assert 0 <= x < 400
            assert 0 <= y < 300

    def test_boids_are_heterogeneous(self):
        flock = make_flock(count=50)
        speeds = {b.max_speed for b in flock.boids}
        assert len(speeds) > 1
        for b in flock.boids:
            assert 10.0 <= b.max_speed < 10.5
            assert 0.05 <= b.max_force < 0.55
            assert b.tail_length >= 10

    def test_same_seed_reproduces_population(self):
        assert make_flock(seed=99).get_positions() == make_flock(seed=99).get_positions()

    def test_different_seed_differs(self):
        assert make_flock(seed=1).get_positions() != make_flock(seed=2).get_positions()

    def test_boid_count_is_clamped(self):
        flock = Flock()
        flock.set_boid_count(0)
        assert flock.boid_count == 1
        flock.set_boid_count(10_000)
        assert flock.boid_count == 500


class TestStep:

    def test_step_before_initialize_is_noop(self):
        flock = Flock()
        flock.step(0, StepConfig())
        assert flock.boids == []

    def test_invariants_hold_over_many_frames(self):
        flock = make_flock(count=40)
        config = StepConfig()
        for frame in range(60):
            flock.step(frame, config)
            for b in flock.boids:
                assert b.velocity.length <= b.max_speed + 1e-9
                assert b.chain_points[0] == b.position

    def test_step_is_deterministic(self):
        a = make_flock(seed=5)
        b = make_flock(seed=5)
        for frame in range(20):
            a.step(frame, StepConfig())
            b.step(frame, StepConfig())
        assert a.get_positions() == b.get_positions()

    def test_chains_shape(self):
        flock = make_flock(count=5)
        flock.step(0, StepConfig())
        chains = flock.chains()
        assert len(chains) == 5
        for (full, short), boid in zip(chains, flock.boids):
            assert len(full) == boid.tail_length
            assert len(short) == 3
            assert full[0] == boid.position.to_tuple()


class TestGroupMode:

    def _line_flock(self, make_boid, count):
        flock = Flock(Viewport(1000, 1000))
        flock.set_boids([make_boid(x=100 * i + 50, y=900) for i in range(count)])
        flock.set_guide_path(GuidePath([(0, 0), (100, 0)]))
        return flock

    def test_targets_are_spread_along_path(self, make_boid):
        flock = self._line_flock(make_boid, 4)
        config = StepConfig(group_mode=True)
        assert flock.guide_target(0, 0, config) == Vector2(0, 0)
        assert flock.guide_target(1, 0, config) == Vector2(25, 0)
        assert flock.guide_target(2, 0, config) == Vector2(50, 0)

    def test_targets_advance_with_frames(self, make_boid):
        flock = self._line_flock(make_boid, 4)
        config = StepConfig(group_mode=True)
        assert flock.guide_target(1, 30, config) == Vector2(50, 0)
        # Wraps back to the start
        assert flock.guide_target(3, 30, config) == Vector2(0, 0)

    def test_no_target_without_path(self, make_boid):
        flock = Flock()
        flock.set_boids([make_boid()])
        assert flock.guide_target(0, 0, StepConfig(group_mode=True)) is None
        flock.set_guide_path(GuidePath())
        assert flock.guide_target(0, 0, StepConfig(group_mode=True)) is None

    def test_group_mode_steers_toward_path(self, make_boid):
        flock = Flock(Viewport(1000, 1000))
        b = make_boid(x=500, y=500, max_speed=10, max_force=0.05)
        flock.set_boids([b])
        flock.set_guide_path(GuidePath([(0, 500), (100, 500)]))

        flock.step(0, StepConfig(group_mode=True))

        assert b.velocity.x == pytest.approx(-0.05)
        assert b.velocity.y == pytest.approx(0, abs=1e-12)

    def test_scatter_mode_ignores_path(self, make_boid):
        flock = Flock(Viewport(1000, 1000))
        b = make_boid(x=500, y=500)
        flock.set_boids([b])
        flock.set_guide_path(GuidePath([(0, 500), (100, 500)]))

        flock.step(0, StepConfig(group_mode=False))

        assert b.velocity.is_zero()
        assert b.position == Vector2(500, 500)

    def test_toggle_changes_next_frame_forces(self, make_boid):
        """Switching to group mode drops separation and cohesion."""
        def build():
            flock = Flock(Viewport(1000, 1000))
            a = make_boid(x=500, y=500, vx=1, max_force=0.5)
            c = make_boid(x=505, y=510, vy=-1, max_force=0.5)
            flock.set_boids([a, c])
            return flock, a

        scatter, a1 = build()
        group, a2 = build()
        scatter.step(0, StepConfig(group_mode=False))
        group.step(0, StepConfig(group_mode=True))
        assert a1.velocity != a2.velocity
