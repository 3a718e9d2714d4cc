"""Pytest configuration - consistent CWD, headless Qt, shared fixtures."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# Qt must not try to open a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for tests that need Qt objects."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_boid():
    """Factory for boids with fixed, non-random limits."""
    from tadpoles.flock.boid import Boid
    from tadpoles.flock.vector import Vector2

    def _make(x=0.0, y=0.0, vx=0.0, vy=0.0, max_speed=10.0, max_force=0.05, tail_length=10):
        return Boid(
            position=Vector2(x, y),
            velocity=Vector2(vx, vy),
            max_speed=max_speed,
            max_force=max_force,
            tail_length=tail_length,
        )

    return _make
