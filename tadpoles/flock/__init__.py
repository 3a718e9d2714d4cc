"""
Tadpole Flock

Reynolds-style flocking with wrap-around borders and swaying tails.
Boids either scatter freely or follow a guide path in group mode.
"""

from .vector import Vector2
from .flock_state import FlockSettings, StepConfig, Viewport, generate_random_seed
from .boid import Boid, create_boid, run
from .guide_path import GuidePath
from .flock_engine import Flock, XorShift32

__all__ = [
    'Vector2',
    'Boid',
    'create_boid',
    'run',
    'Flock',
    'XorShift32',
    'FlockSettings',
    'StepConfig',
    'Viewport',
    'GuidePath',
    'generate_random_seed',
]
