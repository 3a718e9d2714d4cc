"""
Central Configuration
All simulation constants in one place
"""

# === POPULATION ===
DEFAULT_BOID_COUNT = 200
MIN_BOID_COUNT = 1
MAX_BOID_COUNT = 500

# Base limits (each boid adds its own strength on top)
BASE_MAX_SPEED = 10.0
BASE_MAX_FORCE = 0.05

# Per-boid strength is uniform in [0, MAX_STRENGTH)
MAX_STRENGTH = 0.5

# === STEERING ===
BOID_RADIUS = 30.0            # Wrap margin beyond the viewport edge
SEPARATION_DISTANCE = 60.0
ALIGNMENT_DISTANCE = 25.0
COHESION_DISTANCE = 100.0
ARRIVE_DISTANCE = 100.0       # Arrival damping starts inside this distance
SEPARATION_WEIGHT = 3.0

# === TAIL ===
MIN_TAIL_LENGTH = 10
TAIL_STRENGTH_SCALE = 10.0
SHORT_CHAIN_LENGTH = 3
PIECE_LENGTH_BASE = 5.0
PIECE_LENGTH_SPEED_DIVISOR = 3.0
PHASE_SPEED_FACTOR = 10.0
WAVE_LINK_OFFSET = 3.0
WAVE_PERIOD_DIVISOR = 10.0
SWAY_ANGLE = 90.0             # Degrees

# === GROUP MODE ===
FRAMES_PER_LAP = 30.0         # Frames for a boid to advance one slot along the guide path

# === GUIDE PATH ===
PATH_SIMPLIFY_TOLERANCE = 10.0
PATH_FIT_SCALE = 0.8

# === FRAME CLOCK ===
SIM_HZ = 60

# === VIEWPORT ===
DEFAULT_VIEW_WIDTH = 960
DEFAULT_VIEW_HEIGHT = 640

# === SETTINGS FILE ===
SETTINGS_FILENAME = "flock.json"
