"""
Flock Controller - Drives the flock from a Qt frame clock

Connects:
- Flock (simulation)
- FlockSettings (configuration + live mode switch)
- GuidePath (group mode target, drawn by the user)

Runs one simulation step per QTimer tick at SIM_HZ and emits the tail
geometry for the canvas.
"""

from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from tadpoles.config import PATH_FIT_SCALE, PATH_SIMPLIFY_TOLERANCE, SIM_HZ
from tadpoles.flock.flock_engine import Flock
from tadpoles.flock.flock_state import FlockSettings, generate_random_seed
from tadpoles.flock.guide_path import GuidePath
from tadpoles.utils.logger import logger


class FlockController(QObject):
    """
    Controller for the tadpole flock.

    Owns the frame counter; everything the canvas needs arrives through
    signals.
    """

    # Signals for UI
    chains_updated = pyqtSignal(list)      # [(chain, short_chain), ...]
    guide_path_changed = pyqtSignal()
    group_mode_changed = pyqtSignal(bool)
    seed_changed = pyqtSignal(int)
    running_changed = pyqtSignal(bool)

    def __init__(self, settings: Optional[FlockSettings] = None, parent=None):
        super().__init__(parent)

        self._settings = settings or FlockSettings()
        self._flock = Flock()
        self._flock.set_boid_count(self._settings.boid_count)
        self._flock.set_limits(self._settings.max_speed, self._settings.max_force)

        viewport = self._flock.viewport
        self._guide_path = GuidePath.heart(viewport.width, viewport.height)
        self._flock.set_guide_path(self._guide_path)

        self._frame_count = 0
        self._running = False

        self._timer = QTimer(self)
        self._timer.setInterval(1000 // SIM_HZ)
        self._timer.timeout.connect(self._tick)

    @property
    def flock(self) -> Flock:
        return self._flock

    @property
    def settings(self) -> FlockSettings:
        return self._settings

    @property
    def guide_path(self) -> GuidePath:
        return self._guide_path

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def running(self) -> bool:
        return self._running

    @property
    def group_mode(self) -> bool:
        return self._settings.group_mode

    # === Lifecycle ===

    def start(self) -> None:
        """Start the frame clock (initializes the flock on first start)."""
        if self._running:
            return

        if not self._flock.initialized:
            self._initialize()

        self._timer.start()
        self._running = True
        self.running_changed.emit(True)
        logger.info("Flock started", component="FLOCK")

    def stop(self) -> None:
        """Stop the frame clock. The flock keeps its state."""
        if not self._running:
            return

        self._timer.stop()
        self._running = False
        self.running_changed.emit(False)
        logger.info(f"Flock stopped at frame {self._frame_count}", component="FLOCK")

    def toggle(self) -> None:
        if self._running:
            self.stop()
        else:
            self.start()

    def _initialize(self) -> None:
        seed = self._settings.get_active_seed()
        self._flock.initialize(seed)
        self._frame_count = 0
        self.seed_changed.emit(seed)

    def _tick(self) -> None:
        """Frame clock tick."""
        self.advance()

    def advance(self) -> None:
        """Run exactly one simulation step and publish the tails."""
        if not self._flock.initialized:
            self._initialize()

        self._flock.step(self._frame_count, self._settings.step_config())
        self._frame_count += 1

        if self._frame_count % (SIM_HZ * 10) == 0:
            logger.flock(f"Frame {self._frame_count}, group_mode={self._settings.group_mode}")

        self.chains_updated.emit(self._flock.chains())

    # === Mode ===

    def toggle_group_mode(self) -> bool:
        enabled = self._settings.toggle_group_mode()
        logger.info(f"Group mode {'on' if enabled else 'off'}", component="FLOCK")
        self.group_mode_changed.emit(enabled)
        return enabled

    def set_group_mode(self, enabled: bool) -> None:
        if enabled != self._settings.group_mode:
            self.toggle_group_mode()

    # === Seed ===

    def reseed(self) -> None:
        """Pick a new seed and rebuild the population."""
        self._settings.seed = generate_random_seed()
        self._flock.initialize(self._settings.seed)
        self._frame_count = 0
        self.seed_changed.emit(self._settings.seed)

    # === Viewport / guide path ===

    def resize(self, width: float, height: float) -> None:
        """Follow the view size and refit the guide path to it."""
        if width <= 0 or height <= 0:
            return
        self._flock.set_viewport(width, height)
        if not self._guide_path.is_empty:
            self._guide_path.fit_bounds(width, height)
            self._guide_path.scale(PATH_FIT_SCALE)
            self.guide_path_changed.emit()

    def begin_path(self, x: float, y: float) -> None:
        """Start drawing a new guide path."""
        self._guide_path.clear()
        self._guide_path.add((x, y))
        self.guide_path_changed.emit()

    def extend_path(self, x: float, y: float) -> None:
        self._guide_path.add((x, y))
        self.guide_path_changed.emit()

    def finish_path(self) -> None:
        """Simplify the freshly drawn path."""
        before = len(self._guide_path)
        self._guide_path.simplify(PATH_SIMPLIFY_TOLERANCE)
        logger.debug(f"Guide path simplified {before} -> {len(self._guide_path)} points",
                     component="PATH")
        self.guide_path_changed.emit()
