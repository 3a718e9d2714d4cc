"""
Main Window - Canvas plus a status line
"""

import logging

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QLabel, QMainWindow

from tadpoles.flock.flock_controller import FlockController
from tadpoles.gui.flock_canvas import FlockCanvas
from tadpoles.gui.theme import COLORS, FONT_FAMILY, FONT_SIZE_STATUS
from tadpoles.utils.logger import logger

STATUS_MESSAGE_MS = 5000


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: FlockController):
        super().__init__()

        self.setWindowTitle("Tadpoles")
        self.setGeometry(100, 50, 960, 680)

        self.controller = controller
        self.canvas = FlockCanvas(controller)
        self.setCentralWidget(self.canvas)

        self._status_label = QLabel()
        self._status_label.setFont(QFont(FONT_FAMILY, FONT_SIZE_STATUS))
        self._status_label.setStyleSheet(
            f"color: {COLORS['text']}; background-color: {COLORS['status_bg']};")
        self.statusBar().addWidget(self._status_label, 1)

        controller.group_mode_changed.connect(lambda _enabled: self._refresh_status())
        controller.seed_changed.connect(lambda _seed: self._refresh_status())
        logger.signal_emitter.log_message.connect(self._on_log_message)
        self._refresh_status()

    def _on_log_message(self, message: str, level: int, timestamp: str) -> None:
        # Warnings and errors flash in the status bar
        if level >= logging.WARNING:
            self.statusBar().showMessage(f"{timestamp} {message}", STATUS_MESSAGE_MS)

    def _refresh_status(self) -> None:
        settings = self.controller.settings
        mode = "GROUP" if settings.group_mode else "SCATTER"
        self._status_label.setText(
            f"{mode}  |  boids: {settings.boid_count}  |  seed: {settings.seed}"
            "  |  click: toggle mode, drag: draw path, space: select")

    def closeEvent(self, event):
        self.controller.stop()
        super().closeEvent(event)
