"""
Flock Canvas
Draws the tadpoles and the guide path, and turns mouse/keyboard input
into controller calls.

Input:
- Click (no drag): toggle group mode
- Drag: draw a new guide path (simplified on release)
- Space: toggle the selection overlay (raw chain and path vertices)
"""

from typing import List, Tuple

from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen
from PyQt5.QtWidgets import QWidget

from tadpoles.flock.flock_controller import FlockController
from tadpoles.gui.theme import COLORS, STROKES
from tadpoles.utils.smoothing import smooth_points

# Pixels the mouse must travel before a press becomes a drag
DRAG_THRESHOLD = 3


def chain_to_path(points) -> QPainterPath:
    """Smoothed QPainterPath through a chain of (x, y) points."""
    path = QPainterPath()
    smoothed = smooth_points(points)
    if len(smoothed) == 0:
        return path
    path.moveTo(QPointF(float(smoothed[0][0]), float(smoothed[0][1])))
    for x, y in smoothed[1:]:
        path.lineTo(QPointF(float(x), float(y)))
    return path


class FlockCanvas(QWidget):
    """Full-window drawing surface for the flock."""

    def __init__(self, controller: FlockController, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(False)
        self.setMinimumSize(320, 240)

        self._controller = controller
        self._chains: List[Tuple[list, list]] = []
        self._selected = False

        self._press_pos = None
        self._dragging = False

        self._tail_pen = self._round_pen(COLORS['tail'], STROKES['tail'])
        self._head_pen = self._round_pen(COLORS['head'], STROKES['head'])

        controller.chains_updated.connect(self._on_chains_updated)
        controller.guide_path_changed.connect(self.update)
        controller.group_mode_changed.connect(lambda _enabled: self.update())

    @staticmethod
    def _round_pen(color: str, width: float) -> QPen:
        pen = QPen(QColor(color), width)
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        return pen

    @property
    def controller(self) -> FlockController:
        return self._controller

    @property
    def selected(self) -> bool:
        return self._selected

    def _on_chains_updated(self, chains: list) -> None:
        self._chains = chains
        self.update()

    # === Painting ===

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(COLORS['background']))

        self._draw_guide_path(painter)

        painter.setBrush(Qt.NoBrush)
        for chain, short_chain in self._chains:
            painter.setPen(self._tail_pen)
            painter.drawPath(chain_to_path(chain))
            painter.setPen(self._head_pen)
            painter.drawPath(chain_to_path(short_chain))

        if self._selected:
            self._draw_selection(painter)

    def _draw_guide_path(self, painter: QPainter) -> None:
        points = self._controller.guide_path.points
        if len(points) < 2:
            return
        key = 'guide_path_group' if self._controller.group_mode else 'guide_path'
        painter.setPen(QPen(QColor(COLORS[key]), STROKES['guide_path']))
        path = QPainterPath()
        path.moveTo(QPointF(*points[0]))
        for x, y in points[1:]:
            path.lineTo(QPointF(x, y))
        painter.drawPath(path)

    def _draw_selection(self, painter: QPainter) -> None:
        """Raw simulation vertices, like selecting the layer in an editor."""
        color = QColor(COLORS['selection'])
        radius = STROKES['selection_point_radius']
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(color))
        for chain, _short in self._chains:
            for x, y in chain:
                painter.drawEllipse(QPointF(x, y), radius, radius)
        for x, y in self._controller.guide_path.points:
            painter.drawRect(int(x) - radius, int(y) - radius, radius * 2, radius * 2)

    # === Input ===

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._press_pos = event.pos()
            self._dragging = False
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._press_pos is None:
            return
        if not self._dragging:
            if (event.pos() - self._press_pos).manhattanLength() < DRAG_THRESHOLD:
                return
            self._dragging = True
            self._controller.begin_path(self._press_pos.x(), self._press_pos.y())
        self._controller.extend_path(event.pos().x(), event.pos().y())

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)
            return
        if self._dragging:
            self._controller.finish_path()
        else:
            self._controller.toggle_group_mode()
        self._press_pos = None
        self._dragging = False

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Space:
            self._selected = not self._selected
            self.update()
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._controller.resize(self.width(), self.height())
