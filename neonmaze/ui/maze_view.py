"""Maze canvas: glowing walls, pulsing goal and the eased player token."""

from __future__ import annotations

import math
import time
from typing import Optional

from PySide6.QtCore import QPointF, QTimer, Qt, Signal
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from neonmaze.core.controls import direction_for_drag
from neonmaze.core.maze import Side
from neonmaze.core.motion import SmoothedPosition
from neonmaze.core.session import GameSession
from neonmaze.ui.colors import NeonColors

MAX_CELL_SIZE = 50
FRAME_INTERVAL_MS = 16


class MazeView(QWidget):
    """Renders a :class:`GameSession` and turns mouse drags into move requests.

    The frame timer only reads the session and advances the smoothed
    display position; all game state changes go through the main window.
    """

    move_requested = Signal(int, int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session: Optional[GameSession] = None
        self._display = SmoothedPosition()
        self._drag_origin: Optional[QPointF] = None

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._tick)

    def set_session(self, session: Optional[GameSession]) -> None:
        self._session = session
        self._snap_to_player()
        if session is None:
            self._frame_timer.stop()
        else:
            self._frame_timer.start()
        self.update()

    def stop(self) -> None:
        self._frame_timer.stop()

    # -- geometry ---------------------------------------------------------

    def cell_size(self) -> float:
        grid = self._session.grid if self._session else None
        if grid is None:
            return float(MAX_CELL_SIZE)
        margin = 20
        return max(
            4.0,
            min(
                (self.width() - 2 * margin) / grid.cols,
                (self.height() - 2 * margin) / grid.rows,
                float(MAX_CELL_SIZE),
            ),
        )

    def _origin(self) -> QPointF:
        grid = self._session.grid if self._session else None
        if grid is None:
            return QPointF(0, 0)
        size = self.cell_size()
        return QPointF(
            (self.width() - grid.cols * size) / 2.0,
            (self.height() - grid.rows * size) / 2.0,
        )

    def _player_target(self) -> tuple[float, float]:
        if self._session is None:
            return 0.0, 0.0
        col, row = self._session.player
        size = self.cell_size()
        return col * size, row * size

    def _snap_to_player(self) -> None:
        self._display.snap(*self._player_target())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._snap_to_player()

    def _tick(self) -> None:
        self._display.step(*self._player_target())
        self.update()

    # -- painting ---------------------------------------------------------

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        bg = QLinearGradient(0, 0, 0, self.height())
        bg.setColorAt(0.0, QColor(NeonColors.BG_TOP))
        bg.setColorAt(1.0, QColor(NeonColors.BG_BOTTOM))
        painter.fillRect(self.rect(), bg)

        if self._session is None or self._session.grid is None:
            return

        painter.translate(self._origin())
        size = self.cell_size()
        self._paint_walls(painter, size)
        self._paint_goal(painter, size)
        self._paint_player(painter, size)

    def _paint_walls(self, painter: QPainter, size: float) -> None:
        grid = self._session.grid
        path = QPainterPath()
        for cell in grid:
            x = cell.col * size
            y = cell.row * size
            if cell.has_wall(Side.TOP):
                path.moveTo(x, y)
                path.lineTo(x + size, y)
            if cell.has_wall(Side.RIGHT):
                path.moveTo(x + size, y)
                path.lineTo(x + size, y + size)
            if cell.has_wall(Side.BOTTOM):
                path.moveTo(x + size, y + size)
                path.lineTo(x, y + size)
            if cell.has_wall(Side.LEFT):
                path.moveTo(x, y + size)
                path.lineTo(x, y)

        # Wide translucent pass first for the glow, crisp line on top.
        glow = QColor(NeonColors.WALL)
        glow.setAlpha(60)
        glow_pen = QPen(glow, 8)
        glow_pen.setCapStyle(Qt.RoundCap)
        painter.strokePath(path, glow_pen)

        pen = QPen(QColor(NeonColors.WALL), 2)
        pen.setCapStyle(Qt.RoundCap)
        painter.strokePath(path, pen)

    def _paint_goal(self, painter: QPainter, size: float) -> None:
        col, row = self._session.goal
        center = QPointF(col * size + size / 2, row * size + size / 2)
        radius = size / 3

        color = QColor(NeonColors.GOAL)
        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(color, 3))
        painter.drawEllipse(center, radius, radius)

        pulse = (math.sin(time.time() * 5.0) + 1) / 2 * (radius / 2)
        painter.setPen(Qt.NoPen)
        painter.setBrush(color)
        painter.drawEllipse(center, pulse, pulse)

    def _paint_player(self, painter: QPainter, size: float) -> None:
        center = QPointF(self._display.x + size / 2, self._display.y + size / 2)
        radius = size / 4

        halo = QColor(NeonColors.PLAYER)
        halo.setAlpha(70)
        painter.setPen(Qt.NoPen)
        painter.setBrush(halo)
        painter.drawEllipse(center, radius * 1.6, radius * 1.6)

        painter.setBrush(QColor(NeonColors.PLAYER))
        painter.drawEllipse(center, radius, radius)

    # -- drag input -------------------------------------------------------

    def mousePressEvent(self, event) -> None:
        self._drag_origin = event.position()
        self.setFocus()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self._drag_origin is None:
            return
        current = event.position()
        direction = direction_for_drag(
            current.x() - self._drag_origin.x(),
            current.y() - self._drag_origin.y(),
        )
        if direction is not None:
            # Re-anchor so a continuous drag keeps stepping.
            self._drag_origin = current
            self.move_requested.emit(*direction)

    def mouseReleaseEvent(self, event) -> None:
        self._drag_origin = None
        super().mouseReleaseEvent(event)
