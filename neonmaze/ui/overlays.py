"""In-window overlays (level completed)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from neonmaze.core.session import LevelResult
from neonmaze.ui.colors import NeonColors

ACTION_NEXT = "next"
ACTION_MAP = "map"
ACTION_RESTART = "restart"


def _neon_card_container(radius: int = 20, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(360)
    container.setMaximumWidth(440)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {NeonColors.PANEL_BG};
            border: 1px solid {NeonColors.PANEL_BORDER};
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(30)
    shadow.setOffset(0, 0)
    shadow.setColor(QColor(0, 255, 255, 90))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.55);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def neon_button_style(accent: str = NeonColors.WALL) -> str:
    return f"""
        QPushButton {{
            background: transparent;
            color: {accent};
            padding: 10px 18px;
            border: 2px solid {accent};
            border-radius: 12px;
            font-weight: 800;
            font-size: 14px;
            letter-spacing: 1px;
        }}
        QPushButton:hover {{
            background: {accent};
            color: {NeonColors.BG_TOP};
        }}
    """


class LevelCompletedOverlay(QWidget):
    """Overlay shown when the player reaches the goal.

    Emits ``closed`` with one of ``ACTION_NEXT``, ``ACTION_RESTART`` or
    ``ACTION_MAP``. Clicking the dimmed background counts as ``ACTION_MAP``.
    """

    closed = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, lambda: self._finish(ACTION_MAP))
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _neon_card_container(object_name="levelCompletedContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(16)

        title = QLabel("LEVEL COMPLETE")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(
            f"color: {NeonColors.GOAL}; font-size: 22px; font-weight: 900; letter-spacing: 3px;"
        )
        content.addWidget(title)

        self._score_label = QLabel("")
        self._score_label.setAlignment(Qt.AlignCenter)
        self._score_label.setStyleSheet(f"color: {NeonColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 700;")
        content.addWidget(self._score_label)

        self._detail_label = QLabel("")
        self._detail_label.setAlignment(Qt.AlignCenter)
        self._detail_label.setWordWrap(True)
        self._detail_label.setStyleSheet(f"color: {NeonColors.TEXT_SECONDARY}; font-size: 13px;")
        content.addWidget(self._detail_label)

        buttons = QHBoxLayout()
        buttons.setSpacing(10)
        self._map_btn = QPushButton("LEVEL MAP")
        self._restart_btn = QPushButton("RETRY")
        self._next_btn = QPushButton("NEXT LEVEL")
        for btn, accent, action in (
            (self._map_btn, NeonColors.TEXT_SECONDARY, ACTION_MAP),
            (self._restart_btn, NeonColors.PLAYER, ACTION_RESTART),
            (self._next_btn, NeonColors.GOAL, ACTION_NEXT),
        ):
            btn.setStyleSheet(neon_button_style(accent))
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            btn.clicked.connect(lambda _checked=False, a=action: self._finish(a))
            buttons.addWidget(btn)
        content.addLayout(buttons)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def show_result(self, result: LevelResult, has_next: bool) -> None:
        self._score_label.setText(f"+{result.level_score}  (total {result.total_score})")
        minutes, seconds = divmod(result.elapsed, 60)
        detail = f"Level {result.level} cleared in {minutes:02d}:{seconds:02d}"
        if result.unlocked:
            detail += f"\nLevel {result.level + 1} unlocked"
        self._detail_label.setText(detail)
        self._next_btn.setVisible(has_next)
        self._update_geometry()
        self.raise_()
        self.show()
        if has_next:
            self._next_btn.setFocus()
        else:
            self._map_btn.setFocus()

    def _finish(self, action: str) -> None:
        self.hide()
        self.closed.emit(action)

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
