"""Level selection UI: LevelButton and LevelGridWidget."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from neonmaze.ui.colors import NeonColors, blend_hex
from neonmaze.ui.models import LevelState

LOCK_GLYPH = "\U0001F512"
CHECK_GLYPH = "✓"


class LevelButton(QPushButton):
    """A square level button; locked ones show a padlock and ignore clicks."""

    def __init__(self, on_click: Callable[[int], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self._level = 0
        self._unlocked = False
        self.setFixedSize(84, 84)
        self.setCursor(Qt.PointingHandCursor)
        self.clicked.connect(self._handle_click)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(18)
        shadow.setOffset(0, 0)
        shadow.setColor(QColor(NeonColors.WALL))
        self.setGraphicsEffect(shadow)
        self._shadow = shadow

    def set_state(self, state: LevelState) -> None:
        self._level = state.level
        self._unlocked = state.unlocked
        self.setEnabled(state.unlocked)

        if not state.unlocked:
            accent = NeonColors.LOCKED
            self.setText(LOCK_GLYPH)
            self.setToolTip(f"Level {state.level} is locked")
        elif state.completed:
            accent = NeonColors.COMPLETED
            self.setText(f"{state.level}\n{CHECK_GLYPH}")
            tip = f"Level {state.level} completed"
            if state.best_score:
                tip += f"\nBest: {state.best_score}"
            self.setToolTip(tip)
        else:
            accent = NeonColors.WALL
            self.setText(str(state.level))
            self.setToolTip(f"Level {state.level}")

        border_width = 3 if state.is_current and state.unlocked else 2
        self._shadow.setColor(QColor(accent))
        self._shadow.setEnabled(state.unlocked)
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {blend_hex(accent, NeonColors.BG_TOP, 0.82)};
                color: {accent if state.unlocked else NeonColors.TEXT_MUTED};
                border: {border_width}px solid {accent};
                border-radius: 14px;
                font-size: 20px;
                font-weight: 900;
            }}
            QPushButton:hover {{
                background: {blend_hex(accent, NeonColors.BG_TOP, 0.65)};
            }}
            """
        )

    def _handle_click(self) -> None:
        if self._unlocked and self._level:
            self._on_click(self._level)


class LevelGridWidget(QWidget):
    """Grid of level buttons for one difficulty, five per row."""

    COLUMNS = 5

    def __init__(
        self,
        *,
        on_level_clicked: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_level_clicked = on_level_clicked
        self._buttons: list[LevelButton] = []

        self._title = QLabel("")
        self._title.setAlignment(Qt.AlignCenter)
        self._title.setStyleSheet(
            f"color: {NeonColors.WALL}; font-size: 26px; font-weight: 900; letter-spacing: 3px;"
        )

        self._grid = QGridLayout()
        self._grid.setSpacing(18)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(24)
        layout.addWidget(self._title)
        layout.addLayout(self._grid)
        layout.addStretch(1)

    def set_title(self, text: str) -> None:
        self._title.setText(text)

    def set_level_states(self, states: list[LevelState]) -> None:
        while len(self._buttons) < len(states):
            idx = len(self._buttons)
            button = LevelButton(self._on_level_clicked, parent=self)
            self._grid.addWidget(button, idx // self.COLUMNS, idx % self.COLUMNS)
            self._buttons.append(button)

        for button, state in zip(self._buttons, states):
            button.show()
            button.set_state(state)

        for button in self._buttons[len(states):]:
            button.hide()
