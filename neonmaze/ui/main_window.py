from __future__ import annotations

import os
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from neonmaze.core.config import GameConfig
from neonmaze.core.controls import direction_for_key
from neonmaze.core.progress import ProgressStore
from neonmaze.core.session import GameSession, MoveOutcome
from neonmaze.ui.colors import NeonColors
from neonmaze.ui.level_cards import LevelGridWidget
from neonmaze.ui.maze_view import MazeView
from neonmaze.ui.models import build_level_states
from neonmaze.ui.overlays import (
    ACTION_NEXT,
    ACTION_RESTART,
    LevelCompletedOverlay,
    neon_button_style,
)

_QT_KEY_NAMES = {
    Qt.Key.Key_Up: "up",
    Qt.Key.Key_Right: "right",
    Qt.Key.Key_Down: "down",
    Qt.Key.Key_Left: "left",
}


def format_elapsed(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


class MainWindow(QMainWindow):
    """Main application window: menu, difficulty picker, level map and the maze screen.

    Owns the current :class:`GameSession`. Keyboard and drag input are
    funnelled into :meth:`GameSession.move`; the maze view only reads it.
    """

    def __init__(self, config: GameConfig, progress_store: ProgressStore) -> None:
        super().__init__()
        self._config = config
        self._progress_store = progress_store
        self._session: Optional[GameSession] = None
        self._difficulty_key: str = config.keys()[0]
        self._score = 0
        self._unlock_all_levels = os.environ.get("NEONMAZE_UNLOCK_ALL") == "1"

        self._stack: Optional[QStackedWidget] = None
        self._menu_screen: Optional[QWidget] = None
        self._difficulty_screen: Optional[QWidget] = None
        self._level_screen: Optional[QWidget] = None
        self._game_screen: Optional[QWidget] = None
        self._level_grid: Optional[LevelGridWidget] = None
        self._maze_view: Optional[MazeView] = None
        self._level_label: Optional[QLabel] = None
        self._score_label: Optional[QLabel] = None
        self._time_label: Optional[QLabel] = None
        self._completed_overlay: Optional[LevelCompletedOverlay] = None

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(250)
        self._clock_timer.timeout.connect(self._update_time_label)

        self.setWindowTitle("Neon Maze")
        self.resize(960, 760)
        self._build_ui()

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    # -- construction -----------------------------------------------------

    def _build_ui(self) -> None:
        self._stack = QStackedWidget()
        self._stack.setStyleSheet(f"background: {NeonColors.BG_TOP};")
        self._menu_screen = self._build_menu_screen()
        self._difficulty_screen = self._build_difficulty_screen()
        self._level_screen = self._build_level_screen()
        self._game_screen = self._build_game_screen()
        for screen in (self._menu_screen, self._difficulty_screen, self._level_screen, self._game_screen):
            self._stack.addWidget(screen)
        self.setCentralWidget(self._stack)

        self._completed_overlay = LevelCompletedOverlay(self._game_screen)
        self._completed_overlay.closed.connect(self._on_overlay_closed)

        self._stack.setCurrentWidget(self._menu_screen)

    def _title_label(self, text: str, size: int = 40, color: str = NeonColors.WALL) -> QLabel:
        label = QLabel(text)
        label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(f"color: {color}; font-size: {size}px; font-weight: 900; letter-spacing: 4px;")
        return label

    def _button(self, text: str, accent: str = NeonColors.WALL) -> QPushButton:
        btn = QPushButton(text)
        btn.setStyleSheet(neon_button_style(accent))
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setMinimumWidth(220)
        return btn

    def _build_menu_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.addStretch(1)
        layout.addWidget(self._title_label("NEON MAZE", size=56))
        subtitle = QLabel("Find the glowing exit")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {NeonColors.TEXT_SECONDARY}; font-size: 15px;")
        layout.addWidget(subtitle)
        layout.addSpacing(30)
        start_btn = self._button("START", NeonColors.PLAYER)
        start_btn.clicked.connect(self._show_difficulty_screen)
        layout.addWidget(start_btn, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        return screen

    def _build_difficulty_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setSpacing(14)
        layout.addStretch(1)
        layout.addWidget(self._title_label("SELECT DIFFICULTY", size=30))
        layout.addSpacing(16)
        for difficulty in self._config.all():
            btn = self._button(difficulty.name.upper())
            btn.clicked.connect(lambda _checked=False, key=difficulty.key: self._show_level_map(key))
            layout.addWidget(btn, 0, Qt.AlignHCenter)
        layout.addSpacing(16)
        back_btn = self._button("BACK", NeonColors.TEXT_SECONDARY)
        back_btn.clicked.connect(self._show_menu_screen)
        layout.addWidget(back_btn, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        return screen

    def _build_level_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.addStretch(1)
        self._level_grid = LevelGridWidget(on_level_clicked=self._start_level)
        layout.addWidget(self._level_grid, 0, Qt.AlignHCenter)
        back_btn = self._button("BACK", NeonColors.TEXT_SECONDARY)
        back_btn.clicked.connect(self._show_difficulty_screen)
        layout.addWidget(back_btn, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        return screen

    def _build_game_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        hud = QHBoxLayout()
        hud.setSpacing(24)
        self._level_label = QLabel("")
        self._score_label = QLabel("")
        self._time_label = QLabel("00:00")
        for label in (self._level_label, self._score_label, self._time_label):
            label.setStyleSheet(f"color: {NeonColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 800;")
            hud.addWidget(label)
        hud.addStretch(1)

        restart_btn = QPushButton("RESTART")
        restart_btn.setStyleSheet(neon_button_style(NeonColors.PLAYER))
        restart_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        restart_btn.clicked.connect(self._restart_level)
        hud.addWidget(restart_btn)

        map_btn = QPushButton("LEVELS")
        map_btn.setStyleSheet(neon_button_style(NeonColors.TEXT_SECONDARY))
        map_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        map_btn.clicked.connect(lambda: self._show_level_map(self._difficulty_key))
        hud.addWidget(map_btn)
        layout.addLayout(hud)

        self._maze_view = MazeView()
        self._maze_view.move_requested.connect(self._move_player)
        layout.addWidget(self._maze_view, 1)
        return screen

    # -- navigation -------------------------------------------------------

    def _leave_game(self) -> None:
        self._clock_timer.stop()
        if self._maze_view is not None:
            self._maze_view.stop()
        if self._completed_overlay is not None:
            self._completed_overlay.hide()

    def _show_menu_screen(self) -> None:
        if self._stack is None or self._menu_screen is None:
            return
        self._leave_game()
        self._stack.setCurrentWidget(self._menu_screen)

    def _show_difficulty_screen(self) -> None:
        if self._stack is None or self._difficulty_screen is None:
            return
        self._leave_game()
        self._stack.setCurrentWidget(self._difficulty_screen)

    def _show_level_map(self, difficulty_key: str) -> None:
        """Refresh unlock status for ``difficulty_key`` and show its level grid."""
        if self._stack is None or self._level_screen is None or self._level_grid is None:
            return
        self._leave_game()
        self._difficulty_key = difficulty_key
        difficulty = self._config.get(difficulty_key)
        self._level_grid.set_title(f"{difficulty.name.upper()} LEVELS")
        self._level_grid.set_level_states(
            build_level_states(
                difficulty,
                self._config.total_levels,
                self._progress_store,
                unlock_all=self._unlock_all_levels,
            )
        )
        self._stack.setCurrentWidget(self._level_screen)

    # -- gameplay ---------------------------------------------------------

    def _start_level(self, level: int) -> None:
        """Replace the current session with a fresh maze for ``level``."""
        if self._stack is None or self._game_screen is None or self._maze_view is None:
            return
        if self._completed_overlay is not None:
            self._completed_overlay.hide()
        self._session = GameSession.start_level(
            self._config,
            self._progress_store,
            self._difficulty_key,
            level,
            score=self._score,
        )
        self._stack.setCurrentWidget(self._game_screen)
        self._maze_view.set_session(self._session)
        self._maze_view.setFocus()
        self._update_hud()
        self._clock_timer.start()

    def _restart_level(self) -> None:
        if self._session is not None:
            self._start_level(self._session.level)

    def _move_player(self, dcol: int, drow: int) -> None:
        if self._session is None:
            return
        result = self._session.move(dcol, drow)
        if result.outcome is MoveOutcome.MOVED and result.completed:
            self._level_completed()

    def _level_completed(self) -> None:
        session = self._session
        if session is None or session.result is None or self._completed_overlay is None:
            return
        self._clock_timer.stop()
        self._score = session.score
        self._update_hud()
        self._completed_overlay.show_result(session.result, session.has_next_level())

    def _on_overlay_closed(self, action: str) -> None:
        session = self._session
        if session is None:
            return
        if action == ACTION_NEXT and session.has_next_level():
            self._start_level(session.level + 1)
        elif action == ACTION_RESTART:
            self._start_level(session.level)
        else:
            self._show_level_map(self._difficulty_key)

    def _update_hud(self) -> None:
        if self._session is None:
            return
        if self._level_label is not None:
            name = self._config.get(self._session.difficulty).name
            self._level_label.setText(f"{name.upper()}  LEVEL {self._session.level}")
        if self._score_label is not None:
            self._score_label.setText(f"SCORE {self._session.score}")
        self._update_time_label()

    def _update_time_label(self) -> None:
        if self._session is None or self._time_label is None:
            return
        self._time_label.setText(format_elapsed(self._session.elapsed_seconds()))

    # -- events -----------------------------------------------------------

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self._stack is not None and self._stack.currentWidget() is self._game_screen:
            if event.key() == Qt.Key.Key_Escape:
                self._show_level_map(self._difficulty_key)
                return
            name = _QT_KEY_NAMES.get(event.key(), event.text())
            direction = direction_for_key(name) if name else None
            if direction is not None:
                self._move_player(*direction)
                return
        super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist progress when closing the app."""
        self._leave_game()
        if self._progress_store is not None:
            self._progress_store.save()
        super().closeEvent(event)
