from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from wordtiles.core.sequencer import ValidationState
from wordtiles.core.session import GameSession, SessionView
from wordtiles.ui.colors import HomeColors, hover_shade
from wordtiles.ui.models import build_level_states
from wordtiles.ui.review_panel import ReviewPanel
from wordtiles.ui.tile_widgets import LevelProgressStrip, TileRow

logger = logging.getLogger(__name__)


def _button_style(bg: str, fg: str = "white") -> str:
    return f"""
        QPushButton {{
            background: {bg};
            color: {fg};
            border: none;
            border-radius: 16px;
            padding: 8px 18px;
            font-size: 13px;
            font-weight: 700;
        }}
        QPushButton:hover:enabled {{ background: {hover_shade(bg)}; }}
        QPushButton:disabled {{ background: #e2e8f0; color: #94a3b8; }}
    """


class MainWindow(QMainWindow):
    """Single-screen puzzle window.

    All state lives in the ``GameSession``; every button handler forwards one
    command to it and then redraws from ``session.snapshot()``.
    """

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self._session = session

        self._level_label: Optional[QLabel] = None
        self._scenario_label: Optional[QLabel] = None
        self._drop_zone: Optional[TileRow] = None
        self._bank_row: Optional[TileRow] = None
        self._undo_button: Optional[QPushButton] = None
        self._check_button: Optional[QPushButton] = None
        self._next_button: Optional[QPushButton] = None
        self._finished_button: Optional[QPushButton] = None
        self._feedback_label: Optional[QLabel] = None
        self._hint_label: Optional[QLabel] = None
        self._progress_strip: Optional[LevelProgressStrip] = None
        self._review_section: Optional[QFrame] = None
        self._review_button: Optional[QPushButton] = None
        self._review_panel: Optional[ReviewPanel] = None

        self.setWindowTitle("Sentence Structure Puzzle Game")
        self.resize(1000, 720)
        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {HomeColors.BG_TOP}, stop:1 {HomeColors.BG_BOTTOM});
            }}
            """
        )
        outer = QVBoxLayout(root)
        outer.setContentsMargins(24, 24, 24, 24)

        card = QFrame()
        card.setObjectName("gameCard")
        card.setStyleSheet(
            f"""
            QFrame#gameCard {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(12)
        outer.addWidget(card)

        # Header
        title = QLabel("Sentence Structure Puzzle Game")
        title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 26px; font-weight: 900;")
        layout.addWidget(title)
        subtitle = QLabel(
            "For EFL 6th graders (CEFR A1) – "
            "<b>Focus on verb tenses (past, present, future) using time clues.</b>"
        )
        subtitle.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px;")
        layout.addWidget(subtitle)
        steps = QLabel(
            "1) Make a sentence using all the tiles. 2) Use <b>Undo</b> to fix before checking. "
            "3) Click <b>Check Sentence</b> when you are ready."
        )
        steps.setWordWrap(True)
        steps.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(steps)

        self._progress_strip = LevelProgressStrip()
        layout.addWidget(self._progress_strip)

        # Level pill + scenario + time clue badge
        level_row = QHBoxLayout()
        level_col = QVBoxLayout()
        self._level_label = QLabel("")
        self._level_label.setStyleSheet(
            f"color: {HomeColors.PRIMARY}; font-size: 12px; font-weight: 800; letter-spacing: 1px;"
        )
        self._scenario_label = QLabel("")
        self._scenario_label.setStyleSheet(
            f"color: {HomeColors.TEXT_PRIMARY}; font-size: 17px; font-weight: 700;"
        )
        level_col.addWidget(self._level_label)
        level_col.addWidget(self._scenario_label)
        level_row.addLayout(level_col, 1)
        clue = QLabel("Time Clue = Verb Tense")
        clue.setStyleSheet(
            "background: #f3e8ff; color: #6b21a8; border: 1px solid #d8b4fe;"
            " border-radius: 12px; padding: 4px 12px; font-size: 12px;"
        )
        level_row.addWidget(clue, 0, Qt.AlignRight | Qt.AlignVCenter)
        layout.addLayout(level_row)

        # Drop zone
        layout.addWidget(self._section_label("Drop Zone (Make your sentence here)"))
        self._drop_zone = TileRow("Click word tiles below to build your sentence in order.", dashed=True)
        layout.addWidget(self._drop_zone)

        # Controls
        controls = QHBoxLayout()
        controls.setSpacing(10)
        self._undo_button = QPushButton("Undo Last Word")
        self._undo_button.setStyleSheet(_button_style("#e2e8f0", HomeColors.TEXT_PRIMARY))
        self._undo_button.clicked.connect(self._on_undo)
        self._check_button = QPushButton("Check Sentence")
        self._check_button.setStyleSheet(_button_style("#10b981"))
        self._check_button.clicked.connect(self._on_check)
        self._next_button = QPushButton("Next Level")
        self._next_button.setStyleSheet(_button_style(HomeColors.PRIMARY_LIGHT))
        self._next_button.clicked.connect(self._on_next)
        self._finished_button = QPushButton("All Levels Finished")
        self._finished_button.setStyleSheet(_button_style(HomeColors.PRIMARY))
        self._finished_button.setEnabled(False)
        for button in (self._undo_button, self._check_button, self._next_button, self._finished_button):
            button.setCursor(Qt.PointingHandCursor)
            controls.addWidget(button)
        controls.addStretch(1)
        layout.addLayout(controls)

        undo_shortcut = QShortcut(QKeySequence.Undo, self)
        undo_shortcut.activated.connect(self._on_undo)
        check_shortcut = QShortcut(QKeySequence(Qt.Key_Return), self)
        check_shortcut.activated.connect(self._on_check)

        # Messages
        self._feedback_label = QLabel("")
        self._feedback_label.setStyleSheet("font-size: 15px; font-weight: 700;")
        self._hint_label = QLabel("")
        self._hint_label.setStyleSheet(f"color: {HomeColors.ERROR}; font-size: 13px;")
        layout.addWidget(self._feedback_label)
        layout.addWidget(self._hint_label)

        # Word bank
        layout.addWidget(self._section_label("Word Tiles (Click to place in the sentence)"))
        self._bank_row = TileRow("All tiles are in the sentence.")
        layout.addWidget(self._bank_row)
        footnote = QLabel("* Time Clue tiles (e.g. <b>yesterday, now, tomorrow</b>) tell you which verb tense to use.")
        footnote.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 11px;")
        layout.addWidget(footnote)

        # Review entry, shown once every level is complete
        self._review_section = QFrame()
        review_layout = QHBoxLayout(self._review_section)
        review_layout.setContentsMargins(0, 12, 0, 0)
        review_text = QVBoxLayout()
        done_title = QLabel("All levels complete!")
        done_title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 17px; font-weight: 800;")
        done_sub = QLabel("Review the sentences you got wrong and compare them with the correct answers.")
        done_sub.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px;")
        review_text.addWidget(done_title)
        review_text.addWidget(done_sub)
        review_layout.addLayout(review_text, 1)
        self._review_button = QPushButton("Retry Incorrect Sentences (Review Mode)")
        self._review_button.setCursor(Qt.PointingHandCursor)
        self._review_button.setStyleSheet(_button_style(HomeColors.AMBER))
        self._review_button.clicked.connect(self._on_open_review)
        review_layout.addWidget(self._review_button, 0, Qt.AlignVCenter)
        layout.addWidget(self._review_section)

        # Review list stays in place once opened
        self._review_panel = ReviewPanel()
        self._review_panel.hide()
        layout.addWidget(self._review_panel)
        layout.addStretch(1)

        self.setCentralWidget(root)

    def _section_label(self, text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px; font-weight: 700;")
        return lbl

    def _on_tile_clicked(self, index: int) -> None:
        if self._session.place_tile(index):
            self._refresh()

    def _on_undo(self) -> None:
        if self._session.undo() is not None:
            self._refresh()

    def _on_check(self) -> None:
        self._session.check()
        self._refresh()

    def _on_next(self) -> None:
        if self._session.advance():
            self._refresh()

    def _on_open_review(self) -> None:
        if self._session.open_review():
            self._refresh()

    def _refresh(self) -> None:
        """Redraw every widget from a fresh session snapshot."""
        view = self._session.snapshot()
        self._render_header(view)
        self._render_tiles(view)
        self._render_controls(view)
        self._render_messages(view)
        if self._review_section is not None:
            self._review_section.setVisible(view.finished and len(view.review_items) > 0)
        if self._review_button is not None:
            self._review_button.setEnabled(view.can_open_review)
        if self._review_panel is not None:
            if view.review_opened:
                self._review_panel.set_items(view.review_items)
            self._review_panel.setVisible(view.review_opened)

    def _render_header(self, view: SessionView) -> None:
        if self._level_label is not None:
            self._level_label.setText(f"LEVEL {view.level.id} OF {view.level_count}")
        if self._scenario_label is not None:
            self._scenario_label.setText(f"Scenario: {view.level.scenario}")
        if self._progress_strip is not None:
            self._progress_strip.set_states(build_level_states(view, self._session.catalog.all()))

    def _render_tiles(self, view: SessionView) -> None:
        locked = view.validation is ValidationState.SUCCESS
        if self._drop_zone is not None:
            self._drop_zone.set_tiles(
                list(enumerate(view.assembled)),
                view.validation,
                enabled=not locked,
            )
        if self._bank_row is not None:
            self._bank_row.set_tiles(
                view.bank,
                ValidationState.NONE,
                on_click=self._on_tile_clicked,
                enabled=not locked,
            )

    def _render_controls(self, view: SessionView) -> None:
        if self._undo_button is not None:
            self._undo_button.setEnabled(view.can_undo)
        if self._check_button is not None:
            self._check_button.setEnabled(view.can_check)
        if self._next_button is not None:
            self._next_button.setVisible(not view.is_last_level)
            self._next_button.setEnabled(view.can_advance)
        if self._finished_button is not None:
            self._finished_button.setVisible(
                view.is_last_level and view.validation is ValidationState.SUCCESS
            )

    def _render_messages(self, view: SessionView) -> None:
        if self._feedback_label is not None:
            color = {
                ValidationState.SUCCESS: HomeColors.SUCCESS,
                ValidationState.ERROR: HomeColors.ERROR,
            }.get(view.validation, HomeColors.TEXT_SECONDARY)
            self._feedback_label.setStyleSheet(f"color: {color}; font-size: 15px; font-weight: 700;")
            self._feedback_label.setText(view.feedback)
            self._feedback_label.setVisible(bool(view.feedback))
        if self._hint_label is not None:
            self._hint_label.setText(view.hint)
            self._hint_label.setVisible(bool(view.hint))

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop speech when the window closes; the session ends with it."""
        self._session.close()
        logger.info("Session closed")
        super().closeEvent(event)
