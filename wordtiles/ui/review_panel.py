"""Inline review section that compares wrong attempts with the correct sentences."""

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from wordtiles.core.session import ReviewItem
from wordtiles.ui.colors import HomeColors
from wordtiles.ui.models import build_review_card_text


class ReviewPanel(QFrame):
    """Read-only review list shown below the puzzle once review is opened.

    There is no close control: the window keeps the panel visible for as long
    as the session reports the review as opened.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("reviewPanel")
        self.setStyleSheet(
            """
            QFrame#reviewPanel {
                background: #ffffff;
                border: 1px solid #e2e8f0;
                border-radius: 16px;
            }
            """
        )
        self._items: tuple[ReviewItem, ...] = ()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        title = QLabel("Review Mode – Compare and Learn")
        title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 800;")
        layout.addWidget(title)

        intro = QLabel(
            "Here are the sentences you answered incorrectly at least once. "
            "Compare your attempt with the correct sentence."
        )
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px;")
        layout.addWidget(intro)

        self._entries_host = QWidget()
        self._entries_layout = QVBoxLayout(self._entries_host)
        self._entries_layout.setContentsMargins(0, 0, 0, 0)
        self._entries_layout.setSpacing(8)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setMaximumHeight(280)
        scroll.setWidget(self._entries_host)
        layout.addWidget(scroll)

    def set_items(self, items: Sequence[ReviewItem]) -> None:
        items = tuple(items)
        if items == self._items and self._entries_layout.count():
            return
        self._items = items

        while self._entries_layout.count():
            item = self._entries_layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

        if not items:
            empty = QLabel("Great job! There are no incorrect sentences to review.")
            empty.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px;")
            self._entries_layout.addWidget(empty)
        for entry in items:
            self._entries_layout.addWidget(self._entry_card(entry))
        self._entries_layout.addStretch(1)

    def _entry_card(self, entry: ReviewItem) -> QFrame:
        card = QFrame()
        card.setObjectName("reviewCard")
        card.setStyleSheet(
            """
            QFrame#reviewCard {
                background: #f8fafc;
                border: 1px solid #e2e8f0;
                border-radius: 12px;
            }
            """
        )
        lo = QVBoxLayout(card)
        lo.setContentsMargins(14, 12, 14, 12)
        lo.setSpacing(4)

        text = build_review_card_text(entry)

        heading = QLabel(text.heading)
        heading.setTextFormat(Qt.PlainText)
        heading.setWordWrap(True)
        heading.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 13px; font-weight: 700;")
        lo.addWidget(heading)

        yours = QLabel(text.yours)
        yours.setTextFormat(Qt.RichText)
        yours.setStyleSheet(f"color: {HomeColors.ERROR}; font-size: 13px;")
        lo.addWidget(yours)

        correct = QLabel(text.correct)
        correct.setTextFormat(Qt.RichText)
        correct.setStyleSheet(f"color: {HomeColors.SUCCESS}; font-size: 13px;")
        lo.addWidget(correct)

        tip = QLabel("Tip: Compare the time clue and check if the verb tense matches.")
        tip.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 11px;")
        lo.addWidget(tip)
        return card
