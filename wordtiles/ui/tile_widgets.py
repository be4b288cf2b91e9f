"""Tile buttons, tile rows and the level progress strip."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSizePolicy, QWidget

from wordtiles.core.levels import Token
from wordtiles.core.sequencer import ValidationState
from wordtiles.ui.colors import HomeColors, hover_shade, role_colors
from wordtiles.ui.models import LevelState


def _pill_style(bg: str, fg: str, border: str) -> str:
    return f"""
        QPushButton {{
            background: {bg};
            color: {fg};
            border: 1px solid {border};
            border-radius: 16px;
            padding: 6px 14px;
            font-size: 15px;
        }}
        QPushButton:hover:enabled {{
            background: {hover_shade(bg)};
        }}
    """


class TileButton(QPushButton):
    """A rounded word tile. Colour depends on where it sits and the check result."""

    def __init__(self, token: Token, parent: Optional[QWidget] = None) -> None:
        super().__init__(token.text, parent)
        self._token = token
        self.setCursor(Qt.PointingHandCursor)
        self.setFocusPolicy(Qt.NoFocus)
        self.apply_state(ValidationState.NONE)

    @property
    def token(self) -> Token:
        return self._token

    def apply_state(self, state: ValidationState) -> None:
        if state is ValidationState.SUCCESS:
            bg, fg, border = role_colors(self._token.role)
            # keep role colours when the locked tile is disabled
            self.setStyleSheet(
                _pill_style(bg, fg, border)
                + f"QPushButton:disabled {{ background: {bg}; color: {fg}; border: 1px solid {border}; }}"
            )
        elif state is ValidationState.ERROR:
            self.setStyleSheet(
                _pill_style(HomeColors.TILE_ERROR_BG, HomeColors.TILE_TEXT, HomeColors.TILE_ERROR_BORDER)
            )
        else:
            self.setStyleSheet(_pill_style(HomeColors.TILE_BG, HomeColors.TILE_TEXT, HomeColors.TILE_BORDER))


class TileRow(QWidget):
    """Horizontal row of tiles with a placeholder shown while empty."""

    def __init__(self, placeholder: str, dashed: bool = False, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("tileRow")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setMinimumHeight(72)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        border = "2px dashed #cbd5e1" if dashed else "1px solid #e2e8f0"
        self.setStyleSheet(
            f"""
            QWidget#tileRow {{
                background: #f8fafc;
                border: {border};
                border-radius: 14px;
            }}
            """
        )
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(12, 10, 12, 10)
        self._layout.setSpacing(8)
        self._placeholder_text = placeholder

    def set_tiles(
        self,
        tiles: Sequence[tuple[int, Token]],
        state: ValidationState,
        on_click: Optional[Callable[[int], None]] = None,
        enabled: bool = True,
    ) -> None:
        """Replace the row contents; *on_click* receives the tile index."""
        while self._layout.count():
            item = self._layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

        if not tiles:
            hint = QLabel(self._placeholder_text)
            hint.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 12px; background: transparent;")
            self._layout.addWidget(hint)
            self._layout.addStretch(1)
            return

        for idx, token in tiles:
            button = TileButton(token)
            button.apply_state(state)
            button.setEnabled(enabled)
            if on_click is not None:
                button.clicked.connect(lambda _checked=False, i=idx: on_click(i))
            self._layout.addWidget(button)
        self._layout.addStretch(1)


class LevelProgressStrip(QWidget):
    """Row of circles: completed (✓), current (indigo), upcoming (gray)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._states: list[LevelState] = []
        self.setFixedHeight(44)
        self.setMinimumWidth(200)

    def set_states(self, states: list[LevelState]) -> None:
        self._states = list(states)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._states:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        size = 28
        spacing = 10
        total_width = len(self._states) * (size + spacing) - spacing
        start_x = max(0, (self.width() - total_width) // 2)
        y = (self.height() - size) // 2
        for i, state in enumerate(self._states):
            x = start_x + i * (size + spacing)
            if state.completed:
                painter.setBrush(QColor("#d1fae5"))
                painter.setPen(QPen(QColor(HomeColors.SUCCESS), 2))
                text_color = QColor(HomeColors.SUCCESS)
                display = "✓"
            elif state.is_current:
                painter.setBrush(QColor("#e0e7ff"))
                painter.setPen(QPen(QColor(HomeColors.PRIMARY), 2))
                text_color = QColor(HomeColors.PRIMARY)
                display = str(state.level.id)
            else:
                painter.setBrush(QColor(255, 255, 255, 160))
                painter.setPen(QPen(QColor("#cbd5e1"), 1))
                text_color = QColor(HomeColors.TEXT_MUTED)
                display = str(state.level.id)
            painter.drawEllipse(x, y, size, size)
            painter.setPen(text_color)
            font = painter.font()
            font.setPointSize(10)
            font.setBold(state.is_current)
            painter.setFont(font)
            painter.drawText(x, y, size, size, Qt.AlignCenter, display)
