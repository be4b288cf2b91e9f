"""Qt text-to-speech backend for the speaker interface."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLocale, QObject
from PySide6.QtTextToSpeech import QTextToSpeech

logger = logging.getLogger(__name__)


class QtSpeaker:
    """Best-effort speech: stays silent when no engine is installed.

    Every ``speak`` stops the current utterance first so two never overlap.
    """

    def __init__(self, locale: str = "en_US", enabled: bool = True, parent: Optional[QObject] = None) -> None:
        self._engine: Optional[QTextToSpeech] = None
        if not enabled:
            logger.info("Speech disabled by settings")
            return
        if not QTextToSpeech.availableEngines():
            logger.warning("No text-to-speech engine available; speech is off")
            return
        self._engine = QTextToSpeech(parent)
        self._engine.setLocale(QLocale(locale))
        self._engine.stateChanged.connect(self._on_state_changed)

    def _on_state_changed(self, state: QTextToSpeech.State) -> None:
        if state == QTextToSpeech.State.Error and self._engine is not None:
            logger.warning("Speech playback failed: %s", self._engine.errorString())

    @property
    def available(self) -> bool:
        return self._engine is not None

    def speak(self, text: str) -> None:
        if self._engine is None or not text:
            return
        self._engine.stop()
        self._engine.say(text)

    def cancel(self) -> None:
        if self._engine is None:
            return
        self._engine.stop()
