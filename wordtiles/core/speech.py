"""Interface for the text-to-speech collaborator used after a correct answer."""

from __future__ import annotations

from typing import Protocol


class Speaker(Protocol):
    def speak(self, text: str) -> None:
        ...

    def cancel(self) -> None:
        ...


class SilentSpeaker:
    """Speaker that does nothing; used when speech is off or unsupported."""

    def speak(self, text: str) -> None:
        return None

    def cancel(self) -> None:
        return None
