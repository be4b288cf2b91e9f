from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ReviewEntry:
    level_index: int
    incorrect_sentence: str


class ReviewLog:
    """First wrong attempt per level, in the order they were made."""

    def __init__(self) -> None:
        # dicts keep insertion order
        self._entries: Dict[int, ReviewEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, level_index: object) -> bool:
        return level_index in self._entries

    def get(self, level_index: int) -> Optional[ReviewEntry]:
        return self._entries.get(level_index)

    def record(self, level_index: int, incorrect_sentence: str) -> bool:
        """Store the attempt unless this level already has one."""
        if level_index in self._entries:
            return False
        self._entries[level_index] = ReviewEntry(level_index, incorrect_sentence)
        return True

    def entries(self) -> list[ReviewEntry]:
        return list(self._entries.values())
