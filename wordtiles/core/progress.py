from __future__ import annotations

import logging

from wordtiles.core.sequencer import ValidationState

logger = logging.getLogger(__name__)


class ProgressTracker:
    """Per-level completion flags for one session. Kept in memory only."""

    def __init__(self, level_count: int) -> None:
        if level_count < 0:
            raise ValueError("level_count must not be negative")
        self._completed: list[bool] = [False] * level_count
        self._finished = False

    @property
    def level_count(self) -> int:
        return len(self._completed)

    @property
    def completed(self) -> list[bool]:
        return list(self._completed)

    @property
    def completed_count(self) -> int:
        return sum(1 for done in self._completed if done)

    @property
    def finished(self) -> bool:
        """True once every level has been solved. Never reverts."""
        return self._finished

    def is_complete(self, level_index: int) -> bool:
        self._check_index(level_index)
        return self._completed[level_index]

    def mark_complete(self, level_index: int) -> bool:
        """Flag *level_index* as solved; returns False if it already was."""
        self._check_index(level_index)
        if self._completed[level_index]:
            return False
        self._completed[level_index] = True
        if not self._finished and all(self._completed):
            self._finished = True
            logger.info("All %d levels complete", self.level_count)
        return True

    def is_last_level(self, level_index: int) -> bool:
        return level_index == self.level_count - 1

    def can_advance(self, level_index: int, state: ValidationState) -> bool:
        return state is ValidationState.SUCCESS and not self.is_last_level(level_index)

    def _check_index(self, level_index: int) -> None:
        if not 0 <= level_index < len(self._completed):
            raise IndexError(f"level index {level_index} out of range (0..{len(self._completed) - 1})")
