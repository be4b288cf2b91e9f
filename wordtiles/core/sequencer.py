from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from wordtiles.core.levels import Level, Token
from wordtiles.core.shuffle import shuffle_indices

logger = logging.getLogger(__name__)


class ValidationState(str, Enum):
    NONE = "none"
    SUCCESS = "success"
    ERROR = "error"


class TileSequencer:
    """Owns the bank/sequence partition of tile indices for the level in play.

    Only the placed ``sequence`` and the per-level ``shuffled_order`` are
    stored; the bank is always derived as the shuffled order minus whatever
    has been placed, so the two sides can never overlap or lose a tile.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self._level: Optional[Level] = None
        self._shuffled_order: list[int] = []
        self._sequence: list[int] = []
        self._state = ValidationState.NONE

    @property
    def level(self) -> Optional[Level]:
        return self._level

    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def sequence(self) -> list[int]:
        return list(self._sequence)

    @property
    def shuffled_order(self) -> list[int]:
        return list(self._shuffled_order)

    @property
    def bank(self) -> list[int]:
        placed = set(self._sequence)
        return [idx for idx in self._shuffled_order if idx not in placed]

    @property
    def tile_count(self) -> int:
        return len(self._shuffled_order)

    @property
    def is_full(self) -> bool:
        return len(self._sequence) == len(self._shuffled_order)

    @property
    def is_locked(self) -> bool:
        return self._state is ValidationState.SUCCESS

    def assembled_tokens(self) -> list[Token]:
        if self._level is None:
            return []
        return [self._level.tokens[idx] for idx in self._sequence]

    def bank_tokens(self) -> list[tuple[int, Token]]:
        if self._level is None:
            return []
        return [(idx, self._level.tokens[idx]) for idx in self.bank]

    def enter_level(self, level: Level) -> None:
        """Reset for *level*: fresh bank shuffle, empty sequence, no feedback."""
        self._level = level
        self._shuffled_order = shuffle_indices(range(level.tile_count), self._rng)
        self._sequence = []
        self._state = ValidationState.NONE

    def place(self, index: int) -> bool:
        """Move *index* from the bank to the end of the sequence."""
        if self.is_locked:
            logger.debug("place(%s) ignored: level is locked", index)
            return False
        if index in self._sequence or not 0 <= index < self.tile_count:
            logger.debug("place(%s) ignored: not in bank", index)
            return False
        self._sequence.append(index)
        self._state = ValidationState.NONE
        return True

    def undo(self) -> Optional[int]:
        """Return the last placed index to the bank and hand it back."""
        if self.is_locked or not self._sequence:
            logger.debug("undo() ignored: nothing to take back")
            return None
        index = self._sequence.pop()
        self._state = ValidationState.NONE
        return index

    def mark(self, state: ValidationState) -> None:
        self._state = state
