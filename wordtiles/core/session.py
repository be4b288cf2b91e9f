from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from wordtiles.core import validator
from wordtiles.core.levels import Level, LevelCatalog, Token
from wordtiles.core.progress import ProgressTracker
from wordtiles.core.review import ReviewLog
from wordtiles.core.sequencer import TileSequencer, ValidationState
from wordtiles.core.speech import SilentSpeaker, Speaker
from wordtiles.core.validator import CheckResult, CheckStatus

logger = logging.getLogger(__name__)

SUCCESS_FEEDBACK = "Excellent! The sentence is correct."
ERROR_FEEDBACK = "Not quite. Try again!"
ERROR_HINT = "Look at the time clue!"


@dataclass(frozen=True)
class ReviewItem:
    """A review entry paired with what the learner should have built."""

    level_index: int
    level: Level
    incorrect_sentence: str

    @property
    def correct_sentence(self) -> str:
        return self.level.canonical_sentence


@dataclass(frozen=True)
class SessionView:
    """Everything the UI needs to draw the current state."""

    level_index: int
    level_count: int
    level: Level
    assembled: Tuple[Token, ...]
    bank: Tuple[Tuple[int, Token], ...]
    validation: ValidationState
    feedback: str
    hint: str
    completed: Tuple[bool, ...]
    finished: bool
    review_items: Tuple[ReviewItem, ...]
    review_opened: bool
    is_last_level: bool
    can_undo: bool
    can_check: bool
    can_advance: bool
    can_open_review: bool


class GameSession:
    """Plays a catalog level by level.

    Every command is synchronous and either applies or is a no-op; rejected
    commands return ``False``/``None`` (or a not-ready check result) instead
    of raising.
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        speaker: Optional[Speaker] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if len(catalog) == 0:
            raise ValueError("A game session needs at least one level")
        self._catalog = catalog
        self._speaker: Speaker = speaker if speaker is not None else SilentSpeaker()
        self._sequencer = TileSequencer(rng=rng)
        self._progress = ProgressTracker(len(catalog))
        self._review_log = ReviewLog()
        self._level_index = 0
        self._feedback = ""
        self._hint = ""
        self._review_opened = False
        self._enter_level(0)

    @property
    def catalog(self) -> LevelCatalog:
        return self._catalog

    @property
    def current_level_index(self) -> int:
        return self._level_index

    @property
    def current_level(self) -> Level:
        return self._catalog[self._level_index]

    @property
    def sequencer(self) -> TileSequencer:
        return self._sequencer

    @property
    def progress(self) -> ProgressTracker:
        return self._progress

    @property
    def review_log(self) -> ReviewLog:
        return self._review_log

    @property
    def validation_state(self) -> ValidationState:
        return self._sequencer.state

    @property
    def feedback(self) -> str:
        return self._feedback

    @property
    def hint(self) -> str:
        return self._hint

    @property
    def finished(self) -> bool:
        return self._progress.finished

    @property
    def review_opened(self) -> bool:
        return self._review_opened

    def is_last_level(self) -> bool:
        return self._progress.is_last_level(self._level_index)

    def can_advance(self) -> bool:
        return self._progress.can_advance(self._level_index, self._sequencer.state)

    def can_open_review(self) -> bool:
        return self.finished and not self._review_opened and len(self._review_log) > 0

    def place_tile(self, index: int) -> bool:
        if not self._sequencer.place(index):
            return False
        self._clear_messages()
        return True

    def undo(self) -> Optional[int]:
        index = self._sequencer.undo()
        if index is not None:
            self._clear_messages()
        return index

    def check(self) -> CheckResult:
        """Judge a full sequence; partial or already-solved levels are not ready."""
        if self._sequencer.is_locked:
            logger.debug("check() ignored: level %d already solved", self._level_index)
            return validator.NOT_READY
        level = self.current_level
        result = validator.check(self._sequencer.sequence, level)
        if result.status is CheckStatus.NOT_READY:
            logger.debug("check() ignored: sequence incomplete")
            return result

        if result.is_success:
            self._sequencer.mark(ValidationState.SUCCESS)
            self._feedback = SUCCESS_FEEDBACK
            self._hint = ""
            self._progress.mark_complete(self._level_index)
            logger.info("Level %d solved", level.id)
            self._speaker.cancel()
            self._speaker.speak(level.canonical_sentence)
        else:
            self._sequencer.mark(ValidationState.ERROR)
            self._feedback = ERROR_FEEDBACK
            self._hint = ERROR_HINT
            if self._review_log.record(self._level_index, result.sentence or ""):
                logger.info("Level %d: first wrong attempt recorded", level.id)
        return result

    def advance(self) -> bool:
        if not self.can_advance():
            logger.debug("advance() ignored at level index %d", self._level_index)
            return False
        self._enter_level(self._level_index + 1)
        return True

    def open_review(self) -> bool:
        """Enter the read-only review view. Only once, and only when finished."""
        if not self.finished or self._review_opened:
            logger.debug("open_review() ignored")
            return False
        self._review_opened = True
        logger.info("Review opened with %d entries", len(self._review_log))
        return True

    def review_items(self) -> list[ReviewItem]:
        return [
            ReviewItem(
                level_index=entry.level_index,
                level=self._catalog[entry.level_index],
                incorrect_sentence=entry.incorrect_sentence,
            )
            for entry in self._review_log.entries()
        ]

    def close(self) -> None:
        """Tear down the session; stops any speech still playing."""
        self._speaker.cancel()

    def snapshot(self) -> SessionView:
        seq = self._sequencer
        return SessionView(
            level_index=self._level_index,
            level_count=len(self._catalog),
            level=self.current_level,
            assembled=tuple(seq.assembled_tokens()),
            bank=tuple(seq.bank_tokens()),
            validation=seq.state,
            feedback=self._feedback,
            hint=self._hint,
            completed=tuple(self._progress.completed),
            finished=self.finished,
            review_items=tuple(self.review_items()),
            review_opened=self._review_opened,
            is_last_level=self.is_last_level(),
            can_undo=bool(seq.sequence) and not seq.is_locked,
            can_check=seq.is_full and not seq.is_locked,
            can_advance=self.can_advance(),
            can_open_review=self.can_open_review(),
        )

    def _enter_level(self, index: int) -> None:
        self._level_index = index
        self._sequencer.enter_level(self._catalog[index])
        self._clear_messages()
        logger.info(
            "Entered level %d of %d: %s",
            index + 1,
            len(self._catalog),
            self.current_level.scenario,
        )

    def _clear_messages(self) -> None:
        self._feedback = ""
        self._hint = ""
