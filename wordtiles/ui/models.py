"""Data models used by the UI."""

from __future__ import annotations

import html
from dataclasses import dataclass

from wordtiles.core.levels import Level
from wordtiles.core.session import ReviewItem, SessionView


@dataclass
class LevelState:
    """UI state for a single level dot in the progress strip."""

    level: Level
    completed: bool
    is_current: bool = False


def build_level_states(view: SessionView, levels: list[Level]) -> list[LevelState]:
    """Pair every level with its completion flag and mark the one in play."""
    return [
        LevelState(level=level, completed=bool(done), is_current=(idx == view.level_index))
        for idx, (level, done) in enumerate(zip(levels, view.completed))
    ]


@dataclass(frozen=True)
class ReviewCardText:
    """Label contents for one review card.

    ``heading`` is plain text; ``yours`` and ``correct`` are rich text with the
    learner-visible sentences HTML-escaped.
    """

    heading: str
    yours: str
    correct: str


def build_review_card_text(item: ReviewItem) -> ReviewCardText:
    return ReviewCardText(
        heading=f"Level {item.level.id} – {item.level.scenario}",
        yours=f"<b>Your sentence:</b> {html.escape(item.incorrect_sentence)}",
        correct=f"<b>Correct sentence:</b> {html.escape(item.correct_sentence)}",
    )
