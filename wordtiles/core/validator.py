from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from wordtiles.core.levels import Level, build_sentence


class CheckStatus(str, Enum):
    NOT_READY = "not_ready"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of judging an assembled sequence."""

    status: CheckStatus
    sentence: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is CheckStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is CheckStatus.ERROR


NOT_READY = CheckResult(status=CheckStatus.NOT_READY)


def render_sentence(sequence: Sequence[int], level: Level) -> str:
    """Render the learner's sentence from tile indices in placement order."""
    return build_sentence(level.tokens[idx].text for idx in sequence)


def check(sequence: Sequence[int], level: Level) -> CheckResult:
    """Compare the rendered sequence with the level's canonical sentence.

    Comparison is on the rendered text, so tiles with identical text are
    interchangeable. A partial sequence is never judged.
    """
    if len(sequence) != level.tile_count:
        return NOT_READY
    sentence = render_sentence(sequence, level)
    if sentence == level.canonical_sentence:
        return CheckResult(status=CheckStatus.SUCCESS, sentence=sentence)
    return CheckResult(status=CheckStatus.ERROR, sentence=sentence)
