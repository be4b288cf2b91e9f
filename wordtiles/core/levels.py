from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_DIR = Path(__file__).resolve().parent.parent / "data" / "levels"


class Role(str, Enum):
    SUBJECT = "subject"
    VERB = "verb"
    OBJECT = "object"
    PLACE = "place"
    TIME = "time"


@dataclass(frozen=True)
class Token:
    text: str
    role: Role


def build_sentence(texts: Iterable[str]) -> str:
    """Join tile texts with single spaces and close with a period."""
    return " ".join(texts) + "."


@dataclass(frozen=True)
class Level:
    id: int
    scenario: str
    tokens: Tuple[Token, ...]
    canonical_sentence: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(
            self, "canonical_sentence", build_sentence(t.text for t in self.tokens)
        )

    @property
    def tile_count(self) -> int:
        return len(self.tokens)


class LevelCatalog:
    """Read-only, ordered collection of levels for one game session."""

    def __init__(self, levels: Iterable[Level]) -> None:
        self._levels: Tuple[Level, ...] = tuple(levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels)

    def __getitem__(self, index: int) -> Level:
        return self._levels[index]

    def all(self) -> list[Level]:
        return list(self._levels)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "LevelCatalog":
        levels = [
            _parse_level(raw, source=f"record {i}") for i, raw in enumerate(records)
        ]
        return cls(levels)

    @classmethod
    def from_directory(cls, base_dir: Optional[Path] = None) -> "LevelCatalog":
        base_dir = Path(base_dir) if base_dir is not None else DEFAULT_LEVELS_DIR
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        levels: list[Level] = []
        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            levels.append(_parse_level(raw, source=level_path.name))

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        logger.info("Loaded %d levels from %s", len(levels), base_dir)
        return cls(levels)


def _parse_level(raw: Any, source: str) -> Level:
    if not raw or not isinstance(raw, Mapping):
        raise ValueError(f"{source}: expected a mapping with 'id', 'scenario' and 'tokens'")
    level_id = raw.get("id")
    if isinstance(level_id, bool) or not isinstance(level_id, int):
        raise ValueError(f"{source}: missing or invalid 'id'")
    scenario = raw.get("scenario")
    if not scenario or not isinstance(scenario, str):
        raise ValueError(f"{source}: missing or invalid 'scenario'")
    raw_tokens = raw.get("tokens")
    if not isinstance(raw_tokens, list) or not raw_tokens:
        raise ValueError(f"{source}: 'tokens' must be a non-empty list")

    tokens: list[Token] = []
    for pos, item in enumerate(raw_tokens):
        if not isinstance(item, Mapping):
            raise ValueError(f"{source}: token {pos} must be a mapping with 'text' and 'role'")
        text = item.get("text")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"{source}: token {pos} has no 'text' string")
        text = text.strip()
        try:
            role = Role(str(item.get("role", "")).strip().lower())
        except ValueError:
            raise ValueError(f"{source}: token {pos} has unknown role {item.get('role')!r}") from None
        tokens.append(Token(text=text, role=role))

    return Level(id=level_id, scenario=scenario.strip(), tokens=tuple(tokens))
