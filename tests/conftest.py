"""Shared fixtures: small in-memory level catalogs."""

from __future__ import annotations

import random
from typing import Callable

import pytest

from wordtiles.core.levels import Level, LevelCatalog, Role, Token

HOMEWORK = ["She", "is doing", "her homework", "in her room", "now"]
SOCCER = ["They", "played", "soccer", "at the park", "yesterday"]
GRANDMA = ["I", "will visit", "my grandma", "at her house", "tomorrow"]

_ROLES = [Role.SUBJECT, Role.VERB, Role.OBJECT, Role.PLACE, Role.TIME]


def _make_level(level_id: int, texts: list[str], scenario: str = "Scenario.") -> Level:
    tokens = tuple(Token(text=t, role=_ROLES[i % len(_ROLES)]) for i, t in enumerate(texts))
    return Level(id=level_id, scenario=scenario, tokens=tokens)


@pytest.fixture()
def make_level() -> Callable[..., Level]:
    return _make_level


@pytest.fixture()
def homework_level() -> Level:
    return _make_level(1, HOMEWORK, "After-school study time.")


@pytest.fixture()
def catalog() -> LevelCatalog:
    return LevelCatalog(
        [
            _make_level(1, HOMEWORK, "After-school study time."),
            _make_level(2, SOCCER, "Weekend sports at the park."),
            _make_level(3, GRANDMA, "Visiting grandma tomorrow."),
        ]
    )


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
