"""Tests for wordtiles.core.levels – level data and YAML catalog loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from wordtiles.core.levels import Level, LevelCatalog, Role, Token, build_sentence


def _write_yaml(path: Path, data: dict) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


def _level_data(level_id: int, texts: list[str]) -> dict:
    roles = ["subject", "verb", "object", "place", "time"]
    return {
        "id": level_id,
        "scenario": f"Scenario {level_id}.",
        "tokens": [{"text": t, "role": roles[i % 5]} for i, t in enumerate(texts)],
    }


@pytest.fixture()
def levels_dir(tmp_path: Path) -> Path:
    d = tmp_path / "levels"
    d.mkdir()
    return d


# ---------------------------------------------------------------------------
# Level dataclass
# ---------------------------------------------------------------------------

class TestLevel:
    def test_canonical_sentence_is_derived(self):
        lv = Level(
            id=1,
            scenario="x",
            tokens=(Token("She", Role.SUBJECT), Token("is doing", Role.VERB), Token("now", Role.TIME)),
        )
        assert lv.canonical_sentence == "She is doing now."

    def test_tokens_become_tuple(self):
        lv = Level(id=1, scenario="x", tokens=[Token("Hi", Role.SUBJECT)])
        assert isinstance(lv.tokens, tuple)
        assert lv.tile_count == 1

    def test_frozen(self):
        lv = Level(id=1, scenario="x", tokens=(Token("Hi", Role.SUBJECT),))
        with pytest.raises(AttributeError):
            lv.scenario = "y"  # type: ignore[misc]

    def test_build_sentence(self):
        assert build_sentence(["a", "b"]) == "a b."
        assert build_sentence([]) == "."


class TestRole:
    def test_values(self):
        assert [r.value for r in Role] == ["subject", "verb", "object", "place", "time"]


# ---------------------------------------------------------------------------
# LevelCatalog
# ---------------------------------------------------------------------------

class TestCatalog:
    def test_sequence_protocol(self, catalog: LevelCatalog):
        assert len(catalog) == 3
        assert catalog[1].id == 2
        assert [lv.id for lv in catalog] == [1, 2, 3]
        assert catalog.all() == list(catalog)

    def test_from_records(self):
        cat = LevelCatalog.from_records([_level_data(1, ["I", "ran"]), _level_data(2, ["We", "swam"])])
        assert len(cat) == 2
        assert cat[0].canonical_sentence == "I ran."
        assert cat[1].tokens[0].role is Role.SUBJECT


class TestFromDirectory:
    def test_loads_in_numeric_order(self, levels_dir: Path):
        _write_yaml(levels_dir / "level10.yaml", _level_data(10, ["I", "took"]))
        _write_yaml(levels_dir / "level2.yaml", _level_data(2, ["They", "played"]))
        _write_yaml(levels_dir / "level1.yaml", _level_data(1, ["She", "is doing"]))
        cat = LevelCatalog.from_directory(levels_dir)
        assert [lv.id for lv in cat] == [1, 2, 10]

    def test_ignores_non_level_files(self, levels_dir: Path):
        _write_yaml(levels_dir / "level1.yaml", _level_data(1, ["I", "ran"]))
        _write_yaml(levels_dir / "notes.yaml", {"x": 1})
        assert len(LevelCatalog.from_directory(levels_dir)) == 1

    def test_strips_text_and_normalises_role(self, levels_dir: Path):
        data = {"id": 1, "scenario": "  Park.  ", "tokens": [{"text": "  They ", "role": "SUBJECT"}]}
        _write_yaml(levels_dir / "level1.yaml", data)
        lv = LevelCatalog.from_directory(levels_dir)[0]
        assert lv.scenario == "Park."
        assert lv.tokens[0] == Token("They", Role.SUBJECT)

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LevelCatalog.from_directory(tmp_path / "nope")

    def test_empty_directory(self, levels_dir: Path):
        with pytest.raises(ValueError, match="No level files"):
            LevelCatalog.from_directory(levels_dir)

    def test_not_a_mapping(self, levels_dir: Path):
        (levels_dir / "level1.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="level1.yaml"):
            LevelCatalog.from_directory(levels_dir)

    def test_missing_id(self, levels_dir: Path):
        data = _level_data(1, ["I", "ran"])
        del data["id"]
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="'id'"):
            LevelCatalog.from_directory(levels_dir)

    def test_missing_scenario(self, levels_dir: Path):
        data = _level_data(1, ["I", "ran"])
        data["scenario"] = ""
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="'scenario'"):
            LevelCatalog.from_directory(levels_dir)

    def test_empty_tokens(self, levels_dir: Path):
        data = _level_data(1, [])
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="'tokens'"):
            LevelCatalog.from_directory(levels_dir)

    def test_blank_token_text(self, levels_dir: Path):
        data = _level_data(1, ["I", "   "])
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="token 1"):
            LevelCatalog.from_directory(levels_dir)

    def test_null_token_text(self, levels_dir: Path):
        data = _level_data(1, ["I", "ran"])
        data["tokens"][1]["text"] = None
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="token 1"):
            LevelCatalog.from_directory(levels_dir)

    def test_numeric_token_text(self, levels_dir: Path):
        data = {"id": 1, "scenario": "x", "tokens": [{"text": 5, "role": "subject"}]}
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="token 0"):
            LevelCatalog.from_directory(levels_dir)

    def test_null_text_in_records(self):
        with pytest.raises(ValueError, match="record 0: token 0"):
            LevelCatalog.from_records([{"id": 1, "scenario": "x", "tokens": [{"text": None, "role": "verb"}]}])

    def test_unknown_role(self, levels_dir: Path):
        data = {"id": 1, "scenario": "x", "tokens": [{"text": "I", "role": "adverb"}]}
        _write_yaml(levels_dir / "level1.yaml", data)
        with pytest.raises(ValueError, match="unknown role"):
            LevelCatalog.from_directory(levels_dir)


class TestPackagedLevels:
    def test_ten_levels_ship(self):
        cat = LevelCatalog.from_directory()
        assert [lv.id for lv in cat] == list(range(1, 11))

    def test_first_level_sentence(self):
        cat = LevelCatalog.from_directory()
        assert cat[0].canonical_sentence == "She is doing her homework in her room now."

    def test_every_level_uses_all_roles_once(self):
        for lv in LevelCatalog.from_directory():
            assert [t.role for t in lv.tokens] == list(Role)
