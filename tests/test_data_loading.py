from __future__ import annotations

import json
from pathlib import Path

import pytest

from aipe.data.errors import DataLoadError, DataReferenceError, DataValidationError
from aipe.data.repositories import ClassesRepository, RacesRepository, TemplatesRepository


def test_shipped_definitions_load() -> None:
    classes_repo = ClassesRepository()
    races_repo = RacesRepository()
    templates_repo = TemplatesRepository(classes_repo=classes_repo, races_repo=races_repo)
    assert {class_def.id for class_def in classes_repo.all()} == {
        "warrior",
        "ranger",
        "mage",
        "cleric",
        "rogue",
        "paladin",
    }
    assert races_repo.get("elf").modifiers["constitution"] == -1
    assert [template.id for template in templates_repo.all()] == [
        "endgame",
        "fresh",
        "infinite",
        "midgame",
    ]


def test_missing_definition_raises_key_error() -> None:
    with pytest.raises(KeyError):
        ClassesRepository().get("necromancer")


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    with pytest.raises(DataLoadError):
        ClassesRepository(base_path=definitions_dir).all()


def test_classes_repo_rejects_unknown_stat(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "classes.json",
        {"bad_class": {"name": "Bad", "starting_bonus": {"luck": 2}}},
    )
    with pytest.raises(DataValidationError):
        ClassesRepository(base_path=definitions_dir).all()


def test_classes_repo_rejects_negative_bonus(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "classes.json",
        {"bad_class": {"name": "Bad", "starting_bonus": {"strength": -1}}},
    )
    with pytest.raises(DataValidationError):
        ClassesRepository(base_path=definitions_dir).all()


def test_races_repo_rejects_unknown_fields(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "races.json", {"gnome": {"name": "Gnome", "size": "small"}})
    with pytest.raises(DataValidationError):
        RacesRepository(base_path=definitions_dir).all()


def test_templates_repo_rejects_missing_class_reference(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _seed_minimal_defs(definitions_dir)
    _write_json(
        definitions_dir / "templates.json",
        {
            "bad": {
                "name": "Bad",
                "description": "References a missing class.",
                "snapshot": {"class_id": "bard", "race": "human", "stats": {}},
            }
        },
    )
    with pytest.raises(DataReferenceError):
        TemplatesRepository(base_path=definitions_dir).all()


def test_templates_repo_rejects_bad_snapshot(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _seed_minimal_defs(definitions_dir)
    _write_json(
        definitions_dir / "templates.json",
        {
            "bad": {
                "name": "Bad",
                "description": "Negative tier.",
                "snapshot": {"stats": {"strength": {"tier": -2}}},
            }
        },
    )
    with pytest.raises(DataValidationError):
        TemplatesRepository(base_path=definitions_dir).all()


def _seed_minimal_defs(definitions_dir: Path) -> None:
    _write_json(definitions_dir / "classes.json", {"warrior": {"name": "Warrior"}})
    _write_json(definitions_dir / "races.json", {"human": {"name": "Human"}})


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
