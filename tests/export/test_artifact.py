# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON database artifact."""

import json
from pathlib import Path

import pytest

from rbxapi.export.artifact import ARTIFACT_FORMAT_VERSION, deserialize, read_artifact, serialize, write_artifact
from rbxapi.model.items import (
    Argument,
    CallbackDef,
    ClassDef,
    Database,
    EnumItemDef,
    FunctionDef,
    YieldFunctionDef,
)
from rbxapi.parser.lexer import lex

_SAMPLE = Path(__file__).parent.parent / "data" / "sample_api.txt"

# ###############
# Helpers
# ###############


def _roundtrip(database: Database) -> Database:
    return deserialize(serialize(database))


def _single(item: object) -> dict:
    return json.loads(serialize(Database(items=(item,))))["items"][0]  # type: ignore[arg-type]


# ###############
# Serialize / Deserialize
# ###############


class TestRoundtrip:
    def test_empty_database(self) -> None:
        assert _roundtrip(Database()) == Database()

    def test_sample_dump_survives_roundtrip(self) -> None:
        database = lex(_SAMPLE.read_text(encoding="utf-8"))
        assert _roundtrip(database) == database

    def test_function_and_yield_function_stay_distinct(self) -> None:
        db = Database(
            items=(
                FunctionDef(class_name="A", name="F", return_type="void"),
                YieldFunctionDef(class_name="A", name="F", return_type="void"),
            )
        )
        result = _roundtrip(db)
        assert type(result.items[0]) is FunctionDef
        assert type(result.items[1]) is YieldFunctionDef

    def test_empty_default_is_not_lost(self) -> None:
        fn = FunctionDef(
            class_name="Instance",
            name="SetAttribute",
            return_type="void",
            arguments=(Argument(type="Variant", name="value", default=""),),
        )
        (result,) = _roundtrip(Database(items=(fn,))).items
        assert result == fn


class TestJsonLayout:
    def test_is_compact(self) -> None:
        assert " " not in serialize(Database(items=(ClassDef(name="A"),)))

    def test_carries_format_version(self) -> None:
        assert json.loads(serialize(Database()))["v"] == ARTIFACT_FORMAT_VERSION

    def test_class_without_superclass_omits_key(self) -> None:
        assert _single(ClassDef(name="A")) == {"kind": "Class", "name": "A", "tags": []}

    def test_tags_are_sorted(self) -> None:
        assert _single(ClassDef(name="A", tags=frozenset({"b", "a"})))["tags"] == ["a", "b"]

    def test_argument_without_default_omits_key(self) -> None:
        item = CallbackDef(
            class_name="A",
            name="B",
            return_type="bool",
            parameters=(Argument(type="Tuple", name="arguments"),),
        )
        assert _single(item)["parameters"] == [{"type": "Tuple", "name": "arguments"}]

    def test_enum_item_value_is_a_number(self) -> None:
        assert _single(EnumItemDef(enum_name="Axis", name="Z", value=2))["value"] == 2


class TestErrors:
    def test_unsupported_version(self) -> None:
        with pytest.raises(ValueError, match="Unsupported artifact format version"):
            deserialize('{"v":"0","items":[]}')

    def test_missing_version(self) -> None:
        with pytest.raises(ValueError, match="Unsupported artifact format version"):
            deserialize('{"items":[]}')

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown item kind: 'Method'"):
            deserialize('{"v":"1","items":[{"kind":"Method","name":"X"}]}')

    @pytest.mark.parametrize(
        "data",
        [
            "[]",
            '"v1"',
            '{"v":"1","items":{}}',
            '{"v":"1","items":[3]}',
            '{"v":"1","items":[{"name":"X"}]}',
            '{"v":"1","items":[{"kind":"Enum"}]}',
            '{"v":"1","items":[{"kind":"Enum","name":"X","tags":7}]}',
        ],
    )
    def test_malformed_structure_is_a_value_error(self, data: str) -> None:
        with pytest.raises(ValueError):
            deserialize(data)

    def test_missing_field_is_named(self) -> None:
        with pytest.raises(ValueError, match="missing field 'enum_name'"):
            deserialize('{"v":"1","items":[{"kind":"EnumItem","name":"X","value":0}]}')


# ###############
# Files
# ###############


class TestFiles:
    def test_write_then_read(self, tmp_path: Path) -> None:
        db = Database(items=(ClassDef(name="Instance", superclass="Root"),))
        path = tmp_path / "api.json"
        write_artifact(db, path)
        assert read_artifact(path) == db

    def test_write_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "nested" / "api.json"
        write_artifact(Database(), path)
        assert path.exists()
