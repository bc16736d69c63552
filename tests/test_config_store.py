"""Tests for the JSON-backed configuration store."""

import json
from pathlib import Path

import pytest

from config_store import ConfigDocument, StorageError, open_config


def read_json(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))


class TestOpen:
    def test_missing_file_is_created_empty(self, config_path):
        open_config(config_path)
        assert read_json(config_path) == {}

    def test_parent_directories_are_created(self, tmp_path):
        path = tmp_path / "a" / "b" / "friendsverifier.json"
        open_config(path)
        assert read_json(path) == {}

    def test_existing_file_is_loaded(self, config_path):
        config_path.write_text('{"Language": "zh-CN"}', encoding="utf-8")
        doc = ConfigDocument.open(config_path)
        assert doc.get("Language") == "zh-CN"

    def test_invalid_json_raises(self, config_path):
        config_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            open_config(config_path)

    def test_non_object_raises(self, config_path):
        config_path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StorageError, match="JSON object"):
            open_config(config_path)

    def test_uncreatable_path_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("I am a file", encoding="utf-8")
        with pytest.raises(StorageError):
            open_config(blocker / "friendsverifier.json")


class TestGet:
    def test_missing_key_is_none(self, doc):
        assert doc.get("Users") is None
        assert "Users" not in doc

    def test_scalars_come_back_as_strings(self, config_path):
        config_path.write_text('{"n": 5, "f": 1.5, "b": true, "s": "x"}', encoding="utf-8")
        doc = open_config(config_path)
        assert doc.get("n") == "5"
        assert doc.get("f") == "1.5"
        assert doc.get("b") == "true"
        assert doc.get("s") == "x"

    def test_structured_values_are_absent(self, config_path):
        config_path.write_text('{"o": {"a": 1}, "l": [1], "z": null}', encoding="utf-8")
        doc = open_config(config_path)
        assert doc.get("o") is None
        assert doc.get("l") is None
        assert doc.get("z") is None


class TestSet:
    def test_round_trip(self, doc):
        value = '{"Alice":"secret1"}'
        doc.set("Users", value)
        assert doc.get("Users") == value
        assert read_json(doc.path)["Users"] == value

    def test_other_keys_unchanged(self, config_path):
        config_path.write_text('{"Language": "en-US", "Extra": {"keep": [1, 2]}}', encoding="utf-8")
        doc = open_config(config_path)
        doc.set("Users", "{}")
        assert read_json(config_path) == {
            "Language": "en-US",
            "Extra": {"keep": [1, 2]},
            "Users": "{}",
        }

    def test_external_edits_since_open_survive(self, config_path):
        doc = open_config(config_path)
        config_path.write_text('{"Edited": "outside"}', encoding="utf-8")
        doc.set("Language", "default")
        assert read_json(config_path) == {"Edited": "outside", "Language": "default"}

    def test_file_corrupted_after_open_raises(self, config_path):
        doc = open_config(config_path)
        config_path.write_text("garbage", encoding="utf-8")
        with pytest.raises(StorageError):
            doc.set("Language", "default")

    def test_non_ascii_is_kept_readable(self, doc):
        doc.set("Language", "中文")
        with open(doc.path, encoding="utf-8") as f:
            assert "中文" in f.read()


class TestEnsureDefault:
    def test_defaults_written_when_absent(self, doc):
        doc.ensure_default("Users", "{}")
        doc.ensure_default("Language", "default")
        assert doc.get("Users") == "{}"
        assert doc.get("Language") == "default"
        assert read_json(doc.path) == {"Users": "{}", "Language": "default"}

    def test_empty_value_is_replaced(self, config_path):
        config_path.write_text('{"Language": ""}', encoding="utf-8")
        doc = open_config(config_path)
        doc.ensure_default("Language", "default")
        assert doc.get("Language") == "default"

    def test_existing_value_is_kept(self, config_path):
        config_path.write_text('{"Language": "zh-CN"}', encoding="utf-8")
        doc = open_config(config_path)
        doc.ensure_default("Language", "default")
        assert doc.get("Language") == "zh-CN"
