"""
Tests for change-aware schema loading.

Test Coverage:
    - Initial load with default parse/accept/key functions
    - Idempotence on an unchanged directory
    - Reload of changed sources only
    - Per-source failures (parse error, rejection, missing id) without aborting the batch
    - Missing source directory
    - Loading a single referenced schema by URI
"""

import json
import logging
from pathlib import Path

import pytest

from json_schema_validator import keywords as kw
from json_schema_validator.exceptions import SchemaError, SchemaNotFoundError
from json_schema_validator.models.cache_entry import LoadFailure, ParseFailure
from json_schema_validator.store.codecs import is_valid_schema, parse_yaml, schema_id
from json_schema_validator.store.schema_loader import SchemaLoader, get_secondary_key

from conftest import DRAFT4, write_source


def test_initial_load_stores_every_valid_source(loader, store, schema_dir):
    failures = loader.update(schema_dir)

    assert failures == []
    assert sorted(store.keys()) == ["person", "tag"]
    assert store.get("tag") == {"id": "tag", "type": "string", "minLength": 1}
    entry = store.entry("person")
    assert entry.secondary_key == "person"
    assert entry.timestamp == 1_000_000


def test_update_is_idempotent(loader, store, schema_dir, monkeypatch):
    assert loader.update(schema_dir) == []
    before = store.snapshot()

    reads = []
    original = SchemaLoader._load_source

    def counting_load(path, parse_fn):
        reads.append(path.name)
        return original(path, parse_fn)

    monkeypatch.setattr(SchemaLoader, "_load_source", staticmethod(counting_load))
    assert loader.update(schema_dir) == []
    assert reads == []
    assert store.snapshot() == before


def test_changed_source_is_reloaded(loader, store, schema_dir):
    loader.update(schema_dir)
    untouched = store.entry("tag")

    write_source(schema_dir, "person.json", {
        "$schema": DRAFT4,
        "id": "person",
        "type": "object",
        "required": ["name", "age"],
    }, mtime=2_000_000)
    assert loader.update(schema_dir) == []

    assert store.get("person")["required"] == ["name", "age"]
    assert store.entry("person").timestamp == 2_000_000
    assert store.entry("tag") is untouched


def test_new_source_is_picked_up(loader, store, schema_dir):
    loader.update(schema_dir)
    write_source(schema_dir, "color.json", {"id": "color", "enum": ["red", "green"]})
    assert loader.update(schema_dir) == []
    assert "color" in store


def test_malformed_source_does_not_block_others(loader, store, schema_dir):
    write_source(schema_dir, "broken.json", "{not json", mtime=1_000_000)
    write_source(schema_dir, "anonymous.json", {"type": "string"}, mtime=1_000_000)

    failures = loader.update(schema_dir)

    assert sorted(store.keys()) == ["person", "tag"]
    by_source = {failure.source_id: failure for failure in failures}
    assert set(by_source) == {"broken.json", "anonymous.json"}
    assert isinstance(by_source["broken.json"].reason, ParseFailure)
    assert by_source["anonymous.json"].reason == kw.MISSING_ID_FIELD
    assert by_source["broken.json"].timestamp == 1_000_000


def test_rejected_source_is_reported(loader, store, schema_dir):
    write_source(schema_dir, "bad.json", {"id": "bad", "type": 5})
    failures = loader.update(schema_dir)
    assert [f.source_id for f in failures] == ["bad.json"]
    assert failures[0].reason == "rejected by acceptance check"
    assert "bad" not in store


def test_accept_fn_exception_is_a_failure(loader, store, schema_dir):
    def explode(value):
        raise RuntimeError("boom")

    failures = loader.update(schema_dir, accept_fn=explode)
    assert len(failures) == 2
    assert all(isinstance(f.reason, RuntimeError) for f in failures)
    assert len(store) == 0


def test_custom_functions(loader, store, tmp_path):
    source_dir = tmp_path / "custom"
    source_dir.mkdir()
    write_source(source_dir, "one.txt", "1")
    write_source(source_dir, "two.txt", "2")

    failures = loader.update(
        source_dir,
        parse_fn=lambda raw: {"n": int(raw)},
        accept_fn=lambda value: not isinstance(value, ParseFailure),
        key_fn=lambda value: value["n"],
    )
    assert failures == []
    assert store.get(1) == {"n": 1}
    assert store.get(2) == {"n": 2}


def test_subdirectories_are_skipped(loader, store, schema_dir):
    nested = schema_dir / "nested"
    nested.mkdir()
    write_source(nested, "deep.json", {"id": "deep"})
    assert loader.update(schema_dir) == []
    assert "deep" not in store


def test_missing_directory_raises(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.update(tmp_path / "nowhere")


def test_failures_are_logged_and_sent_to_sink(store, schema_dir, caplog):
    received = []
    loader = SchemaLoader(store, on_failure=received.append)
    write_source(schema_dir, "broken.yaml", "")

    with caplog.at_level(logging.WARNING, logger="json_schema_validator"):
        failures = loader.update(schema_dir)

    assert received == failures
    assert len(failures) == 1
    assert isinstance(failures[0], LoadFailure)
    assert "broken.yaml" in caplog.text


def test_load_uri_from_path_and_file_uri(loader, store, tmp_path):
    path = write_source(tmp_path, "remote.json", {"type": "integer"})

    assert loader.load_uri(str(path)) == {"type": "integer"}
    assert store.get(str(path)) == {"type": "integer"}

    uri = path.as_uri()
    assert loader.load_uri(uri) == {"type": "integer"}
    assert uri in store


@pytest.mark.parametrize("uri", ["http://example.com/s.json", "/definitely/not/here.json"])
def test_load_uri_not_found(loader, uri):
    with pytest.raises(SchemaNotFoundError):
        loader.load_uri(uri)


def test_load_uri_unparsable_source(loader, store, tmp_path):
    path = write_source(tmp_path, "broken.json", "{not json")
    with pytest.raises(SchemaError) as excinfo:
        loader.load_uri(str(path))
    assert excinfo.value.kind == kw.SCHEMA_INVALID
    assert excinfo.value.extra["uri"] == str(path)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert str(path) not in store


def test_loaded_uri_does_not_hide_source_from_update(loader, store, tmp_path):
    path = write_source(tmp_path, "a.json", {"$schema": DRAFT4, "id": "http://example.com/a", "type": "string"})
    loader.load_uri(str(path))
    assert store.entry(str(path)).secondary_key is None

    assert loader.update(tmp_path) == []
    assert "http://example.com/a" in store
    assert str(path) in store


def test_source_rewritten_during_read_is_reloaded(loader, store, schema_dir, monkeypatch):
    original_read = Path.read_bytes

    def read_then_rewrite(path):
        raw = original_read(path)
        if path.name == "person.json":
            rewritten = {"$schema": DRAFT4, "id": "person", "type": "array"}
            write_source(schema_dir, "person.json", rewritten, mtime=2_000_000)
        return raw

    monkeypatch.setattr(Path, "read_bytes", read_then_rewrite)
    assert loader.update(schema_dir) == []
    monkeypatch.undo()
    assert store.get("person")["type"] == "object"
    assert store.entry("person").timestamp == 1_000_000

    assert loader.update(schema_dir) == []
    assert store.get("person")["type"] == "array"


def test_secondary_key_is_file_stem():
    assert get_secondary_key("person.schema.json") == "person.schema"
    assert get_secondary_key("tag.yaml") == "tag"


class TestCodecs:
    def test_parse_yaml_rejects_empty_document(self):
        with pytest.raises(ValueError):
            parse_yaml(b"")

    def test_is_valid_schema(self):
        assert is_valid_schema({"type": "string"})
        assert is_valid_schema({"$schema": DRAFT4, "required": ["a"]})
        assert not is_valid_schema({"$schema": DRAFT4, "required": True})
        assert not is_valid_schema({"$schema": "http://example.com/other#"})
        assert not is_valid_schema([1, 2])
        assert not is_valid_schema(ParseFailure(ValueError("x")))

    def test_schema_id(self):
        assert schema_id({"id": "a"}) == "a"
        with pytest.raises(KeyError):
            schema_id({"id": ""})
        with pytest.raises(KeyError):
            schema_id(json.loads("[]"))
