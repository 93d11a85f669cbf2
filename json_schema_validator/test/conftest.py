"""
Pytest configuration and shared fixtures for the test suite.

Provides:
- An empty schema store and a loader bound to it
- A schema directory populated with a few valid and invalid sources
- A helper that writes a schema source with a chosen modification time
"""

import json
import os

import pytest

from json_schema_validator.store.schema_loader import SchemaLoader
from json_schema_validator.store.schema_store import SchemaStore
from json_schema_validator.validator.engine import ValidationOptions, Validator
from json_schema_validator.validator.error_handler import ErrorMode

DRAFT3 = "http://json-schema.org/draft-03/schema#"
DRAFT4 = "http://json-schema.org/draft-04/schema#"


def write_source(directory, name, content, mtime=None):
    """Write a schema source (dict -> JSON, str -> raw text) and optionally pin its mtime."""
    path = directory / name
    if isinstance(content, (dict, list)):
        path.write_text(json.dumps(content))
    else:
        path.write_text(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def store():
    return SchemaStore()


@pytest.fixture
def loader(store):
    return SchemaLoader(store)


@pytest.fixture
def validator(store):
    return Validator(store)


@pytest.fixture
def collect_all():
    return ValidationOptions(error_mode=ErrorMode.COLLECT_ALL)


@pytest.fixture
def schema_dir(tmp_path):
    """Directory with two valid schemas, one without id and one that is not JSON."""
    source_dir = tmp_path / "schemas"
    source_dir.mkdir()
    write_source(source_dir, "person.json", {
        "$schema": DRAFT4,
        "id": "person",
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "required": ["name"],
    }, mtime=1_000_000)
    write_source(source_dir, "tag.yaml", "id: tag\ntype: string\nminLength: 1\n", mtime=1_000_000)
    return source_dir
