"""
Tests for error accumulation, results and validator-level limits.

Test Coverage:
    - Fail-fast versus collect-all, and explicit error budgets
    - Caller supplied error handler functions
    - ValidationResult helpers
    - Validation against stored schemas
    - Nesting depth bound
"""

import pytest

from json_schema_validator import keywords as kw
from json_schema_validator.config import ValidatorConfig
from json_schema_validator.exceptions import DataError, DepthLimitExceeded, SchemaError, SchemaNotFoundError
from json_schema_validator.validator.engine import ValidationOptions, Validator, validate
from json_schema_validator.validator.error_handler import ErrorHandler, ErrorMode, StopValidation

from conftest import DRAFT3, DRAFT4

CASES = [
    (
        {"$schema": DRAFT4, "type": "object", "required": ["x", "y"],
         "properties": {"a": {"type": "string"}, "b": {"minimum": 3}}},
        {"a": 1, "b": 2},
    ),
    (
        {"$schema": DRAFT4, "items": {"type": "integer", "maximum": 3}, "uniqueItems": True},
        [1, 5, "x", 1],
    ),
    (
        {"properties": {"name": {"required": True}, "tags": {"items": {"pattern": "^t"}}},
         "additionalProperties": False},
        {"tags": ["a", "tb", "c"], "other": 1},
    ),
    (
        {"$schema": DRAFT4, "oneOf": [{}, {}], "not": {"type": "null"}, "enum": [1]},
        None,
    ),
]


@pytest.mark.parametrize("schema, value", CASES)
def test_fail_fast_reports_first_collect_all_error(schema, value):
    fail_fast = validate(value, schema, ValidationOptions(error_mode=ErrorMode.FAIL_FAST))
    collect_all = validate(value, schema, ValidationOptions(error_mode=ErrorMode.COLLECT_ALL))

    assert len(fail_fast.errors) == 1
    assert len(collect_all.errors) > 1
    assert fail_fast.errors[0] == collect_all.errors[0]
    assert fail_fast.errors[0].kind == collect_all.errors[0].kind
    assert fail_fast.errors[0].path == collect_all.errors[0].path


MALFORMED = [
    ({"$schema": DRAFT4, "type": "string", "minLength": -1}, 5, kw.SCHEMA_INVALID),
    ({"$schema": DRAFT4, "required": ["x"], "properties": {"a": {"minLength": -1}}}, {"a": "s"}, kw.SCHEMA_INVALID),
    ({"$schema": DRAFT4, "type": "string", "anyOf": [{}, {"type": "bogus"}]}, 5, kw.WRONG_TYPE_SPECIFICATION),
    ({"type": "string", "disallow": "text"}, 5, kw.WRONG_TYPE_SPECIFICATION),
    (
        {"$schema": DRAFT4, "definitions": {"short": {"type": "string", "maxLength": "2"}},
         "properties": {"a": {"$ref": "#/definitions/short"}}},
        {"a": 5},
        kw.SCHEMA_INVALID,
    ),
]


@pytest.mark.parametrize("error_mode", list(ErrorMode))
@pytest.mark.parametrize("schema, value, kind", MALFORMED)
def test_malformed_schema_is_reported_in_every_mode(schema, value, kind, error_mode):
    with pytest.raises(SchemaError) as excinfo:
        validate(value, schema, ValidationOptions(error_mode=error_mode))
    assert excinfo.value.kind == kind


def test_unreferenced_definitions_are_not_checked():
    schema = {"$schema": DRAFT4, "definitions": {"unused": {"minLength": -1}}, "type": "integer"}
    assert validate(1, schema).valid


def test_collect_all_reports_errors_in_keyword_order():
    schema, value = CASES[0]
    result = validate(value, schema, ValidationOptions(error_mode=ErrorMode.COLLECT_ALL))
    assert [(e.kind, e.pointer) for e in result.errors] == [
        (kw.MISSING_REQUIRED_PROPERTY, ""),
        (kw.MISSING_REQUIRED_PROPERTY, ""),
        (kw.WRONG_TYPE, "/a"),
        (kw.NOT_IN_RANGE, "/b"),
    ]


def test_allowed_errors_budget():
    schema, value = CASES[0]
    result = validate(value, schema, ValidationOptions(allowed_errors=1))
    assert len(result.errors) == 2


def test_configured_allowed_errors(store):
    schema, value = CASES[0]
    validator = Validator(store, config=ValidatorConfig(allowed_errors=2))
    assert len(validator.validate(value, schema).errors) == 3


def test_custom_error_handler_function():
    def one_per_kind(error, errors, allowed):
        if any(e.kind == error.kind for e in errors):
            return errors
        return errors + [error]

    schema, value = CASES[0]
    options = ValidationOptions(error_mode=ErrorMode.COLLECT_ALL, error_handler=one_per_kind)
    result = validate(value, schema, options)
    assert [e.kind for e in result.errors] == [
        kw.MISSING_REQUIRED_PROPERTY, kw.WRONG_TYPE, kw.NOT_IN_RANGE,
    ]


class TestErrorHandler:
    def test_fail_fast_stops_at_first_error(self):
        handler = ErrorHandler.for_mode(ErrorMode.FAIL_FAST)
        with pytest.raises(StopValidation) as excinfo:
            handler.handle(DataError(kw.WRONG_TYPE))
        assert excinfo.value.handler is handler
        assert len(handler.errors) == 1

    def test_collect_all_never_stops(self):
        handler = ErrorHandler.for_mode(ErrorMode.COLLECT_ALL)
        for _ in range(100):
            handler.handle(DataError(kw.WRONG_TYPE))
        assert not handler.exhausted
        assert len(handler.errors) == 100

    def test_explicit_budget_overrides_mode(self):
        handler = ErrorHandler.for_mode(ErrorMode.COLLECT_ALL, allowed_errors=1)
        handler.handle(DataError(kw.WRONG_TYPE))
        with pytest.raises(StopValidation):
            handler.handle(DataError(kw.WRONG_SIZE))


class TestValidationResult:
    def test_valid_result(self):
        result = validate({"a": 1}, {"type": "object"})
        assert result.valid
        assert result.first_error is None
        assert result.raise_for_errors() == {"a": 1}
        assert result.error_summary == ""

    def test_invalid_result(self):
        result = validate("x", {"type": "integer"})
        assert not result.valid
        with pytest.raises(DataError) as excinfo:
            result.raise_for_errors()
        assert excinfo.value.kind == kw.WRONG_TYPE
        assert "wrong_type" in result.error_summary

    def test_value_and_schema_are_not_mutated(self):
        schema = {"$schema": DRAFT4, "properties": {"a": {"items": {"$ref": "#"}}}, "required": ["a"]}
        value = {"a": [{"a": []}, {"b": 1}]}
        schema_before = repr(schema)
        value_before = repr(value)
        validate(value, schema, ValidationOptions(error_mode=ErrorMode.COLLECT_ALL))
        assert repr(schema) == schema_before
        assert repr(value) == value_before


class TestValidator:
    def test_validate_with_key(self, store, validator):
        store.put_schema("person", {"$schema": DRAFT4, "required": ["name"]})
        assert validator.validate_with_key({"name": "x"}, "person").valid
        assert not validator.validate_with_key({}, "person").valid

    def test_validate_with_missing_key(self, validator):
        with pytest.raises(SchemaNotFoundError):
            validator.validate_with_key({}, "nobody")

    def test_is_valid(self, validator):
        assert validator.is_valid(1, {"type": "integer"})
        assert not validator.is_valid(1, {"type": "string"})

    def test_instance_nesting_is_bounded(self, store):
        validator = Validator(store, config=ValidatorConfig(max_depth=3))
        schema = {"items": {"$ref": "#"}}
        assert validator.is_valid([[[1]]], schema)
        with pytest.raises(DepthLimitExceeded) as excinfo:
            validator.validate([[[[1]]]], schema)
        assert excinfo.value.path == (0, 0, 0, 0)

    def test_deeply_nested_input_with_default_limit(self, validator):
        value = []
        for _ in range(500):
            value = [value]
        with pytest.raises(DepthLimitExceeded):
            validator.validate(value, {"$schema": DRAFT3, "items": {"$ref": "#"}})
