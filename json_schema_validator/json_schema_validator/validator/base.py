# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Keyword checks shared by the draft-3 and draft-4 validators.

Each keyword has up to two methods, named after the suffix listed in
``KEYWORDS``:

* ``shape_<suffix>(param, schema, context)`` raises :class:`SchemaError` when
  the keyword's declared value ``param`` is malformed.
* ``check_<suffix>(value, kind, param, schema, context)`` applies the keyword
  to an instance value of a kind it constrains.

Shapes are checked for a whole schema document (:meth:`check_schema`) before
any instance check runs against it, so a malformed schema is reported the same
way whatever the error mode.
"""

from __future__ import annotations

import re
from abc import ABC
from typing import Any, Callable, Dict, List

from .. import keywords as kw
from ..exceptions import DataError
from ..utils.json_values import (
    ValueKind,
    is_integral,
    is_multiple_of,
    is_number,
    json_equal,
    value_kind,
)
from .context import ValidationContext
from .error_handler import StopValidation

Handler = Callable[[Any, ValueKind, Any, dict, ValidationContext], None]
ShapeCheck = Callable[[Any, dict, ValidationContext], None]

# keywords whose value maps names to sub-schemas
_SCHEMA_MAPS = (kw.PROPERTIES, kw.PATTERN_PROPERTIES, kw.DEPENDENCIES)
# keywords whose value is a sub-schema or a list holding sub-schemas
_SCHEMA_VALUES = (
    kw.ITEMS, kw.ADDITIONAL_PROPERTIES, kw.ADDITIONAL_ITEMS, kw.TYPE, kw.DISALLOW,
    kw.EXTENDS, kw.ALL_OF, kw.ANY_OF, kw.ONE_OF, kw.NOT,
)


def _is_non_negative_int(param: Any) -> bool:
    return isinstance(param, int) and not isinstance(param, bool) and param >= 0


def _is_schema_array(param: Any) -> bool:
    return isinstance(param, list) and len(param) > 0 and all(isinstance(s, dict) for s in param)


def _nested_schemas(keyword: str, param: Any) -> List[dict]:
    if keyword in _SCHEMA_MAPS:
        return [s for s in param.values() if isinstance(s, dict)]
    if keyword in _SCHEMA_VALUES:
        if isinstance(param, dict):
            return [param]
        if isinstance(param, list):
            return [s for s in param if isinstance(s, dict)]
    return []


class BaseDraftValidator(ABC):
    """Recursive keyword engine; subclasses pick the keyword set of one draft."""

    # keyword -> suffix of its shape_/check_ methods; keywords not listed are ignored
    KEYWORDS: Dict[str, str] = {}

    def __init__(self):
        self._shapes: Dict[str, ShapeCheck] = {}
        self._handlers: Dict[str, Handler] = {}
        for keyword, suffix in self.KEYWORDS.items():
            shape = getattr(self, f"shape_{suffix}", None)
            if shape is not None:
                self._shapes[keyword] = shape
            handler = getattr(self, f"check_{suffix}", None)
            if handler is not None:
                self._handlers[keyword] = handler

    # ---- entry points -----------------------------------------------------

    def check_schema(self, schema: Any, context: ValidationContext) -> None:
        """Check the keyword values of *schema* and of every sub-schema it nests.

        ``$ref`` targets are not followed here; they are checked once resolved.
        Each node is checked at most once per validation call.
        """
        checked = context.session.checked_schemas
        if id(schema) in checked:
            return
        if not isinstance(schema, dict):
            raise context.schema_error(kw.SCHEMA_INVALID, schema=schema)
        checked[id(schema)] = schema

        for keyword, param in schema.items():
            shape = self._shapes.get(keyword)
            if shape is None:
                continue
            shape(param, schema, context)
            for sub_schema in _nested_schemas(keyword, param):
                self.check_schema(sub_schema, context)

    def validate_node(self, value: Any, schema: dict, context: ValidationContext) -> None:
        """Apply every keyword of an already checked *schema* to *value*."""
        schema_id = schema.get(kw.ID)
        if isinstance(schema_id, str) and schema_id:
            context = context.with_base(schema_id)

        kind = value_kind(value)
        if kind is None:
            context.report(kw.DATA_INVALID, value_type=type(value).__name__)
            return

        for keyword, param in schema.items():
            handler = self._handlers.get(keyword)
            if handler is not None:
                handler(value, kind, param, schema, context)

    @staticmethod
    def validate_sub(value: Any, schema: dict, context: ValidationContext) -> None:
        """Validate with the engine of the context's draft (which may differ after a $ref)."""
        context.validator.validate_node(value, schema, context)

    def sub_errors(self, value: Any, schema: dict, context: ValidationContext) -> List[DataError]:
        """Validate in isolation and return the (at most one) error found."""
        child = context.isolated()
        try:
            self.validate_sub(value, schema, child)
        except StopValidation as stop:
            if stop.handler is not child.handler:
                raise
        return child.handler.errors

    def is_valid(self, value: Any, schema: dict, context: ValidationContext) -> bool:
        return not self.sub_errors(value, schema, context)

    # ---- helpers ----------------------------------------------------------

    def compile_pattern(self, pattern: Any, context: ValidationContext, keyword: str):
        if not isinstance(pattern, str):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=keyword, value=pattern)
        cache = context.session.patterns
        compiled = cache.get(pattern)
        if compiled is None:
            try:
                compiled = re.compile(pattern)
            except re.error as e:
                raise context.schema_error(
                    kw.SCHEMA_INVALID, keyword=keyword, value=pattern, reason=str(e)
                ) from None
            cache[pattern] = compiled
        return compiled

    def check_type_spec(self, type_spec: Any, context: ValidationContext) -> None:
        if not isinstance(type_spec, str) or type_spec not in kw.TYPE_NAMES:
            raise context.schema_error(kw.WRONG_TYPE_SPECIFICATION, value=type_spec)

    def type_matches(self, value: Any, kind: ValueKind, type_spec: Any, context: ValidationContext) -> bool:
        """Does *value* match a single, already checked, type name?"""
        if type_spec == kw.ANY:
            return True
        if type_spec == ValueKind.INTEGER.value:
            return is_integral(value)
        if type_spec == ValueKind.NUMBER.value:
            return kind in (ValueKind.INTEGER, ValueKind.NUMBER)
        return kind.value == type_spec

    def _type_alternatives(self, param: Any, context: ValidationContext) -> list:
        alternatives = param if isinstance(param, list) else [param]
        if not alternatives:
            raise context.schema_error(kw.WRONG_TYPE_SPECIFICATION, value=param)
        for type_spec in alternatives:
            self.check_type_spec(type_spec, context)
        return alternatives

    def _number_param(self, param: Any, keyword: str, context: ValidationContext, error_kind: str = kw.SCHEMA_INVALID):
        if not is_number(param):
            raise context.schema_error(error_kind, keyword=keyword, value=param)

    def _size_param(self, param: Any, keyword: str, context: ValidationContext, error_kind: str = kw.SCHEMA_INVALID):
        if not _is_non_negative_int(param):
            raise context.schema_error(error_kind, keyword=keyword, value=param)

    def _bool_param(self, param: Any, keyword: str, context: ValidationContext):
        if not isinstance(param, bool):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=keyword, value=param)

    def _schema_map_param(self, param: Any, keyword: str, context: ValidationContext):
        if not isinstance(param, dict) or not all(isinstance(s, dict) for s in param.values()):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=keyword, value=param)

    def _schema_or_bool_param(self, param: Any, keyword: str, context: ValidationContext):
        if not isinstance(param, (bool, dict)):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=keyword, value=param)

    # ---- type -------------------------------------------------------------

    def shape_type(self, param, schema, context):
        self._type_alternatives(param, context)

    def check_type(self, value, kind, param, schema, context):
        alternatives = param if isinstance(param, list) else [param]
        if not any(self.type_matches(value, kind, t, context) for t in alternatives):
            context.report(kw.WRONG_TYPE, expected=param, actual=kind.value)

    # ---- objects ----------------------------------------------------------

    def shape_properties(self, param, schema, context):
        self._schema_map_param(param, kw.PROPERTIES, context)

    def check_properties(self, value, kind, param, schema, context):
        if kind is not ValueKind.OBJECT:
            return
        for name, sub_schema in param.items():
            if name in value:
                self.validate_sub(value[name], sub_schema, context.descend(name))
            else:
                self.check_absent_property(name, sub_schema, context)

    def check_absent_property(self, name: str, sub_schema: dict, context: ValidationContext) -> None:
        """Hook for drafts that declare requiredness on the property schema itself."""
        return None

    def shape_pattern_properties(self, param, schema, context):
        self._schema_map_param(param, kw.PATTERN_PROPERTIES, context)
        for pattern in param:
            self.compile_pattern(pattern, context, kw.PATTERN_PROPERTIES)

    def check_pattern_properties(self, value, kind, param, schema, context):
        if kind is not ValueKind.OBJECT:
            return
        compiled = [
            (self.compile_pattern(p, context, kw.PATTERN_PROPERTIES), s) for p, s in param.items()
        ]
        for name, item in value.items():
            for regex, sub_schema in compiled:
                if regex.search(name):
                    self.validate_sub(item, sub_schema, context.descend(name))

    def shape_additional_properties(self, param, schema, context):
        self._schema_or_bool_param(param, kw.ADDITIONAL_PROPERTIES, context)

    def check_additional_properties(self, value, kind, param, schema, context):
        if kind is not ValueKind.OBJECT or param is True:
            return

        properties = schema.get(kw.PROPERTIES)
        properties = properties if isinstance(properties, dict) else {}
        patterns = schema.get(kw.PATTERN_PROPERTIES)
        patterns = patterns if isinstance(patterns, dict) else {}
        regexes = [self.compile_pattern(p, context, kw.PATTERN_PROPERTIES) for p in patterns]

        extras = [
            name for name in value
            if name not in properties and not any(r.search(name) for r in regexes)
        ]
        if not extras:
            return
        if param is False:
            context.report(kw.NO_EXTRA_PROPERTIES_ALLOWED, properties=extras)
            return
        for name in extras:
            self.validate_sub(value[name], param, context.descend(name))

    def shape_dependencies(self, param, schema, context):
        if not isinstance(param, dict):
            raise context.schema_error(kw.WRONG_TYPE_DEPENDENCY, value=param)
        for name, dependency in param.items():
            self.normalize_dependency(name, dependency, context)

    def check_dependencies(self, value, kind, param, schema, context):
        if kind is not ValueKind.OBJECT:
            return
        for name, dependency in param.items():
            if name not in value:
                continue
            dependency = self.normalize_dependency(name, dependency, context)
            if isinstance(dependency, dict):
                self.validate_sub(value, dependency, context)
                continue
            for required in dependency:
                if required not in value:
                    context.report(kw.MISSING_DEPENDENCY, property=name, dependency=required)

    def normalize_dependency(self, name: str, dependency: Any, context: ValidationContext):
        """Return a schema or a list of property names, or raise for other shapes."""
        if isinstance(dependency, dict):
            return dependency
        if isinstance(dependency, list) and all(isinstance(d, str) for d in dependency):
            return dependency
        raise context.schema_error(kw.INVALID_DEPENDENCY, property=name, value=dependency)

    # ---- numbers ----------------------------------------------------------

    def shape_minimum(self, param, schema, context):
        self._number_param(param, kw.MINIMUM, context)

    def check_minimum(self, value, kind, param, schema, context):
        exclusive = schema.get(kw.EXCLUSIVE_MINIMUM, False) is True
        if kind not in (ValueKind.INTEGER, ValueKind.NUMBER):
            return
        if value < param or (exclusive and value == param):
            context.report(kw.NOT_IN_RANGE, minimum=param, exclusive=exclusive)

    def shape_maximum(self, param, schema, context):
        self._number_param(param, kw.MAXIMUM, context)

    def check_maximum(self, value, kind, param, schema, context):
        exclusive = schema.get(kw.EXCLUSIVE_MAXIMUM, False) is True
        if kind not in (ValueKind.INTEGER, ValueKind.NUMBER):
            return
        if value > param or (exclusive and value == param):
            context.report(kw.NOT_IN_RANGE, maximum=param, exclusive=exclusive)

    # exclusiveMinimum/exclusiveMaximum only modify their sibling bound,
    # so they have no check of their own
    def shape_exclusive_minimum(self, param, schema, context):
        self._bool_param(param, kw.EXCLUSIVE_MINIMUM, context)

    def shape_exclusive_maximum(self, param, schema, context):
        self._bool_param(param, kw.EXCLUSIVE_MAXIMUM, context)

    def _divisor_param(self, param, context, keyword, schema_kind, strictly_positive):
        self._number_param(param, keyword, context, schema_kind)
        if param == 0 or (strictly_positive and param < 0):
            raise context.schema_error(schema_kind, keyword=keyword, value=param)

    def _check_divisor(self, value, kind, divisor, context, data_kind):
        if kind not in (ValueKind.INTEGER, ValueKind.NUMBER):
            return
        if not is_multiple_of(value, divisor):
            context.report(data_kind, divisor=divisor)

    # ---- arrays -----------------------------------------------------------

    def shape_items(self, param, schema, context):
        if isinstance(param, dict):
            return
        if not isinstance(param, list) or not all(isinstance(s, dict) for s in param):
            raise context.schema_error(kw.WRONG_TYPE_ITEMS, value=param)

    def check_items(self, value, kind, param, schema, context):
        if kind is not ValueKind.ARRAY:
            return
        if isinstance(param, dict):
            for index, item in enumerate(value):
                self.validate_sub(item, param, context.descend(index))
            return
        for index, (item, sub_schema) in enumerate(zip(value, param)):
            self.validate_sub(item, sub_schema, context.descend(index))

    def shape_additional_items(self, param, schema, context):
        self._schema_or_bool_param(param, kw.ADDITIONAL_ITEMS, context)

    def check_additional_items(self, value, kind, param, schema, context):
        items = schema.get(kw.ITEMS)
        # only meaningful next to positional items
        if kind is not ValueKind.ARRAY or not isinstance(items, list) or param is True:
            return
        if len(value) <= len(items):
            return
        if param is False:
            context.report(kw.NO_EXTRA_ITEMS_ALLOWED, allowed=len(items), actual=len(value))
            return
        for index in range(len(items), len(value)):
            self.validate_sub(value[index], param, context.descend(index))

    def shape_min_items(self, param, schema, context):
        self._size_param(param, kw.MIN_ITEMS, context)

    def check_min_items(self, value, kind, param, schema, context):
        if kind is ValueKind.ARRAY and len(value) < param:
            context.report(kw.WRONG_SIZE, min_items=param, actual=len(value))

    def shape_max_items(self, param, schema, context):
        self._size_param(param, kw.MAX_ITEMS, context)

    def check_max_items(self, value, kind, param, schema, context):
        if kind is ValueKind.ARRAY and len(value) > param:
            context.report(kw.WRONG_SIZE, max_items=param, actual=len(value))

    def shape_unique_items(self, param, schema, context):
        self._bool_param(param, kw.UNIQUE_ITEMS, context)

    def check_unique_items(self, value, kind, param, schema, context):
        if not param or kind is not ValueKind.ARRAY:
            return
        for index in range(1, len(value)):
            for earlier in range(index):
                if json_equal(value[earlier], value[index]):
                    context.report(kw.NOT_UNIQUE, item=value[index], index=index, duplicate_of=earlier)
                    return

    # ---- strings ----------------------------------------------------------

    def shape_pattern(self, param, schema, context):
        self.compile_pattern(param, context, kw.PATTERN)

    def check_pattern(self, value, kind, param, schema, context):
        if kind is ValueKind.STRING and not self.compile_pattern(param, context, kw.PATTERN).search(value):
            context.report(kw.NO_MATCH, pattern=param)

    def shape_min_length(self, param, schema, context):
        self._size_param(param, kw.MIN_LENGTH, context)

    def check_min_length(self, value, kind, param, schema, context):
        # len() of a str counts code points
        if kind is ValueKind.STRING and len(value) < param:
            context.report(kw.WRONG_LENGTH, min_length=param, actual=len(value))

    def shape_max_length(self, param, schema, context):
        self._size_param(param, kw.MAX_LENGTH, context)

    def check_max_length(self, value, kind, param, schema, context):
        if kind is ValueKind.STRING and len(value) > param:
            context.report(kw.WRONG_LENGTH, max_length=param, actual=len(value))

    def shape_format(self, param, schema, context):
        if not isinstance(param, str):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=kw.FORMAT, value=param)

    def check_format(self, value, kind, param, schema, context):
        checker = context.session.format_checker
        if checker is not None and not checker(param, value):
            context.report(kw.WRONG_FORMAT, format=param)

    # ---- any kind ---------------------------------------------------------

    def shape_enum(self, param, schema, context):
        if not isinstance(param, list) or not param:
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=kw.ENUM, value=param)

    def check_enum(self, value, kind, param, schema, context):
        if not any(json_equal(value, candidate) for candidate in param):
            context.report(kw.NOT_IN_ENUM, enum=param)

    def shape_ref(self, param, schema, context):
        if not isinstance(param, str):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=kw.REF, value=param)

    def check_ref(self, value, kind, param, schema, context):
        resolution = context.session.resolver(schema, context)
        target_context = resolution.context
        target_context.validator.check_schema(resolution.schema, target_context)
        self.validate_sub(value, resolution.schema, target_context)
