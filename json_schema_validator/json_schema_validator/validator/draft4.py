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

"""Draft-4 keyword semantics."""

from .. import keywords as kw
from ..utils.json_values import ValueKind
from .base import BaseDraftValidator, _is_schema_array


class Draft4Validator(BaseDraftValidator):
    """Validator for draft-4 schemas, adding the combinators and property counts."""

    KEYWORDS = {
        kw.TYPE: "type",
        kw.PROPERTIES: "properties",
        kw.PATTERN_PROPERTIES: "pattern_properties",
        kw.ADDITIONAL_PROPERTIES: "additional_properties",
        kw.ITEMS: "items",
        kw.ADDITIONAL_ITEMS: "additional_items",
        kw.REQUIRED: "required",
        kw.DEPENDENCIES: "dependencies",
        kw.MINIMUM: "minimum",
        kw.MAXIMUM: "maximum",
        kw.EXCLUSIVE_MINIMUM: "exclusive_minimum",
        kw.EXCLUSIVE_MAXIMUM: "exclusive_maximum",
        kw.MIN_ITEMS: "min_items",
        kw.MAX_ITEMS: "max_items",
        kw.UNIQUE_ITEMS: "unique_items",
        kw.PATTERN: "pattern",
        kw.MIN_LENGTH: "min_length",
        kw.MAX_LENGTH: "max_length",
        kw.ENUM: "enum",
        kw.FORMAT: "format",
        kw.MULTIPLE_OF: "multiple_of",
        kw.MAX_PROPERTIES: "max_properties",
        kw.MIN_PROPERTIES: "min_properties",
        kw.ALL_OF: "all_of",
        kw.ANY_OF: "any_of",
        kw.ONE_OF: "one_of",
        kw.NOT: "not",
        kw.REF: "ref",
    }

    def shape_required(self, param, schema, context):
        if not isinstance(param, list) or not all(isinstance(name, str) for name in param):
            raise context.schema_error(kw.WRONG_REQUIRED_ARRAY, value=param)

    def check_required(self, value, kind, param, schema, context):
        if kind is not ValueKind.OBJECT:
            return
        for name in param:
            if name not in value:
                context.report(kw.MISSING_REQUIRED_PROPERTY, property=name)

    def shape_multiple_of(self, param, schema, context):
        self._divisor_param(
            param, context,
            keyword=kw.MULTIPLE_OF,
            schema_kind=kw.WRONG_MULTIPLE_OF,
            strictly_positive=True,
        )

    def check_multiple_of(self, value, kind, param, schema, context):
        self._check_divisor(value, kind, param, context, kw.NOT_MULTIPLE_OF)

    def shape_max_properties(self, param, schema, context):
        self._size_param(param, kw.MAX_PROPERTIES, context, kw.WRONG_MAX_PROPERTIES)

    def check_max_properties(self, value, kind, param, schema, context):
        if kind is ValueKind.OBJECT and len(value) > param:
            context.report(kw.TOO_MANY_PROPERTIES, max_properties=param, actual=len(value))

    def shape_min_properties(self, param, schema, context):
        self._size_param(param, kw.MIN_PROPERTIES, context, kw.WRONG_MIN_PROPERTIES)

    def check_min_properties(self, value, kind, param, schema, context):
        if kind is ValueKind.OBJECT and len(value) < param:
            context.report(kw.TOO_FEW_PROPERTIES, min_properties=param, actual=len(value))

    # ---- combinators ------------------------------------------------------
    # Sub-schemas are checked in isolation; a failure is reported once, for the
    # combinator, with the sub-schema errors attached.

    def shape_all_of(self, param, schema, context):
        if not _is_schema_array(param):
            raise context.schema_error(kw.WRONG_ALL_OF_SCHEMA_ARRAY, value=param)

    def check_all_of(self, value, kind, param, schema, context):
        for index, sub_schema in enumerate(param):
            errors = self.sub_errors(value, sub_schema, context)
            if errors:
                context.report(kw.ALL_SCHEMAS_NOT_VALID, failed=index, errors=errors)
                return

    def shape_any_of(self, param, schema, context):
        if not _is_schema_array(param):
            raise context.schema_error(kw.WRONG_ANY_OF_SCHEMA_ARRAY, value=param)

    def check_any_of(self, value, kind, param, schema, context):
        collected = []
        for sub_schema in param:
            errors = self.sub_errors(value, sub_schema, context)
            if not errors:
                return
            collected.extend(errors)
        context.report(kw.ANY_SCHEMAS_NOT_VALID, errors=collected)

    def shape_one_of(self, param, schema, context):
        if not _is_schema_array(param):
            raise context.schema_error(kw.WRONG_ONE_OF_SCHEMA_ARRAY, value=param)

    def check_one_of(self, value, kind, param, schema, context):
        matched = []
        collected = []
        for index, sub_schema in enumerate(param):
            errors = self.sub_errors(value, sub_schema, context)
            if errors:
                collected.extend(errors)
            else:
                matched.append(index)
        if not matched:
            context.report(kw.NO_SCHEMA_VALID, errors=collected)
        elif len(matched) > 1:
            context.report(kw.NOT_ONE_SCHEMA_VALID, matched=matched)

    def shape_not(self, param, schema, context):
        if not isinstance(param, dict):
            raise context.schema_error(kw.WRONG_NOT_SCHEMA, value=param)

    def check_not(self, value, kind, param, schema, context):
        if self.is_valid(value, param, context):
            context.report(kw.NOT_SCHEMA_VALID)
