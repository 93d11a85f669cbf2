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

"""Draft-3 keyword semantics."""

from typing import Any

from .. import keywords as kw
from .base import BaseDraftValidator
from .context import ValidationContext


class Draft3Validator(BaseDraftValidator):
    """Validator for draft-3 schemas.

    Differences from draft-4: ``required`` is a boolean on the property's own
    schema, ``type`` and ``disallow`` may list schemas next to type names,
    ``dependencies`` may name a single property, and ``divisibleBy`` /
    ``extends`` replace ``multipleOf`` / ``allOf``.
    """

    KEYWORDS = {
        kw.TYPE: "type",
        kw.PROPERTIES: "properties",
        kw.PATTERN_PROPERTIES: "pattern_properties",
        kw.ADDITIONAL_PROPERTIES: "additional_properties",
        kw.ITEMS: "items",
        kw.ADDITIONAL_ITEMS: "additional_items",
        kw.REQUIRED: "required_flag",
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
        kw.DIVISIBLE_BY: "divisible_by",
        kw.DISALLOW: "disallow",
        kw.EXTENDS: "extends",
        kw.REF: "ref",
    }

    def check_type_spec(self, type_spec: Any, context: ValidationContext) -> None:
        if isinstance(type_spec, dict):
            return
        super().check_type_spec(type_spec, context)

    def type_matches(self, value, kind, type_spec, context) -> bool:
        if isinstance(type_spec, dict):
            return self.is_valid(value, type_spec, context)
        return super().type_matches(value, kind, type_spec, context)

    # evaluated by the parent's "properties" check
    def shape_required_flag(self, param, schema, context):
        self._bool_param(param, kw.REQUIRED, context)

    def check_absent_property(self, name, sub_schema, context):
        if sub_schema.get(kw.REQUIRED, False) is True:
            context.report(kw.MISSING_REQUIRED_PROPERTY, property=name)

    def normalize_dependency(self, name, dependency, context):
        if isinstance(dependency, str):
            return [dependency]
        return super().normalize_dependency(name, dependency, context)

    def shape_divisible_by(self, param, schema, context):
        self._divisor_param(
            param, context,
            keyword=kw.DIVISIBLE_BY,
            schema_kind=kw.WRONG_DIVISIBLE_BY,
            strictly_positive=False,
        )

    def check_divisible_by(self, value, kind, param, schema, context):
        self._check_divisor(value, kind, param, context, kw.NOT_DIVISIBLE)

    def shape_disallow(self, param, schema, context):
        self._type_alternatives(param, context)

    def check_disallow(self, value, kind, param, schema, context):
        alternatives = param if isinstance(param, list) else [param]
        if any(self.type_matches(value, kind, t, context) for t in alternatives):
            context.report(kw.NOT_ALLOWED, disallowed=param, actual=kind.value)

    def shape_extends(self, param, schema, context):
        parents = param if isinstance(param, list) else [param]
        if not all(isinstance(parent, dict) for parent in parents):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=kw.EXTENDS, value=param)

    def check_extends(self, value, kind, param, schema, context):
        for parent in param if isinstance(param, list) else [param]:
            self.validate_sub(value, parent, context)
