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

"""Schema keyword names, type names and error kinds."""

# ---- keywords ---------------------------------------------------------------

SCHEMA = "$schema"
ID = "id"
REF = "$ref"
TYPE = "type"
PROPERTIES = "properties"
PATTERN_PROPERTIES = "patternProperties"
ADDITIONAL_PROPERTIES = "additionalProperties"
ITEMS = "items"
ADDITIONAL_ITEMS = "additionalItems"
REQUIRED = "required"
DEPENDENCIES = "dependencies"
MINIMUM = "minimum"
MAXIMUM = "maximum"
EXCLUSIVE_MINIMUM = "exclusiveMinimum"
EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
MIN_ITEMS = "minItems"
MAX_ITEMS = "maxItems"
UNIQUE_ITEMS = "uniqueItems"
PATTERN = "pattern"
MIN_LENGTH = "minLength"
MAX_LENGTH = "maxLength"
ENUM = "enum"
FORMAT = "format"
DIVISIBLE_BY = "divisibleBy"
DISALLOW = "disallow"
EXTENDS = "extends"
ALL_OF = "allOf"
ANY_OF = "anyOf"
ONE_OF = "oneOf"
NOT = "not"
MULTIPLE_OF = "multipleOf"
MAX_PROPERTIES = "maxProperties"
MIN_PROPERTIES = "minProperties"

# ---- type names ---------------------------------------------------------------

ANY = "any"
TYPE_NAMES = ("any", "array", "boolean", "integer", "null", "number", "object", "string")

# ---- schema error kinds -------------------------------------------------------

SCHEMA_INVALID = "schema_invalid"
SCHEMA_UNSUPPORTED = "schema_unsupported"
INVALID_DEPENDENCY = "invalid_dependency"
WRONG_ALL_OF_SCHEMA_ARRAY = "wrong_all_of_schema_array"
WRONG_ANY_OF_SCHEMA_ARRAY = "wrong_any_of_schema_array"
WRONG_ONE_OF_SCHEMA_ARRAY = "wrong_one_of_schema_array"
WRONG_NOT_SCHEMA = "wrong_not_schema"
WRONG_MAX_PROPERTIES = "wrong_max_properties"
WRONG_MIN_PROPERTIES = "wrong_min_properties"
WRONG_MULTIPLE_OF = "wrong_multiple_of"
WRONG_DIVISIBLE_BY = "wrong_divisible_by"
WRONG_REQUIRED_ARRAY = "wrong_required_array"
WRONG_TYPE_ITEMS = "wrong_type_items"
WRONG_TYPE_DEPENDENCY = "wrong_type_dependency"
WRONG_TYPE_SPECIFICATION = "wrong_type_specification"

# ---- data error kinds -----------------------------------------------------------

DATA_INVALID = "data_invalid"
WRONG_TYPE = "wrong_type"
MISSING_ID_FIELD = "missing_id_field"
MISSING_REQUIRED_PROPERTY = "missing_required_property"
MISSING_DEPENDENCY = "missing_dependency"
NO_MATCH = "no_match"
NO_EXTRA_PROPERTIES_ALLOWED = "no_extra_properties_allowed"
NO_EXTRA_ITEMS_ALLOWED = "no_extra_items_allowed"
NOT_ALLOWED = "not_allowed"
NOT_UNIQUE = "not_unique"
NOT_IN_RANGE = "not_in_range"
NOT_IN_ENUM = "not_in_enum"
NOT_DIVISIBLE = "not_divisible"
NOT_MULTIPLE_OF = "not_multiple_of"
WRONG_SIZE = "wrong_size"
WRONG_LENGTH = "wrong_length"
WRONG_FORMAT = "wrong_format"
TOO_MANY_PROPERTIES = "too_many_properties"
TOO_FEW_PROPERTIES = "too_few_properties"
ALL_SCHEMAS_NOT_VALID = "all_schemas_not_valid"
ANY_SCHEMAS_NOT_VALID = "any_schemas_not_valid"
NOT_ONE_SCHEMA_VALID = "not_one_schema_valid"
NO_SCHEMA_VALID = "no_schema_valid"
NOT_SCHEMA_VALID = "not_schema_valid"
