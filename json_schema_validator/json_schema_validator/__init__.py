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

"""JSON schema validation for draft-3 and draft-4 schemas."""

from .exceptions import (
    BrokenReferenceError,
    CyclicReferenceError,
    DataError,
    DepthLimitExceeded,
    SchemaError,
    SchemaNotFoundError,
    SchemaValidatorError,
)
from .models.validation_result import ValidationResult
from .resolvers.ref_resolver import RefResolver
from .store.schema_loader import SchemaLoader
from .store.schema_store import SchemaStore
from .utils.draft_version import Draft
from .validator.engine import ValidationOptions, Validator, validate
from .validator.error_handler import ErrorMode

__version__ = "0.1.0"

__all__ = [
    "validate",
    "Validator",
    "ValidationOptions",
    "ValidationResult",
    "SchemaStore",
    "SchemaLoader",
    "RefResolver",
    "ErrorMode",
    "Draft",
    "SchemaValidatorError",
    "SchemaError",
    "CyclicReferenceError",
    "BrokenReferenceError",
    "DataError",
    "SchemaNotFoundError",
    "DepthLimitExceeded",
]
