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

"""Public validation entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, Union
from urllib.parse import urldefrag

from .. import keywords as kw
from ..config import ValidatorConfig, validator_config
from ..exceptions import DepthLimitExceeded
from ..models.validation_result import ValidationResult
from ..resolvers.ref_resolver import RefResolver
from ..store.schema_loader import SchemaLoader
from ..store.schema_store import SchemaStore
from ..utils.draft_version import Draft, detect_draft, parse_draft
from .context import FormatChecker, SchemaLoaderFn, ValidationContext, ValidationSession
from .error_handler import ErrorHandler, ErrorHandlerFn, ErrorMode, StopValidation
from .factory import ValidatorFactory


@dataclass
class ValidationOptions:
    """Per-call settings; unset fields fall back to the validator's configuration."""

    draft: Optional[Union[str, Draft]] = None
    error_mode: ErrorMode = ErrorMode.FAIL_FAST
    allowed_errors: Optional[int] = None
    error_handler: Optional[ErrorHandlerFn] = None
    ref_resolver: Optional[Callable[..., Any]] = None
    schema_loader: Optional[SchemaLoaderFn] = None
    format_checker: Optional[FormatChecker] = None


class Validator:
    """Reusable validator bound to one schema store.

    Validators hold no per-call state, so one instance may be shared between
    threads; the store is the only shared mutable resource.
    """

    def __init__(
        self,
        store: Optional[SchemaStore] = None,
        config: Optional[ValidatorConfig] = None,
        schema_loader: Optional[SchemaLoaderFn] = None,
        ref_resolver: Optional[Callable[..., Any]] = None,
        format_checker: Optional[FormatChecker] = None,
    ):
        self.store = store if store is not None else SchemaStore()
        self.config = config or validator_config
        # referenced documents missing from the store are read from the local filesystem
        self.schema_loader = schema_loader or SchemaLoader(self.store).load_uri
        self.ref_resolver = ref_resolver or RefResolver()
        self.format_checker = format_checker
        self._validators = ValidatorFactory.all_validators()

    def validate(self, value: Any, schema: Any, options: Optional[ValidationOptions] = None) -> ValidationResult:
        """Validate *value* against *schema*.

        Data errors are returned in the result; at most one in fail-fast mode.

        Raises:
            SchemaError: If the schema (or a schema it references) is malformed.
            SchemaNotFoundError: If a referenced schema is neither stored nor loadable.
            DepthLimitExceeded: If nesting or reference chaining is too deep.
        """
        options = options or ValidationOptions()
        context = self._root_context(schema, options)
        try:
            context.validator.check_schema(schema, context)
            context.validator.validate_node(value, schema, context)
        except StopValidation as stop:
            if stop.handler is not context.handler:
                raise
        except RecursionError:
            raise DepthLimitExceeded("Validation recursion", self.config.max_depth, context.path) from None
        return ValidationResult(value=value, errors=list(context.handler.errors))

    def validate_with_key(self, value: Any, key: Hashable, options: Optional[ValidationOptions] = None) -> ValidationResult:
        """Validate against the schema stored under *key*."""
        return self.validate(value, self.store.get(key), options)

    def is_valid(self, value: Any, schema: Any, options: Optional[ValidationOptions] = None) -> bool:
        return self.validate(value, schema, options).valid

    def _root_context(self, schema: Any, options: ValidationOptions) -> ValidationContext:
        default_draft = parse_draft(options.draft or self.config.default_draft)
        draft = detect_draft(schema, default_draft)

        allowed_errors = options.allowed_errors
        if allowed_errors is None and options.error_mode is ErrorMode.FAIL_FAST:
            allowed_errors = self.config.allowed_errors
        handler = ErrorHandler.for_mode(options.error_mode, allowed_errors, options.error_handler)

        session = ValidationSession(
            store=self.store,
            resolver=options.ref_resolver or self.ref_resolver,
            validators=self._validators,
            schema_loader=options.schema_loader or self.schema_loader,
            format_checker=options.format_checker or self.format_checker,
            max_depth=self.config.max_depth,
            max_ref_chain=self.config.max_ref_chain,
        )

        document_uri = ""
        schema_id = schema.get(kw.ID) if isinstance(schema, dict) else None
        if isinstance(schema_id, str):
            document_uri = urldefrag(schema_id)[0]
        return ValidationContext(
            session=session,
            draft=draft,
            root=schema,
            handler=handler,
            document_uri=document_uri,
            base_uri=document_uri,
        )


def validate(
    value: Any,
    schema: Any,
    options: Optional[ValidationOptions] = None,
    store: Optional[SchemaStore] = None,
) -> ValidationResult:
    """Validate *value* against *schema* with a one-off :class:`Validator`."""
    return Validator(store).validate(value, schema, options)
