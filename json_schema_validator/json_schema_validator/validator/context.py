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

"""Per-node validation context and the state shared by one validation call."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urljoin

from ..exceptions import (
    CyclicReferenceError,
    DataError,
    DepthLimitExceeded,
    PathToken,
    SchemaError,
)
from ..store.schema_store import SchemaStore
from ..utils.draft_version import Draft
from .error_handler import ErrorHandler

FormatChecker = Callable[[str, Any], bool]
SchemaLoaderFn = Callable[[str], Any]


@dataclass
class ValidationSession:
    """Collaborators and limits shared by every node of one validation call."""

    store: SchemaStore
    resolver: Callable[..., Any]
    validators: Mapping[Draft, Any]
    schema_loader: Optional[SchemaLoaderFn] = None
    format_checker: Optional[FormatChecker] = None
    max_depth: int = 128
    max_ref_chain: int = 32
    # compiled regular expressions, keyed by source pattern
    patterns: Dict[str, Any] = field(default_factory=dict)
    # schema nodes whose keyword values were already checked, by id()
    checked_schemas: Dict[int, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationContext:
    """Where the engine currently is: draft, document, instance path and $ref chain.

    Contexts are immutable; moving into a child value or following a
    reference produces a new context. The error handler is shared with the
    parent except for isolated sub-validations (combinators).
    """

    session: ValidationSession
    draft: Draft
    root: Any
    handler: ErrorHandler
    document_uri: str = ""
    base_uri: str = ""
    path: Tuple[PathToken, ...] = ()
    ref_chain: Tuple[str, ...] = ()
    depth: int = 0

    @property
    def validator(self):
        """Keyword engine for the active draft."""
        return self.session.validators[self.draft]

    def descend(self, token: PathToken) -> "ValidationContext":
        """Context for a property value or array item.

        The reference chain restarts because the next reference is resolved
        against a different part of the instance.
        """
        depth = self.depth + 1
        path = self.path + (token,)
        if depth > self.session.max_depth:
            raise DepthLimitExceeded("Instance nesting", self.session.max_depth, path)
        return replace(self, path=path, depth=depth, ref_chain=())

    def with_base(self, schema_id: str) -> "ValidationContext":
        return replace(self, base_uri=urljoin(self.base_uri, schema_id))

    def with_document(self, root: Any, document_uri: str, draft: Draft) -> "ValidationContext":
        return replace(self, root=root, document_uri=document_uri, base_uri=document_uri, draft=draft)

    def enter_ref(self, key: str) -> "ValidationContext":
        if key in self.ref_chain:
            raise CyclicReferenceError(self.ref_chain + (key,), self.path)
        if len(self.ref_chain) >= self.session.max_ref_chain:
            raise DepthLimitExceeded("Reference chain", self.session.max_ref_chain, self.path)
        return replace(self, ref_chain=self.ref_chain + (key,))

    def isolated(self) -> "ValidationContext":
        """Same location with a fresh fail-fast handler, for combinator checks."""
        return replace(self, handler=ErrorHandler(allowed_errors=0))

    def report(self, kind: str, **extra: Any) -> None:
        """Record a data error at the current location."""
        self.handler.handle(DataError(kind, self.path, extra))

    def schema_error(self, kind: str, **extra: Any) -> SchemaError:
        """Build (not raise) a schema error located at the current instance path."""
        return SchemaError(kind, self.path, extra)
