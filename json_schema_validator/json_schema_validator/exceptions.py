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

"""Custom exceptions for the JSON schema validator."""

from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .utils.json_pointer import format_pointer

PathToken = Union[str, int]


class SchemaValidatorError(Exception):
    """Base exception for schema-validator related errors."""
    pass


class _KindedError(SchemaValidatorError):
    """Error carrying a machine-readable kind, the instance path and extra details."""

    family = "error"

    def __init__(
        self,
        kind: str,
        path: Iterable[PathToken] = (),
        extra: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        self.kind = kind
        self.path: Tuple[PathToken, ...] = tuple(path)
        self.extra: Dict[str, Any] = dict(extra or {})
        super().__init__(message or self._default_message())

    @property
    def pointer(self) -> str:
        """JSON Pointer of the instance location the error refers to."""
        return format_pointer(self.path)

    def _default_message(self) -> str:
        details = ", ".join(f"{k}={v!r}" for k, v in self.extra.items())
        location = self.pointer or "/"
        if details:
            return f"{self.kind} at {location} ({details})"
        return f"{self.kind} at {location}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "kind": self.kind,
            "path": self.pointer,
            "extra": self.extra,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _KindedError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.kind == other.kind
            and self.path == other.path
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.kind, self.path))


class SchemaError(_KindedError):
    """Exception raised when the schema itself is malformed."""

    family = "schema"


class CyclicReferenceError(SchemaError):
    """Exception raised when a $ref chain revisits a reference it is still resolving."""

    def __init__(self, chain: Iterable[str], path: Iterable[PathToken] = ()):
        chain = list(chain)
        super().__init__(
            "cyclic_reference",
            path,
            {"chain": chain},
            message=f"Cyclic $ref chain: {' -> '.join(chain)}",
        )


class BrokenReferenceError(SchemaError):
    """Exception raised when a JSON pointer $ref does not lead to a schema node."""

    def __init__(self, ref: str, segment: str, path: Iterable[PathToken] = ()):
        super().__init__(
            "broken_reference",
            path,
            {"ref": ref, "segment": segment},
            message=f"Broken $ref '{ref}': segment '{segment}' cannot be resolved",
        )


class DataError(_KindedError):
    """Exception describing a value rejected by a well-formed schema."""

    family = "data"


class SchemaNotFoundError(SchemaValidatorError):
    """Exception raised when a schema key is absent from the store."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Schema not found: {key!r}")


class DepthLimitExceeded(SchemaValidatorError):
    """Exception raised when instance nesting or reference chaining is too deep."""

    def __init__(self, what: str, limit: int, path: Iterable[PathToken] = ()):
        self.what = what
        self.limit = limit
        self.path = tuple(path)
        super().__init__(
            f"{what} is too deep (limit: {limit}) at {format_pointer(self.path) or '/'}"
        )
