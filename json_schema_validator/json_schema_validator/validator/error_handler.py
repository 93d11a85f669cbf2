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

"""Error accumulation policy for a validation run.

A handler records data errors until more than ``allowed_errors`` have been
seen, then stops the run. ``allowed_errors == 0`` is fail-fast (stop at the
first error); a negative budget collects everything.
"""

from enum import Enum
from typing import Callable, List, Optional

from ..exceptions import DataError

# (error, errors so far, allowed errors) -> new error list
ErrorHandlerFn = Callable[[DataError, List[DataError], int], List[DataError]]

UNLIMITED = -1


class ErrorMode(str, Enum):
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"

    @property
    def allowed_errors(self) -> int:
        return 0 if self is ErrorMode.FAIL_FAST else UNLIMITED


class StopValidation(Exception):
    """Raised by a handler whose error budget is exhausted; never leaves the engine."""

    def __init__(self, handler: "ErrorHandler"):
        super().__init__("error budget exhausted")
        self.handler = handler


class ErrorHandler:
    """Collects the data errors of one (sub-)validation."""

    def __init__(self, allowed_errors: int = 0, handler_fn: Optional[ErrorHandlerFn] = None):
        self.allowed_errors = allowed_errors
        self.handler_fn = handler_fn
        self.errors: List[DataError] = []

    @classmethod
    def for_mode(
        cls,
        mode: Optional[ErrorMode] = None,
        allowed_errors: Optional[int] = None,
        handler_fn: Optional[ErrorHandlerFn] = None,
    ) -> "ErrorHandler":
        """Build a handler; an explicit *allowed_errors* budget overrides *mode*."""
        if allowed_errors is None:
            allowed_errors = (mode or ErrorMode.FAIL_FAST).allowed_errors
        return cls(allowed_errors=allowed_errors, handler_fn=handler_fn)

    @property
    def exhausted(self) -> bool:
        return self.allowed_errors >= 0 and len(self.errors) > self.allowed_errors

    def handle(self, error: DataError) -> None:
        if self.handler_fn is not None:
            self.errors = list(self.handler_fn(error, list(self.errors), self.allowed_errors))
        else:
            self.errors.append(error)
        if self.exhausted:
            raise StopValidation(self)
