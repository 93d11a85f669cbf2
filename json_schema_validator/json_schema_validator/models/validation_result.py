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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..exceptions import DataError


@dataclass
class ValidationResult:
    """Result of validating one value."""

    value: Any
    errors: List[DataError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> Optional[DataError]:
        return self.errors[0] if self.errors else None

    def raise_for_errors(self) -> Any:
        """Raise the first data error, or return the validated value."""
        if self.errors:
            raise self.errors[0]
        return self.value

    @property
    def error_summary(self) -> str:
        if not self.errors:
            return ""
        return "; ".join(str(e) for e in self.errors[:3])  # First 3 errors
