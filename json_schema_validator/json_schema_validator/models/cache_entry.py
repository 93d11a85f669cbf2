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

from dataclasses import dataclass
from typing import Any, Hashable, Optional


@dataclass(frozen=True)
class CacheEntry:
    """A parsed schema document as held by the schema store.

    ``primary_key`` is what lookups use. ``secondary_key`` is derived from the
    source the document was loaded from (the file stem) and only serves to
    decide whether that source changed since it was last loaded.
    """

    primary_key: Hashable
    secondary_key: Optional[str]
    timestamp: float
    schema: Any


@dataclass(frozen=True)
class ParseFailure:
    """Marker handed to the acceptance check when a source could not be parsed."""

    error: BaseException

    def __str__(self) -> str:
        return f"parse_error: {self.error}"


@dataclass(frozen=True)
class LoadFailure:
    source_id: str
    timestamp: float
    reason: Any

    def __str__(self) -> str:
        return f"{self.source_id} (mtime={self.timestamp}): {self.reason}"
