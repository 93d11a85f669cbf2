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

"""Schema draft selection.

The ``$schema`` field of a schema document declares which revision of the
specification its keywords follow. Exactly two identifiers are recognised:

  * ``http://json-schema.org/draft-03/schema#`` selects draft-3 semantics.
  * ``http://json-schema.org/draft-04/schema#`` selects draft-4 semantics.

Any other value is rejected. A document without ``$schema`` uses the
caller's default draft (draft-3 unless configured otherwise).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from .. import keywords as kw
from ..exceptions import SchemaError


class Draft(str, Enum):
    DRAFT3 = "http://json-schema.org/draft-03/schema#"
    DRAFT4 = "http://json-schema.org/draft-04/schema#"

    @property
    def short_name(self) -> str:
        return "draft3" if self is Draft.DRAFT3 else "draft4"


DEFAULT_DRAFT = Draft.DRAFT3

_ALIASES = {
    "draft3": Draft.DRAFT3,
    "draft-03": Draft.DRAFT3,
    "draft4": Draft.DRAFT4,
    "draft-04": Draft.DRAFT4,
}


def parse_draft(raw: Union[str, Draft]) -> Draft:
    """Parse a draft identifier: the ``$schema`` URI or a short name like ``draft4``.

    Raises:
        SchemaError: ``schema_unsupported`` for anything else.
    """
    if isinstance(raw, Draft):
        return raw
    if isinstance(raw, str):
        if raw in _ALIASES:
            return _ALIASES[raw]
        for draft in Draft:
            if raw == draft.value:
                return draft
    raise SchemaError(
        kw.SCHEMA_UNSUPPORTED,
        extra={"schema": raw},
        message=f"Unsupported $schema identifier: {raw!r}",
    )


def detect_draft(schema: Any, default: Optional[Union[str, Draft]] = None) -> Draft:
    """Return the draft a schema document declares, or *default* when it declares none."""
    if isinstance(schema, Mapping) and kw.SCHEMA in schema:
        declared = schema[kw.SCHEMA]
        # Only the two literal URIs are accepted inside documents
        if isinstance(declared, str) and declared in (Draft.DRAFT3.value, Draft.DRAFT4.value):
            return Draft(declared)
        raise SchemaError(
            kw.SCHEMA_UNSUPPORTED,
            extra={"schema": declared},
            message=f"Unsupported $schema identifier: {declared!r}",
        )
    if default is None:
        return DEFAULT_DRAFT
    return parse_draft(default)
