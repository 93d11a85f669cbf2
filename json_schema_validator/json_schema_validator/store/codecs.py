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

"""Default parse, acceptance and key functions for schema sources."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Hashable, Union

import yaml
from jsonschema import Draft3Validator, Draft4Validator
from jsonschema.exceptions import SchemaError as MetaSchemaError

from .. import keywords as kw
from ..exceptions import SchemaValidatorError
from ..models.cache_entry import ParseFailure
from ..utils.draft_version import Draft, detect_draft

logger = logging.getLogger(__name__)

ParseFn = Callable[[bytes], Any]

_META_VALIDATORS = {
    Draft.DRAFT3: Draft3Validator,
    Draft.DRAFT4: Draft4Validator,
}


def parse_json(raw: Union[bytes, str]) -> Any:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return json.loads(raw)


def parse_yaml(raw: Union[bytes, str]) -> Any:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        raise ValueError("Empty YAML document")
    return data


def parser_for(source: Union[str, Path]) -> ParseFn:
    """Pick a parse function from the source's file suffix (JSON when unknown)."""
    suffix = Path(str(source)).suffix.lower()
    if suffix in (".yaml", ".yml"):
        return parse_yaml
    return parse_json


def is_valid_schema(value: Any) -> bool:
    """Acceptance check: *value* is a schema object that passes its draft's meta-schema.

    Parse failure markers and non-object documents are rejected.
    """
    if isinstance(value, ParseFailure) or not isinstance(value, dict):
        return False
    try:
        draft = detect_draft(value)
    except SchemaValidatorError:
        return False
    try:
        _META_VALIDATORS[draft].check_schema(value)
    except MetaSchemaError as e:
        logger.debug(f"Schema rejected by {draft.short_name} meta-schema: {e.message}")
        return False
    return True


def schema_id(value: Any) -> Hashable:
    """Default key function: the document's ``id``.

    Raises:
        KeyError: If the document declares no string ``id``.
    """
    if isinstance(value, dict):
        identifier = value.get(kw.ID)
        if isinstance(identifier, str) and identifier:
            return identifier
    raise KeyError(kw.ID)
