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

"""Classification and comparison of JSON-like Python values.

Parsed JSON maps onto a closed set of Python types (``None``, ``bool``,
``int``, ``float``, ``str``, ``list``, ``dict``). Every keyword check goes
through :func:`value_kind` so that ``bool`` is never mistaken for a number
(``isinstance(True, int)`` is true in Python).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from fractions import Fraction
from typing import Any, Optional


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def value_kind(value: Any) -> Optional[ValueKind]:
    """Return the JSON kind of *value*, or ``None`` for non-JSON Python objects.

    Integers are reported as ``INTEGER`` and floats as ``NUMBER``; whether a
    float with no fractional part satisfies ``"integer"`` is decided by
    :func:`is_integral`.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return None


def is_number(value: Any) -> bool:
    return value_kind(value) in (ValueKind.INTEGER, ValueKind.NUMBER)


def is_integral(value: Any) -> bool:
    """True for ints and for finite floats with a zero fractional part."""
    kind = value_kind(value)
    if kind is ValueKind.INTEGER:
        return True
    if kind is ValueKind.NUMBER:
        return math.isfinite(value) and value == int(value)
    return False


def json_equal(left: Any, right: Any) -> bool:
    """Deep structural equality with JSON semantics.

    Kinds must agree except that integers and floats compare numerically.
    Arrays compare element-wise in order, objects by key set and per-key value.
    """
    left_kind = value_kind(left)
    right_kind = value_kind(right)

    if is_number(left) and is_number(right):
        return left == right
    if left_kind is not right_kind:
        return False

    if left_kind is ValueKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if left_kind is ValueKind.OBJECT:
        if set(left.keys()) != set(right.keys()):
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    return left == right


def is_multiple_of(value: Any, divisor: Any) -> bool:
    """Check divisibility exactly.

    Floats are read as the decimal literal they print as, so 0.3 is a multiple
    of 0.1. Non-finite values are never multiples.
    """
    if isinstance(value, int) and isinstance(divisor, int):
        return value % divisor == 0
    try:
        return Fraction(str(value)) % Fraction(str(divisor)) == 0
    except (ValueError, OverflowError):
        return False
