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

"""JSON Pointer (RFC 6901) helpers used for error paths and local $ref walking."""

from typing import Iterable, List, Union
from urllib.parse import unquote

JsonPointer = str


def escape_token(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def format_pointer(path: Iterable[Union[str, int]]) -> JsonPointer:
    """Render a path of object keys / array indices as a JSON Pointer.

    The empty path is the document root and renders as ``""``.
    """
    return "".join(f"/{escape_token(str(token))}" for token in path)


def split_fragment_pointer(fragment: str) -> List[str]:
    """Split a URI fragment pointer (``/definitions/a%20b``) into unescaped segments.

    The fragment is expected without its leading ``#``. An empty fragment
    addresses the whole document and yields no segments.
    """
    if not fragment:
        return []
    if not fragment.startswith("/"):
        raise ValueError(f"Fragment is not a JSON pointer: '{fragment}'")
    return [unescape_token(unquote(token)) for token in fragment[1:].split("/")]
