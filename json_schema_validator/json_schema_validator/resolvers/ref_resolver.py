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

import logging
from typing import Any, List, NamedTuple
from urllib.parse import urldefrag, urljoin

from .. import keywords as kw
from ..exceptions import BrokenReferenceError, SchemaNotFoundError
from ..utils.draft_version import detect_draft
from ..utils.json_pointer import split_fragment_pointer
from ..validator.context import ValidationContext

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    schema: Any
    context: ValidationContext


class RefResolver:
    """Resolves ``$ref`` keywords to schema nodes.

    * ``#`` is the root of the current document.
    * ``#/a/0/b`` walks a JSON pointer through the current document.
    * Anything else is joined to the nearest enclosing ``id`` and looked up in
      the schema store; a fragment after the document part is then walked
      inside the fetched document.

    Every followed reference is pushed onto the context's reference chain,
    which fails on the first repeated key.
    """

    def __call__(self, schema_node: Any, context: ValidationContext) -> Resolution:
        return self.resolve(schema_node, context)

    def resolve(self, schema_node: Any, context: ValidationContext) -> Resolution:
        ref = schema_node[kw.REF]
        if not isinstance(ref, str):
            raise context.schema_error(kw.SCHEMA_INVALID, keyword=kw.REF, value=ref)

        if ref == "#" or ref.startswith("#/"):
            key = f"{context.document_uri}{ref}"
            context = context.enter_ref(key)
            logger.debug(f"Resolving local reference {key}")
            target = self._walk(context.root, ref, ref[1:], context)
            return Resolution(target, context)

        absolute = urljoin(context.base_uri, ref)
        document_uri, fragment = urldefrag(absolute)
        key = f"{document_uri}#{fragment}"
        context = context.enter_ref(key)

        if document_uri == context.document_uri or not document_uri:
            logger.debug(f"Resolving reference {ref} inside the current document")
            target = self._walk(context.root, ref, fragment, context)
            return Resolution(target, context)

        logger.debug(f"Resolving reference {ref} as {key}")
        document = self._fetch(document_uri, context)
        context = context.with_document(document, document_uri, detect_draft(document, context.draft))
        target = self._walk(document, ref, fragment, context)
        return Resolution(target, context)

    def _fetch(self, document_uri: str, context: ValidationContext) -> Any:
        store = context.session.store
        for candidate in (document_uri, f"{document_uri}#"):
            if candidate in store:
                return store.get(candidate)

        loader = context.session.schema_loader
        if loader is None:
            raise SchemaNotFoundError(document_uri)
        logger.debug(f"Schema {document_uri} not in store, fetching")
        document = loader(document_uri)
        if document_uri not in store:
            store.put_schema(document_uri, document)
        return document

    @staticmethod
    def _walk(document: Any, ref: str, fragment: str, context: ValidationContext) -> Any:
        try:
            segments: List[str] = split_fragment_pointer(fragment)
        except ValueError:
            raise BrokenReferenceError(ref, fragment, context.path) from None

        node = document
        for segment in segments:
            if isinstance(node, dict):
                if segment not in node:
                    raise BrokenReferenceError(ref, segment, context.path)
                node = node[segment]
            elif isinstance(node, list):
                if not segment.isdigit() or int(segment) >= len(node):
                    raise BrokenReferenceError(ref, segment, context.path)
                node = node[int(segment)]
            else:
                raise BrokenReferenceError(ref, segment, context.path)
        return node
