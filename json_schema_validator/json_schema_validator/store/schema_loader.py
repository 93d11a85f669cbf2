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

"""Change-aware loading of schema documents from a directory into a SchemaStore."""

import logging
from pathlib import Path
from typing import Any, Callable, Hashable, List, Optional, Tuple, Union
from urllib.parse import unquote, urlparse

from .. import keywords as kw
from ..exceptions import SchemaError, SchemaNotFoundError
from ..models.cache_entry import CacheEntry, LoadFailure, ParseFailure
from .codecs import is_valid_schema, parser_for, schema_id
from .schema_store import SchemaStore

logger = logging.getLogger(__name__)

ParseFn = Callable[[bytes], Any]
AcceptFn = Callable[[Any], bool]
KeyFn = Callable[[Any], Hashable]
FailureSink = Callable[[LoadFailure], None]

# (source_id, timestamp, parsed value or ParseFailure)
_LoadedSource = Tuple[str, float, Any]


def get_secondary_key(source_id: str) -> str:
    """Secondary cache key of a source: its file name without extension."""
    return Path(source_id).stem


class SchemaLoader:
    """Loads schema definitions from a directory and republishes them into a store.

    Each update only re-reads sources whose modification time is newer than
    the one recorded for them, so calling :meth:`update` repeatedly on an
    unchanged directory does no work.
    """

    def __init__(self, store: SchemaStore, on_failure: Optional[FailureSink] = None):
        self.store = store
        self.on_failure = on_failure

    def update(
        self,
        source_dir: Union[str, Path],
        parse_fn: Optional[ParseFn] = None,
        accept_fn: Optional[AcceptFn] = None,
        key_fn: Optional[KeyFn] = None,
    ) -> List[LoadFailure]:
        """Reload stale schema sources found directly under *source_dir*.

        Args:
            source_dir: Directory holding one schema document per file.
            parse_fn: Turns raw bytes into a value. Defaults to JSON or YAML by suffix.
            accept_fn: Decides whether a parsed value may be stored. Receives a
                :class:`ParseFailure` for sources that failed to parse.
                Defaults to a draft-3/draft-4 meta-schema check.
            key_fn: Computes the primary store key. Defaults to the document ``id``.

        Returns:
            An empty list when every candidate was stored, otherwise one
            :class:`LoadFailure` per rejected source. Accepted sources are
            stored either way.

        Raises:
            FileNotFoundError: If *source_dir* does not exist.
            OSError: If a candidate source cannot be read.
        """
        source_path = Path(source_dir)
        if not source_path.is_dir():
            raise FileNotFoundError(f"Schema directory not found: {source_path}")

        accept_fn = accept_fn or is_valid_schema
        key_fn = key_fn or schema_id

        candidates = self._get_updated_sources(source_path)
        loaded = [self._load_source(path, parse_fn) for path in candidates]
        failures = self._store_schemas(loaded, accept_fn, key_fn)

        logger.info(
            f"Schema update from {source_path}: {len(candidates)} candidate(s), "
            f"{len(candidates) - len(failures)} stored, {len(failures)} failed"
        )
        for failure in failures:
            logger.warning(f"Schema source rejected: {failure}")
            if self.on_failure is not None:
                self.on_failure(failure)
        return failures

    def load_uri(self, uri: str, parse_fn: Optional[ParseFn] = None) -> Any:
        """Fetch a schema that is referenced by *uri* but not present in the store.

        Only local sources are supported: ``file://`` URIs and plain paths.
        The parsed schema is stored under *uri* and returned. It is not tied to
        a source directory, so a later :meth:`update` of that directory still
        stores the file under its own key.

        Raises:
            SchemaNotFoundError: For other schemes or when the file does not exist.
            SchemaError: If the file cannot be parsed.
        """
        parsed = urlparse(uri)
        if parsed.scheme not in ("file", ""):
            raise SchemaNotFoundError(uri)
        path = Path(unquote(parsed.path))

        if not path.is_file():
            raise SchemaNotFoundError(uri)

        logger.debug(f"Loading referenced schema {uri} from {path}")
        parse = parse_fn or parser_for(path)
        timestamp = path.stat().st_mtime
        try:
            schema = parse(path.read_bytes())
        except Exception as e:
            raise SchemaError(kw.SCHEMA_INVALID, extra={"uri": uri, "reason": str(e)}) from e
        self.store.put_schema(uri, schema, timestamp=timestamp)
        return schema

    def _get_updated_sources(self, source_dir: Path) -> List[Path]:
        """Return the sources in *source_dir* that need to be (re)loaded."""
        sources = sorted(p for p in source_dir.iterdir() if p.is_file())
        if not sources or not self.store.is_populated():
            return sources
        return [p for p in sources if self._is_outdated(p)]

    def _is_outdated(self, path: Path) -> bool:
        recorded = self.store.find_by_secondary_key(get_secondary_key(path.name))
        if recorded is None:
            logger.debug(f"New schema source: {path.name}")
            return True
        outdated = path.stat().st_mtime > recorded
        if outdated:
            logger.debug(f"Schema source changed: {path.name}")
        return outdated

    @staticmethod
    def _load_source(path: Path, parse_fn: Optional[ParseFn]) -> _LoadedSource:
        # stat first: a rewrite during the read then leaves the source outdated
        timestamp = path.stat().st_mtime
        raw = path.read_bytes()
        parse = parse_fn or parser_for(path)
        try:
            value = parse(raw)
        except Exception as e:
            value = ParseFailure(e)
        return path.name, timestamp, value

    def _store_schemas(
        self,
        loaded: List[_LoadedSource],
        accept_fn: AcceptFn,
        key_fn: KeyFn,
    ) -> List[LoadFailure]:
        failures: List[LoadFailure] = []
        for source_id, timestamp, value in loaded:
            try:
                accepted = accept_fn(value)
            except Exception as e:
                failures.append(LoadFailure(source_id, timestamp, e))
                continue

            if not accepted:
                reason = value if isinstance(value, ParseFailure) else "rejected by acceptance check"
                failures.append(LoadFailure(source_id, timestamp, reason))
                continue

            try:
                key = key_fn(value)
            except Exception:
                failures.append(LoadFailure(source_id, timestamp, kw.MISSING_ID_FIELD))
                continue

            self.store.put([
                CacheEntry(
                    primary_key=key,
                    secondary_key=get_secondary_key(source_id),
                    timestamp=timestamp,
                    schema=value,
                )
            ])
        return failures
