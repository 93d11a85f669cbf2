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

"""Thread-safe in-memory store of parsed schema documents."""

import logging
import threading
from typing import Any, Dict, Hashable, Iterable, List, Optional

from ..exceptions import SchemaNotFoundError
from ..models.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class SchemaStore:
    """Keyed collection of schema documents shared by concurrent validators.

    Every public method takes the store lock, so a reader never observes a
    half-inserted entry. A batch passed to :meth:`put` is applied entry by
    entry: readers may see part of a batch, never part of an entry.

    Entries are only ever superseded by a later entry with the same primary
    key; there is no removal.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._entries: Dict[Hashable, CacheEntry] = {}
        # secondary_key -> primary_key of the entry most recently loaded from that source
        self._secondary_index: Dict[str, Hashable] = {}
        self._populated = False

    def get(self, key: Hashable) -> Any:
        """Return the schema stored under *key*.

        Raises:
            SchemaNotFoundError: If no entry has that key, including when the
                store was never populated.
        """
        return self.entry(key).schema

    def entry(self, key: Hashable) -> CacheEntry:
        with self._lock:
            try:
                return self._entries[key]
            except (KeyError, TypeError):
                raise SchemaNotFoundError(key) from None

    def put(self, entries: Iterable[CacheEntry]) -> int:
        """Insert *entries*; an entry replaces any entry with the same primary key.

        Returns:
            Number of entries inserted.
        """
        count = 0
        for entry in entries:
            with self._lock:
                self._entries[entry.primary_key] = entry
                if entry.secondary_key is not None:
                    self._secondary_index[entry.secondary_key] = entry.primary_key
                self._populated = True
            logger.debug(f"Stored schema '{entry.primary_key}' (source: {entry.secondary_key})")
            count += 1
        return count

    def put_schema(
        self,
        key: Hashable,
        schema: Any,
        secondary_key: Optional[str] = None,
        timestamp: float = 0.0,
    ) -> CacheEntry:
        """Convenience wrapper around :meth:`put` for a single schema."""
        entry = CacheEntry(
            primary_key=key,
            secondary_key=secondary_key,
            timestamp=timestamp,
            schema=schema,
        )
        self.put([entry])
        return entry

    def find_by_secondary_key(self, secondary_key: str) -> Optional[float]:
        """Return the recorded timestamp for a source, or None if it was never loaded."""
        with self._lock:
            primary_key = self._secondary_index.get(secondary_key)
            if primary_key is None:
                return None
            entry = self._entries.get(primary_key)
            if entry is None or entry.secondary_key != secondary_key:
                return None
            return entry.timestamp

    def is_populated(self) -> bool:
        with self._lock:
            return self._populated

    def keys(self) -> List[Hashable]:
        with self._lock:
            return list(self._entries.keys())

    def snapshot(self) -> Dict[Hashable, CacheEntry]:
        """Return a shallow copy of all entries, taken under the lock."""
        with self._lock:
            return dict(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            try:
                return key in self._entries
            except TypeError:
                return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
