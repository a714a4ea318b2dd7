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

"""In-process persistence adapter.

Stores records per collection in plain dicts. Updates follow document-store
``$set`` semantics: nested data is flattened to dotted paths and each path is
written into the stored record, leaving sibling keys untouched.
"""

import copy
import logging
import threading
import uuid
from typing import Any, Dict, Optional

from ..exceptions import DuplicateRecordError, MissingCollectionOrDataError, MissingIdError, RecordNotFoundError
from ..utils.paths import flatten, split_path
from .base import AdapterResult, PersistenceAdapter

logger = logging.getLogger(__name__)


class MemoryAdapter(PersistenceAdapter):
    """Adapter keeping records in memory, keyed by ``_id``."""

    def __init__(self):
        self._collections: Dict[str, Dict[Any, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def create(self, collection: str, data: Dict[str, Any]) -> AdapterResult:
        if not collection or data is None:
            raise MissingCollectionOrDataError()

        record = copy.deepcopy(dict(data))
        record_id = record.get("_id") or uuid.uuid4().hex
        record["_id"] = record_id

        with self._lock:
            records = self._collections.setdefault(collection, {})
            if record_id in records:
                raise DuplicateRecordError(f"Record '{record_id}' already exists in '{collection}'")
            records[record_id] = record
            stored = copy.deepcopy(record)

        logger.debug(f"Created record {record_id} in '{collection}'")
        return AdapterResult(id=record_id, data=stored)

    def update(self, collection: str, data: Dict[str, Any], id: Optional[Any] = None) -> AdapterResult:
        if not collection or data is None:
            raise MissingCollectionOrDataError()
        if not id and not data.get("_id"):
            raise MissingIdError()

        rest = {k: v for k, v in data.items() if k != "_id"}
        record_id = id or data["_id"]

        with self._lock:
            records = self._collections.get(collection, {})
            if record_id not in records:
                raise RecordNotFoundError(f"No record with id '{record_id}' in '{collection}'")
            record = records[record_id]
            for path, value in flatten(rest).items():
                _set_path(record, split_path(path), copy.deepcopy(value))
            stored = copy.deepcopy(record)

        logger.debug(f"Updated record {record_id} in '{collection}'")
        return AdapterResult(id=record_id, data=stored)

    def find(self, collection: str, id: Any) -> Optional[Dict[str, Any]]:
        """Return a copy of a stored record, or None."""
        with self._lock:
            record = self._collections.get(collection, {}).get(id)
            return copy.deepcopy(record) if record is not None else None

    def clear(self) -> None:
        with self._lock:
            self._collections.clear()


def _set_path(record: Dict[str, Any], tokens, value: Any) -> None:
    for token in tokens[:-1]:
        child = record.get(token)
        if not isinstance(child, dict):
            child = {}
            record[token] = child
        record = child
    record[tokens[-1]] = value
