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

"""Persistence adapter contract.

Models hand already-validated data to an adapter and propagate whatever the
adapter raises. Concrete database plugins live outside this package.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AdapterResult:
    """Record returned by adapter operations."""

    id: Any
    data: Dict[str, Any]


class PersistenceAdapter(ABC):
    """Abstract base for persistence adapters."""

    @abstractmethod
    def create(self, collection: str, data: Dict[str, Any]) -> AdapterResult:
        """Insert a new record.

        Args:
            collection: Table or collection name
            data: Record content

        Returns:
            AdapterResult with the new id and the stored record

        Raises:
            MissingCollectionOrDataError: If collection is empty or data is None
            DuplicateRecordError: If data carries the ``_id`` of a stored record
        """

    @abstractmethod
    def update(self, collection: str, data: Dict[str, Any], id: Optional[Any] = None) -> AdapterResult:
        """Update an existing record.

        The target is ``id`` when given, ``data["_id"]`` otherwise.

        Raises:
            MissingCollectionOrDataError: If collection is empty or data is None
            MissingIdError: If no id can be determined
        """
