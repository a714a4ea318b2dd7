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

"""Model instances: raw data bound to a shared configuration."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .adapters.base import PersistenceAdapter
from .exceptions import MissingAdapterError, ModelValidationError
from .exposer import ExposerMap, expose
from .schema.definition import SchemaDefinition
from .schema.loader import load_model_document
from .schema.validator import ValidationOutcome, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelConfig:
    """Configuration shared by every instance of one kind of model.

    All options are optional: without ``schema`` validation always succeeds,
    without ``exposer`` every projection name is unknown.
    """

    schema: Optional[SchemaDefinition] = None
    exposer: Optional[ExposerMap] = None
    db: Optional[PersistenceAdapter] = None
    table: Optional[str] = None

    def __post_init__(self) -> None:
        if self.schema is not None and not isinstance(self.schema, SchemaDefinition):
            object.__setattr__(self, "schema", SchemaDefinition(self.schema))
        if self.exposer is not None and not isinstance(self.exposer, ExposerMap):
            object.__setattr__(self, "exposer", ExposerMap(self.exposer))

    @classmethod
    def from_file(cls, file_path: Union[str, Path], db: Optional[PersistenceAdapter] = None) -> "ModelConfig":
        """Build a configuration from a YAML/JSON model document."""
        document = load_model_document(file_path)
        return cls(schema=document.schema, exposer=document.exposer, db=db, table=document.table)


class Model:
    """A record validated, projected and persisted through its ModelConfig.

    The storage id is kept on ``id``, apart from ``data``, so that it never
    takes part in validation. A ``_id`` key in the constructor data is moved
    there, so ``save()`` updates the stored record it names.
    """

    def __init__(self, data: Optional[Mapping] = None, config: Optional[ModelConfig] = None, id: Any = None):
        self.data: Dict[str, Any] = dict(data) if data is not None else {}
        self.config = config if config is not None else ModelConfig()
        stored_id = self.data.pop("_id", None)
        self.id = id if id is not None else stored_id

    @property
    def validation(self) -> ValidationOutcome:
        """Validate current data without raising."""
        if self.config.schema is None:
            return ValidationOutcome.success(copy.deepcopy(self.data))
        return validate(self.config.schema, self.data)

    def validate(self) -> "Model":
        """Validate current data, raising ModelValidationError on failure.

        Raw data is left untouched; normalized values are only available
        through ``validation``.
        """
        outcome = self.validation
        if not outcome.ok:
            raise ModelValidationError(outcome.errors)
        return self

    def expose(self, name: str) -> Dict[str, Any]:
        return expose(self.config.exposer, name, self.data)

    def _require_db(self) -> PersistenceAdapter:
        if self.config.db is None:
            raise MissingAdapterError("No db adapter configured for this model")
        return self.config.db

    def _normalized(self) -> Dict[str, Any]:
        outcome = self.validation
        if not outcome.ok:
            raise ModelValidationError(outcome.errors)
        return dict(outcome.values)

    def _adopt(self, result) -> "Model":
        self.id = result.id
        self.data = {k: v for k, v in result.data.items() if k != "_id"}
        return self

    def create(self) -> "Model":
        """Insert validated, normalized data and adopt the stored record."""
        db = self._require_db()
        values = self._normalized()
        logger.debug(f"Creating record in '{self.config.table}'")
        return self._adopt(db.create(self.config.table, values))

    def update(self) -> "Model":
        """Update the stored record with validated, normalized data."""
        db = self._require_db()
        values = self._normalized()
        logger.debug(f"Updating record {self.id} in '{self.config.table}'")
        return self._adopt(db.update(self.config.table, values, self.id))

    def save(self) -> "Model":
        """Update when the instance has an id, create otherwise."""
        if self.id is not None:
            return self.update()
        return self.create()

    def __repr__(self) -> str:
        return f"Model(table={self.config.table!r}, id={self.id!r}, data={self.data!r})"
