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

"""Loading of model documents from YAML or JSON files.

A model document declares the schema, the exposer map and the table name of
a model::

    table: users
    schema:
      firstname: {kind: string, required: true}
      job:
        kind: object
        sub:
          title: string
    exposer:
      public: [firstname, job.title]

Documents are checked against ``model_document.json`` with ``jsonschema``
before any SchemaDefinition is built from them.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
import yaml

from ..exceptions import SchemaLoadError
from ..exposer import ExposerMap
from ..settings import settings
from .definition import SchemaDefinition

logger = logging.getLogger(__name__)

_DOCUMENT_SCHEMA_PATH = Path(__file__).parent / "model_document.json"
_DOCUMENT_SCHEMA: Optional[dict] = None


class YamlLoader:
    """YAML/JSON file loader with optional caching."""

    def __init__(self, cache_enabled: bool = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to cache loaded files. If None, uses global settings.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else settings.cache_enabled
        self._cache: Dict[Path, Any] = {}

    def load(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML or JSON file.

        Raises:
            SchemaLoadError: If the file is missing or cannot be parsed
        """
        path = Path(file_path)

        if not path.is_file():
            raise SchemaLoadError(f"File not found: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
            if path.suffix == ".json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise SchemaLoadError(f"Failed to parse {path}: {exc}") from exc
        except OSError as exc:
            raise SchemaLoadError(f"Failed to read {path}: {exc}") from exc

        if data is None:
            data = {}

        if self.cache_enabled:
            self._cache[path] = data
        return data

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Loader cache cleared")


# Global loader instance
yaml_loader = YamlLoader()


def get_document_schema() -> dict:
    """Return the JSON Schema of model documents (cached)."""
    global _DOCUMENT_SCHEMA
    if _DOCUMENT_SCHEMA is None:
        with open(_DOCUMENT_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _DOCUMENT_SCHEMA = json.load(f)
    return _DOCUMENT_SCHEMA


def check_document(document: Any, source: str = "<document>") -> None:
    """Check the structure of a model document.

    Raises:
        SchemaLoadError: Listing every structural problem with its JSON pointer
    """
    validator = jsonschema.Draft7Validator(get_document_schema())
    problems = sorted(
        validator.iter_errors(document),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if problems:
        details = "\n".join(
            f"  - {e.message} (path=/{'/'.join(str(p) for p in e.absolute_path)})" for e in problems
        )
        raise SchemaLoadError(f"Invalid model document {source}:\n{details}")


@dataclass(frozen=True)
class ModelDocument:
    schema: Optional[SchemaDefinition] = None
    exposer: Optional[ExposerMap] = None
    table: Optional[str] = None


def parse_model_document(document: Any, source: str = "<document>") -> ModelDocument:
    """Build a ModelDocument from already-loaded data.

    Raises:
        SchemaLoadError: If the document structure is invalid
        InvalidSchemaError: If a field declares an unrecognized kind
    """
    check_document(document, source)
    schema = document.get("schema")
    exposer = document.get("exposer")
    return ModelDocument(
        schema=SchemaDefinition(schema) if schema is not None else None,
        exposer=ExposerMap(exposer) if exposer is not None else None,
        table=document.get("table"),
    )


def load_model_document(file_path: Union[str, Path], loader: YamlLoader = None) -> ModelDocument:
    """Load and parse a model document file."""
    loader = loader or yaml_loader
    document = loader.load(file_path)
    return parse_model_document(document, source=str(file_path))
