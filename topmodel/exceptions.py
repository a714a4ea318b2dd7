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

"""Custom exceptions for topmodel."""

from typing import Iterable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .schema.validator import FieldError


class TopModelError(Exception):
    """Base exception for topmodel related errors."""
    pass


class InvalidSchemaError(TopModelError):
    """Exception raised when a schema definition is malformed.

    ``field`` holds the dotted path of the offending field and ``kind`` the
    unrecognized kind, when the error is about one.
    """

    def __init__(self, detail: str, field: str = None, kind: str = None):
        if field:
            message = f"Invalid schema field '{field}': {detail}"
        else:
            message = f"Invalid schema: {detail}"
        super().__init__(message)
        self.detail = detail
        self.field = field
        self.kind = kind


class InvalidExposerError(TopModelError):
    """Exception raised when a projection map is malformed."""
    pass


class UnknownProjectionError(TopModelError):
    """Exception raised when exposing with an undeclared projection name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown projection '{name}'")
        self.name = name


class SchemaLoadError(TopModelError):
    """Exception raised when a model document cannot be loaded."""
    pass


class ModelValidationError(TopModelError):
    """Aggregate validation failure raised by ``Model.validate()``."""

    def __init__(self, errors: Iterable["FieldError"]):
        self.errors: Tuple["FieldError", ...] = tuple(errors)
        details = "\n".join(f"  - {e.key}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed with {len(self.errors)} error(s):\n{details}")


class MissingAdapterError(TopModelError):
    """Exception raised when a persistence call is made without a db adapter."""
    pass


class AdapterError(TopModelError):
    """Base exception for persistence adapter errors."""
    pass


class MissingCollectionOrDataError(AdapterError):
    """Exception raised when a query has no collection or no data."""

    def __init__(self, message: str = "Missing collection or data in query"):
        super().__init__(message)


class MissingIdError(AdapterError):
    """Exception raised when an update has no id."""

    def __init__(self, message: str = "Missing `id` or `_id` in params or data"):
        super().__init__(message)


class RecordNotFoundError(AdapterError):
    """Exception raised when an update targets an unknown record."""
    pass


class DuplicateRecordError(AdapterError):
    """Exception raised when a create reuses the id of a stored record."""
    pass
