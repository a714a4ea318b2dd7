from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

from ..utils.paths import FieldPath, join_path
from .definition import SchemaDefinition


NOT_IN_SCHEMA = "not in schema"
REQUIRED = "required"


def invalid_type_message(kind_name: str) -> str:
    return f"invalid type, expected {kind_name}"


@dataclass(frozen=True)
class FieldError:
    key: FieldPath
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "message": self.message}


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of a validation run: either ``values`` or ``errors``, never both."""

    values: Optional[Mapping] = None
    errors: Tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        if self.errors and self.values is not None:
            raise ValueError("ValidationOutcome cannot carry both values and errors")
        if not self.errors and self.values is None:
            raise ValueError("ValidationOutcome needs either values or errors")
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.values is not None and not isinstance(self.values, MappingProxyType):
            object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def success(cls, values: Mapping) -> "ValidationOutcome":
        return cls(values=values)

    @classmethod
    def failure(cls, errors: List[FieldError]) -> "ValidationOutcome":
        return cls(errors=tuple(errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"values": dict(self.values)}
        return {"errors": [e.to_dict() for e in self.errors]}


def validate(schema: Union[SchemaDefinition, Mapping], data: Any) -> ValidationOutcome:
    """Validate data against schema.

    Every level of nesting is checked and all errors are collected before
    returning. Nested error keys are dotted (``job.title``).

    Args:
        schema: Schema to validate against, or a plain mapping of field specs
        data: Mapping to validate

    Returns:
        ValidationOutcome with normalized values (defaults applied), or the
        full list of FieldError objects
    """
    if not isinstance(schema, SchemaDefinition):
        schema = SchemaDefinition(schema)
    if not isinstance(data, Mapping):
        return ValidationOutcome.failure([FieldError("", invalid_type_message("object"))])

    errors: List[FieldError] = []
    values = _validate_object(schema, data, path="", errors=errors)
    if errors:
        return ValidationOutcome.failure(errors)
    return ValidationOutcome.success(values)


def _validate_object(
    schema: SchemaDefinition, data: Mapping, *, path: FieldPath, errors: List[FieldError]
) -> Dict[str, Any]:
    values: Dict[str, Any] = {}

    # Unknown keys first, in data order.
    for key in data:
        if key not in schema:
            errors.append(FieldError(join_path(path, str(key)), NOT_IN_SCHEMA))

    for name, spec in schema.items():
        field_path = join_path(path, name)

        if name not in data:
            if spec.required:
                errors.append(FieldError(field_path, REQUIRED))
            elif spec.has_default:
                values[name] = spec.materialize_default()
            continue

        value = data[name]
        if not spec.kind.accepts(value):
            errors.append(FieldError(field_path, invalid_type_message(spec.kind.value)))
            continue

        if spec.sub is not None:
            values[name] = _validate_object(spec.sub, value, path=field_path, errors=errors)
        else:
            values[name] = copy.deepcopy(value)

    return values
