"""topmodel: schema validation, field projection and persistence glue for plain records."""

__version__ = "0.3.0"

from .exceptions import (
    InvalidExposerError,
    InvalidSchemaError,
    ModelValidationError,
    TopModelError,
    UnknownProjectionError,
)
from .schema import FieldError, FieldKind, FieldSpec, SchemaDefinition, ValidationOutcome, validate
from .exposer import ExposerMap, expose
from .model import Model, ModelConfig

__all__ = [
    "ExposerMap",
    "FieldError",
    "FieldKind",
    "FieldSpec",
    "InvalidExposerError",
    "InvalidSchemaError",
    "Model",
    "ModelConfig",
    "ModelValidationError",
    "SchemaDefinition",
    "TopModelError",
    "UnknownProjectionError",
    "ValidationOutcome",
    "expose",
    "validate",
]
