"""Schema definitions and validation.

This package has no dependency on the model or persistence layers so that
validation stays a pure function of (schema, data).
"""

from .kinds import FieldKind
from .definition import MISSING, FieldSpec, SchemaDefinition
from .validator import (
    NOT_IN_SCHEMA,
    REQUIRED,
    FieldError,
    ValidationOutcome,
    invalid_type_message,
    validate,
)
