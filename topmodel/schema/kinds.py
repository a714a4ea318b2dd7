from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT = "object"
    ARRAY = "array"
    NESTED = "nested"

    @property
    def is_object_like(self) -> bool:
        return self in (FieldKind.OBJECT, FieldKind.NESTED)

    def accepts(self, value: Any) -> bool:
        return _PREDICATES[self](value)


KIND_ALIASES = {
    "str": FieldKind.STRING,
    "text": FieldKind.STRING,
    "int": FieldKind.NUMBER,
    "integer": FieldKind.NUMBER,
    "float": FieldKind.NUMBER,
    "bool": FieldKind.BOOLEAN,
    "datetime": FieldKind.DATE,
    "dict": FieldKind.OBJECT,
    "mapping": FieldKind.OBJECT,
    "list": FieldKind.ARRAY,
}


def normalize_kind_name(kind_name: Any) -> Optional[str]:
    if kind_name is None:
        return None
    if isinstance(kind_name, FieldKind):
        return kind_name.value
    if isinstance(kind_name, str):
        return kind_name.strip().lower()
    return str(kind_name).strip().lower()


def parse_kind(kind_name: Any) -> Optional[FieldKind]:
    """Resolve a kind name (or alias) to a FieldKind, or None if unrecognized."""
    name = normalize_kind_name(kind_name)
    if not name:
        return None
    if name in KIND_ALIASES:
        return KIND_ALIASES[name]
    try:
        return FieldKind(name)
    except ValueError:
        return None


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_date(value: Any) -> bool:
    """Accept date-like values or values constructible into one.

    Strings must be ISO-8601; numbers are read as POSIX timestamps.
    """
    if isinstance(value, (date, datetime)):
        return True
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return False
        # fromisoformat only learned the trailing "Z" in 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            datetime.fromisoformat(text)
        except ValueError:
            return False
        return True
    if _is_number(value):
        try:
            datetime.fromtimestamp(float(value))
        except (OverflowError, OSError, ValueError):
            return False
        return True
    return False


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


_PREDICATES: Dict[FieldKind, Callable[[Any], bool]] = {
    FieldKind.STRING: _is_string,
    FieldKind.NUMBER: _is_number,
    FieldKind.BOOLEAN: _is_boolean,
    FieldKind.DATE: _is_date,
    FieldKind.OBJECT: _is_object,
    FieldKind.ARRAY: _is_array,
    FieldKind.NESTED: _is_object,
}
