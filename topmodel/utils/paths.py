from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple


FieldPath = str

PATH_SEPARATOR = "."


def join_path(base: Optional[FieldPath], token: str) -> FieldPath:
    if not base:
        return token
    if not token:
        return base
    return f"{base}{PATH_SEPARATOR}{token}"


def split_path(path: FieldPath) -> Tuple[str, ...]:
    return tuple(path.split(PATH_SEPARATOR))


def flatten(data: Mapping, prefix: FieldPath = "") -> Dict[FieldPath, Any]:
    """Flatten nested mappings into dotted keys.

    Non-empty nested mappings are descended into; every other value
    (lists, scalars, empty mappings) is kept as a leaf.

    >>> flatten({"job": {"title": "dev"}, "id": 1})
    {'job.title': 'dev', 'id': 1}
    """
    flat: Dict[FieldPath, Any] = {}
    for key, value in data.items():
        path = join_path(prefix, str(key))
        if isinstance(value, Mapping) and value:
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat
