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

"""Declarative schema definitions.

A schema is built once from a mapping of field name to field spec and is
read-only afterwards. Field specs may be given as:

- a :class:`FieldSpec`,
- a mapping ``{"kind": ..., "required": ..., "default": ..., "sub": ...}``
  (``type`` is accepted in place of ``kind``),
- a bare kind name such as ``"string"``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Optional

from ..exceptions import InvalidSchemaError
from ..utils.paths import join_path
from .kinds import FieldKind, parse_kind


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Sentinel for "no default declared"; None is a legitimate default.
MISSING: Any = _Missing()

_SPEC_KEYS = {"kind", "type", "required", "default", "sub"}


@dataclass(frozen=True)
class FieldSpec:
    kind: FieldKind
    required: bool = False
    default: Any = MISSING
    sub: Optional["SchemaDefinition"] = None

    def __post_init__(self) -> None:
        kind = parse_kind(self.kind)
        if kind is None:
            raise InvalidSchemaError(f"unrecognized kind '{self.kind}'", kind=str(self.kind))
        object.__setattr__(self, "kind", kind)

        if not isinstance(self.required, bool):
            raise InvalidSchemaError(f"'required' must be a boolean, got {type(self.required).__name__}")

        if self.sub is not None:
            if not kind.is_object_like:
                raise InvalidSchemaError(f"'sub' schema requires an object kind, got '{kind.value}'")
            if not isinstance(self.sub, SchemaDefinition):
                if not isinstance(self.sub, Mapping):
                    raise InvalidSchemaError(f"'sub' must be a mapping, got {type(self.sub).__name__}")
                object.__setattr__(self, "sub", SchemaDefinition(self.sub))

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def materialize_default(self) -> Any:
        """Produce a fresh default value.

        Zero-argument producers are called; literal values are deep-copied so
        that no two validation runs share a mutable default.
        """
        if callable(self.default):
            return self.default()
        return copy.deepcopy(self.default)


def _build_field(raw: Any) -> FieldSpec:
    if isinstance(raw, FieldSpec):
        return raw

    if isinstance(raw, (str, FieldKind)):
        return FieldSpec(kind=raw)

    if not isinstance(raw, Mapping):
        raise InvalidSchemaError(
            f"field spec must be a mapping or a kind name, got {type(raw).__name__}"
        )

    unknown = [k for k in raw if k not in _SPEC_KEYS]
    if unknown:
        raise InvalidSchemaError(f"unknown spec key(s): {', '.join(sorted(map(str, unknown)))}")

    if "kind" in raw and "type" in raw:
        raise InvalidSchemaError("both 'kind' and 'type' given")
    kind = raw.get("kind", raw.get("type"))
    if kind is None:
        raise InvalidSchemaError("missing 'kind'")

    return FieldSpec(
        kind=kind,
        required=raw.get("required", False),
        default=raw.get("default", MISSING),
        sub=raw.get("sub"),
    )


class SchemaDefinition(Mapping):
    """Read-only mapping of field name to :class:`FieldSpec`.

    Declaration order is preserved and drives error ordering.
    """

    def __init__(self, fields: Mapping[str, Any]):
        if isinstance(fields, SchemaDefinition):
            self._fields = fields._fields
            return
        if not isinstance(fields, Mapping):
            raise InvalidSchemaError(f"schema must be a mapping, got {type(fields).__name__}")

        built = {}
        for name, raw in fields.items():
            if not isinstance(name, str) or not name:
                raise InvalidSchemaError(f"field names must be non-empty strings, got {name!r}")
            try:
                built[name] = _build_field(raw)
            except InvalidSchemaError as exc:
                raise InvalidSchemaError(
                    exc.detail, field=join_path(name, exc.field), kind=exc.kind
                ) from exc
        self._fields = MappingProxyType(built)

    def __getitem__(self, name: str) -> FieldSpec:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}: {spec.kind.value}" for name, spec in self._fields.items())
        return f"SchemaDefinition({{{inner}}})"
