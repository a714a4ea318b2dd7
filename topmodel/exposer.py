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

"""Named field projections ("exposers")."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Tuple

from .exceptions import InvalidExposerError, UnknownProjectionError
from .utils.paths import FieldPath, split_path


class ExposerMap(Mapping):
    """Read-only mapping of projection name to an ordered tuple of field paths."""

    def __init__(self, projections: Mapping[str, Any]):
        if isinstance(projections, ExposerMap):
            self._projections = projections._projections
            return
        if not isinstance(projections, Mapping):
            raise InvalidExposerError(f"Exposer must be a mapping, got {type(projections).__name__}")

        built: Dict[str, Tuple[FieldPath, ...]] = {}
        for name, paths in projections.items():
            if not isinstance(name, str) or not name:
                raise InvalidExposerError(f"Projection names must be non-empty strings, got {name!r}")
            if isinstance(paths, (str, bytes)) or not isinstance(paths, (list, tuple)):
                raise InvalidExposerError(f"Projection '{name}' must be a list of field paths")
            for path in paths:
                if not isinstance(path, str) or not all(split_path(path)):
                    raise InvalidExposerError(f"Projection '{name}' has an invalid field path: {path!r}")
            built[name] = tuple(paths)
        self._projections = MappingProxyType(built)

    def __getitem__(self, name: str) -> Tuple[FieldPath, ...]:
        return self._projections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._projections)

    def __len__(self) -> int:
        return len(self._projections)

    def __repr__(self) -> str:
        return f"ExposerMap({dict(self._projections)!r})"


_ABSENT = object()


def _lookup(data: Mapping, tokens: Tuple[str, ...]) -> Any:
    current: Any = data
    for token in tokens:
        if not isinstance(current, Mapping) or token not in current:
            return _ABSENT
        current = current[token]
    return current


def _place(target: Dict[str, Any], tokens: Tuple[str, ...], value: Any) -> None:
    for token in tokens[:-1]:
        child = target.get(token)
        if not isinstance(child, dict):
            child = {}
            target[token] = child
        target = child
    target[tokens[-1]] = value


def expose(exposer_map: Optional[Mapping], name: str, data: Mapping) -> Dict[str, Any]:
    """Project data onto the field paths of a named projection.

    Dotted paths produce nested objects mirroring the path. Missing source
    keys are skipped. Values are deep-copied; data is never mutated.

    Raises:
        UnknownProjectionError: If name is not declared in exposer_map
    """
    if not exposer_map or name not in exposer_map:
        raise UnknownProjectionError(name)
    if not isinstance(exposer_map, ExposerMap):
        exposer_map = ExposerMap(exposer_map)

    output: Dict[str, Any] = {}
    for path in exposer_map[name]:
        tokens = split_path(path)
        value = _lookup(data, tokens)
        if value is _ABSENT:
            continue
        _place(output, tokens, copy.deepcopy(value))
    return output
