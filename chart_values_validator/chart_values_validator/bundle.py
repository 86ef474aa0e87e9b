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

"""Configuration bundle tree consumed by the validator.

A bundle is a chart-like node: its own name, an optional raw JSON Schema
document, and ordered child bundles. Child values are scoped by name, so a
child called ``db`` validates ``values["db"]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional, Union

from .exceptions import StructuralMismatchError


@dataclass
class Bundle:
    """A named bundle with an optional raw schema and ordered dependencies."""

    name: str
    schema: Optional[Union[bytes, str]] = None
    dependencies: List["Bundle"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.schema, str):
            self.schema = self.schema.encode("utf-8")

    @property
    def has_schema(self) -> bool:
        return self.schema is not None

    def walk(self) -> Iterator["Bundle"]:
        """Yield this bundle and all descendants, parent first, depth first."""
        yield self
        for child in self.dependencies:
            yield from child.walk()


def scoped_values(values: Mapping[str, Any], child_name: str) -> Mapping[str, Any]:
    """Return the value subtree that belongs to ``child_name``.

    Raises:
        StructuralMismatchError: If the key is missing or does not hold a map.
    """
    if child_name not in values:
        raise StructuralMismatchError(
            f"values have no entry for dependency '{child_name}'"
        )
    subtree = values[child_name]
    if not isinstance(subtree, Mapping):
        raise StructuralMismatchError(
            f"values for dependency '{child_name}' must be a map, got {type(subtree).__name__}"
        )
    return subtree
