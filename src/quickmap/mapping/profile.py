# Copyright 2026 Firefly Software Solutions Inc.
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
"""Profile: a named, independently assembled group of TypeMaps."""

from __future__ import annotations

from typing import TypeVar

from quickmap.mapping.builder import MapperConfigurationExpression
from quickmap.mapping.expression import MappingExpression
from quickmap.mapping.type_map import TypeMap

S = TypeVar("S")
D = TypeVar("D")


class Profile:
    """Groups related TypeMaps so they can be registered together.

    A Profile builds into its own private builder, invisible to any
    MapperConfiguration until it is added to one. Declare maps by
    overriding :meth:`configure`::

        class UserProfile(Profile):
            def configure(self) -> None:
                self.create_map(User, UserDto).reverse_map()

    or by calling :meth:`create_map` from ``__init__`` after ``super().__init__()``.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name: str = name or type(self).__name__
        self._expression = MapperConfigurationExpression()
        self.configure()

    def configure(self) -> None:
        """Hook for subclasses to declare their TypeMaps."""

    def create_map(self, source_type: type[S], destination_type: type[D]) -> MappingExpression[S, D]:
        return self._expression.create_map(source_type, destination_type)

    @property
    def type_maps(self) -> tuple[TypeMap, ...]:
        """The TypeMaps collected so far, in creation order."""
        return self._expression.type_maps

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, type_maps={len(self.type_maps)})"

    def __str__(self) -> str:
        return self.name
