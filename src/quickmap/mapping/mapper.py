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
"""Mapper: the public entry point for executing mappings.

Example::

    configuration = MapperConfiguration(lambda cfg: cfg.create_map(User, UserDto))
    mapper = configuration.create_mapper()

    dto = mapper.map(user, UserDto)
    mapper.map_into(user, existing_dto)
    dtos = mapper.map_list(users, UserDto)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from quickmap.kernel.exceptions import ArgumentTypeException, require
from quickmap.mapping.engine import MappingEngine

if TYPE_CHECKING:
    from quickmap.mapping.configuration import MapperConfiguration

D = TypeVar("D")


class Mapper:
    """Maps instances between the type pairs registered in a MapperConfiguration.

    When no explicit types are passed, the source (and, for
    :meth:`map_into`, the destination) type is the runtime type of the
    instance. Lookups are exact: a subclass instance needs its own TypeMap
    or an explicit ``source_type``.
    """

    def __init__(self, configuration: MapperConfiguration) -> None:
        self._configuration = require(configuration, "configuration")
        self._engine = MappingEngine(configuration)

    @property
    def configuration(self) -> MapperConfiguration:
        return self._configuration

    def map(self, source: Any, destination_type: type[D], *, source_type: type | None = None) -> D:
        """Map *source* into a new *destination_type* instance."""
        require(source, "source")
        require(destination_type, "destination_type")
        source_type = self._resolve_type(source, source_type, "source")
        return self._engine.map(source, source_type, destination_type)

    def map_into(
        self,
        source: Any,
        destination: D,
        *,
        source_type: type | None = None,
        destination_type: type | None = None,
    ) -> D:
        """Map *source* onto the existing *destination*, returning it.

        Fields whose guard rejects the source keep their current values.
        """
        require(source, "source")
        require(destination, "destination")
        source_type = self._resolve_type(source, source_type, "source")
        destination_type = self._resolve_type(destination, destination_type, "destination")
        return self._engine.map_into(source, destination, source_type, destination_type)

    def map_list(
        self, sources: Iterable[Any], destination_type: type[D], *, source_type: type | None = None
    ) -> list[D]:
        """Map every element of *sources* to *destination_type*."""
        require(sources, "sources")
        return [self.map(source, destination_type, source_type=source_type) for source in sources]

    @staticmethod
    def _resolve_type(instance: Any, declared: type | None, argument: str) -> type:
        if declared is None:
            return type(instance)
        if isinstance(declared, type) and not isinstance(instance, declared):
            raise ArgumentTypeException(argument, declared, type(instance))
        return declared
