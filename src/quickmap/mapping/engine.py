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
"""MappingEngine: stateless executor of sealed TypeMaps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from quickmap.kernel.exceptions import (
    ConstructionException,
    FieldMappingException,
    MappingNotFoundException,
    require,
)
from quickmap.mapping.conversion import convert_value
from quickmap.mapping.property_map import PropertyMap
from quickmap.mapping.type_map import TypeMap

if TYPE_CHECKING:
    from quickmap.mapping.configuration import MapperConfiguration

logger = logging.getLogger(__name__)


class MappingEngine:
    """Builds or populates destination instances from a sealed configuration.

    The engine never mutates the configuration, so one engine can serve
    concurrent mapping calls. Thread safety of user-supplied producers,
    guards and hooks is the caller's concern.
    """

    def __init__(self, configuration: MapperConfiguration) -> None:
        self._configuration = require(configuration, "configuration")
        self._strict = configuration.properties.strict_conversion

    def map(self, source: Any, source_type: type, destination_type: type) -> Any:
        """Map *source* into a new instance of *destination_type*."""
        type_map = self._find_type_map(source_type, destination_type)
        destination = self._create_destination(type_map, source)
        self._map_properties(type_map, source, destination)
        return destination

    def map_into(self, source: Any, destination: Any, source_type: type, destination_type: type) -> Any:
        """Map *source* onto an existing *destination* and return it."""
        type_map = self._find_type_map(source_type, destination_type)
        self._map_properties(type_map, source, destination)
        return destination

    def _find_type_map(self, source_type: type, destination_type: type) -> TypeMap:
        type_map = self._configuration.find_type_map_for(source_type, destination_type)
        if type_map is None:
            logger.debug(
                "No type map registered for %s -> %s",
                getattr(source_type, "__name__", source_type),
                getattr(destination_type, "__name__", destination_type),
            )
            raise MappingNotFoundException(source_type, destination_type)
        return type_map

    @staticmethod
    def _create_destination(type_map: TypeMap, source: Any) -> Any:
        if type_map.custom_constructor is not None:
            try:
                return type_map.custom_constructor(source)
            except Exception as exc:
                raise ConstructionException(
                    type_map.destination_type, f"custom constructor raised {exc!r}"
                ) from exc
        try:
            return type_map.destination_type()
        except Exception as exc:
            raise ConstructionException(type_map.destination_type, str(exc)) from exc

    def _map_properties(self, type_map: TypeMap, source: Any, destination: Any) -> None:
        if type_map.before_map is not None:
            type_map.before_map(source, destination)

        for property_map in type_map.property_maps:
            if property_map.ignored:
                continue
            try:
                self._map_property(property_map, source, destination)
            except Exception as exc:
                raise FieldMappingException(
                    property_map.destination_name, type_map.source_type, type_map.destination_type
                ) from exc

        if type_map.after_map is not None:
            type_map.after_map(source, destination)

    def _map_property(self, property_map: PropertyMap, source: Any, destination: Any) -> None:
        value = property_map.resolve_value(source)

        if not property_map.should_map(source):
            return

        target_type = property_map.destination_field.field_type
        if value is not None and type(value) is not target_type:
            value = convert_value(value, target_type, strict=self._strict)

        property_map.write(destination, value)
