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
"""TypeMap: the full mapping configuration for one TypePair.

A TypeMap is mutable while the configuration is being built. ``seal()``
fills in automatic same-name matches once and locks it; ``validate()`` is
only meaningful afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from quickmap.kernel.exceptions import ConfigurationException
from quickmap.kernel.types import FieldError
from quickmap.mapping.conversion import are_types_compatible
from quickmap.mapping.fields import FieldDescriptor, describe, find_field
from quickmap.mapping.property_map import PropertyMap
from quickmap.mapping.type_pair import TypePair


class TypeMap:
    """Ordered PropertyMaps plus construction and before/after hooks for a TypePair.

    PropertyMaps keep declaration order for explicit configuration, followed
    by automatic matches in destination field order.
    """

    def __init__(self, source_type: type, destination_type: type) -> None:
        self.type_pair = TypePair(source_type, destination_type)
        self.custom_constructor: Callable[[Any], Any] | None = None
        self.before_map: Callable[[Any, Any], None] | None = None
        self.after_map: Callable[[Any, Any], None] | None = None
        self._property_maps: list[PropertyMap] = []
        self._sealed = False

    @property
    def source_type(self) -> type:
        return self.type_pair.source_type

    @property
    def destination_type(self) -> type:
        return self.type_pair.destination_type

    @property
    def property_maps(self) -> tuple[PropertyMap, ...]:
        return tuple(self._property_maps)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def ensure_not_sealed(self) -> None:
        if self._sealed:
            raise ConfigurationException(
                f"The type map {self.type_pair} is sealed and can no longer be configured",
                code="CONFIGURATION_SEALED",
            )

    def add_property_map(self, property_map: PropertyMap) -> None:
        self.ensure_not_sealed()
        self._property_maps.append(property_map)

    def find_property_map_for(self, destination_name: str) -> PropertyMap | None:
        """Find the PropertyMap of a destination field, ignoring case."""
        folded = destination_name.casefold()
        for property_map in self._property_maps:
            if property_map.destination_name.casefold() == folded:
                return property_map
        return None

    def get_or_create_property_map(self, destination_field: FieldDescriptor) -> PropertyMap:
        for property_map in self._property_maps:
            if property_map.destination_name == destination_field.name:
                return property_map
        property_map = PropertyMap(destination_field)
        self.add_property_map(property_map)
        return property_map

    def destination_field(self, name: str) -> FieldDescriptor | None:
        return find_field(self.destination_type, name)

    def source_field(self, name: str) -> FieldDescriptor | None:
        return find_field(self.source_type, name, ignore_case=True)

    def seal(self) -> None:
        """Build automatic PropertyMaps and lock the TypeMap. Idempotent."""
        if self._sealed:
            return
        self._build_automatic_property_maps()
        self._sealed = True

    def _build_automatic_property_maps(self) -> None:
        for property_map in self._property_maps:
            if property_map.source_field is None and not property_map.has_value_producer:
                property_map.source_field = self._matching_source(property_map.destination_field)

        configured = {property_map.destination_name for property_map in self._property_maps}
        for destination in describe(self.destination_type):
            if not destination.writable or destination.name in configured:
                continue
            source = self._matching_source(destination)
            if source is not None:
                self._property_maps.append(PropertyMap(destination, source_field=source))

    def _matching_source(self, destination: FieldDescriptor) -> FieldDescriptor | None:
        """Same-named (ignoring case), readable, type-compatible source field."""
        source = self.source_field(destination.name)
        if source is None or not source.readable:
            return None
        if not are_types_compatible(source.field_type, destination.field_type):
            return None
        return source

    def validation_errors(self) -> list[FieldError]:
        """Collect every configuration problem of this TypeMap."""
        if not self._sealed:
            raise ConfigurationException(
                f"The type map {self.type_pair} must be sealed before it is validated",
                code="CONFIGURATION_NOT_SEALED",
            )
        pair = str(self.type_pair)
        errors: list[FieldError] = []
        for property_map in self._property_maps:
            errors.extend(property_map.validation_errors(pair))

        mapped = {property_map.destination_name for property_map in self._property_maps}
        for destination in describe(self.destination_type):
            if destination.writable and destination.required and destination.name not in mapped:
                errors.append(FieldError(destination.name, "is required but not mapped", pair))
        return errors

    def validate(self) -> None:
        errors = self.validation_errors()
        if errors:
            raise ConfigurationException.from_errors(errors)

    def __repr__(self) -> str:
        return f"TypeMap({self.type_pair}, property_maps={len(self._property_maps)}, sealed={self._sealed})"
