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
"""MapperConfiguration: the sealed registry every mapping call consults.

Lifecycle::

    BUILDING --(constructor seals once, under a lock)--> SEALED

Once sealed, the TypeMaps are read-only and may be shared by any number of
threads mapping concurrently.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from quickmap.config.properties import MapperProperties
from quickmap.kernel.exceptions import ConfigurationException, require
from quickmap.kernel.types import FieldError
from quickmap.mapping.builder import MapperConfigurationExpression
from quickmap.mapping.profile import Profile
from quickmap.mapping.type_map import TypeMap
from quickmap.mapping.type_pair import TypePair

if TYPE_CHECKING:
    from quickmap.mapping.mapper import Mapper

logger = logging.getLogger(__name__)


class ConfigurationState(Enum):
    BUILDING = "BUILDING"
    SEALED = "SEALED"


class MapperConfiguration:
    """Owns every TypeMap, seals them and validates them.

    Args:
        configure: A callable receiving a fresh builder, or an already
            populated :class:`MapperConfigurationExpression`.
        profiles: Profiles (instances or classes) merged after *configure* runs.
        properties: Engine settings; defaults to :class:`MapperProperties`.

    Usage::

        configuration = MapperConfiguration(
            lambda cfg: cfg.create_map(User, UserDto),
            profiles=[BillingProfile],
        )
        configuration.assert_configuration_is_valid()
        mapper = configuration.create_mapper()
    """

    # Shared by all registries: Profile TypeMaps may be merged into several.
    _seal_lock = threading.Lock()

    def __init__(
        self,
        configure: Callable[[MapperConfigurationExpression], Any] | MapperConfigurationExpression | None = None,
        *,
        profiles: Iterable[Profile | type[Profile]] = (),
        properties: MapperProperties | None = None,
    ) -> None:
        self._state = ConfigurationState.BUILDING
        self._properties = properties or MapperProperties()

        if isinstance(configure, MapperConfigurationExpression):
            expression = configure
        else:
            expression = MapperConfigurationExpression()
            if configure is not None:
                configure(expression)
        expression.add_profiles(*profiles)

        self._expression = expression
        self._type_maps: list[TypeMap] = []
        self._seal()

        if self._properties.validate_on_build:
            self.assert_configuration_is_valid()

    @property
    def state(self) -> ConfigurationState:
        return self._state

    @property
    def is_sealed(self) -> bool:
        return self._state is ConfigurationState.SEALED

    @property
    def properties(self) -> MapperProperties:
        return self._properties

    @property
    def profiles(self) -> tuple[Profile, ...]:
        return self._expression.profiles

    def _seal(self) -> None:
        with self._seal_lock:
            if self._state is ConfigurationState.SEALED:
                return
            start = time.perf_counter()
            type_maps = self._expression.seal()
            for type_map in type_maps:
                type_map.seal()
            self._type_maps = type_maps
            self._state = ConfigurationState.SEALED

        logger.info(
            "Mapper configuration sealed: %d type map(s) from %d profile(s) in %.2fms",
            len(self._type_maps),
            len(self._expression.profiles),
            (time.perf_counter() - start) * 1000,
        )

    def create_mapper(self) -> Mapper:
        """Create a Mapper backed by this configuration."""
        if not self.is_sealed:
            raise ConfigurationException(
                "The configuration must be sealed before a mapper is created",
                code="CONFIGURATION_NOT_SEALED",
            )
        from quickmap.mapping.mapper import Mapper

        return Mapper(self)

    def assert_configuration_is_valid(self) -> None:
        """Validate every TypeMap and raise one ConfigurationException listing all problems."""
        errors: list[FieldError] = []
        for type_map in self._type_maps:
            errors.extend(type_map.validation_errors())

        if errors:
            logger.warning("Mapper configuration is invalid: %d error(s)", len(errors))
            raise ConfigurationException.from_errors(errors)
        logger.debug("Mapper configuration is valid (%d type maps)", len(self._type_maps))

    def get_all_type_maps(self) -> tuple[TypeMap, ...]:
        return tuple(self._type_maps)

    def find_type_map_for(self, source_type: type, destination_type: type) -> TypeMap | None:
        """First registered TypeMap for the pair, or ``None``."""
        return self.find_type_map_for_pair(TypePair(source_type, destination_type))

    def find_type_map_for_pair(self, type_pair: TypePair) -> TypeMap | None:
        require(type_pair, "type_pair")
        for type_map in self._type_maps:
            if type_map.type_pair == type_pair:
                return type_map
        return None

    def __repr__(self) -> str:
        return f"MapperConfiguration(state={self._state.value}, type_maps={len(self._type_maps)})"
