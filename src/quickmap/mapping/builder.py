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
"""MapperConfigurationExpression: the builder populated during setup.

The builder owns the TypeMaps it creates until a MapperConfiguration takes
them over and seals it; after that every mutating call is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from quickmap.kernel.exceptions import ConfigurationException, require
from quickmap.mapping.expression import MappingExpression
from quickmap.mapping.type_map import TypeMap

if TYPE_CHECKING:
    from quickmap.mapping.profile import Profile

S = TypeVar("S")
D = TypeVar("D")


class MapperConfigurationExpression:
    """Collects TypeMaps and Profiles in registration order.

    Usage::

        def configure(cfg: MapperConfigurationExpression) -> None:
            cfg.create_map(User, UserDto).reverse_map()
            cfg.add_profile(BillingProfile)

        configuration = MapperConfiguration(configure)
    """

    def __init__(self) -> None:
        self._type_maps: list[TypeMap] = []
        self._profiles: list[Profile] = []
        self._sealed = False

    @property
    def type_maps(self) -> tuple[TypeMap, ...]:
        return tuple(self._type_maps)

    @property
    def profiles(self) -> tuple[Profile, ...]:
        return tuple(self._profiles)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def _ensure_not_sealed(self) -> None:
        if self._sealed:
            raise ConfigurationException(
                "The mapper configuration is sealed and can no longer be modified",
                code="CONFIGURATION_SEALED",
            )

    def create_map(self, source_type: type[S], destination_type: type[D]) -> MappingExpression[S, D]:
        """Register a TypeMap for the pair. Duplicates are allowed; the first registered wins."""
        require(source_type, "source_type")
        require(destination_type, "destination_type")
        self._ensure_not_sealed()
        type_map = TypeMap(source_type, destination_type)
        self._type_maps.append(type_map)
        return MappingExpression(type_map, self)

    def add_profile(self, profile: Profile | type[Profile]) -> None:
        """Merge a Profile's TypeMaps, by reference. A Profile class is instantiated first."""
        from quickmap.mapping.profile import Profile

        require(profile, "profile")
        self._ensure_not_sealed()
        if isinstance(profile, type):
            if not issubclass(profile, Profile):
                raise ConfigurationException(f"'{profile.__name__}' is not a Profile subclass")
            profile = profile()
        elif not isinstance(profile, Profile):
            raise ConfigurationException(f"'{type(profile).__name__}' is not a Profile")

        self._profiles.append(profile)
        self._type_maps.extend(profile.type_maps)

    def add_profiles(self, *profiles: Profile | type[Profile]) -> None:
        for profile in profiles:
            self.add_profile(profile)

    def seal(self) -> list[TypeMap]:
        """Stop accepting configuration and hand over the owned TypeMap list."""
        self._sealed = True
        return self._type_maps
