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
"""quickmap: declarative object-to-object mapping.

Configure type pairs once, seal them into a MapperConfiguration, then map
concurrently with the Mapper it creates::

    from quickmap import MapperConfiguration

    configuration = MapperConfiguration(
        lambda cfg: cfg.create_map(User, UserDto).for_member(
            "full_name", lambda opt: opt.map_from(lambda u: f"{u.first_name} {u.last_name}")
        )
    )
    configuration.assert_configuration_is_valid()
    dto = configuration.create_mapper().map(user, UserDto)
"""

from quickmap.config.properties import MapperProperties
from quickmap.core.bootstrap import build_mapper
from quickmap.kernel.exceptions import (
    ConfigurationException,
    FieldMappingException,
    MapperException,
    MappingNotFoundException,
    NullArgumentException,
)
from quickmap.mapping import (
    Mapper,
    MapperConfiguration,
    MapperConfigurationExpression,
    MapperPort,
    MappingExpression,
    Profile,
    TypeMap,
    TypePair,
)

__all__ = [
    "build_mapper",
    "ConfigurationException",
    "FieldMappingException",
    "Mapper",
    "MapperConfiguration",
    "MapperConfigurationExpression",
    "MapperException",
    "MapperPort",
    "MapperProperties",
    "MappingExpression",
    "MappingNotFoundException",
    "NullArgumentException",
    "Profile",
    "TypeMap",
    "TypePair",
]
