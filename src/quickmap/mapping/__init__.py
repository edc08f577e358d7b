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
"""quickmap mapping: type maps, the configuration DSL, profiles and the engine."""

from quickmap.mapping.builder import MapperConfigurationExpression
from quickmap.mapping.configuration import ConfigurationState, MapperConfiguration
from quickmap.mapping.expression import MappingExpression, MemberConfigurationExpression
from quickmap.mapping.fields import FieldDescriptor, describe
from quickmap.mapping.mapper import Mapper
from quickmap.mapping.port import MapperPort
from quickmap.mapping.profile import Profile
from quickmap.mapping.property_map import PropertyMap
from quickmap.mapping.type_map import TypeMap
from quickmap.mapping.type_pair import TypePair

__all__ = [
    # Model
    "FieldDescriptor",
    "PropertyMap",
    "TypeMap",
    "TypePair",
    "describe",
    # Configuration
    "ConfigurationState",
    "MapperConfiguration",
    "MapperConfigurationExpression",
    "MappingExpression",
    "MemberConfigurationExpression",
    "Profile",
    # Execution
    "Mapper",
    "MapperPort",
]
