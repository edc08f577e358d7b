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
"""Mapper configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from quickmap.core.config import config_properties


@config_properties(prefix="quickmap.mapper")
@dataclass
class MapperProperties:
    """Configuration for the mapping engine (quickmap.mapper.*).

    Attributes:
        strict_conversion: Raise instead of storing the unconverted value
            when a runtime value cannot be converted to the destination
            field's declared type.
        validate_on_build: Run ``assert_configuration_is_valid()`` right
            after the configuration is sealed.
    """

    strict_conversion: bool = False
    validate_on_build: bool = False
