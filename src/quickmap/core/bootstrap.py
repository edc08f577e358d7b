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
"""Mapper bootstrap: configuration, logging and registry in one call."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from quickmap.config.properties import MapperProperties
from quickmap.core.config import Config
from quickmap.logging.port import LoggingPort
from quickmap.logging.structlog_adapter import StructlogAdapter
from quickmap.mapping.builder import MapperConfigurationExpression
from quickmap.mapping.configuration import MapperConfiguration
from quickmap.mapping.mapper import Mapper
from quickmap.mapping.profile import Profile


def load_config(
    config_path: str | Path | None = None,
    active_profiles: list[str] | None = None,
) -> Config:
    """Load configuration from *config_path*, or only the library defaults when omitted.

    A directory is searched for quickmap.yaml / quickmap.toml files.
    """
    if config_path is None:
        return Config._assemble([])
    path = Path(config_path)
    if path.is_dir():
        return Config.from_sources(path, active_profiles=active_profiles)
    return Config.from_file(path, active_profiles=active_profiles)


def build_mapper(
    config_path: str | Path | None = None,
    *,
    profiles: Iterable[Profile | type[Profile]] = (),
    configure: Callable[[MapperConfigurationExpression], Any] | None = None,
    active_profiles: list[str] | None = None,
    config: Config | None = None,
    logging_adapter: LoggingPort | None = None,
) -> Mapper:
    """Build a ready-to-use Mapper.

    Startup sequence:
    1. Load configuration (file, profile overlays, env vars)
    2. Configure logging from the quickmap.logging section, through
       *logging_adapter* when given, else a StructlogAdapter
    3. Bind MapperProperties from quickmap.mapper
    4. Build and seal the MapperConfiguration (validating it when
       ``validate_on_build`` is set)
    """
    if config is None:
        config = load_config(config_path, active_profiles)

    if logging_adapter is None:
        logging_adapter = StructlogAdapter()
    logging_adapter.configure(config)
    logger = logging_adapter.get_logger("quickmap.core")

    properties = config.bind(MapperProperties)
    configuration = MapperConfiguration(configure, profiles=profiles, properties=properties)
    logger.info(
        "mapper_ready",
        type_maps=len(configuration.get_all_type_maps()),
        strict_conversion=properties.strict_conversion,
        sources=config.loaded_sources,
    )
    return configuration.create_mapper()
