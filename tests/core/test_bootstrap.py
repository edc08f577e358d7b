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
"""Tests for build_mapper: configuration, logging and registry wired together."""

import logging
from dataclasses import dataclass

import pytest

from quickmap import build_mapper
from quickmap.core.bootstrap import load_config
from quickmap.core.config import Config
from quickmap.kernel.exceptions import (
    ConfigurationException,
    FieldMappingException,
    ValueConversionException,
)
from quickmap.logging import LoggingPort
from quickmap.mapping import Mapper, Profile


@dataclass
class Reading:
    sensor: str = ""
    value: str = ""


@dataclass
class ReadingDto:
    sensor: str = ""
    value: int = 0


@dataclass
class Alert:
    sensor: str
    severity: int


class RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def info(self, event: str, **fields) -> None:
        self.events.append((event, fields))


class RecordingLogging:
    def __init__(self) -> None:
        self.configured_with: Config | None = None
        self.logger = RecordingLogger()
        self.requested: list[str] = []

    def configure(self, config: Config) -> None:
        self.configured_with = config

    def get_logger(self, name: str) -> RecordingLogger:
        self.requested.append(name)
        return self.logger

    def set_level(self, name: str, level: str) -> None:
        pass


class ReadingProfile(Profile):
    def configure(self) -> None:
        self.create_map(Reading, ReadingDto).for_member(
            "value", lambda opt: opt.map_from(lambda src: src.value)
        )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestLoadConfig:
    def test_defaults_only_without_path(self):
        config = load_config()
        assert config.get("quickmap.mapper.strict_conversion") is False
        assert config.loaded_sources == ["quickmap-defaults.yaml (library defaults)"]

    def test_directory_is_searched(self, tmp_path):
        (tmp_path / "quickmap.yaml").write_text("quickmap:\n  mapper:\n    strict_conversion: true\n")
        config = load_config(tmp_path)
        assert config.get("quickmap.mapper.strict_conversion") is True


class TestBuildMapper:
    def test_defaults_give_lenient_mapper(self):
        mapper = build_mapper(profiles=[ReadingProfile])
        assert isinstance(mapper, Mapper)
        assert mapper.configuration.properties.strict_conversion is False

        dto = mapper.map(Reading(sensor="t1", value="42"), ReadingDto)
        assert dto == ReadingDto(sensor="t1", value=42)

        dto = mapper.map(Reading(sensor="t1", value="n/a"), ReadingDto)
        assert dto.value == "n/a"

    def test_strict_conversion_from_file(self, tmp_path):
        config_file = tmp_path / "quickmap.yaml"
        config_file.write_text("quickmap:\n  mapper:\n    strict_conversion: true\n")

        mapper = build_mapper(config_file, profiles=[ReadingProfile()])
        assert mapper.configuration.properties.strict_conversion is True

        with pytest.raises(FieldMappingException) as exc_info:
            mapper.map(Reading(sensor="t1", value="n/a"), ReadingDto)
        assert exc_info.value.field == "value"
        assert isinstance(exc_info.value.__cause__, ValueConversionException)

    def test_strict_conversion_from_env(self, monkeypatch):
        monkeypatch.setenv("QUICKMAP_MAPPER_STRICT_CONVERSION", "true")
        mapper = build_mapper(profiles=[ReadingProfile])
        assert mapper.configuration.properties.strict_conversion is True

    def test_configure_callback(self):
        mapper = build_mapper(configure=lambda cfg: cfg.create_map(Reading, Reading))
        copy = mapper.map(Reading(sensor="t2", value="7"), Reading)
        assert copy == Reading(sensor="t2", value="7")

    def test_validate_on_build_rejects_invalid_configuration(self):
        config = Config({"quickmap": {"mapper": {"validate_on_build": True}}})
        with pytest.raises(ConfigurationException) as exc_info:
            build_mapper(config=config, configure=lambda cfg: cfg.create_map(Reading, Alert))
        assert [error.field for error in exc_info.value.errors] == ["severity"]

    def test_active_profile_overlay(self, tmp_path):
        (tmp_path / "quickmap.yaml").write_text("quickmap:\n  mapper:\n    strict_conversion: false\n")
        (tmp_path / "quickmap-strict.yaml").write_text("quickmap:\n  mapper:\n    strict_conversion: true\n")

        mapper = build_mapper(tmp_path, profiles=[ReadingProfile], active_profiles=["strict"])
        assert mapper.configuration.properties.strict_conversion is True

    def test_custom_logging_adapter_receives_config_and_ready_event(self):
        adapter = RecordingLogging()
        assert isinstance(adapter, LoggingPort)
        root_handlers = list(logging.getLogger().handlers)
        config = Config({"quickmap": {"mapper": {"strict_conversion": True}}})

        build_mapper(config=config, profiles=[ReadingProfile], logging_adapter=adapter)

        assert adapter.configured_with is config
        assert adapter.requested == ["quickmap.core"]
        [(event, fields)] = adapter.logger.events
        assert event == "mapper_ready"
        assert fields["type_maps"] == 1
        assert fields["strict_conversion"] is True
        assert logging.getLogger().handlers == root_handlers
