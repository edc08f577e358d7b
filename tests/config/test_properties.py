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
"""Tests for MapperProperties binding."""

from quickmap.config import MapperProperties
from quickmap.core.config import Config


class TestMapperProperties:
    def test_defaults(self):
        props = MapperProperties()
        assert props.strict_conversion is False
        assert props.validate_on_build is False

    def test_bind_from_library_defaults(self, tmp_path):
        config = Config.from_file(tmp_path / "missing.yaml")
        assert config.bind(MapperProperties) == MapperProperties()

    def test_bind_from_yaml(self, tmp_path):
        config_file = tmp_path / "quickmap.yaml"
        config_file.write_text(
            "quickmap:\n  mapper:\n    strict_conversion: true\n    validate_on_build: true\n"
        )
        props = Config.from_file(config_file).bind(MapperProperties)
        assert props.strict_conversion is True
        assert props.validate_on_build is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("QUICKMAP_MAPPER_VALIDATE_ON_BUILD", "1")
        props = Config({}).bind(MapperProperties)
        assert props.validate_on_build is True
        assert props.strict_conversion is False

    def test_env_false_string(self, monkeypatch):
        monkeypatch.setenv("QUICKMAP_MAPPER_STRICT_CONVERSION", "false")
        config = Config({"quickmap": {"mapper": {"strict_conversion": True}}})
        assert config.bind(MapperProperties).strict_conversion is False
