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
"""Tests for MapperConfiguration: sealing, lookup, validation and concurrent use."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from quickmap.config.properties import MapperProperties
from quickmap.kernel.exceptions import ConfigurationException
from quickmap.mapping import ConfigurationState, Mapper, MapperConfiguration, Profile, TypePair

# ---------------------------------------------------------------------------
# Test types
# ---------------------------------------------------------------------------


@dataclass
class Order:
    id: int = 0
    customer: str = ""
    amount: float = 0.0


@dataclass
class OrderDto:
    id: int = 0
    customer: str = ""
    amount: float = 0.0


class OrderSummary:
    id: int
    headline: str


class Receipt:
    number: str
    total: float


class OrderProfile(Profile):
    def configure(self) -> None:
        self.create_map(Order, OrderDto)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_constructor_seals(self) -> None:
        configuration = MapperConfiguration(lambda cfg: cfg.create_map(Order, OrderDto))

        assert configuration.state is ConfigurationState.SEALED
        assert configuration.is_sealed
        assert all(tm.is_sealed for tm in configuration.get_all_type_maps())

    def test_create_mapper(self) -> None:
        configuration = MapperConfiguration(lambda cfg: cfg.create_map(Order, OrderDto))

        mapper = configuration.create_mapper()

        assert isinstance(mapper, Mapper)
        assert mapper.configuration is configuration

    def test_default_properties(self) -> None:
        configuration = MapperConfiguration()

        assert configuration.properties == MapperProperties()
        assert configuration.get_all_type_maps() == ()


class TestLookup:
    def test_first_registered_duplicate_wins(self) -> None:
        def configure(cfg) -> None:
            cfg.create_map(Order, OrderDto).for_member("customer", lambda opt: opt.use_value("first"))
            cfg.create_map(Order, OrderDto).for_member("customer", lambda opt: opt.use_value("second"))

        configuration = MapperConfiguration(configure)

        assert len(configuration.get_all_type_maps()) == 2
        assert configuration.create_mapper().map(Order(), OrderDto).customer == "first"
        assert configuration.find_type_map_for_pair(TypePair(Order, OrderDto)) is configuration.get_all_type_maps()[0]

    def test_missing_pair_returns_none(self) -> None:
        configuration = MapperConfiguration(lambda cfg: cfg.create_map(Order, OrderDto))

        assert configuration.find_type_map_for(OrderDto, Order) is None


class TestAssertConfigurationIsValid:
    def test_valid_configuration_passes(self) -> None:
        MapperConfiguration(lambda cfg: cfg.create_map(Order, OrderDto)).assert_configuration_is_valid()

    def test_errors_from_all_type_maps_are_aggregated(self) -> None:
        def configure(cfg) -> None:
            cfg.create_map(Order, OrderSummary)
            cfg.create_map(Order, OrderDto)
            cfg.create_map(Order, Receipt).for_member("total", lambda opt: opt.map_from("amount"))

        configuration = MapperConfiguration(configure)

        with pytest.raises(ConfigurationException) as exc_info:
            configuration.assert_configuration_is_valid()

        errors = exc_info.value.errors
        assert [(e.type_pair, e.field) for e in errors] == [
            ("Order -> OrderSummary", "headline"),
            ("Order -> Receipt", "number"),
        ]
        message = str(exc_info.value)
        assert "2 error(s)" in message
        assert "Order -> OrderSummary: field 'headline' is required but not mapped" in message

    def test_validate_on_build(self) -> None:
        with pytest.raises(ConfigurationException, match="headline"):
            MapperConfiguration(
                lambda cfg: cfg.create_map(Order, OrderSummary),
                properties=MapperProperties(validate_on_build=True),
            )


class TestConcurrency:
    def test_concurrent_construction_seals_shared_profile_once(self) -> None:
        profile = OrderProfile()
        barrier = threading.Barrier(8)

        def construct(_: int) -> MapperConfiguration:
            barrier.wait()
            return MapperConfiguration(profiles=[profile])

        with ThreadPoolExecutor(max_workers=8) as pool:
            configurations = list(pool.map(construct, range(8)))

        [type_map] = profile.type_maps
        assert [pm.destination_name for pm in type_map.property_maps] == ["id", "customer", "amount"]
        assert all(c.get_all_type_maps()[0] is type_map for c in configurations)

    def test_concurrent_mapping_on_one_mapper(self) -> None:
        mapper = MapperConfiguration(
            lambda cfg: cfg.create_map(Order, OrderDto).for_member(
                "customer", lambda opt: opt.map_from(lambda o: f"customer-{o.id}")
            )
        ).create_mapper()
        orders = [Order(id=i, amount=i * 1.5) for i in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda o: mapper.map(o, OrderDto), orders))

        assert results == [OrderDto(id=i, customer=f"customer-{i}", amount=i * 1.5) for i in range(500)]
