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
"""Tests for type compatibility rules and runtime value conversion."""

from __future__ import annotations

import datetime
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Optional

import pytest

from quickmap.kernel.exceptions import ValueConversionException
from quickmap.mapping.conversion import (
    are_types_compatible,
    change_type,
    convert_value,
    is_numeric,
    unwrap_optional,
)


class Animal:
    pass


class Dog(Animal):
    pass


class Status(Enum):
    ACTIVE = 1
    SUSPENDED = 2


class TestUnwrapOptional:
    def test_optional_forms(self) -> None:
        assert unwrap_optional(Optional[int]) == (int, True)
        assert unwrap_optional(int | None) == (int, True)

    def test_non_optional(self) -> None:
        assert unwrap_optional(int) == (int, False)
        assert unwrap_optional(int | str) == (int | str, False)
        assert unwrap_optional(int | str | None) == (int | str | None, False)


class TestTypeCompatibility:
    @pytest.mark.parametrize(
        ("source", "destination"),
        [
            (str, str),
            (Dog, Animal),
            (bool, int),
            (int, Any),
            (list[int], list),
            (int, int | str),
            (int | None, int),
            (int, Optional[int]),
            (Optional[str], str | None),
            (int, float),
            (float, Decimal),
            (Optional[Decimal], int),
            (Fraction, float),
        ],
    )
    def test_compatible(self, source: Any, destination: Any) -> None:
        assert are_types_compatible(source, destination)

    @pytest.mark.parametrize(
        ("source", "destination"),
        [
            (Animal, Dog),
            (str, int),
            (int, str),
            (int, bool),
            (list[str], str),
            (list[int], list[str]),
            (Optional[str], int),
        ],
    )
    def test_incompatible(self, source: Any, destination: Any) -> None:
        assert not are_types_compatible(source, destination)

    def test_bool_is_not_numeric(self) -> None:
        assert is_numeric(int)
        assert is_numeric(Decimal)
        assert not is_numeric(bool)


class TestChangeType:
    def test_numeric_and_textual(self) -> None:
        assert change_type("17", int) == 17
        assert change_type(3, float) == 3.0
        assert change_type(2.5, Decimal) == Decimal("2.5")
        assert change_type(Decimal("4.0"), int) == 4
        assert change_type(12, str) == "12"

    def test_narrowing_to_int_rounds_half_to_even(self) -> None:
        assert change_type(2.7, int) == 3
        assert change_type(2.5, int) == 2
        assert change_type(3.5, int) == 4
        assert change_type(-2.5, int) == -2
        assert change_type(Decimal("7.5"), int) == 8
        assert change_type(Fraction(5, 2), int) == 2
        assert type(change_type(Decimal("2.4"), int)) is int

    def test_narrowing_non_finite_float_fails(self) -> None:
        with pytest.raises(OverflowError):
            change_type(float("inf"), int)
        with pytest.raises(ValueError):
            change_type(float("nan"), int)

    def test_booleans(self) -> None:
        assert change_type(" True ", bool) is True
        assert change_type("false", bool) is False
        assert change_type(0, bool) is False
        with pytest.raises(ValueError):
            change_type("maybe", bool)

    def test_enums(self) -> None:
        assert change_type(2, Status) is Status.SUSPENDED
        assert change_type("ACTIVE", Status) is Status.ACTIVE
        assert change_type(Status.ACTIVE, str) == "ACTIVE"
        assert change_type(Status.SUSPENDED, int) == 2

    def test_temporal_text(self) -> None:
        assert change_type("2024-02-29", datetime.date) == datetime.date(2024, 2, 29)

    def test_unsupported_target(self) -> None:
        with pytest.raises(TypeError):
            change_type("x", Animal)


class TestConvertValue:
    def test_none_is_propagated(self) -> None:
        assert convert_value(None, int) is None

    def test_optional_target_is_unwrapped(self) -> None:
        assert convert_value("5", Optional[int]) == 5

    def test_assignable_value_is_used_as_is(self) -> None:
        dog = Dog()
        assert convert_value(dog, Animal) is dog

    def test_lenient_fallback_returns_original(self) -> None:
        assert convert_value("abc", int) == "abc"

    def test_strict_mode_raises(self) -> None:
        with pytest.raises(ValueConversionException) as exc_info:
            convert_value("abc", int, strict=True)

        assert exc_info.value.target_type is int
        assert isinstance(exc_info.value.__cause__, ValueError)
