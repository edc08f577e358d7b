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
"""Type compatibility rules and runtime value conversion."""

from __future__ import annotations

import datetime
import decimal
import fractions
import logging
import numbers
import types
from enum import Enum
from typing import Any, Union, get_args, get_origin

from quickmap.kernel.exceptions import ValueConversionException

logger = logging.getLogger(__name__)

NUMERIC_TYPES: tuple[type, ...] = (int, float, decimal.Decimal, fractions.Fraction)

_TEMPORAL_TYPES: tuple[type, ...] = (datetime.datetime, datetime.date, datetime.time)

_CONVERSION_ERRORS = (TypeError, ValueError, ArithmeticError, KeyError)


def _is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Split ``Optional[T]`` / ``T | None`` into ``(T, True)``; other types give ``(tp, False)``."""
    if _is_union(tp):
        args = get_args(tp)
        inner = [arg for arg in args if arg is not type(None)]
        if len(args) == 2 and len(inner) == 1:
            return inner[0], True
    return tp, False


def is_numeric(tp: Any) -> bool:
    """Numeric scalars of any width or precision; ``bool`` is not numeric."""
    return tp in NUMERIC_TYPES


def is_assignable(source_type: Any, destination_type: Any) -> bool:
    """Whether a value declared as *source_type* can be stored as *destination_type* unchanged."""
    if destination_type is Any or destination_type is object:
        return True
    if _is_union(destination_type):
        return any(is_assignable(source_type, arg) for arg in get_args(destination_type))

    source_cls = get_origin(source_type) or source_type
    destination_cls = get_origin(destination_type) or destination_type
    if not (isinstance(source_cls, type) and isinstance(destination_cls, type)):
        return False
    if not issubclass(source_cls, destination_cls):
        return False
    destination_args = get_args(destination_type)
    return not destination_args or get_args(source_type) == destination_args


def are_types_compatible(source_type: Any, destination_type: Any) -> bool:
    """Decide whether a same-named source field may feed a destination field.

    Checked in order: identical types, assignable destination, optional
    wrapper of the same underlying type in either direction, and numeric
    scalars on both sides (width and precision are settled at runtime).
    """
    if source_type == destination_type:
        return True
    if is_assignable(source_type, destination_type):
        return True

    source_inner, source_optional = unwrap_optional(source_type)
    destination_inner, destination_optional = unwrap_optional(destination_type)
    if (source_optional or destination_optional) and source_inner == destination_inner:
        return True

    return is_numeric(source_inner) and is_numeric(destination_inner)


def is_instance_of(value: Any, tp: Any) -> bool:
    """``isinstance`` for annotations; types that cannot be checked accept any value."""
    if tp is Any or tp is object:
        return True
    if _is_union(tp):
        return any(is_instance_of(value, arg) for arg in get_args(tp))
    cls = get_origin(tp) or tp
    if not isinstance(cls, type):
        return True
    return isinstance(value, cls)


def change_type(value: Any, target: type) -> Any:
    """Convert *value* to *target* for the numeric, textual, boolean, enum and temporal cases.

    Raises:
        TypeError: No conversion exists between the two types.
        ValueError: The value cannot be parsed as the target type.
        ArithmeticError: The value does not fit the target type.
    """
    if target is str:
        if isinstance(value, Enum):
            return value.name
        return str(value)

    if target is bool:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "false"):
                return lowered == "true"
            raise ValueError(f"'{value}' is not a boolean literal")
        if isinstance(value, numbers.Number):
            return bool(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to bool")

    if target in NUMERIC_TYPES:
        if isinstance(value, Enum):
            value = value.value
        if target is decimal.Decimal and isinstance(value, float):
            return decimal.Decimal(str(value))
        if target is int and isinstance(value, (float, decimal.Decimal, fractions.Fraction)):
            # half-to-even, so 2.5 -> 2 and 3.5 -> 4
            return round(value)
        if isinstance(value, (str, numbers.Number)):
            return target(value.strip() if isinstance(value, str) else value)
        raise TypeError(f"Cannot convert {type(value).__name__} to {target.__name__}")

    if isinstance(target, type) and issubclass(target, Enum):
        try:
            return target(value)
        except ValueError:
            if isinstance(value, str):
                return target[value]
            raise

    if target in _TEMPORAL_TYPES and isinstance(value, str):
        return target.fromisoformat(value)  # type: ignore[attr-defined]

    raise TypeError(f"No conversion from {type(value).__name__} to {getattr(target, '__name__', target)}")


def convert_value(value: Any, target_type: Any, *, strict: bool = False) -> Any:
    """Convert *value* to the declared *target_type* of a destination field.

    ``None`` is propagated unchanged and an optional target is unwrapped to
    its underlying type. Values that already satisfy the target are used
    as-is. When a conversion fails, lenient mode stores the original value
    unconverted and logs a warning, which can leave a field holding a value
    of the wrong type; strict mode raises ValueConversionException instead.
    """
    if value is None:
        return None

    target, _ = unwrap_optional(target_type)
    if is_instance_of(value, target):
        return value

    try:
        return change_type(value, get_origin(target) or target)
    except _CONVERSION_ERRORS as exc:
        if strict:
            raise ValueConversionException(value, target) from exc
        logger.warning(
            "Conversion of %s to '%s' failed (%s); storing the value unconverted",
            type(value).__name__,
            getattr(target, "__name__", target),
            exc,
        )
        return value
