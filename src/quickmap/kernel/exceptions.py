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
"""Unified exception hierarchy for quickmap.

All library exceptions inherit from MapperException, enabling unified
error handling: catch MapperException to handle every mapping failure,
or catch specific subclasses for targeted handling.

Categories:
- ConfigurationException: invalid or late (post-seal) configuration
- MappingException: failures while executing a mapping
- ArgumentException: invalid arguments passed to a public entry point
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quickmap.kernel.types import ErrorCategory

if TYPE_CHECKING:
    from quickmap.kernel.types import FieldError


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


# =============================================================================
# Base Exception
# =============================================================================


class MapperException(Exception):
    """Base exception for all quickmap errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MAPPING_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    category: ErrorCategory = ErrorCategory.TECHNICAL

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(MapperException):
    """Mapping configuration is invalid or was modified after sealing.

    When raised by validation, ``errors`` holds every problem found, not
    only the first one.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        errors: list[FieldError] | None = None,
        code: str = "CONFIGURATION_INVALID",
    ) -> None:
        self.errors: list[FieldError] = list(errors or [])
        super().__init__(message, code=code, context={"error_count": len(self.errors)})

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> ConfigurationException:
        """Build one aggregated exception listing every failing pair and field."""
        lines = [f"The mapping configuration has {len(errors)} error(s):"]
        for error in errors:
            lines.append(f"  - {error}")
        return cls("\n".join(lines), errors=errors)


# =============================================================================
# Mapping Exceptions
# =============================================================================


class MappingException(MapperException):
    """Failure while executing a mapping."""

    category = ErrorCategory.MAPPING


class MappingNotFoundException(MappingException):
    """No TypeMap is registered for the requested source/destination pair."""

    def __init__(self, source_type: type, destination_type: type) -> None:
        self.source_type = source_type
        self.destination_type = destination_type
        src, dest = _type_name(source_type), _type_name(destination_type)
        super().__init__(
            f"No mapping is registered from '{src}' to '{dest}'. "
            f"Register one with create_map({src}, {dest}) in the mapper configuration.",
            code="MAPPING_NOT_FOUND",
            context={"source_type": src, "destination_type": dest},
        )


class FieldMappingException(MappingException):
    """Applying a single PropertyMap failed.

    The original failure is chained as ``__cause__``.
    """

    def __init__(self, field: str, source_type: type, destination_type: type) -> None:
        self.field = field
        self.source_type = source_type
        self.destination_type = destination_type
        src, dest = _type_name(source_type), _type_name(destination_type)
        super().__init__(
            f"Error mapping field '{field}' from '{src}' to '{dest}'",
            code="FIELD_MAPPING_FAILED",
            context={"field": field, "source_type": src, "destination_type": dest},
        )


class ConstructionException(MappingException):
    """The destination instance could not be created."""

    def __init__(self, destination_type: type, reason: str) -> None:
        self.destination_type = destination_type
        dest = _type_name(destination_type)
        super().__init__(
            f"Cannot create an instance of '{dest}': {reason}. "
            "Give the type a no-argument constructor or configure construct_using().",
            code="CONSTRUCTION_FAILED",
            context={"destination_type": dest},
        )


class ValueConversionException(MappingException):
    """A value could not be converted to the declared destination type."""

    def __init__(self, value: Any, target_type: Any) -> None:
        self.value = value
        self.target_type = target_type
        super().__init__(
            f"Cannot convert {value!r} ({_type_name(type(value))}) to '{_type_name(target_type)}'",
            code="VALUE_CONVERSION_FAILED",
        )


# =============================================================================
# Argument Exceptions
# =============================================================================


class ArgumentException(MapperException):
    """An argument passed to a public entry point is invalid."""

    category = ErrorCategory.ARGUMENT


class NullArgumentException(ArgumentException, ValueError):
    """A required argument was ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None", code="NULL_ARGUMENT")


class ArgumentTypeException(ArgumentException, TypeError):
    """An argument is not an instance of the type it was declared as."""

    def __init__(self, argument: str, expected: type, actual: type) -> None:
        self.argument = argument
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Argument '{argument}' is a '{_type_name(actual)}', expected '{_type_name(expected)}'",
            code="ARGUMENT_TYPE_MISMATCH",
        )


def require(value: Any, argument: str) -> Any:
    """Return *value*, raising NullArgumentException when it is ``None``."""
    if value is None:
        raise NullArgumentException(argument)
    return value
