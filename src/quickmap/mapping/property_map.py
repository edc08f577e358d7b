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
"""PropertyMap: mapping configuration for one destination field."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from quickmap.kernel.exceptions import require
from quickmap.kernel.types import FieldError
from quickmap.mapping.fields import FieldDescriptor


class PropertyMap:
    """Where a destination field's value comes from, and whether it is mapped at all.

    Attributes:
        destination_field: The field being written.
        source_field: Field read from the source instance, if any.
        value_producer: Callable computing the value from the whole source
            instance; takes precedence over ``source_field``.
        ignored: Skip the field entirely.
        guard: Predicate over the source instance; when it returns false the
            destination field keeps its current value.
    """

    def __init__(
        self,
        destination_field: FieldDescriptor,
        source_field: FieldDescriptor | None = None,
    ) -> None:
        self.destination_field: FieldDescriptor = require(destination_field, "destination_field")
        self.source_field: FieldDescriptor | None = source_field
        self.value_producer: Callable[[Any], Any] | None = None
        self.ignored: bool = False
        self.guard: Callable[[Any], bool] | None = None

    @property
    def destination_name(self) -> str:
        return self.destination_field.name

    @property
    def has_value_producer(self) -> bool:
        return self.value_producer is not None

    def use_constant(self, value: Any) -> None:
        """Produce *value* for every source instance."""
        self.value_producer = lambda _source: value

    def resolve_value(self, source: Any) -> Any:
        """Compute the raw value for this field from *source*.

        A missing or unreadable source field yields ``None``.
        """
        if self.value_producer is not None:
            return self.value_producer(source)
        if self.source_field is None or not self.source_field.readable:
            return None
        return self.source_field.get(source)

    def should_map(self, source: Any) -> bool:
        return self.guard is None or bool(self.guard(source))

    def write(self, destination: Any, value: Any) -> None:
        """Assign *value* on *destination*; read-only fields are left untouched."""
        if self.destination_field.writable:
            self.destination_field.set(destination, value)

    def validation_errors(self, type_pair: str | None = None) -> list[FieldError]:
        if self.ignored:
            return []
        errors = []
        if not self.has_value_producer and self.source_field is None:
            errors.append(
                FieldError(self.destination_name, "has no source configured and is not ignored", type_pair)
            )
        if self.source_field is not None and not self.destination_field.writable:
            errors.append(FieldError(self.destination_name, "destination field is not writable", type_pair))
        return errors

    def __repr__(self) -> str:
        source = self.source_field.name if self.source_field else None
        return (
            f"PropertyMap(destination={self.destination_name!r}, source={source!r}, "
            f"producer={self.has_value_producer}, ignored={self.ignored}, guarded={self.guard is not None})"
        )
