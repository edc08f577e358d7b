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
"""TypePair: the registry key for a (source type, destination type) combination."""

from __future__ import annotations

from dataclasses import dataclass

from quickmap.kernel.exceptions import require


@dataclass(frozen=True)
class TypePair:
    """Immutable identity of a source/destination type combination.

    Equality and hashing are structural over the two types.
    """

    source_type: type
    destination_type: type

    def __post_init__(self) -> None:
        require(self.source_type, "source_type")
        require(self.destination_type, "destination_type")

    def reversed(self) -> TypePair:
        """The pair with source and destination swapped."""
        return TypePair(self.destination_type, self.source_type)

    def __str__(self) -> str:
        src = getattr(self.source_type, "__name__", repr(self.source_type))
        dest = getattr(self.destination_type, "__name__", repr(self.destination_type))
        return f"{src} -> {dest}"
