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
"""MapperPort: the contract consumers of a mapper depend on."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar, runtime_checkable

D = TypeVar("D")


@runtime_checkable
class MapperPort(Protocol):
    """Port defining the object-mapping contract.

    A dependency-injection container registers a Mapper under this port so
    application services can depend on the contract, not the implementation.
    """

    def map(self, source: Any, destination_type: type[D], *, source_type: type | None = None) -> D: ...

    def map_into(
        self,
        source: Any,
        destination: D,
        *,
        source_type: type | None = None,
        destination_type: type | None = None,
    ) -> D: ...

    def map_list(
        self, sources: Iterable[Any], destination_type: type[D], *, source_type: type | None = None
    ) -> list[D]: ...
