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
"""Error classification enum and the structured configuration-error record.

All types use only the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(Enum):
    """Classifies an error by the phase it belongs to."""

    CONFIGURATION = "CONFIGURATION"
    MAPPING = "MAPPING"
    ARGUMENT = "ARGUMENT"
    TECHNICAL = "TECHNICAL"


@dataclass(frozen=True)
class FieldError:
    """Describes a configuration problem on a single destination field."""

    field: str
    message: str
    type_pair: str | None = None

    def __str__(self) -> str:
        if self.type_pair:
            return f"{self.type_pair}: field '{self.field}' {self.message}"
        return f"field '{self.field}' {self.message}"
