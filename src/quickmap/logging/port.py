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
"""LoggingPort: how build_mapper hands the quickmap.logging section to a logging backend."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from quickmap.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Logging backend used by :func:`quickmap.core.bootstrap.build_mapper`.

    ``configure`` receives the loaded Config and reads ``quickmap.logging.*``
    from it; ``get_logger("quickmap.core")`` then supplies the logger that
    reports the finished mapper. StructlogAdapter is the default.
    """

    def configure(self, config: Config) -> None:
        """Apply ``quickmap.logging.format`` and ``quickmap.logging.level.*``."""
        ...

    def get_logger(self, name: str) -> Any:
        """Return a logger accepting ``info(event, **fields)``."""
        ...

    def set_level(self, name: str, level: str) -> None: ...
