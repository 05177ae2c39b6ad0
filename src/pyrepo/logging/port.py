# Copyright 2026 The pyrepo Authors.
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
"""LoggingPort — how pyrepo's module loggers get their output configured.

pyrepo modules emit plain ``logging`` records (``pyrepo.data.collection``
logs one DEBUG line per lookup and one WARNING per collection fault). A
logging port decides how those records are rendered and filtered, driven by
the ``pyrepo.logging`` configuration section.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pyrepo.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Contract for a logging backend driven by ``pyrepo.logging`` settings."""

    def configure(self, config: Config) -> None:
        """Apply ``pyrepo.logging.format`` and ``pyrepo.logging.level.*``."""
        ...

    def get_logger(self, name: str) -> Any:
        """Return a logger for *name*, usually a module ``__name__``."""
        ...

    def set_level(self, name: str, level: str) -> None:
        """Override the level of one logger, e.g. ``pyrepo.data.collection``."""
        ...
