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
"""Logging bootstrap for applications embedding pyrepo."""

from __future__ import annotations

from pyrepo.core.config import Config
from pyrepo.logging.port import LoggingPort
from pyrepo.logging.structlog_adapter import StructlogAdapter


def configure_logging(config: Config, port: LoggingPort | None = None) -> LoggingPort:
    """Configure *port* (a :class:`StructlogAdapter` by default) from *config*.

    Returns the configured port so callers can adjust levels later.
    """
    port = port if port is not None else StructlogAdapter()
    port.configure(config)
    return port
