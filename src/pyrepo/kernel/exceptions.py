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
"""Exception hierarchy for pyrepo.

Every exception raised by pyrepo inherits from :class:`PyRepoException`,
which carries a machine-readable ``code`` and a ``context`` dict alongside the
human-readable message.

Storage adapters signal their own failures through the
:class:`DataSourceException` branch. The collection façade never lets these
escape raw; it wraps them into a
:class:`~pyrepo.data.errors.CollectionFault`.
"""

from __future__ import annotations


class PyRepoException(Exception):
    """Base exception for all pyrepo errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"COLLECTION_LOOKUP"``).
        context: Arbitrary key-value pairs describing the failure.
    """

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
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyRepoException):
    """Failures of the storage infrastructure behind a collection."""


class DataSourceException(InfrastructureException):
    """A data source failed to carry out a request."""


class EntityNotFoundException(DataSourceException):
    """An entity addressed by its identity is not present in the data source."""


class DuplicateEntityException(DataSourceException):
    """An entity being created is already present in the data source."""


class UnsupportedSpecificationException(DataSourceException):
    """A data source cannot honor some part of a specification.

    Raised instead of silently ignoring an unknown condition type, ordering
    or pagination request.
    """
