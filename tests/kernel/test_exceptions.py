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
"""Tests for the pyrepo exception hierarchy."""

from pyrepo.kernel.exceptions import (
    DataSourceException,
    DuplicateEntityException,
    EntityNotFoundException,
    InfrastructureException,
    PyRepoException,
    UnsupportedSpecificationException,
)


class TestPyRepoException:
    def test_basic_creation(self):
        exc = PyRepoException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = PyRepoException("not found", code="NOT_FOUND", context={"entity": "Order", "id": "123"})
        assert exc.code == "NOT_FOUND"
        assert exc.context["id"] == "123"

    def test_context_defaults_to_fresh_dict(self):
        exc = PyRepoException("test")
        exc.context["key"] = "value"
        assert PyRepoException("test2").context == {}


class TestExceptionHierarchy:
    def test_infrastructure_is_pyrepo(self):
        assert issubclass(InfrastructureException, PyRepoException)

    def test_data_source_is_infrastructure(self):
        assert issubclass(DataSourceException, InfrastructureException)

    def test_backend_exceptions_are_data_source_exceptions(self):
        for exc_type in (EntityNotFoundException, DuplicateEntityException, UnsupportedSpecificationException):
            assert issubclass(exc_type, DataSourceException)
