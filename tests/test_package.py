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
"""Tests for package integrity — every module imports and carries the license header."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

import pytest

import pyrepo

_ROOT = Path(__file__).resolve().parent.parent
_MODULES = sorted(info.name for info in pkgutil.walk_packages(pyrepo.__path__, prefix="pyrepo."))
_SOURCES = sorted([*(_ROOT / "src" / "pyrepo").rglob("*.py"), *(_ROOT / "tests").rglob("*.py")])


class TestPackageIntegrity:
    @pytest.mark.parametrize("name", _MODULES)
    def test_module_imports_with_own_docstring(self, name: str):
        module = importlib.import_module(name)
        assert module.__doc__
        assert "PyFly" not in module.__doc__

    @pytest.mark.parametrize("path", _SOURCES, ids=lambda path: path.name)
    def test_source_starts_with_license_header(self, path: Path):
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "# Copyright 2026 The pyrepo Authors."
        assert lines[2] == '# Licensed under the Apache License, Version 2.0 (the "License");'
        assert lines[13].startswith('"""')
