# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def global_error_report() -> bytes:
    """Return a ``"type": "error"`` report as emitted by the compiler."""

    return json.dumps(
        {
            "type": "error",
            "title": "BAD IMPORT",
            "path": "Main.elm",
            "message": ["Module ", "X", " not found"],
        }
    ).encode()


@pytest.fixture
def compile_errors_report() -> bytes:
    """Return a ``"type": "compile-errors"`` report with an excerpt to filter."""

    return json.dumps(
        {
            "type": "compile-errors",
            "errors": [
                {
                    "path": "src/Main.elm",
                    "name": "Main",
                    "problems": [
                        {
                            "title": "TYPE MISMATCH",
                            "region": {"start": {"line": 5, "column": 3}, "end": {"line": 5, "column": 9}},
                            "message": [
                                "Something is off:\n\n",
                                "3| older line\n",
                                "4| old line\n",
                                "5| new line\n",
                                {"bold": False, "underline": False, "color": "RED", "string": "   ^^^"},
                                " error here\n",
                                "12| unrelated\n",
                            ],
                        },
                        {
                            "title": "NAMING ERROR",
                            "region": {"start": {"line": 20, "column": 1}, "end": {"line": 20, "column": 4}},
                            "message": ["I cannot find `foo`"],
                        },
                    ],
                },
                {
                    "path": "src/Other.elm",
                    "name": "Other",
                    "problems": [
                        {
                            "title": "MISSING PATTERNS",
                            "region": {"start": {"line": 2, "column": 0}, "end": {"line": 2, "column": 5}},
                            "message": ["1| case x of\n", "2|   A -> 1"],
                        }
                    ],
                },
            ],
        }
    ).encode()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a temporary project root."""

    root = tmp_path / "project"
    root.mkdir()
    return root
