# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared across the elm-report package."""

from __future__ import annotations

from pathlib import Path
from typing import Final

GLOBAL_ERROR_TYPE: Final[str] = "error"
COMPILE_ERRORS_TYPE: Final[str] = "compile-errors"

DEFAULT_COMPILER: Final[Path] = Path("/usr/local/bin/elm")
DEFAULT_MAIN: Final[Path] = Path("./src/elm/Main.elm")
CONFIG_FILENAME: Final[str] = ".elm-report.toml"

# Global errors have no region; they are reported at 1:0.
GLOBAL_ERROR_LINE: Final[int] = 1
GLOBAL_ERROR_COLUMN: Final[int] = 0

HEADER_SEPARATOR: Final[str] = " -- "
LOCATION_SEPARATOR: Final[str] = ":"
HEADER_STYLE: Final[str] = "cyan"
SUCCESS_MESSAGE: Final[str] = "It Works!"

EXIT_SUCCESS: Final[int] = 0
EXIT_DIAGNOSTICS: Final[int] = 1

__all__ = [
    "COMPILE_ERRORS_TYPE",
    "CONFIG_FILENAME",
    "DEFAULT_COMPILER",
    "DEFAULT_MAIN",
    "EXIT_DIAGNOSTICS",
    "EXIT_SUCCESS",
    "GLOBAL_ERROR_COLUMN",
    "GLOBAL_ERROR_LINE",
    "GLOBAL_ERROR_TYPE",
    "HEADER_SEPARATOR",
    "HEADER_STYLE",
    "LOCATION_SEPARATOR",
    "SUCCESS_MESSAGE",
]
