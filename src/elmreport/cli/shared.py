# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Final

from ..logging import fail as core_fail
from ..logging import warn as core_warn

PACKAGE_LOGGER_NAME: Final[str] = "elmreport"
DEBUG_HANDLER_NAME: Final[str] = "elmreport-debug"


@dataclass(slots=True)
class CLILogger:
    """Adapter around the status helpers respecting CLI emoji and colour settings."""

    use_emoji: bool
    use_color: bool | None = None

    def fail(self, message: str) -> None:
        """Log a failure message."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)


def build_cli_logger(*, emoji: bool, color: bool | None = None, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and enable debug logging when requested.

    Args:
        emoji: Whether status output may include emoji glyphs.
        color: Explicit colour preference; ``None`` follows TTY detection.
        debug: Whether package debug logging should be streamed to stderr.

    Returns:
        CLILogger: Logger for user-facing status lines.
    """

    if debug:
        configure_debug_logging()
    return CLILogger(use_emoji=emoji, use_color=color)


def configure_debug_logging() -> None:
    """Stream package debug messages to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if any(existing.get_name() == DEBUG_HANDLER_NAME for existing in logger.handlers):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.set_name(DEBUG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


__all__ = ["CLILogger", "build_cli_logger", "configure_debug_logging"]
