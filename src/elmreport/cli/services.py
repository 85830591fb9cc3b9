# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import typer

from ..config import ReportConfig, load_config
from ..constants import EXIT_DIAGNOSTICS
from ..errors import ConfigError
from ..printer import ReportPrinter
from .options import SharedCLIOptions
from .shared import CLILogger, configure_debug_logging


def load_cli_config(
    options: SharedCLIOptions,
    overrides: Mapping[str, Any],
    *,
    logger: CLILogger,
) -> ReportConfig:
    """Return the resolved configuration, exiting on invalid input.

    Args:
        options: Options shared by every command.
        overrides: Values supplied on the command line.
        logger: Logger used to report configuration failures.

    Returns:
        ReportConfig: Validated configuration.

    Raises:
        typer.Exit: When configuration loading fails.
    """

    try:
        config = load_config(options.root, config_file=options.config_file, overrides=overrides)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_DIAGNOSTICS) from exc
    if config.debug:
        configure_debug_logging()
    return config


def build_printer(config: ReportConfig) -> ReportPrinter:
    """Return a printer writing the report to standard output."""

    return ReportPrinter(base_path=config.base_path, color=config.color)


def emit_fragment_warnings(printer: ReportPrinter, *, logger: CLILogger) -> None:
    """Warn about message fragments that were skipped while rendering.

    Args:
        printer: Printer that rendered the report.
        logger: Logger used to emit the warning.
    """

    if not printer.issues:
        return
    logger.warn(f"Skipped {len(printer.issues)} message fragment(s) with an unrecognized shape.")


__all__ = ["build_printer", "emit_fragment_warnings", "load_cli_config"]
