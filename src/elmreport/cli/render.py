# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command rendering a previously captured JSON report."""

from __future__ import annotations

import typer

from ..report import report_buffer
from .options import (
    COLOR_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    REPORT_ARGUMENT,
    ROOT_OPTION,
    build_shared_options,
)
from .services import build_printer, emit_fragment_warnings, load_cli_config
from .shared import build_cli_logger


def render_command(
    report: REPORT_ARGUMENT = None,
    root: ROOT_OPTION = None,
    config_file: CONFIG_OPTION = None,
    color: COLOR_OPTION = None,
    debug: DEBUG_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Render a JSON report produced by ``elm make --report=json``.

    An empty report is treated as a successful build.

    Raises:
        typer.Exit: Always raised; ``0`` for an empty report, ``1`` otherwise.
    """

    options = build_shared_options(root=root, config_file=config_file, color=color, debug=debug, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji, color=options.color, debug=options.debug)
    config = load_cli_config(options, options.overrides(), logger=logger)

    raw = report.read_bytes() if report is not None else typer.get_binary_stream("stdin").read()
    printer = build_printer(config)
    exit_code = report_buffer(raw, printer, on_failure=logger.fail)
    emit_fragment_warnings(printer, logger=logger)
    raise typer.Exit(code=exit_code)


__all__ = ["render_command"]
