# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command compiling the main module and reporting the result."""

from __future__ import annotations

import typer

from ..compiler import run_compiler
from ..constants import EXIT_DIAGNOSTICS
from ..errors import CompilerNotFoundError, CompilerTimeoutError
from ..report import report_compiler_result
from .options import (
    COLOR_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    ELM_OPTION,
    EMOJI_OPTION,
    MAIN_OPTION,
    ROOT_OPTION,
    TIMEOUT_OPTION,
    MakeCLIOptions,
    build_shared_options,
)
from .services import build_printer, emit_fragment_warnings, load_cli_config
from .shared import build_cli_logger


def make_command(
    elm: ELM_OPTION = None,
    main: MAIN_OPTION = None,
    root: ROOT_OPTION = None,
    config_file: CONFIG_OPTION = None,
    color: COLOR_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    debug: DEBUG_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Compile the main module and print the compiler's report.

    Raises:
        typer.Exit: Always raised; ``0`` when the build succeeds, ``1`` otherwise.
    """

    options = MakeCLIOptions(
        shared=build_shared_options(root=root, config_file=config_file, color=color, debug=debug, emoji=emoji),
        compiler=elm,
        main=main,
        timeout=timeout,
    )
    logger = build_cli_logger(emoji=options.shared.emoji, color=options.shared.color, debug=options.shared.debug)
    config = load_cli_config(options.shared, options.overrides(), logger=logger)

    try:
        result = run_compiler(config.compiler, config.main, cwd=config.root, timeout=config.timeout)
    except (CompilerNotFoundError, CompilerTimeoutError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_DIAGNOSTICS) from exc

    printer = build_printer(config)
    exit_code = report_compiler_result(result, printer, on_failure=logger.fail)
    emit_fragment_warnings(printer, logger=logger)
    raise typer.Exit(code=exit_code)


__all__ = ["make_command"]
