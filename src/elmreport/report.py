# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a compiler result into printed output and an exit status."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .compiler import CompilerResult
from .constants import EXIT_DIAGNOSTICS, EXIT_SUCCESS, SUCCESS_MESSAGE
from .decoder import decode
from .errors import DecodeError
from .models import RawText
from .printer import ReportPrinter

LOGGER = logging.getLogger(__name__)

FailureCallback = Callable[[str], None]


def report_buffer(raw: bytes, printer: ReportPrinter, *, on_failure: FailureCallback) -> int:
    """Decode ``raw`` and print it through ``printer``.

    Args:
        raw: Compiler report buffer; empty means success.
        printer: Destination for the rendered report.
        on_failure: Receives the message describing a fatal decode failure.

    Returns:
        int: ``0`` when ``raw`` is empty, ``1`` for any report or decode failure.
    """

    if not raw:
        printer.print_success(SUCCESS_MESSAGE)
        return EXIT_SUCCESS
    return print_diagnostics(raw, printer, on_failure=on_failure)


def print_diagnostics(raw: bytes, printer: ReportPrinter, *, on_failure: FailureCallback) -> int:
    """Print the report held in ``raw``; a decode failure prints nothing.

    Returns:
        int: Always ``1``; a report of any shape means the build failed.
    """

    try:
        report = decode(raw)
    except DecodeError as exc:
        on_failure(f"{exc.reason} {exc.raw_text}")
        return EXIT_DIAGNOSTICS
    if isinstance(report, RawText):
        LOGGER.debug("unrecognized report type=%r, printing verbatim", report.type)
        printer.print_raw(report)
    else:
        printer.print_report(report)
    return EXIT_DIAGNOSTICS


def report_compiler_result(result: CompilerResult, printer: ReportPrinter, *, on_failure: FailureCallback) -> int:
    """Print the outcome of a compiler run and return the process exit status.

    A zero exit status is reported as success regardless of stderr content.
    """

    if result.exited_zero:
        printer.print_success(SUCCESS_MESSAGE)
        return EXIT_SUCCESS
    return print_diagnostics(result.stderr, printer, on_failure=on_failure)


__all__ = ["print_diagnostics", "report_buffer", "report_compiler_result"]
