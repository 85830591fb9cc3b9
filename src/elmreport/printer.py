# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write decoded compiler reports to a text stream."""

from __future__ import annotations

import posixpath
import sys
from dataclasses import dataclass, field
from typing import TextIO

import typer

from .constants import HEADER_SEPARATOR, HEADER_STYLE, LOCATION_SEPARATOR
from .errors import FragmentShapeWarning
from .line_filter import filter_by_line
from .models import DiagnosticEnvelope, RawText, ReportEntry, iter_report_entries
from .renderer import render_message
from .styles import colorize


def join_report_path(base_path: str, relative_path: str) -> str:
    """Join ``relative_path`` onto ``base_path`` and normalise the result.

    An absolute ``relative_path`` is appended to the base rather than replacing it.
    """

    parts = [part for part in (base_path, relative_path) if part]
    if not parts:
        return ""
    return posixpath.normpath("/".join(parts))


def format_location(path: str, line: int, column: int) -> str:
    """Return ``path:line:column``."""

    return f"{path}{LOCATION_SEPARATOR}{line}{LOCATION_SEPARATOR}{column}"


@dataclass(slots=True)
class ReportPrinter:
    """Render report entries as a cyan header followed by the filtered body.

    Attributes:
        base_path: Directory joined with each diagnostic's relative path.
        stream: Destination for the report; defaults to standard output.
        color: ``False`` disables every ANSI sequence in the output.
        issues: Fragment warnings collected while rendering message bodies.
    """

    base_path: str
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    color: bool = True
    issues: list[FragmentShapeWarning] = field(default_factory=list)

    def format_header(self, title: str, relative_path: str, line: int, column: int) -> str:
        """Return the ``<title> -- <path>:<line>:<column>`` header line."""

        location = format_location(join_report_path(self.base_path, relative_path), line, column)
        return colorize(f"{title}{HEADER_SEPARATOR}{location}", HEADER_STYLE, enabled=self.color)

    def format_body(self, entry: ReportEntry) -> str:
        """Return the rendered message of ``entry`` filtered to its line."""

        message = render_message(entry.message, color=self.color, issues=self.issues)
        return filter_by_line(message, entry.line)

    def print_entry(self, entry: ReportEntry) -> None:
        """Print the header and filtered body of a single diagnostic.

        Args:
            entry: Flattened diagnostic; ``leading_blank`` adds an empty line first.
        """

        if entry.leading_blank:
            self._echo("")
        self._echo(self.format_header(entry.title, entry.path, entry.line, entry.column))
        self._echo(self.format_body(entry))

    def print_report(self, envelope: DiagnosticEnvelope) -> None:
        """Print every diagnostic in ``envelope`` in report order."""

        for entry in iter_report_entries(envelope):
            self.print_entry(entry)

    def print_raw(self, report: RawText) -> None:
        """Echo a report of unrecognized type verbatim."""

        self._echo(report.content)

    def print_success(self, message: str) -> None:
        """Print ``message`` unstyled for a successful build."""

        self._echo(message)

    def _echo(self, message: str) -> None:
        typer.echo(message, file=self.stream, color=self.color)


__all__ = ["ReportPrinter", "format_location", "join_report_path"]
