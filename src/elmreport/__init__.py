# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render Elm compiler JSON reports as styled terminal output."""

from __future__ import annotations

from .decoder import decode
from .errors import DecodeError, ElmReportError, FragmentShapeWarning
from .line_filter import filter_by_line
from .models import FileProblems, GlobalError, RawText
from .printer import ReportPrinter
from .renderer import render_message

__all__ = [
    "DecodeError",
    "ElmReportError",
    "FileProblems",
    "FragmentShapeWarning",
    "GlobalError",
    "RawText",
    "ReportPrinter",
    "decode",
    "filter_by_line",
    "render_message",
]
