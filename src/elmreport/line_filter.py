# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Trim compiler source excerpts down to the reported line."""

from __future__ import annotations

import string
from typing import Final

_LINE_BREAK: Final[str] = "\n"
_MARGIN_WHITESPACE: Final[str] = " \t"


def keep_line(line: str, target_line: int) -> bool:
    """Decide whether ``line`` survives filtering for ``target_line``.

    Numbered excerpt lines are kept when they start with ``target_line`` or the
    line above it; the compiler may label the annotated line one above the
    reported start. Other non-blank lines are explanatory prose and are kept.
    """

    trimmed = line.strip(_MARGIN_WHITESPACE)
    if not trimmed:
        return False
    if trimmed[0] not in string.digits:
        return True
    return trimmed.startswith((str(target_line), str(target_line - 1)))


def filter_by_line(message: str, target_line: int) -> str:
    """Drop excerpt lines that belong to other source lines.

    Args:
        message: Rendered, multi-line message body.
        target_line: Source line the diagnostic is reported at.

    Returns:
        str: Kept lines, unmodified, joined with newlines. Blank lines are removed.
    """

    kept = [line for line in message.split(_LINE_BREAK) if keep_line(line, target_line)]
    return _LINE_BREAK.join(kept)


__all__ = ["filter_by_line", "keep_line"]
