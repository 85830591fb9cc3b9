# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status messages written to stderr with optional colour and emoji."""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a cached stderr console configured for the presentation flags.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Console bound to ``sys.stderr``.
    """

    return Console(
        stderr=True,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool | None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    console.print(text)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = ["detect_tty", "emoji", "fail", "get_console", "warn"]
