# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble a styled message body from compiler message fragments."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .errors import FragmentShapeWarning
from .models import Fragment, PlainText, StyledRun, UnrecognizedFragment
from .styles import StyleDescriptor, apply_style

LOGGER = logging.getLogger(__name__)


def render_fragment(fragment: Fragment, *, color: bool = True) -> str:
    """Return the rendered text for a single known fragment.

    Unrecognized fragments render as the empty string.
    """

    if isinstance(fragment, PlainText):
        return fragment.text
    if isinstance(fragment, StyledRun):
        return apply_style(fragment.text, StyleDescriptor.from_run(fragment), enabled=color)
    return ""


def render_message(
    fragments: Iterable[Fragment],
    *,
    color: bool = True,
    issues: list[FragmentShapeWarning] | None = None,
) -> str:
    """Concatenate ``fragments`` into a single, possibly multi-line, string.

    Args:
        fragments: Message fragments in compiler order.
        color: ``False`` emits the text of styled runs without ANSI sequences.
        issues: Optional list receiving a warning for every skipped fragment.

    Returns:
        str: Rendered fragments joined in their original order.
    """

    parts: list[str] = []
    for fragment in fragments:
        if isinstance(fragment, UnrecognizedFragment):
            warning = FragmentShapeWarning(fragment.raw)
            LOGGER.debug("skipping message fragment: %s", warning)
            if issues is not None:
                issues.append(warning)
            continue
        parts.append(render_fragment(fragment, color=color))
    return "".join(parts)


__all__ = ["LOGGER", "render_fragment", "render_message"]
