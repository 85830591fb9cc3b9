# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Style descriptors and ANSI rendering for styled message runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from rich.color import ColorSystem
from rich.style import Style

from .models import StyledRun


class MessageColor(StrEnum):
    """Colours the compiler may attach to a styled run."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

    @classmethod
    def parse(cls, value: object) -> MessageColor | None:
        """Return the colour matching ``value`` case-insensitively.

        Args:
            value: Raw ``color`` value of a styled run.

        Returns:
            MessageColor | None: Matching colour, or ``None`` for unknown names and
            non-string values.
        """

        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Display attributes applied to a single run of text."""

    color: MessageColor | None = None
    bold: bool = False
    underline: bool = False

    @classmethod
    def from_run(cls, run: StyledRun) -> StyleDescriptor:
        """Resolve the display attributes declared by ``run``."""

        return cls(color=MessageColor.parse(run.color), bold=run.bold, underline=run.underline)

    @property
    def is_plain(self) -> bool:
        """Return ``True`` when no colour or emphasis applies."""

        return self.color is None and not self.bold and not self.underline

    def to_rich(self) -> Style:
        """Return the equivalent Rich style."""

        return Style(
            color=self.color.value if self.color is not None else None,
            bold=self.bold or None,
            underline=self.underline or None,
        )


def apply_style(text: str, descriptor: StyleDescriptor, *, enabled: bool = True) -> str:
    """Return ``text`` wrapped in the ANSI sequences described by ``descriptor``.

    Args:
        text: Text of the run.
        descriptor: Colour and emphasis to apply.
        enabled: ``False`` disables styling and returns ``text`` unchanged.

    Returns:
        str: Styled text terminated by a reset sequence, or ``text`` itself when no
        attribute applies.
    """

    if not enabled or descriptor.is_plain or not text:
        return text
    return descriptor.to_rich().render(text, color_system=ColorSystem.STANDARD)


def colorize(text: str, color: str, *, enabled: bool = True) -> str:
    """Apply a single named Rich colour to ``text`` when ``enabled``."""

    if not enabled or not text:
        return text
    return Style(color=color).render(text, color_system=ColorSystem.STANDARD)


__all__ = ["MessageColor", "StyleDescriptor", "apply_style", "colorize"]
