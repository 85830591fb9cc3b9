# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while decoding and reporting compiler output."""

from __future__ import annotations


class ElmReportError(RuntimeError):
    """Base class for fatal elm-report failures."""


class DecodeError(ElmReportError):
    """Raised when the compiler report is not valid JSON or matches no known shape."""

    def __init__(self, reason: str, *, raw: bytes) -> None:
        """Initialise the error with the failure reason and the offending buffer.

        Args:
            reason: Human-readable description of the parse or validation failure.
            raw: Raw compiler output that could not be decoded.
        """

        super().__init__(reason)
        self.reason = reason
        self.raw = raw

    @property
    def raw_text(self) -> str:
        """Return the raw buffer decoded leniently for display."""

        return self.raw.decode("utf-8", errors="replace")


class ConfigError(ElmReportError):
    """Raised when configuration input is invalid."""


class CompilerNotFoundError(ElmReportError):
    """Raised when the compiler executable cannot be located."""


class CompilerTimeoutError(ElmReportError):
    """Raised when the compiler does not finish within the configured timeout."""


class FragmentShapeWarning(UserWarning):
    """Describe a message fragment that is neither plain text nor a styled run."""

    def __init__(self, fragment: object) -> None:
        """Create the warning for ``fragment``.

        Args:
            fragment: Raw JSON value that matched no fragment shape.
        """

        super().__init__(f"unrecognized message fragment type {type(fragment).__name__}: {fragment!r}")
        self.fragment = fragment


__all__ = [
    "CompilerNotFoundError",
    "CompilerTimeoutError",
    "ConfigError",
    "DecodeError",
    "ElmReportError",
    "FragmentShapeWarning",
]
