# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing the Elm compiler's JSON report shapes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .constants import GLOBAL_ERROR_COLUMN, GLOBAL_ERROR_LINE

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]


class PlainText(BaseModel):
    """Unstyled message text appended verbatim."""

    model_config = ConfigDict(frozen=True)

    text: StrictStr


class StyledRun(BaseModel):
    """Message text carrying colour and emphasis attributes.

    The compiler names the text field ``string``; it is exposed as ``text``.
    ``color`` keeps whatever JSON value was sent; only known colour names apply.
    """

    model_config = ConfigDict(frozen=True)

    text: StrictStr = Field(alias="string")
    bold: StrictBool = False
    underline: StrictBool = False
    color: JsonValue = None


class UnrecognizedFragment(BaseModel):
    """Fragment matching neither known shape; rendered as nothing."""

    model_config = ConfigDict(frozen=True)

    raw: JsonValue = None


type Fragment = PlainText | StyledRun | UnrecognizedFragment


def parse_fragment(value: JsonValue) -> Fragment:
    """Classify a raw JSON message item into a fragment variant.

    Args:
        value: JSON value taken from a ``message`` array.

    Returns:
        Fragment: ``PlainText`` for strings, ``StyledRun`` for well-formed style
        objects and ``UnrecognizedFragment`` for everything else.
    """

    if isinstance(value, str):
        return PlainText(text=value)
    if isinstance(value, Mapping):
        try:
            return StyledRun.model_validate(value)
        except ValidationError:
            return UnrecognizedFragment(raw=value)
    return UnrecognizedFragment(raw=value)


def _parse_message(value: object) -> tuple[Fragment, ...]:
    if isinstance(value, tuple) and all(
        isinstance(item, PlainText | StyledRun | UnrecognizedFragment) for item in value
    ):
        return value
    if not isinstance(value, list):
        raise ValueError("message must be an array of fragments")
    return tuple(parse_fragment(item) for item in value)


class GlobalError(BaseModel):
    """Report a single error that is not tied to a source region."""

    model_config = ConfigDict(frozen=True)

    title: StrictStr
    path: StrictStr | None
    message: tuple[Fragment, ...]

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: object) -> tuple[Fragment, ...]:
        return _parse_message(value)


class Position(BaseModel):
    """Line and column of a region boundary."""

    model_config = ConfigDict(frozen=True)

    line: StrictInt
    column: StrictInt


class Region(BaseModel):
    """Source region highlighted by a problem."""

    model_config = ConfigDict(frozen=True)

    start: Position


class Problem(BaseModel):
    """Located problem reported for a single source file."""

    model_config = ConfigDict(frozen=True)

    title: StrictStr
    region: Region
    message: tuple[Fragment, ...]

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: object) -> tuple[Fragment, ...]:
        return _parse_message(value)

    @property
    def start_line(self) -> int:
        """Return the line the problem region starts on."""

        return self.region.start.line

    @property
    def start_column(self) -> int:
        """Return the column the problem region starts at."""

        return self.region.start.column


class FileEntry(BaseModel):
    """Problems grouped under the file they were found in."""

    model_config = ConfigDict(frozen=True)

    path: StrictStr
    problems: tuple[Problem, ...]


class FileProblems(BaseModel):
    """Compile errors grouped per file (``"type": "compile-errors"``)."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[FileEntry, ...] = Field(alias="errors")


class RawText(BaseModel):
    """Report with an unrecognized ``type``; printed verbatim."""

    model_config = ConfigDict(frozen=True)

    type: StrictStr
    content: StrictStr


class ReportDiscriminator(BaseModel):
    """Minimal view of a report used to select the full shape."""

    type: StrictStr | None = None

    @property
    def kind(self) -> str:
        """Return the discriminator, treating a missing or null ``type`` as empty."""

        return self.type or ""


type DiagnosticEnvelope = GlobalError | FileProblems


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """Flattened diagnostic ready for header and body rendering."""

    title: str
    path: str
    line: int
    column: int
    message: tuple[Fragment, ...]
    leading_blank: bool


def iter_report_entries(envelope: DiagnosticEnvelope) -> Iterator[ReportEntry]:
    """Yield report entries for ``envelope`` in file order, then problem order.

    Args:
        envelope: Decoded compiler report.

    Yields:
        ReportEntry: One entry per diagnostic. Global errors sit at ``1:0`` and are
        not preceded by a blank line; located problems are.
    """

    if isinstance(envelope, GlobalError):
        yield ReportEntry(
            title=envelope.title,
            path=envelope.path or "",
            line=GLOBAL_ERROR_LINE,
            column=GLOBAL_ERROR_COLUMN,
            message=envelope.message,
            leading_blank=False,
        )
        return
    for entry in envelope.entries:
        for problem in entry.problems:
            yield ReportEntry(
                title=problem.title,
                path=entry.path,
                line=problem.start_line,
                column=problem.start_column,
                message=problem.message,
                leading_blank=True,
            )


__all__ = [
    "DiagnosticEnvelope",
    "FileEntry",
    "FileProblems",
    "Fragment",
    "GlobalError",
    "JsonScalar",
    "JsonValue",
    "PlainText",
    "Position",
    "Problem",
    "RawText",
    "Region",
    "ReportDiscriminator",
    "ReportEntry",
    "StyledRun",
    "UnrecognizedFragment",
    "iter_report_entries",
    "parse_fragment",
]
