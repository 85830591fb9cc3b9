# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared option declarations and option containers for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

ELM_OPTION = Annotated[
    Path | None,
    typer.Option("--elm", help="Path to the elm compiler [default: /usr/local/bin/elm]."),
]
MAIN_OPTION = Annotated[
    Path | None,
    typer.Option("--main", help="Path to the main module [default: ./src/elm/Main.elm]."),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root; report paths are resolved against it."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file to read instead of .elm-report.toml."),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Toggle ANSI styling of the report."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", min=0.0, help="Seconds to wait for the compiler."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Stream debug logging to stderr."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in status messages."),
]
REPORT_ARGUMENT = Annotated[
    Path | None,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON report to render; standard input when omitted.",
    ),
]


@dataclass(slots=True)
class SharedCLIOptions:
    """Capture options common to every command."""

    root: Path
    config_file: Path | None
    color: bool | None
    debug: bool
    emoji: bool

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides supplied on the command line."""

        return {"color": self.color, "debug": self.debug or None}


@dataclass(slots=True)
class MakeCLIOptions:
    """Capture CLI overrides supplied to the make command."""

    shared: SharedCLIOptions
    compiler: Path | None
    main: Path | None
    timeout: float | None

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides supplied on the command line."""

        return {
            **self.shared.overrides(),
            "compiler": self.compiler,
            "main": self.main,
            "timeout": self.timeout,
        }


def build_shared_options(
    *,
    root: Path | None,
    config_file: Path | None,
    color: bool | None,
    debug: bool,
    emoji: bool,
) -> SharedCLIOptions:
    """Construct ``SharedCLIOptions`` resolving the project root."""

    return SharedCLIOptions(
        root=(root or Path.cwd()).resolve(),
        config_file=config_file,
        color=color,
        debug=debug,
        emoji=emoji,
    )


__all__ = [
    "COLOR_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "ELM_OPTION",
    "EMOJI_OPTION",
    "MAIN_OPTION",
    "REPORT_ARGUMENT",
    "ROOT_OPTION",
    "TIMEOUT_OPTION",
    "MakeCLIOptions",
    "SharedCLIOptions",
    "build_shared_options",
]
