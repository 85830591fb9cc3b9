# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .make import make_command
from .render import render_command

app = typer.Typer(
    name="elm-report",
    help="Render Elm compiler reports as readable terminal output.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("make", help="Compile the main module and report any problems.")(make_command)
app.command("render", help="Render a captured JSON report.")(render_command)


def main() -> None:
    """Run the elm-report application."""

    app()


__all__ = ["app", "main"]
