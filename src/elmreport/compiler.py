# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invoke ``elm make`` and capture its JSON report."""

from __future__ import annotations

import logging
import shutil

# Bandit: the compiler is run from an argument list without a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import CompilerNotFoundError, CompilerTimeoutError

LOGGER = logging.getLogger(__name__)

MAKE_SUBCOMMAND: Final[str] = "make"
DISCARD_OUTPUT_FLAG: Final[str] = "--output=/dev/null"
JSON_REPORT_FLAG: Final[str] = "--report=json"


@dataclass(frozen=True, slots=True)
class CompilerResult:
    """Outcome of a single compiler run."""

    returncode: int
    stderr: bytes

    @property
    def exited_zero(self) -> bool:
        """Return ``True`` when the compiler reported success."""

        return self.returncode == 0


def build_make_command(compiler: Path, entry: Path) -> list[str]:
    """Return the argument list compiling ``entry`` with a JSON report."""

    return [str(compiler), MAKE_SUBCOMMAND, str(entry), DISCARD_OUTPUT_FLAG, JSON_REPORT_FLAG]


def _resolve_executable(compiler: Path, cwd: Path | None = None) -> Path:
    """Resolve ``compiler`` to an executable path.

    Bare names are looked up on ``PATH``; relative paths resolve against ``cwd``.

    Raises:
        CompilerNotFoundError: If the executable cannot be located.
    """

    if compiler.is_absolute() or compiler.parent != Path():
        candidate = compiler if compiler.is_absolute() else (cwd or Path.cwd()) / compiler
        if not candidate.exists():
            raise CompilerNotFoundError(f"Compiler '{candidate}' does not exist")
        return candidate
    resolved = shutil.which(str(compiler))
    if resolved is None:
        raise CompilerNotFoundError(f"Compiler '{compiler}' was not found on PATH")
    return Path(resolved)


def run_compiler(
    compiler: Path,
    entry: Path,
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> CompilerResult:
    """Compile ``entry`` and return the exit status with the captured stderr.

    Standard output is discarded; the JSON report is written to stderr.

    Args:
        compiler: Path or name of the ``elm`` executable.
        entry: Main module to compile.
        cwd: Directory the compiler runs in.
        timeout: Seconds to wait before giving up, or ``None`` to wait forever.

    Returns:
        CompilerResult: Return code and raw stderr bytes.

    Raises:
        CompilerNotFoundError: If the executable cannot be located.
        CompilerTimeoutError: If the compiler exceeds ``timeout``.
    """

    command: Sequence[str] = build_make_command(_resolve_executable(compiler, cwd), entry)
    LOGGER.debug("running compiler command=%s cwd=%s", " ".join(command), cwd)
    try:
        completed = subprocess.run(  # nosec B603 - argument list, no shell
            command,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise CompilerTimeoutError(f"Compiler timed out after {timeout:.1f}s") from exc
    LOGGER.debug("compiler exited returncode=%s stderr_bytes=%s", completed.returncode, len(completed.stderr))
    return CompilerResult(returncode=completed.returncode, stderr=completed.stderr or b"")


__all__ = ["CompilerResult", "build_make_command", "run_compiler"]
