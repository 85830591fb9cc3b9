# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the elm-report CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from elmreport.cli import app
from elmreport.cli import make as make_module
from elmreport.cli.shared import DEBUG_HANDLER_NAME, PACKAGE_LOGGER_NAME, configure_debug_logging
from elmreport.compiler import CompilerResult
from elmreport.errors import CompilerNotFoundError

runner = CliRunner()


def _fake_compiler(monkeypatch: pytest.MonkeyPatch, result: CompilerResult) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_run_compiler(compiler: Path, entry: Path, **kwargs: Any) -> CompilerResult:
        calls.append({"compiler": compiler, "entry": entry, **kwargs})
        return result

    monkeypatch.setattr(make_module, "run_compiler", fake_run_compiler)
    return calls


def test_make_success(monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
    calls = _fake_compiler(monkeypatch, CompilerResult(returncode=0, stderr=b""))
    result = runner.invoke(app, ["make", "--root", str(project_root), "--elm", "/x/elm", "--main", "Main.elm"])
    assert result.exit_code == 0
    assert result.output == "It Works!\n"
    assert calls[0]["compiler"] == Path("/x/elm")
    assert calls[0]["entry"] == Path("Main.elm")
    assert calls[0]["cwd"] == project_root.resolve()


def test_make_global_error(monkeypatch: pytest.MonkeyPatch, project_root: Path, global_error_report: bytes) -> None:
    _fake_compiler(monkeypatch, CompilerResult(returncode=1, stderr=global_error_report))
    result = runner.invoke(app, ["make", "--root", str(project_root), "--no-color"])
    assert result.exit_code == 1
    root = project_root.resolve().as_posix()
    assert result.output == f"BAD IMPORT -- {root}/Main.elm:1:0\nModule X not found\n"


def test_make_unrecognized_type(monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
    _fake_compiler(monkeypatch, CompilerResult(returncode=1, stderr=b'{"type":"warning"}'))
    result = runner.invoke(app, ["make", "--root", str(project_root), "--no-color"])
    assert result.exit_code == 1
    assert '{"type":"warning"}' in result.output


def test_make_missing_compiler(monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
    def missing(*_: Any, **__: Any) -> CompilerResult:
        raise CompilerNotFoundError("Compiler '/x/elm' does not exist")

    monkeypatch.setattr(make_module, "run_compiler", missing)
    result = runner.invoke(app, ["make", "--root", str(project_root), "--no-color", "--no-emoji"])
    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_make_decode_failure(monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
    _fake_compiler(monkeypatch, CompilerResult(returncode=1, stderr=b"Segmentation fault"))
    result = runner.invoke(app, ["make", "--root", str(project_root), "--no-color", "--no-emoji"])
    assert result.exit_code == 1
    assert "invalid JSON report" in result.output
    assert "Segmentation fault" in result.output


def test_make_uses_configuration_file(monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
    (project_root / ".elm-report.toml").write_text('compiler = "/opt/elm"\ntimeout = 12.5\n')
    calls = _fake_compiler(monkeypatch, CompilerResult(returncode=0, stderr=b""))
    result = runner.invoke(app, ["make", "--root", str(project_root)])
    assert result.exit_code == 0
    assert calls[0]["compiler"] == Path("/opt/elm")
    assert calls[0]["timeout"] == 12.5


def test_make_invalid_configuration(project_root: Path) -> None:
    (project_root / ".elm-report.toml").write_text("timeout = 0\n")
    result = runner.invoke(app, ["make", "--root", str(project_root), "--no-color", "--no-emoji"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_render_from_file(tmp_path: Path, project_root: Path, compile_errors_report: bytes) -> None:
    report = tmp_path / "report.json"
    report.write_bytes(compile_errors_report)
    result = runner.invoke(app, ["render", str(report), "--root", str(project_root), "--no-color"])
    assert result.exit_code == 1
    root = project_root.resolve().as_posix()
    assert f"\nTYPE MISMATCH -- {root}/src/Main.elm:5:3\n" in result.output
    assert "12| unrelated" not in result.output
    assert f"MISSING PATTERNS -- {root}/src/Other.elm:2:0" in result.output


def test_render_from_stdin(project_root: Path, global_error_report: bytes) -> None:
    result = runner.invoke(app, ["render", "--root", str(project_root), "--color"], input=global_error_report)
    assert result.exit_code == 1
    assert "\x1b[36mBAD IMPORT -- " in result.output


def test_render_empty_input_is_success(project_root: Path) -> None:
    result = runner.invoke(app, ["render", "--root", str(project_root)], input=b"")
    assert result.exit_code == 0
    assert result.output == "It Works!\n"


def test_render_warns_about_skipped_fragments(project_root: Path) -> None:
    raw = b'{"type":"error","title":"T","path":"A.elm","message":["a",{"oops":true},"b"]}'
    result = runner.invoke(app, ["render", "--root", str(project_root), "--no-color", "--no-emoji"], input=raw)
    assert result.exit_code == 1
    assert "ab" in result.output
    assert "Skipped 1 message fragment(s)" in result.output


def test_debug_logging_installs_a_single_handler() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    try:
        configure_debug_logging()
        configure_debug_logging()
        named = [handler for handler in logger.handlers if handler.get_name() == DEBUG_HANDLER_NAME]
        assert len(named) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]
