# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for message rendering and styling."""

from __future__ import annotations

import logging

import pytest

from elmreport.errors import FragmentShapeWarning
from elmreport.models import PlainText, StyledRun, UnrecognizedFragment, parse_fragment
from elmreport.renderer import render_message
from elmreport.styles import MessageColor, StyleDescriptor, apply_style, colorize


def _plain(*texts: str) -> list[PlainText]:
    return [PlainText(text=text) for text in texts]


def test_plain_fragments_concatenate_exactly() -> None:
    texts = ["Module ", "X", " not found\n", "", "  indented"]
    assert render_message(_plain(*texts)) == "".join(texts)


def test_rendering_preserves_fragment_order() -> None:
    fragments = [PlainText(text="a"), StyledRun(string="b", bold=True), PlainText(text="c")]
    forward = render_message(fragments, color=False)
    backward = render_message(list(reversed(fragments)), color=False)
    assert forward == "abc"
    assert backward == "cba"


def test_styled_run_gets_ansi_sequences() -> None:
    run = StyledRun(string="oops", color="red")
    assert render_message([run]) == "\x1b[31moops\x1b[0m"


def test_styles_combine_additively() -> None:
    run = StyledRun(string="x", color="Yellow", bold=True, underline=True)
    rendered = render_message([PlainText(text="<"), run, PlainText(text=">")])
    assert rendered.startswith("<\x1b[")
    assert rendered.endswith("x\x1b[0m>")
    codes = rendered[len("<\x1b[") : rendered.index("m")].split(";")
    assert set(codes) == {"1", "4", "33"}


def test_color_disabled_renders_plain_text() -> None:
    run = StyledRun(string="warn", color="green", bold=True)
    assert render_message([PlainText(text="- "), run], color=False) == "- warn"


def test_unrecognized_fragment_is_skipped_and_reported(caplog: pytest.LogCaptureFixture) -> None:
    issues: list[FragmentShapeWarning] = []
    fragments = [PlainText(text="before "), UnrecognizedFragment(raw={"bold": True}), PlainText(text="after")]
    with caplog.at_level(logging.DEBUG, logger="elmreport.renderer"):
        rendered = render_message(fragments, issues=issues)
    assert rendered == "before after"
    assert len(issues) == 1
    assert issues[0].fragment == {"bold": True}
    assert "skipping message fragment" in caplog.text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("red", MessageColor.RED),
        ("RED", MessageColor.RED),
        ("Green", MessageColor.GREEN),
        ("yellow", MessageColor.YELLOW),
        ("blue", None),
        (None, None),
        (3, None),
    ],
)
def test_color_parsing_is_case_insensitive(value: object, expected: MessageColor | None) -> None:
    assert MessageColor.parse(value) is expected


def test_unknown_color_applies_only_emphasis() -> None:
    descriptor = StyleDescriptor.from_run(StyledRun(string="t", color="magenta", bold=True))
    assert descriptor == StyleDescriptor(color=None, bold=True, underline=False)
    assert apply_style("t", descriptor) == "\x1b[1mt\x1b[0m"


def test_plain_descriptor_leaves_text_untouched() -> None:
    assert apply_style("hello", StyleDescriptor()) == "hello"


def test_colorize_respects_enabled_flag() -> None:
    assert colorize("head", "cyan") == "\x1b[36mhead\x1b[0m"
    assert colorize("head", "cyan", enabled=False) == "head"


def test_parse_fragment_classifies_shapes() -> None:
    assert parse_fragment("text") == PlainText(text="text")
    styled = parse_fragment({"string": "s", "bold": True, "underline": False, "color": None})
    assert styled == StyledRun(string="s", bold=True)
    assert isinstance(parse_fragment({"bold": True}), UnrecognizedFragment)
    assert isinstance(parse_fragment({"string": "s", "bold": "yes"}), UnrecognizedFragment)
    assert isinstance(parse_fragment(42), UnrecognizedFragment)
    assert isinstance(parse_fragment(None), UnrecognizedFragment)


def test_text_key_is_not_a_styled_run() -> None:
    fragment = parse_fragment({"text": "x", "bold": False, "underline": False, "color": None})
    assert isinstance(fragment, UnrecognizedFragment)
    assert render_message([fragment]) == ""


@pytest.mark.parametrize("color", [5, {}, ["red"], True])
def test_non_string_color_keeps_the_text(color: object) -> None:
    fragment = parse_fragment({"string": "x", "color": color})
    assert isinstance(fragment, StyledRun)
    assert StyleDescriptor.from_run(fragment).color is None
    assert render_message([fragment]) == "x"
