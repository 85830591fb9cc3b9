# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify and decode the compiler's JSON report buffer."""

from __future__ import annotations

import json
from typing import TypeVar, cast

from pydantic import BaseModel, ValidationError

from .constants import COMPILE_ERRORS_TYPE, GLOBAL_ERROR_TYPE
from .errors import DecodeError
from .models import DiagnosticEnvelope, ReportDiscriminator, FileProblems, GlobalError, JsonValue, RawText

ModelT = TypeVar("ModelT", bound=BaseModel)


def _load_json(raw: bytes) -> JsonValue:
    try:
        return cast(JsonValue, json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON report: {exc}", raw=raw) from exc


def _validate(model: type[ModelT], payload: JsonValue, raw: bytes) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"report does not match {model.__name__}: {exc}", raw=raw) from exc


def decode(raw: bytes) -> DiagnosticEnvelope | RawText:
    """Decode ``raw`` compiler output into one of the known report shapes.

    The buffer is parsed once, checked for its ``type`` discriminator and then
    validated against the matching model. Reports of any other type are returned
    as :class:`RawText` so they can be echoed verbatim.

    Args:
        raw: Bytes written by the compiler to its diagnostic stream. An empty
            buffer means the compiler succeeded and is not a valid report.

    Returns:
        DiagnosticEnvelope | RawText: Decoded report.

    Raises:
        DecodeError: If ``raw`` is not JSON, is not an object, or does not match
            the shape selected by its ``type``.
    """

    payload = _load_json(raw)
    discriminator = _validate(ReportDiscriminator, payload, raw)
    if discriminator.kind == GLOBAL_ERROR_TYPE:
        return _validate(GlobalError, payload, raw)
    if discriminator.kind == COMPILE_ERRORS_TYPE:
        return _validate(FileProblems, payload, raw)
    return RawText(type=discriminator.kind, content=raw.decode("utf-8", errors="replace"))


__all__ = ["decode"]
