"""Best-effort dialect for model families we do not know.

The request uses Claude-style sampling keys. On the way back we try the
common top-level text fields in a fixed order and, failing all of them,
hand the whole body back as compact JSON so the caller still sees
something.
"""
from __future__ import annotations

import json
from typing import Any

from ..types import ModelSettings
from .base import DialectEntry, Payload, frame_message

FALLBACK_FIELDS = ("completion", "generation", "answer", "response")


def build(message: str, settings: ModelSettings) -> Payload:
    return {
        "prompt": frame_message(message),
        "max_tokens_to_sample": settings.max_tokens,
        "temperature": settings.temperature,
    }


def extract(body: Any) -> str:
    if isinstance(body, dict):
        for key in FALLBACK_FIELDS:
            value = body.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"))


ENTRY = DialectEntry(family="Unknown", prefix=None, build=build, extract=extract)
