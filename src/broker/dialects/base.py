"""Dialect interface for Bedrock model families.

A dialect is pure data: how to shape the request body for one family of
models, and where to find the generated text in that family's response.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Union

from ..types import ModelSettings

SYSTEM_FRAMING = "You are a helpful DevOps assistant. Please respond to this question: "

Payload = Dict[str, Any]
RawBody = Union[bytes, bytearray, str, Dict[str, Any], list]


def frame_message(message: str) -> str:
    return f"{SYSTEM_FRAMING}{message}"


def decode_body(raw: RawBody) -> Any:
    """Decode a raw response body (UTF-8 JSON) unless it is already parsed."""
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw)
    return raw


def dig(data: Any, path: Sequence[Union[str, int]]) -> Any:
    """Walk dict keys / list indexes; any missing step yields None."""
    cur = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(cur, list) or len(cur) <= key:
                return None
            cur = cur[key]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(key)
    return cur


def text_at(path: Sequence[Union[str, int]], family: str) -> Callable[[Any], str]:
    placeholder = f"No response from {family} model"

    def extract(body: Any) -> str:
        value = dig(body, path)
        if not value:
            return placeholder
        return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)

    return extract


@dataclass(frozen=True)
class DialectEntry:
    family: str
    prefix: Optional[str]
    build: Callable[[str, ModelSettings], Payload]
    extract: Callable[[Any], str]

    def matches(self, model_id: str) -> bool:
        return self.prefix is not None and model_id.startswith(self.prefix)

    def build_payload(self, message: str, settings: ModelSettings) -> Payload:
        return self.build(message, settings)

    def extract_text(self, raw: RawBody) -> str:
        return self.extract(decode_body(raw))
