"""AI21 Jurassic dialect."""
from __future__ import annotations

from ..types import ModelSettings
from .base import DialectEntry, Payload, frame_message, text_at


def build(message: str, settings: ModelSettings) -> Payload:
    return {
        "prompt": frame_message(message),
        "maxTokens": settings.max_tokens,
        "temperature": settings.temperature,
        "topP": 0.9,
    }


ENTRY = DialectEntry(
    family="AI21",
    prefix="ai21",
    build=build,
    extract=text_at(["completions", 0, "data", "text"], "AI21"),
)
