"""Anthropic Claude text-completions dialect."""
from __future__ import annotations

from ..types import ModelSettings
from .base import DialectEntry, Payload, frame_message, text_at

STOP_SEQUENCE = "\n\nHuman:"


def build(message: str, settings: ModelSettings) -> Payload:
    return {
        "prompt": f"\n\nHuman: {frame_message(message)}\n\nAssistant:",
        # Claude text completions take max_tokens_to_sample, not max_tokens.
        "max_tokens_to_sample": settings.max_tokens,
        "temperature": settings.temperature,
        "top_k": 250,
        "top_p": 0.999,
        "stop_sequences": [STOP_SEQUENCE],
    }


ENTRY = DialectEntry(
    family="Claude",
    prefix="anthropic.claude",
    build=build,
    extract=text_at(["completion"], "Claude"),
)
