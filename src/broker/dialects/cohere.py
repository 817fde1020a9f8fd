"""Cohere Command dialect."""
from __future__ import annotations

from ..types import ModelSettings
from .base import DialectEntry, Payload, frame_message, text_at


def build(message: str, settings: ModelSettings) -> Payload:
    return {
        "prompt": frame_message(message),
        "max_tokens": settings.max_tokens,
        "temperature": settings.temperature,
        "p": 0.9,
    }


ENTRY = DialectEntry(
    family="Cohere",
    prefix="cohere",
    build=build,
    extract=text_at(["generations", 0, "text"], "Cohere"),
)
