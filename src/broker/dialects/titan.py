"""Amazon Titan text dialect."""
from __future__ import annotations

from ..types import ModelSettings
from .base import DialectEntry, Payload, frame_message, text_at


def build(message: str, settings: ModelSettings) -> Payload:
    return {
        "inputText": frame_message(message),
        "textGenerationConfig": {
            "maxTokenCount": settings.max_tokens,
            "temperature": settings.temperature,
            "topP": 0.9,
        },
    }


ENTRY = DialectEntry(
    family="Titan",
    prefix="amazon.titan",
    build=build,
    extract=text_at(["results", 0, "outputText"], "Titan"),
)
