"""Dialect registry and strict model allowlist.

Design:
- DIALECTS is evaluated in order, first prefix match wins.
- A model id that matches nothing falls back to the default dialect with a
  warning; an unknown family is best-effort, never an error.
- Strict mode means: "Only allowed model ids or families are callable."
- If the allowlist file is missing or empty and strict mode is on -> block.

allowlist.yaml supports:
- families: ["anthropic.claude", "amazon.titan"]   # prefix match
- models:
    - cohere.command-text-v14                       # exact match
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

import yaml

from .dialects import ai21, anthropic, cohere, default, titan
from .dialects.base import DialectEntry
from .logging_util import get_logger

logger = get_logger(__name__)

DIALECTS: Tuple[DialectEntry, ...] = (
    anthropic.ENTRY,
    ai21.ENTRY,
    titan.ENTRY,
    cohere.ENTRY,
)
DEFAULT_DIALECT = default.ENTRY


def resolve_dialect(model_id: str) -> DialectEntry:
    for entry in DIALECTS:
        if entry.matches(model_id):
            return entry

    logger.warning("Using default prompt format for unknown model type modelId=%s", model_id)
    return DEFAULT_DIALECT


def load_allowlist(path: Path) -> Dict:
    if not path.exists():
        return {}
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load YAML: %s (%s)", path, e)
        return {}


def is_allowed(allowlist: Dict, model_id: str, strict: bool) -> Tuple[bool, str]:
    if not strict:
        return True, "strict=false"

    if not allowlist:
        return False, "strict=true but allowlist missing or empty"

    models = set(allowlist.get("models") or [])
    if model_id in models:
        return True, "allowed"

    families = allowlist.get("families") or []
    if any(model_id.startswith(f) for f in families):
        return True, "allowed"

    return False, f"model not allowed: {model_id}"
