"""Environment-based configuration.

Resolved once per Lambda container and treated as immutable afterwards.
Pass an explicit mapping to load_config() in tests instead of patching
os.environ.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from .errors import ConfigError
from .types import AgentSettings, ModelSettings

DEFAULT_MODEL_ID = "anthropic.claude-3-sonnet-20240229-v1:0"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_ALLOWLIST_PATH = Path(__file__).resolve().parents[1] / "configs" / "allowlist.yaml"


@dataclass(frozen=True)
class BrokerConfig:
    model: ModelSettings
    agent: AgentSettings = field(default_factory=AgentSettings)
    use_agent: bool = False
    log_level: str = "info"
    include_error_details: bool = False
    allowed_origins: Tuple[str, ...] = ("*",)
    region: Optional[str] = None
    strict_models: bool = False
    allowlist_path: Path = DEFAULT_ALLOWLIST_PATH


def _to_bool(v: Any, default: bool = False) -> bool:
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower()
    if s in ("1", "true", "y", "yes"):
        return True
    if s in ("0", "false", "n", "no"):
        return False
    return default


def _to_int(key: str, v: Any, default: int) -> int:
    if v is None or str(v).strip() == "":
        return default
    try:
        return int(str(v).strip())
    except ValueError as e:
        raise ConfigError(f"{key} must be an integer: {v!r}") from e


def _to_float(key: str, v: Any, default: float) -> float:
    if v is None or str(v).strip() == "":
        return default
    try:
        return float(str(v).strip())
    except ValueError as e:
        raise ConfigError(f"{key} must be numeric: {v!r}") from e


def _to_str(v: Any) -> Optional[str]:
    s = (v or "").strip()
    return s or None


def _to_origins(v: Any) -> Tuple[str, ...]:
    if not v:
        return ("*",)
    origins = tuple(o.strip() for o in str(v).split(",") if o.strip())
    return origins or ("*",)


def error_details_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Read INCLUDE_ERROR_DETAILS on its own, for failures before a BrokerConfig exists."""
    env = os.environ if environ is None else environ
    return _to_bool(env.get("INCLUDE_ERROR_DETAILS"), False)


def load_config(environ: Optional[Mapping[str, str]] = None) -> BrokerConfig:
    env = os.environ if environ is None else environ

    model = ModelSettings(
        model_id=_to_str(env.get("BEDROCK_MODEL_ID")) or DEFAULT_MODEL_ID,
        max_tokens=_to_int("BEDROCK_MAX_TOKENS", env.get("BEDROCK_MAX_TOKENS"), DEFAULT_MAX_TOKENS),
        temperature=_to_float("BEDROCK_TEMPERATURE", env.get("BEDROCK_TEMPERATURE"), DEFAULT_TEMPERATURE),
    )
    agent = AgentSettings(
        agent_id=_to_str(env.get("BEDROCK_AGENT_ID")),
        agent_alias_id=_to_str(env.get("BEDROCK_AGENT_ALIAS_ID")),
    )

    allowlist_path = _to_str(env.get("BEDROCK_ALLOWLIST_PATH"))

    return BrokerConfig(
        model=model,
        agent=agent,
        use_agent=_to_bool(env.get("USE_BEDROCK_AGENT"), False),
        log_level=(_to_str(env.get("LOG_LEVEL")) or "info").lower(),
        include_error_details=error_details_enabled(env),
        allowed_origins=_to_origins(env.get("ALLOWED_ORIGINS")),
        region=_to_str(env.get("AWS_REGION")),
        strict_models=_to_bool(env.get("BEDROCK_STRICT_MODELS"), False),
        allowlist_path=Path(allowlist_path) if allowlist_path else DEFAULT_ALLOWLIST_PATH,
    )
