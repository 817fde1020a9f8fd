"""Shared types and lightweight data containers.

We avoid heavy frameworks here. The goal is:
- keep settings immutable per invocation
- keep per-call values plain and cheap to build in tests
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigError

PENDING = "pending"


@dataclass(frozen=True)
class ModelSettings:
    model_id: str
    max_tokens: int = 1000
    temperature: float = 0.7

    def __post_init__(self):
        if not isinstance(self.model_id, str) or not self.model_id.strip():
            raise ConfigError("model_id is required")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            raise ConfigError(f"max_tokens must be a positive integer: {self.max_tokens!r}")
        if not 0.0 <= float(self.temperature) <= 1.0:
            raise ConfigError(f"temperature must be within [0, 1]: {self.temperature!r}")


@dataclass(frozen=True)
class AgentSettings:
    agent_id: Optional[str] = None
    agent_alias_id: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.agent_id) and bool(self.agent_alias_id)


@dataclass
class InvocationRequest:
    message: str
    session_id: str


@dataclass
class InvocationResult:
    message: str
    # Only set for code paths that are not wired to a real backend yet.
    implementation_status: Optional[str] = None

    @classmethod
    def pending(cls, message: str) -> "InvocationResult":
        return cls(message=message, implementation_status=PENDING)

    @property
    def is_pending(self) -> bool:
        return self.implementation_status == PENDING

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"message": self.message}
        if self.implementation_status is not None:
            out["implementationStatus"] = self.implementation_status
        return out
