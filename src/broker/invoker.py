"""Direct model and agent invokers.

ModelInvoker owns the single outbound call per request. Everything that can
go wrong around it (payload shaping, allowlist, transport, decoding) comes
out as ModelInvocationError carrying the original message.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .dialects.base import decode_body
from .errors import AgentConfigError, ConfigError, ModelInvocationError
from .logging_util import get_logger, truncate
from .registry import is_allowed, resolve_dialect
from .transport import JSON_CONTENT_TYPE
from .types import AgentSettings, InvocationResult, ModelSettings

logger = get_logger(__name__)

AGENT_PLACEHOLDER_MESSAGE = (
    "This is a placeholder response. To implement an actual Bedrock agent, "
    "you'll need to follow AWS documentation for the specific API calls."
)


class ModelInvoker:
    def __init__(self, transport: Any, allowlist: Optional[Dict] = None, strict: bool = False):
        self.transport = transport
        self.allowlist = allowlist or {}
        self.strict = strict

    def invoke(self, message: str, settings: ModelSettings) -> InvocationResult:
        model_id = settings.model_id
        try:
            logger.info("Calling Bedrock model modelId=%s message=%s", model_id, truncate(message))

            ok, reason = is_allowed(self.allowlist, model_id, self.strict)
            if not ok:
                raise ConfigError(reason)

            dialect = resolve_dialect(model_id)
            payload = dialect.build_payload(message, settings)
            logger.debug("Prepared prompt for model modelId=%s prompt=%s", model_id, json.dumps(payload, ensure_ascii=False))

            raw = self.transport.invoke(
                model_id,
                json.dumps(payload).encode("utf-8"),
                content_type=JSON_CONTENT_TYPE,
                accept=JSON_CONTENT_TYPE,
            )
            body = decode_body(raw)
            logger.debug("Raw model response modelId=%s responseBody=%s", model_id, json.dumps(body, ensure_ascii=False))

            text = dialect.extract_text(body)
        except Exception as e:
            logger.exception("Error calling Bedrock model modelId=%s", model_id)
            raise ModelInvocationError(f"Error calling Bedrock model: {e}") from e

        logger.info("Successfully received model response responseLength=%d", len(text))
        return InvocationResult(message=text)


class AgentInvoker:
    """Hosted Bedrock agent mode.

    Not wired to bedrock-agent-runtime yet: with a complete configuration it
    returns a pending placeholder instead of calling AWS.
    """

    def invoke(self, message: str, session_id: str, settings: AgentSettings) -> InvocationResult:
        logger.info(
            "Calling Bedrock agent agentId=%s agentAliasId=%s sessionId=%s",
            settings.agent_id,
            settings.agent_alias_id,
            session_id,
        )

        if not settings.complete:
            logger.error("Bedrock agent configuration is incomplete")
            raise AgentConfigError("Bedrock agent configuration is incomplete")

        # TODO: call bedrock-agent-runtime invoke_agent and collect the completion event stream.
        logger.warning("Agent implementation is incomplete")
        return InvocationResult.pending(AGENT_PLACEHOLDER_MESSAGE)
