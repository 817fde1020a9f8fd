"""RequestRouter: picks the invocation mode for one request."""
from __future__ import annotations

from typing import Any, Optional

from .config import BrokerConfig
from .errors import BrokerError
from .invoker import AgentInvoker, ModelInvoker
from .logging_util import get_logger, log_step
from .registry import load_allowlist
from .transport import BedrockTransport
from .types import InvocationResult

logger = get_logger(__name__)


class RequestRouter:
    def __init__(
        self,
        config: BrokerConfig,
        transport: Any = None,
        model_invoker: Optional[ModelInvoker] = None,
        agent_invoker: Optional[AgentInvoker] = None,
    ):
        self.config = config

        if model_invoker is None:
            allowlist = load_allowlist(config.allowlist_path) if config.strict_models else None
            model_invoker = ModelInvoker(
                transport or BedrockTransport(region=config.region),
                allowlist=allowlist,
                strict=config.strict_models,
            )
        self.model_invoker = model_invoker
        self.agent_invoker = agent_invoker or AgentInvoker()

    def route(self, message: str, session_id: str) -> InvocationResult:
        mode = "agent" if self.config.use_agent else "model"
        try:
            log_step(logger, "1", f"processing Bedrock request sessionId={session_id} mode={mode}")
            if self.config.use_agent:
                return self.agent_invoker.invoke(message, session_id, self.config.agent)
            return self.model_invoker.invoke(message, self.config.model)

        except BrokerError:
            logger.error("Error in Bedrock request handler sessionId=%s mode=%s", session_id, mode)
            raise
        except Exception as e:
            logger.exception("Error in Bedrock request handler sessionId=%s mode=%s", session_id, mode)
            raise BrokerError(f"Error processing Bedrock request: {e}") from e


def route(message: str, session_id: str, config: BrokerConfig, transport: Any = None) -> InvocationResult:
    return RequestRouter(config, transport=transport).route(message, session_id)
