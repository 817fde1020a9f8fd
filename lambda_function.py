"""AWS Lambda entrypoint.

Design goals:
- Keep this file small and stable.
- Delegate all real logic to src/broker so that the same code path is used
  from the CLI and from Lambda.

Expected event shapes (minimal):
1) API Gateway (body is a JSON string):
   {"body": "{\"message\":\"How do I restart a pod?\",\"sessionId\":\"abc\"}"}

2) Direct invoke / local test (event itself is the JSON dict):
   {"message": "How do I restart a pod?"}

Return:
- statusCode: 200 on success, 400 on a malformed request, 500 otherwise
- body: JSON string of {"message": ..., "implementationStatus"?: "pending"}
  or {"error": ..., "message"?: ...}
"""
from typing import Any, Dict, Optional

from src.broker.config import BrokerConfig, error_details_enabled, load_config
from src.broker.errors import ValidationError
from src.broker.http_util import format_response, parse_request
from src.broker.logging_util import get_logger, log_trace, set_level
from src.broker.router import RequestRouter

logger = get_logger(__name__)

_router: Optional[RequestRouter] = None


def _get_router() -> RequestRouter:
    # Built once per container; config is immutable for the process lifetime.
    global _router
    if _router is None:
        config = load_config()
        set_level(config.log_level)
        _router = RequestRouter(config)
    return _router


def handle_event(event: Dict[str, Any], router: RequestRouter, config: BrokerConfig) -> Dict[str, Any]:
    origins = config.allowed_origins
    try:
        logger.info("Received event")
        log_trace(logger, "Event payload: %s", event)

        try:
            req = parse_request(event)
        except ValidationError as e:
            logger.warning("Invalid request: %s", e)
            return format_response(400, {"error": str(e)}, origins)

        result = router.route(req.message, req.session_id)
        return format_response(200, result.to_dict(), origins)

    except Exception as e:
        logger.exception("Unhandled error in Lambda handler: %s", e)
        return _error_response(e, config.include_error_details, origins)


def _error_response(e: Exception, include_details: bool, origins=("*",)) -> Dict[str, Any]:
    body = {"error": "Internal server error"}
    if include_details:
        body["message"] = str(e)
    return format_response(500, body, origins)


def lambda_handler(event: Dict[str, Any], context: Any):
    try:
        router = _get_router()
    except Exception as e:
        # No config yet, so CORS falls back to the wildcard default.
        logger.exception("Failed to initialise broker: %s", e)
        return _error_response(e, error_details_enabled())
    return handle_event(event, router, router.config)
