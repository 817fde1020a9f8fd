"""API Gateway request parsing and response envelopes."""
from __future__ import annotations

import json
import random
import string
from typing import Any, Dict, Sequence

from .errors import ValidationError
from .logging_util import get_logger
from .types import InvocationRequest

logger = get_logger(__name__)

_ALPHABET = string.digits + string.ascii_lowercase
_SEGMENT_LEN = 13

ALLOW_METHODS = "OPTIONS,POST,GET"
ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"


def generate_session_id() -> str:
    return "".join(
        "".join(random.choices(_ALPHABET, k=_SEGMENT_LEN)) for _ in range(2)
    )


_GATEWAY_KEYS = ("body", "requestContext", "httpMethod", "routeKey")


def _is_gateway_event(event: Any) -> bool:
    # Direct invoke passes the request itself; API Gateway wraps it in "body"
    # and HTTP API (v2) drops "body" entirely when the request has none.
    return isinstance(event, dict) and any(k in event for k in _GATEWAY_KEYS)


def _load_body(event: Dict[str, Any]) -> Dict[str, Any]:
    body = event.get("body") if _is_gateway_event(event) else event
    if body is None or body == "" or body == {}:
        raise ValidationError("Request body is required")
    if isinstance(body, dict):
        return body
    if not isinstance(body, str):
        raise ValidationError("Invalid request format")
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        logger.warning("Error validating request: %s", e)
        raise ValidationError("Invalid request format") from e
    if not isinstance(parsed, dict):
        raise ValidationError("Invalid request format")
    return parsed


def parse_request(event: Dict[str, Any]) -> InvocationRequest:
    body = _load_body(event)

    message = body.get("message")
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("Message is required")

    session_id = body.get("sessionId")
    if not session_id:
        session_id = generate_session_id()
        logger.info("Generated session ID for request sessionId=%s", session_id)

    return InvocationRequest(message=message, session_id=str(session_id))


def cors_headers(allowed_origins: Sequence[str]) -> Dict[str, str]:
    if "*" in allowed_origins:
        origin = "*"
    else:
        # Only a single origin can be echoed without inspecting the request.
        logger.warning("Specific CORS origins are configured but not fully implemented")
        origin = allowed_origins[0]

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


def format_response(status_code: int, body: Dict[str, Any], allowed_origins: Sequence[str] = ("*",)) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **cors_headers(allowed_origins)},
        "body": json.dumps(body, ensure_ascii=False),
    }
