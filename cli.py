"""Simple CLI for the broker.

Usage examples:
- Ask the configured model:
  python cli.py "How do I list failing pods?"

- Keep a session id for agent correlation:
  python cli.py "How do I list failing pods?" --session-id abc123

- Pretty print:
  python cli.py "How do I list failing pods?" --pretty

Notes:
- Settings come from the same environment variables as the Lambda
  (BEDROCK_MODEL_ID, USE_BEDROCK_AGENT, ...).
- This CLI does not manage multi-turn. It is strictly a single call executor.
"""
import argparse
import json
import sys
from typing import List, Optional

from src.broker.config import load_config
from src.broker.errors import BrokerError, ValidationError
from src.broker.http_util import parse_request
from src.broker.logging_util import get_logger, set_level
from src.broker.router import RequestRouter

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None, router: Optional[RequestRouter] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("message", help="Question to send to the model")
    ap.add_argument("--session-id", default=None, help="Session identifier (generated when omitted)")
    ap.add_argument("--pretty", action="store_true", help="Pretty print the output JSON")
    args = ap.parse_args(argv)

    try:
        req = parse_request({"message": args.message, "sessionId": args.session_id})
    except ValidationError as e:
        logger.warning("Invalid input: %s", e)
        return 2

    if router is None:
        config = load_config()
        set_level(config.log_level)
        router = RequestRouter(config)

    try:
        result = router.route(req.message, req.session_id)
    except BrokerError as e:
        logger.error("Request failed: %s", e)
        return 1

    if args.pretty:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
