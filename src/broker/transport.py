"""Bedrock runtime transport.

The only piece of the broker that talks to the network. Anything with an
``invoke(model_id, body, content_type, accept) -> bytes`` method can stand in
for it, which is how the tests run without AWS.
"""
from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.config import Config

JSON_CONTENT_TYPE = "application/json"


def build_bedrock_client(region: Optional[str] = None) -> Any:
    # A failed call propagates as a single failure; no SDK-level retries.
    return boto3.client(
        "bedrock-runtime",
        region_name=region,
        config=Config(retries={"total_max_attempts": 1, "mode": "standard"}),
    )


class BedrockTransport:
    def __init__(self, client: Any = None, region: Optional[str] = None):
        self._client = client
        self.region = region

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = build_bedrock_client(self.region)
        return self._client

    def invoke(
        self,
        model_id: str,
        body: bytes,
        content_type: str = JSON_CONTENT_TYPE,
        accept: str = JSON_CONTENT_TYPE,
    ) -> bytes:
        response = self.client.invoke_model(
            modelId=model_id,
            contentType=content_type,
            accept=accept,
            body=body,
        )
        return response["body"].read()
