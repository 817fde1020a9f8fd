import json

import pytest

from src.broker.config import BrokerConfig
from src.broker.types import AgentSettings, ModelSettings


class FakeTransport:
    def __init__(self, response=b"{}", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def invoke(self, model_id, body, content_type="application/json", accept="application/json"):
        self.calls.append(
            {"model_id": model_id, "body": body, "content_type": content_type, "accept": accept}
        )
        if self.error is not None:
            raise self.error
        if isinstance(self.response, (dict, list)):
            return json.dumps(self.response).encode("utf-8")
        return self.response


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def make_config():
    def _make(**kw):
        model = kw.pop("model", ModelSettings("anthropic.claude-v2", 1000, 0.7))
        agent = kw.pop("agent", AgentSettings())
        return BrokerConfig(model=model, agent=agent, **kw)

    return _make
