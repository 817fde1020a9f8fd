from pathlib import Path

import pytest

from src.broker.config import DEFAULT_ALLOWLIST_PATH, DEFAULT_MODEL_ID, load_config
from src.broker.errors import ConfigError
from src.broker.types import ModelSettings


def test_defaults():
    cfg = load_config({})
    assert cfg.use_agent is False
    assert cfg.model == ModelSettings(DEFAULT_MODEL_ID, 1000, 0.7)
    assert cfg.model.model_id.startswith("anthropic.claude")
    assert cfg.agent.agent_id is None and cfg.agent.agent_alias_id is None
    assert cfg.log_level == "info"
    assert cfg.include_error_details is False
    assert cfg.allowed_origins == ("*",)
    assert cfg.region is None
    assert cfg.strict_models is False
    assert cfg.allowlist_path == DEFAULT_ALLOWLIST_PATH
    assert DEFAULT_ALLOWLIST_PATH.exists()


def test_full_environment():
    cfg = load_config(
        {
            "USE_BEDROCK_AGENT": "true",
            "BEDROCK_MODEL_ID": "cohere.command-text-v14",
            "BEDROCK_MAX_TOKENS": "256",
            "BEDROCK_TEMPERATURE": "0.25",
            "BEDROCK_AGENT_ID": "A1",
            "BEDROCK_AGENT_ALIAS_ID": "AL1",
            "LOG_LEVEL": "DEBUG",
            "INCLUDE_ERROR_DETAILS": "yes",
            "ALLOWED_ORIGINS": "https://a.example.com, https://b.example.com",
            "AWS_REGION": "eu-west-1",
            "BEDROCK_STRICT_MODELS": "1",
            "BEDROCK_ALLOWLIST_PATH": "/etc/broker/allow.yaml",
        }
    )
    assert cfg.use_agent is True
    assert cfg.model == ModelSettings("cohere.command-text-v14", 256, 0.25)
    assert cfg.agent.complete
    assert cfg.log_level == "debug"
    assert cfg.include_error_details is True
    assert cfg.allowed_origins == ("https://a.example.com", "https://b.example.com")
    assert cfg.region == "eu-west-1"
    assert cfg.strict_models is True
    assert cfg.allowlist_path == Path("/etc/broker/allow.yaml")


@pytest.mark.parametrize("value", ["false", "FALSE", "0", "no", "maybe", ""])
def test_use_agent_only_for_truthy_values(value):
    assert load_config({"USE_BEDROCK_AGENT": value}).use_agent is False


@pytest.mark.parametrize(
    "env",
    [
        {"BEDROCK_MAX_TOKENS": "lots"},
        {"BEDROCK_MAX_TOKENS": "0"},
        {"BEDROCK_MAX_TOKENS": "-5"},
        {"BEDROCK_TEMPERATURE": "warm"},
        {"BEDROCK_TEMPERATURE": "1.5"},
        {"BEDROCK_TEMPERATURE": "-0.1"},
    ],
)
def test_invalid_model_settings(env):
    with pytest.raises(ConfigError):
        load_config(env)


def test_model_settings_are_frozen():
    s = ModelSettings("amazon.titan-text-express-v1")
    with pytest.raises(AttributeError):
        s.max_tokens = 10
