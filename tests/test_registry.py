import logging

import pytest

from src.broker.registry import DEFAULT_DIALECT, is_allowed, load_allowlist, resolve_dialect


@pytest.mark.parametrize(
    "model_id, family",
    [
        ("anthropic.claude-3-sonnet-20240229-v1:0", "Claude"),
        ("anthropic.claude-instant-v1", "Claude"),
        ("anthropic.claude-v2:1", "Claude"),
        ("ai21.j2-ultra-v1", "AI21"),
        ("ai21.j2-mid-v1", "AI21"),
        ("amazon.titan-text-express-v1", "Titan"),
        ("amazon.titan-text-lite-v1", "Titan"),
        ("cohere.command-text-v14", "Cohere"),
        ("cohere.command-light-text-v14", "Cohere"),
    ],
)
def test_known_prefixes_resolve_regardless_of_version(model_id, family):
    assert resolve_dialect(model_id).family == family


@pytest.mark.parametrize("model_id", ["foo.bar-v1", "meta.llama2-13b-chat-v1", "claude-v2", ""])
def test_unknown_model_falls_back_to_default_with_warning(model_id, caplog):
    with caplog.at_level(logging.WARNING, logger="src.broker.registry"):
        entry = resolve_dialect(model_id)

    assert entry is DEFAULT_DIALECT
    assert any("unknown model type" in r.getMessage() for r in caplog.records)
    assert all(r.levelno < logging.ERROR for r in caplog.records)


def test_known_model_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="src.broker.registry"):
        resolve_dialect("amazon.titan-text-express-v1")
    assert not caplog.records


def test_allowlist_non_strict_allows_anything():
    ok, reason = is_allowed({}, "foo.bar-v1", strict=False)
    assert ok is True
    assert reason == "strict=false"


def test_allowlist_strict_blocks_when_missing(tmp_path):
    allow = load_allowlist(tmp_path / "configs" / "allowlist.yaml")
    ok, reason = is_allowed(allow, "anthropic.claude-v2", strict=True)
    assert allow == {}
    assert ok is False
    assert "missing or empty" in reason


def test_allowlist_families_and_models(tmp_path):
    path = tmp_path / "allowlist.yaml"
    path.write_text("families:\n  - amazon.titan\nmodels:\n  - cohere.command-text-v14\n", encoding="utf-8")
    allow = load_allowlist(path)

    assert is_allowed(allow, "amazon.titan-text-express-v1", strict=True)[0] is True
    assert is_allowed(allow, "cohere.command-text-v14", strict=True)[0] is True
    assert is_allowed(allow, "cohere.command-light-text-v14", strict=True) == (
        False,
        "model not allowed: cohere.command-light-text-v14",
    )


def test_allowlist_invalid_yaml_is_treated_as_empty(tmp_path):
    path = tmp_path / "allowlist.yaml"
    path.write_text("families: [unclosed\n", encoding="utf-8")
    assert load_allowlist(path) == {}
