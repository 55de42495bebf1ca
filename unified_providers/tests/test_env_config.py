from __future__ import annotations

import json

from unified_providers.config import (
    CONFIG_FILE_ENV,
    get_model,
    get_provider_config,
    reset_config_cache,
)
from unified_providers.config.defaults import (
    ANTHROPIC_DEFAULT_API_VERSION,
    ANTHROPIC_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
)
from unified_providers.config.env import (
    ENV_MAP,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    for p in ["openai", "anthropic"]:
        assert p in ENV_MAP


def test_get_env_var_name():
    assert get_env_var_name("openai") == "OPENAI_API_KEY"
    assert get_env_var_name("Anthropic") == "ANTHROPIC_API_KEY"
    assert get_env_var_name("nope") is None
    assert get_env_var_name("") is None


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("real-value")
    assert not is_placeholder(None)


def test_resolve_provider_key(monkeypatch):
    assert resolve_provider_key("openai") == (None, None)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-real")
    assert resolve_provider_key("openai") == ("sk-real", "OPENAI_API_KEY")
    monkeypatch.setenv("OPENAI_API_KEY", "your-key-placeholder")
    assert resolve_provider_key("openai") == (None, None)


def test_defaults_without_sources():
    cfg = get_provider_config("anthropic")
    assert cfg["model"] == ANTHROPIC_DEFAULT_MODEL
    assert cfg["api_version"] == ANTHROPIC_DEFAULT_API_VERSION
    assert "api_key" not in cfg
    assert get_provider_config("unknown") == {}


def test_json_config_file(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"model": "gpt-file", "base_url": "https://proxy.local/v1"}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()

    cfg = get_provider_config("openai")
    assert cfg["model"] == "gpt-file"
    assert cfg["base_url"] == "https://proxy.local/v1"


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("anthropic:\n  model: claude-file\n  api_version: '2024-10-22'\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()

    cfg = get_provider_config("anthropic")
    assert cfg["model"] == "claude-file"
    assert cfg["api_version"] == "2024-10-22"


def test_unparseable_config_file_is_ignored(monkeypatch, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("openai: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()

    assert get_provider_config("openai")["base_url"] == OPENAI_DEFAULT_BASE_URL


def test_merge_order_env_over_file_and_overrides_over_env(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"model": "gpt-file"}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv("OPENAI_MODEL", "gpt-env")
    reset_config_cache()

    assert get_model("openai") == "gpt-env"
    assert get_provider_config("openai", {"model": "gpt-arg"})["model"] == "gpt-arg"
    assert get_provider_config("openai", {"model": None})["model"] == "gpt-env"


def test_placeholder_api_key_is_skipped(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "changeme")
    assert "api_key" not in get_provider_config("anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-real")
    assert get_provider_config("anthropic")["api_key"] == "ak-real"


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# local secrets\nOPENAI_API_KEY='sk-from-dotenv'\n\nNOT A PAIR\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    reset_config_cache()

    assert get_provider_config("openai")["api_key"] == "sk-from-dotenv"


def test_api_key_comes_from_provider_key_mapping(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-mapped")
    assert get_provider_config("openai")["api_key"] == resolve_provider_key("openai")[0]


def test_api_key_ignored_for_unmapped_provider(monkeypatch):
    monkeypatch.setenv("ACME_API_KEY", "acme-real")
    monkeypatch.setenv("ACME_MODEL", "acme-1")
    cfg = get_provider_config("acme")
    assert cfg == {"model": "acme-1"}


def test_blank_api_key_is_skipped(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")
    assert resolve_provider_key("openai") == (None, None)
    assert "api_key" not in get_provider_config("openai")
