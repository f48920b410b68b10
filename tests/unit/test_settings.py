"""Settings resolution and resource factory selection."""

from __future__ import annotations

from travel_companion.adapters.resource.absent import AbsentResource
from travel_companion.adapters.resource.mock import MockResource
from travel_companion.adapters.resource.ollama import OllamaResource
from travel_companion.config.settings import resolve_resource_provider, resolve_settings
from travel_companion.infrastructure.resource_factory import (
    get_resource,
    is_resource_configured,
    reset_resource,
)


class TestResolveSettings:
    def test_defaults(self):
        settings = resolve_settings()
        assert settings.resource_provider == "absent"
        assert settings.model == "llama3.2"
        assert settings.max_attempts == 3
        assert settings.retry_delay_seconds == 0.5
        assert settings.attempt_timeout_seconds == 60.0
        assert settings.rate_limit_max == 10
        assert settings.input_max_length == 2000

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GENERATION_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("GENERATION_RETRY_DELAY_MS", "250")
        monkeypatch.setenv("AI_RATE_LIMIT_MAX", "3")
        monkeypatch.setenv("LOCAL_LLM_MODEL", "qwen2.5:7b")
        settings = resolve_settings()
        assert settings.max_attempts == 5
        assert settings.retry_delay_seconds == 0.25
        assert settings.rate_limit_max == 3
        assert settings.model == "qwen2.5:7b"

    def test_invalid_numbers_fall_back(self, monkeypatch):
        monkeypatch.setenv("GENERATION_MAX_ATTEMPTS", "lots")
        monkeypatch.setenv("GENERATION_RETRY_DELAY_MS", "-10")
        settings = resolve_settings()
        assert settings.max_attempts == 3
        assert settings.retry_delay_seconds == 0.5

    def test_zero_attempt_timeout_disables(self, monkeypatch):
        monkeypatch.setenv("GENERATION_ATTEMPT_TIMEOUT_SECONDS", "0")
        assert resolve_settings().attempt_timeout_seconds is None

    def test_host_is_normalised(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", " http://gpu-box:11434/ ")
        assert resolve_settings().ollama_host == "http://gpu-box:11434"


class TestProviderSelection:
    def test_absent_by_default(self):
        assert resolve_resource_provider() == "absent"
        assert not is_resource_configured()
        assert isinstance(get_resource(), AbsentResource)

    def test_host_selects_ollama(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", "http://localhost:11434")
        assert resolve_resource_provider() == "ollama"
        assert isinstance(get_resource(), OllamaResource)

    def test_explicit_provider_wins(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", "http://localhost:11434")
        monkeypatch.setenv("LOCAL_LLM_PROVIDER", "mock")
        assert isinstance(get_resource(), MockResource)

    def test_unknown_provider_is_ignored(self, monkeypatch):
        monkeypatch.setenv("LOCAL_LLM_PROVIDER", "cloud")
        assert resolve_resource_provider() == "absent"

    def test_singleton_and_reset(self, monkeypatch):
        monkeypatch.setenv("LOCAL_LLM_PROVIDER", "mock")
        first = get_resource()
        assert get_resource() is first
        reset_resource()
        assert get_resource() is not first
