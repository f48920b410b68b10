"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def no_real_resource(monkeypatch):
    """Disable any real local model so tests never depend on an external server."""
    for name in (
        "LOCAL_LLM_PROVIDER",
        "OLLAMA_HOST",
        "LOCAL_LLM_MODEL",
        "LOCAL_LLM_TIMEOUT_SECONDS",
        "GENERATION_MAX_ATTEMPTS",
        "GENERATION_RETRY_DELAY_MS",
        "GENERATION_ATTEMPT_TIMEOUT_SECONDS",
        "AI_RATE_LIMIT_MAX",
        "AI_RATE_LIMIT_WINDOW",
        "INPUT_MAX_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    # Reset the resource singleton so every test builds its own.
    from travel_companion.infrastructure.resource_factory import reset_resource

    reset_resource()
    yield
    reset_resource()


@pytest.fixture
def mock_resource():
    from travel_companion.adapters.resource.mock import MockResource

    return MockResource()


@pytest.fixture
def fast_context(mock_resource):
    """Assistant wired to the mock resource with no retry delay."""
    from travel_companion.application.context import make_assistant_context
    from travel_companion.config.settings import AssistantSettings

    settings = AssistantSettings(
        resource_provider="mock",
        retry_delay_seconds=0.0,
        attempt_timeout_seconds=None,
    )
    return make_assistant_context(settings=settings, resource=mock_resource)
