"""HTTP surface via FastAPI TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from travel_companion.adapters.resource.mock import MockResource
from travel_companion.api.main import create_app
from travel_companion.application.context import make_assistant_context
from travel_companion.config.settings import AssistantSettings
from travel_companion.shared.exceptions import ContentPolicyViolationError, GenerationFailedError


def _client(resource=None, **overrides) -> TestClient:
    settings = AssistantSettings(
        resource_provider="mock",
        retry_delay_seconds=0.0,
        attempt_timeout_seconds=None,
        **overrides,
    )
    context = make_assistant_context(settings=settings, resource=resource or MockResource())
    return TestClient(create_app(context))


def test_health():
    r = _client().get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "provider": "mock"}


def test_availability_ready():
    data = _client().get("/ai/availability").json()
    assert data["state"] == {"available": True, "reason": None}
    assert data["error"] is None
    assert data["generating"] is False


def test_availability_not_ready_is_explained():
    data = _client(MockResource(status="model_downloading")).get("/ai/availability").json()
    assert data["state"]["reason"] == "resource_not_ready"
    assert data["error"]["suggested_action"] == "retry"


def test_packing_list_endpoint():
    r = _client().post("/ai/generate/packing-list", json={
        "destination": "Tokyo",
        "duration": 5,
        "trip_type": "multi-giorno",
        "season": "primavera",
    })
    assert r.status_code == 200
    assert len(r.json()["clothing"]) >= 5


def test_itinerary_accepts_trip_type_alias():
    resource = MockResource()
    r = _client(resource).post("/ai/generate/itinerary", json={
        "destination": "Lisbona",
        "days": 2,
        "trip_type": "multiDay",
        "travel_style": "culturale",
    })
    assert r.status_code == 200
    assert "- Tipo viaggio: multi-giorno" in resource.calls_for("itinerary")[0]


def test_invalid_trip_type_is_rejected_by_schema():
    r = _client().post("/ai/generate/itinerary", json={
        "destination": "Lisbona",
        "days": 2,
        "trip_type": "crociera",
    })
    assert r.status_code == 422


def test_empty_note_maps_to_validation_error():
    resource = MockResource()
    r = _client(resource).post("/ai/generate/note", json={"text": "   "})
    assert r.status_code == 422
    body = r.json()
    assert body["kind"] == "output_validation_failed"
    assert body["error"]["can_retry"] is False
    assert resource.calls == []


def test_journal_endpoint():
    r = _client().post("/ai/generate/journal", json={
        "date": "2025-05-02",
        "photo_count": 3,
        "places_visited": ["Alfama"],
    })
    assert r.status_code == 200
    assert r.json()["title"]


def test_trip_summary_endpoint():
    r = _client().post("/ai/generate/trip-summary", json={
        "destination": "Lisbona",
        "duration_days": 4,
        "highlights": ["Fado"],
        "variant": "breve",
    })
    assert r.status_code == 200
    assert r.json()["highlights"]


@pytest.mark.parametrize(
    "status, http_status, action",
    [("not_enabled", 503, "open_settings"), ("model_not_ready", 503, "retry")],
)
def test_unavailable_resource(status, http_status, action):
    r = _client(MockResource(status=status)).post("/ai/generate/briefing", json={"destination": "Roma"})
    assert r.status_code == http_status
    body = r.json()
    assert body["kind"] == "resource_unavailable"
    assert body["error"]["suggested_action"] == action


def test_exhausted_retries_map_to_bad_gateway():
    resource = MockResource()
    resource.script("briefing", *(GenerationFailedError() for _ in range(3)))
    r = _client(resource).post("/ai/generate/briefing", json={"destination": "Roma"})
    assert r.status_code == 502
    assert r.json()["kind"] == "generation_failed"


def test_policy_violation_is_not_retryable():
    resource = MockResource()
    resource.script("briefing", ContentPolicyViolationError())
    r = _client(resource).post("/ai/generate/briefing", json={"destination": "Roma"})
    assert r.status_code == 502
    assert r.json()["error"]["can_retry"] is False
    assert len(resource.calls) == 1


def test_rate_limit():
    client = _client(rate_limit_max=2)
    for _ in range(2):
        assert client.post("/ai/generate/briefing", json={"destination": "Roma"}).status_code == 200
    r = client.post("/ai/generate/briefing", json={"destination": "Roma"})
    assert r.status_code == 429
    assert client.get("/ai/availability").status_code == 200


def test_session_reset():
    resource = MockResource()
    client = _client(resource)
    client.post("/ai/generate/briefing", json={"destination": "Roma"})
    r = client.post("/ai/session/reset")
    assert r.status_code == 200
    assert r.json() == {"status": "reset"}
    client.post("/ai/generate/briefing", json={"destination": "Roma"})
    assert len(resource.sessions) == 2
