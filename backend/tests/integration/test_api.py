"""Integration tests for the NDJSON generate endpoint."""

import json

import pytest
from fastapi.testclient import TestClient

from reelforge.api import create_app
from reelforge.config import ProducerConfig, Settings

GENERATE = "/api/generate"


def _client() -> TestClient:
    settings = Settings(producer=ProducerConfig(event_delay_seconds=0))
    return TestClient(create_app(settings))


def test_valid_brief_streams_ten_events() -> None:
    client = _client()

    response = client.post(
        GENERATE,
        json={"topic": "AI studio launch", "length": "45", "platform": "tiktok"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/x-ndjson")
    assert response.headers["cache-control"] == "no-cache"
    assert response.headers["connection"] == "keep-alive"

    body = response.text
    assert body.endswith("\n")
    lines = body.split("\n")[:-1]
    assert len(lines) == 10
    assert all(line == line.strip() and line for line in lines)

    events = [json.loads(line) for line in lines]
    assert [e["type"] for e in events] == [
        "status", "status", "asset", "status", "timeline",
        "status", "asset", "asset", "status", "result",
    ]
    assert [s["duration"] for s in events[4]["segments"]] == [8, 10, 9, 9, 9]
    assert events[-1]["deliverables"]["duration"] == 45
    assert events[-1]["progress"] == 1


def test_defaults_applied_server_side() -> None:
    client = _client()

    response = client.post(GENERATE, json={"topic": "Solar Kits"})
    events = [json.loads(line) for line in response.text.splitlines()]

    deliverables = events[-1]["deliverables"]
    assert deliverables["platform"] == "instagram"
    assert deliverables["duration"] == 30
    assert "callToAction" not in deliverables
    assert "#7f5af0" in deliverables["overlays"]


def test_missing_topic_is_rejected() -> None:
    client = _client()

    response = client.post(GENERATE, json={"platform": "tiktok"})

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["error"] == "Invalid request payload"
    assert "topic" in body["details"]


def test_short_topic_is_rejected() -> None:
    response = _client().post(GENERATE, json={"topic": "ab"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request payload"


@pytest.mark.parametrize("autopilot", ["true", "yes", "on", 1])
def test_non_boolean_autopilot_is_rejected(autopilot) -> None:
    response = _client().post(GENERATE, json={"topic": "AI studio launch", "autopilot": autopilot})

    assert response.status_code == 400
    assert "autopilot" in response.json()["details"]


def test_non_json_body_is_rejected() -> None:
    response = _client().post(
        GENERATE,
        content=b"topic=AI studio launch",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request payload"
    assert body["details"]


def test_health_and_root() -> None:
    client = _client()

    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["generate"] == GENERATE


def test_configurable_generate_path() -> None:
    settings = Settings(producer=ProducerConfig(event_delay_seconds=0))
    settings.server.generate_path = "/v2/reels"
    client = TestClient(create_app(settings))

    assert client.post("/v2/reels", json={"topic": "Solar Kits"}).status_code == 200
    assert client.post(GENERATE, json={"topic": "Solar Kits"}).status_code in (404, 405)
