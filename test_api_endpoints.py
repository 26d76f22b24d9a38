#!/usr/bin/env python3
"""
HTTP-level tests for the callable endpoints and the Dialogflow webhook
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.webhook_api import get_translator
from agents.chatbot.webhook_agent import ERROR_MESSAGE, HELP_MESSAGE

AUTH_HEADERS = {"Authorization": "Bearer test-id-token"}


class FakeTranslator:
    def __init__(self):
        self.calls = []

    async def translate(self, text, target_language):
        self.calls.append((text, target_language))
        return f"[{target_language}] {text}"


@pytest.fixture
def translator():
    fake = FakeTranslator()
    app.dependency_overrides[get_translator] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_translator, None)


@pytest.fixture
def client():
    return TestClient(app)


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "VoyaGo Backend Functions"
    health = client.get("/health").json()
    assert health["status"] == "healthy"


# Callable endpoints

def test_generate_itinerary(client):
    response = client.post("/api/generateItinerary", json={"data": {"prompt": "A relaxing trip to Goa"}},
                           headers=AUTH_HEADERS)
    assert response.status_code == 200
    itinerary = response.json()["result"]["itinerary"]
    assert len(itinerary) == 4
    assert itinerary[0]["title"] == "Arrive in Goa & Check-in"
    assert itinerary[0]["startTime"].endswith("Z")
    assert set(itinerary[0]) == {"title", "type", "location", "startTime", "endTime", "description", "notes"}


def test_generate_itinerary_requires_auth(client):
    response = client.post("/api/generateItinerary", json={"data": {"prompt": "goa trip"}})
    assert response.status_code == 401
    assert response.json() == {"error": {
        "status": "UNAUTHENTICATED",
        "message": "You must be logged in to generate an itinerary.",
    }}


@pytest.mark.parametrize("path, body", [
    ("/api/generateItinerary", b'{"data": {"prompt": 12345}}'),
    ("/api/generateItinerary", b'{"data": "goa"}'),
    ("/api/searchBookings", b"not json"),
    ("/api/searchBookings", b'{"data": {"type": "car"}}'),
])
def test_auth_checked_before_body(client, path, body):
    response = client.post(path, content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 401
    assert response.json()["error"]["status"] == "UNAUTHENTICATED"


@pytest.mark.parametrize("headers", [{"Authorization": "Bearer "}, {"Authorization": "Basic abc"}])
def test_malformed_auth_header_is_unauthenticated(client, headers):
    response = client.post("/api/generateItinerary", json={"data": {"prompt": "goa trip"}}, headers=headers)
    assert response.status_code == 401


@pytest.mark.parametrize("data", [{"prompt": "abcd"}, {}, {"prompt": 12345}])
def test_generate_itinerary_invalid_prompt(client, data):
    response = client.post("/api/generateItinerary", json={"data": data}, headers=AUTH_HEADERS)
    assert response.status_code == 400
    assert response.json()["error"]["status"] == "INVALID_ARGUMENT"


def test_search_bookings(client):
    response = client.post("/api/searchBookings", json={"data": {"type": "flight", "query": "Delhi to Goa"}},
                           headers=AUTH_HEADERS)
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["searchType"] == "flight"
    assert result["searchQuery"] == "Delhi to Goa"
    assert len(result["results"]) == 3
    assert all(r["to"] == "Goa (GOI)" and r["price"] > 0 for r in result["results"])


def test_search_bookings_unsupported_type(client):
    response = client.post("/api/searchBookings", json={"data": {"type": "car", "query": "x"}},
                           headers=AUTH_HEADERS)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid booking type. Supported types: flight, hotel, bus"


def test_search_bookings_rejects_non_json_body(client):
    response = client.post("/api/searchBookings", content=b"not json", headers=AUTH_HEADERS)
    assert response.status_code == 400


def test_callable_cors_preflight(client):
    response = client.options("/api/searchBookings", headers={
        "Origin": "http://localhost:3000",
        "Access-Control-Request-Method": "POST",
    })
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


# Webhook

def test_webhook_preflight(client):
    response = client.options("/dialogflowWebhook")
    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_webhook_translate(client, translator):
    body = {"queryResult": {"intent": {"displayName": "Translate"},
                            "parameters": {"text": "good morning", "language": "French"}}}
    response = client.post("/dialogflowWebhook", json=body)
    assert response.status_code == 200
    assert response.json() == {"fulfillmentText": '"good morning" in French is: "[fr] good morning"'}
    assert response.headers["access-control-allow-origin"] == "*"
    assert translator.calls == [("good morning", "fr")]


def test_webhook_help(client, translator):
    body = {"queryResult": {"intent": {"displayName": "Help"}}}
    response = client.post("/dialogflowWebhook", json=body)
    assert response.json()["fulfillmentText"] == HELP_MESSAGE


def test_webhook_get_without_body(client, translator):
    response = client.get("/dialogflowWebhook")
    assert response.status_code == 200
    assert "fulfillmentText" in response.json()


def test_webhook_invalid_json_is_server_error(client, translator):
    response = client.post("/dialogflowWebhook", content=b"{broken",
                           headers={"Content-Type": "application/json"})
    assert response.status_code == 500
    assert response.json() == {"fulfillmentText": ERROR_MESSAGE}
    assert response.headers["access-control-allow-origin"] == "*"


def test_webhook_array_body_gets_default_message(client, translator):
    response = client.post("/dialogflowWebhook", json=["Translate"])
    assert response.status_code == 200
    assert response.json()["fulfillmentText"].startswith("I'm here to help")
    assert translator.calls == []
