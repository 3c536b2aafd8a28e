"""
Shared pytest fixtures.

Nookal is never reached over the network: every client is wired to an
httpx.MockTransport whose handler the test controls.
"""

import json
from typing import Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from api.routers.webhook_ppm import get_nookal_api
from config import Settings, get_settings
from main import app
from sdk.nookal_sdk import NookalApi


TEST_PRACTITIONER_MAP = {
    "Dr. Smith": "nookal_practitioner_id_1",
    "Dr. Johnson": "nookal_practitioner_id_2",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        nookal_api_key="test-key",
        nookal_api_url="https://nookal.test",
        practitioner_map=TEST_PRACTITIONER_MAP,
        default_practitioner_id="fallback_id",
    )


@pytest.fixture
def nookal_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def nookal_handler() -> Dict[str, Callable[[httpx.Request], httpx.Response]]:
    """Mutable slot so a test can swap the Nookal reply before posting."""
    return {"handler": lambda request: httpx.Response(200, json={"id": "nk-1"})}


@pytest.fixture
def mock_transport(nookal_calls, nookal_handler) -> httpx.MockTransport:
    def handle(request: httpx.Request) -> httpx.Response:
        nookal_calls.append(request)
        return nookal_handler["handler"](request)

    return httpx.MockTransport(handle)


@pytest.fixture
def client(settings, mock_transport):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_nookal_api] = lambda: NookalApi.from_settings(settings, transport=mock_transport)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def full_payload() -> dict:
    return {
        "customData": {
            "appointment_id": "ppm-123",
            "start_date": "July 16, 2025",
            "start_time": "7:00 AM",
            "end_date": "July 16, 2025",
            "end_time": "7:45 AM",
            "contact_name": "Jane Doe",
            "contact_email": "jane@example.com",
            "practitioner_name": "Dr. Smith",
        },
        "contact": {"full_name": "Jane Q. Doe", "email": "jane.q@example.com"},
    }


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
