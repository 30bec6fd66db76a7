import json
import pytest
import requests

SAMPLE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)


@pytest.fixture
def route_payload():
    return {
        "legs": [],
        "distanceMeters": 4490000,
        "duration": "42000s",
        "staticDuration": "42000s",
        "polyline": {"encodedPolyline": SAMPLE_POLYLINE},
        "description": "Route 1",
        "warnings": [],
        "viewport": {
            "low": {"latitude": 34.0522, "longitude": -118.2437},
            "high": {"latitude": 40.7128, "longitude": -74.006},
        },
        "travelAdvisory": {},
        "localizedValues": {
            "distance": {"text": "4,490 km"},
            "duration": {"text": "11 hours 40 mins"},
            "staticDuration": {"text": "11 hours 40 mins"},
        },
        "routeLabels": ["DEFAULT_ROUTE"],
        "polylineDetails": {},
    }


@pytest.fixture
def make_response():
    def _make_response(body, status_code: int = 200) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.encoding = "utf-8"
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return response
    return _make_response
