"""
Shared fixtures for floodwatch tests.
"""

import json
from typing import Any, Callable, Dict

import httpx
import pytest

from floodwatch.client import FloodWatchClient
from floodwatch.config import ClientConfig

BASE_URL = "http://dashboard.test:5000"


@pytest.fixture
def weather_body() -> Dict[str, Any]:
    return {
        "latest_weather_data": {
            "temperature_2m": 31.5,
            "relative_humidity_2m": 68,
            "dew_point_2m": 24.8,
            "pressure_msl": 1008.2,
            "cloud_cover": 40,
            "wind_speed_10m": 12.3,
            "soil_temperature_0cm": 29.1,
        },
        "latest_river_discharge": 120,
    }


@pytest.fixture
def series_body() -> Dict[str, Any]:
    return {"river_discharge_7day": [100, 105, 110, 108, 115, 118, 120]}


@pytest.fixture
def prediction_body() -> Dict[str, Any]:
    return {"predictions_tomorrow": 125}


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, timeout=5)


@pytest.fixture
def routes(weather_body, series_body, prediction_body) -> Dict[str, Any]:
    """Path -> JSON body (or httpx.Response) served by the mock backend."""
    return {
        "/api/weather/latest": weather_body,
        "/api/river_discharge_7day": series_body,
        "/api/predict": prediction_body,
    }


@pytest.fixture
def make_client(config) -> Callable[[Dict[str, Any]], FloodWatchClient]:
    """Build a client whose transport serves the given routes."""

    def _make(route_map: Dict[str, Any]) -> FloodWatchClient:
        def handler(request: httpx.Request) -> httpx.Response:
            served = route_map.get(request.url.path)
            if served is None:
                return httpx.Response(404, json={"error": "not found"})
            if isinstance(served, httpx.Response):
                return served
            return httpx.Response(200, content=json.dumps(served).encode())

        return FloodWatchClient(config, transport=httpx.MockTransport(handler))

    return _make
