"""
Tests for the async dashboard client.
"""

import json
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from floodwatch.client import FloodWatchClient
from floodwatch.config import ClientConfig
from floodwatch.exceptions import (
    FloodWatchConnectionError,
    FloodWatchDecodeError,
    FloodWatchResponseError,
    FloodWatchTimeoutError,
)
from floodwatch.models import Endpoint


class TestFloodWatchClient:
    """Test FloodWatchClient functionality."""

    @pytest.fixture
    def client(self, config):
        """Create a test client."""
        return FloodWatchClient(config)

    def test_init(self, client):
        """Test client initialization."""
        assert client.timeout == 5
        assert client.base_url == "http://dashboard.test:5000"

    def test_default_config(self, monkeypatch):
        monkeypatch.delenv("FLOODWATCH_BASE_URL", raising=False)
        client = FloodWatchClient()
        assert client.base_url == "http://localhost:5000"

    @pytest.mark.asyncio
    async def test_get_json_success(self, client, weather_body):
        """Test successful JSON retrieval."""
        mock_response = Mock()
        mock_response.json.return_value = weather_body
        mock_response.raise_for_status.return_value = None

        mock_client = AsyncMock()
        mock_client.get.return_value = mock_response
        client._client = mock_client

        body = await client.get_json(Endpoint.WEATHER_LATEST)

        assert body == weather_body
        mock_client.get.assert_awaited_once_with(
            "http://dashboard.test:5000/api/weather/latest"
        )

    @pytest.mark.asyncio
    async def test_convenience_methods_hit_their_endpoints(self, client):
        mock_response = Mock()
        mock_response.json.return_value = {}
        mock_response.raise_for_status.return_value = None
        mock_client = AsyncMock()
        mock_client.get.return_value = mock_response
        client._client = mock_client

        await client.get_latest_weather()
        await client.get_discharge_series()
        await client.get_prediction()

        urls = [call.args[0] for call in mock_client.get.await_args_list]
        assert urls == [
            "http://dashboard.test:5000/api/weather/latest",
            "http://dashboard.test:5000/api/river_discharge_7day",
            "http://dashboard.test:5000/api/predict",
        ]

    @pytest.mark.asyncio
    async def test_timeout_error(self, client):
        """Test timeout handling."""
        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.TimeoutException("Timeout")
        client._client = mock_client

        with pytest.raises(FloodWatchTimeoutError, match="timed out after 5"):
            await client.get_json(Endpoint.PREDICT)

    @pytest.mark.asyncio
    async def test_timeout_is_a_connection_error(self, client):
        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.TimeoutException("Timeout")
        client._client = mock_client

        with pytest.raises(FloodWatchConnectionError):
            await client.get_json(Endpoint.PREDICT)

    @pytest.mark.asyncio
    async def test_network_error(self, client):
        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.ConnectError("Connection refused")
        client._client = mock_client

        with pytest.raises(FloodWatchConnectionError, match="Network error"):
            await client.get_json(Endpoint.WEATHER_LATEST)

    @pytest.mark.asyncio
    async def test_http_error_404(self, client):
        """Test 404 error handling."""
        mock_response = Mock()
        mock_response.status_code = 404

        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.HTTPStatusError(
            "Not found", request=Mock(), response=mock_response
        )
        client._client = mock_client

        with pytest.raises(FloodWatchResponseError, match="not found") as exc_info:
            await client.get_json(Endpoint.DISCHARGE_7DAY)

        assert exc_info.value.status_code == 404
        assert exc_info.value.endpoint == "api/river_discharge_7day"

    @pytest.mark.asyncio
    async def test_http_error_500(self, client):
        mock_response = Mock()
        mock_response.status_code = 503

        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.HTTPStatusError(
            "Unavailable", request=Mock(), response=mock_response
        )
        client._client = mock_client

        with pytest.raises(FloodWatchResponseError, match="Backend error") as exc_info:
            await client.get_json(Endpoint.WEATHER_LATEST)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)

        mock_client = AsyncMock()
        mock_client.get.return_value = mock_response
        client._client = mock_client

        with pytest.raises(FloodWatchDecodeError, match="Invalid JSON") as exc_info:
            await client.get_json(Endpoint.PREDICT)

        assert exc_info.value.endpoint == "api/predict"

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self, config):
        client = FloodWatchClient(config)
        mock_client = AsyncMock()
        client._client = mock_client

        async with client as entered:
            assert entered is client

        mock_client.aclose.assert_awaited_once()


class TestFloodWatchClientWire:
    """Requests as they appear on the wire."""

    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"predictions_tomorrow": 125})

        config = ClientConfig(base_url="http://backend:5000/", user_agent="test-agent")
        async with FloodWatchClient(config, transport=httpx.MockTransport(handler)) as client:
            body = await client.get_prediction()

        assert body == {"predictions_tomorrow": 125}
        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == "http://backend:5000/api/predict"
        assert request.url.query == b""
        assert request.headers["User-Agent"] == "test-agent"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_status_error_through_transport(self, make_client, routes):
        routes["/api/predict"] = httpx.Response(502, text="bad gateway")
        async with make_client(routes) as client:
            with pytest.raises(FloodWatchResponseError) as exc_info:
                await client.get_prediction()

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_non_json_body_through_transport(self, make_client, routes):
        routes["/api/weather/latest"] = httpx.Response(200, text="<html>oops</html>")
        async with make_client(routes) as client:
            with pytest.raises(FloodWatchDecodeError):
                await client.get_latest_weather()
