"""
Async HTTP client for the flood-monitoring dashboard backend.
"""

import json
import logging
from typing import Any, Optional, Union

import httpx

from .config import ClientConfig
from .exceptions import (
    FloodWatchConnectionError,
    FloodWatchDecodeError,
    FloodWatchResponseError,
    FloodWatchTimeoutError,
)
from .models import Endpoint

logger = logging.getLogger(__name__)


class FloodWatchClient:
    """
    Client for the weather and river-discharge endpoints.

    Every request is a parameterless GET returning a JSON body. Transport,
    status and decode failures are translated into the floodwatch exception
    hierarchy so callers never see raw httpx errors.

    Example:
        >>> async with FloodWatchClient() as client:
        ...     body = await client.get_latest_weather()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClientConfig()
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=transport,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            },
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "FloodWatchClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def get_json(self, endpoint: Union[Endpoint, str]) -> Any:
        """
        GET one endpoint and return its decoded JSON body.

        Args:
            endpoint: Endpoint member or relative path

        Returns:
            Parsed JSON body

        Raises:
            FloodWatchTimeoutError: If the request timed out
            FloodWatchConnectionError: On network failure
            FloodWatchResponseError: On a non-2xx status
            FloodWatchDecodeError: If the body is not valid JSON
        """
        path = endpoint.value if isinstance(endpoint, Endpoint) else endpoint
        url = self.config.url_for(path)
        logger.debug(f"GET {url}")

        try:
            response = await self._client.get(url)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as e:
            raise FloodWatchTimeoutError(
                f"Request to {path} timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                message = f"Endpoint {path} not found"
            elif status >= 500:
                message = f"Backend error on {path} (HTTP {status})"
            else:
                message = f"HTTP error {status} on {path}"
            raise FloodWatchResponseError(message, status_code=status, endpoint=path) from e
        except httpx.RequestError as e:
            raise FloodWatchConnectionError(f"Network error on {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FloodWatchDecodeError(f"Invalid JSON response: {e}", endpoint=path) from e

    async def get_latest_weather(self) -> Any:
        """Raw body of the latest-weather endpoint."""
        return await self.get_json(Endpoint.WEATHER_LATEST)

    async def get_discharge_series(self) -> Any:
        """Raw body of the 7-day discharge endpoint."""
        return await self.get_json(Endpoint.DISCHARGE_7DAY)

    async def get_prediction(self) -> Any:
        """Raw body of the next-day prediction endpoint."""
        return await self.get_json(Endpoint.PREDICT)

