"""
Concurrent acquisition of dashboard data.

acquire() dispatches one GET per endpoint without waiting between them and
joins on all of them. The result is all-or-nothing: if any request fails the
whole acquisition fails and partial bodies are discarded.

RECOMMENDED USAGE:

    >>> model = await fetch_dashboard()                       # full page
    >>> model = await fetch_dashboard(DashboardPresets.BASIC)  # no prediction
    >>> model = fetch_dashboard.sync()                        # blocking
"""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from .client import FloodWatchClient
from .models import DashboardModel, Endpoint
from .presets import DashboardPreset, DashboardPresets
from .reconcile import reconcile
from .sync import add_sync_version

logger = logging.getLogger(__name__)


async def acquire(
    endpoints: Sequence[Endpoint],
    client: FloodWatchClient,
) -> List[Any]:
    """
    Fetch every endpoint concurrently and wait for all of them to settle.

    Args:
        endpoints: Endpoints to fetch, in originating order
        client: Client to issue the requests with

    Returns:
        Raw JSON bodies, one per endpoint, in originating order

    Raises:
        FloodWatchError: The first failure in originating order, raised only
            after every request has settled
        TypeError: If client is None
    """
    if client is None:
        raise TypeError("client parameter is required")
    if not endpoints:
        raise ValueError("At least one endpoint is required")

    logger.debug(f"Dispatching {len(endpoints)} requests concurrently")

    results = await asyncio.gather(
        *(client.get_json(endpoint) for endpoint in endpoints),
        return_exceptions=True,
    )

    failures = [
        (endpoint, result)
        for endpoint, result in zip(endpoints, results)
        if isinstance(result, BaseException)
    ]
    if failures:
        for endpoint, exc in failures:
            logger.warning(f"Request to {endpoint.value} failed: {exc}")
        raise failures[0][1]

    return list(results)


@add_sync_version
async def fetch_dashboard(
    preset: Optional[DashboardPreset] = None,
    client: Optional[FloodWatchClient] = None,
) -> DashboardModel:
    """
    Run one acquire-and-reconcile cycle.

    Args:
        preset: Endpoint set to fetch (default: DashboardPresets.FULL)
        client: Optional client instance (a temporary one is created if None)

    Returns:
        DashboardModel

    Raises:
        FloodWatchError: On any transport, response or decode failure

    Examples:
        >>> model = await fetch_dashboard()
        >>> model.discharge.to_chart_data()["labels"][-1]
        'Today'
    """
    preset = preset or DashboardPresets.FULL

    if client is None:
        async with FloodWatchClient() as temp_client:
            bodies = await acquire(preset.endpoints, temp_client)
    else:
        bodies = await acquire(preset.endpoints, client)

    return reconcile(bodies, preset)
