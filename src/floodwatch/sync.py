"""
Synchronous wrappers for floodwatch.

For callers that cannot use async/await (scripts, notebooks with a blocking
kernel), these functions run the async API in a private event loop. Client
ownership stays with the async function being wrapped: fetch_dashboard opens
and closes its own client when none is passed.

Usage:
    # Instead of this async code:
    async with FloodWatchClient() as client:
        model = await fetch_dashboard(client=client)

    # Use this sync code:
    from floodwatch.sync import fetch_dashboard_sync
    model = fetch_dashboard_sync()
"""

import asyncio
import functools
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from .client import FloodWatchClient
    from .models import DashboardModel
    from .presets import DashboardPreset

R = TypeVar("R")


class AsyncSyncBridge:
    """Runs async floodwatch functions from synchronous code."""

    @staticmethod
    def run_async(
        async_fn: Callable[..., Awaitable[R]],
        args: tuple = (),
        kwargs: Optional[dict] = None,
    ) -> R:
        """Run an async function to completion in a fresh event loop.

        Raises:
            RuntimeError: If called from within a running event loop
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "Cannot use sync version from within an existing asyncio event loop. "
                "Use the async version instead."
            )

        return asyncio.run(async_fn(*args, **(kwargs or {})))


def add_sync_version(
    async_fn: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    Attach a blocking ``.sync`` variant to an async function.

    Example:
        >>> model = await fetch_dashboard()       # async
        >>> model = fetch_dashboard.sync()        # blocking
    """

    @functools.wraps(async_fn)
    def sync_wrapper(*args: Any, **kwargs: Any) -> R:
        return AsyncSyncBridge.run_async(async_fn, args=args, kwargs=kwargs)

    async_fn.sync = sync_wrapper  # type: ignore
    return async_fn


def fetch_dashboard_sync(
    preset: Optional["DashboardPreset"] = None,
    client: Optional["FloodWatchClient"] = None,
) -> "DashboardModel":
    """Synchronous version of fetch_dashboard.

    Args:
        preset: Which endpoints the page requires (defaults to the full page)
        client: Client instance. If not provided, fetch_dashboard uses a
            temporary one

    Returns:
        DashboardModel with weather, discharge series and prediction

    Examples:
        >>> model = fetch_dashboard_sync()
        >>> model.weather.temperature_2m
        31.5
    """
    from .fetch import fetch_dashboard

    return fetch_dashboard.sync(preset, client=client)  # type: ignore[attr-defined]
