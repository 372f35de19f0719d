"""
Binding of a single dashboard fetch to the lifetime of a view.
"""

import asyncio
import logging
from typing import Any, Optional

from .client import FloodWatchClient
from .config import ClientConfig
from .exceptions import FloodWatchError
from .fetch import acquire
from .presets import DashboardPreset, DashboardPresets
from .reconcile import DashboardState, reconcile

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Owns the state of one dashboard view.

    ``activate()`` starts a single background task that acquires and
    reconciles; ``deactivate()`` cancels it. Once deactivated, any result
    that still arrives is dropped rather than applied to the state.

    Example:
        >>> async with DashboardSession(DashboardPresets.FULL) as session:
        ...     state = await session.wait()
        ...     print(render_dashboard(state))
    """

    def __init__(
        self,
        preset: Optional[DashboardPreset] = None,
        client: Optional[FloodWatchClient] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.preset = preset or DashboardPresets.FULL
        self._client = client
        self._owns_client = client is None
        self._config = config
        self.state = DashboardState()
        self._task: Optional["asyncio.Task[None]"] = None
        self._torn_down = False

    @property
    def active(self) -> bool:
        return self._task is not None and not self._torn_down

    def activate(self) -> "asyncio.Task[None]":
        """Start the fetch. Must be called from a running event loop."""
        if self._torn_down:
            raise RuntimeError("Session has been deactivated; create a new one")
        if self._task is not None:
            raise RuntimeError("Session is already active")

        if self._client is None:
            self._client = FloodWatchClient(self._config)

        self._task = asyncio.get_running_loop().create_task(self._run(self._client))
        return self._task

    async def _run(self, client: FloodWatchClient) -> None:
        try:
            bodies = await acquire(self.preset.endpoints, client)
            model = reconcile(bodies, self.preset)
        except FloodWatchError as exc:
            if self._torn_down:
                logger.debug(f"Discarding failure after teardown: {exc}")
                return
            self.state.fail(exc)
            return

        if self._torn_down:
            logger.debug("Discarding result after teardown")
            return
        self.state.resolve(model)

    async def wait(self) -> DashboardState:
        """Wait for the fetch to settle and return the state."""
        if self._task is None:
            raise RuntimeError("Session was never activated")
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        return self.state

    async def deactivate(self) -> None:
        """Cancel any outstanding fetch and release the owned client."""
        if self._torn_down:
            return
        self._torn_down = True

        task = self._task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise

        if self._owns_client and self._client is not None:
            await self._client.close()

    async def __aenter__(self) -> "DashboardSession":
        self.activate()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.deactivate()
