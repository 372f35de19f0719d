"""
Python client for the flood-monitoring dashboard backend.

Fetch weather and river-discharge telemetry concurrently and reconcile it
into a render-ready dashboard model.
"""

from .client import FloodWatchClient
from .config import ClientConfig, package_version
from .exceptions import (
    FloodWatchConnectionError,
    FloodWatchDecodeError,
    FloodWatchError,
    FloodWatchResponseError,
    FloodWatchTimeoutError,
    LifecycleError,
)
from .fetch import acquire, fetch_dashboard
from .models import (
    DEFAULT_DAY_LABELS,
    DashboardModel,
    DischargeSeries,
    Endpoint,
    FetchLifecycle,
    WeatherSnapshot,
)
from .presets import DashboardPreset, DashboardPresets
from .reconcile import DashboardState, reconcile
from .render import NOT_AVAILABLE, format_value, render_dashboard, render_model
from .response import decode_discharge_series, decode_prediction, decode_weather
from .session import DashboardSession
from .sync import AsyncSyncBridge, fetch_dashboard_sync

__version__ = package_version()

__all__ = [
    # Client and configuration
    "FloodWatchClient",
    "ClientConfig",
    # Models
    "DashboardModel",
    "DischargeSeries",
    "WeatherSnapshot",
    "Endpoint",
    "FetchLifecycle",
    "DEFAULT_DAY_LABELS",
    # Acquisition
    "acquire",
    "fetch_dashboard",
    "DashboardPreset",
    "DashboardPresets",
    # Reconciliation
    "reconcile",
    "DashboardState",
    "DashboardSession",
    "decode_weather",
    "decode_discharge_series",
    "decode_prediction",
    # Rendering
    "render_dashboard",
    "render_model",
    "format_value",
    "NOT_AVAILABLE",
    # Sync API
    "AsyncSyncBridge",
    "fetch_dashboard_sync",
    # Exceptions
    "FloodWatchError",
    "FloodWatchConnectionError",
    "FloodWatchTimeoutError",
    "FloodWatchResponseError",
    "FloodWatchDecodeError",
    "LifecycleError",
]
