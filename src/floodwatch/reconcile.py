"""
Reconciliation of raw endpoint bodies into the unified dashboard model,
plus the view-local state that gates rendering.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from .exceptions import FloodWatchDecodeError, FloodWatchError, LifecycleError
from .models import DEFAULT_DAY_LABELS, DashboardModel, Endpoint, FetchLifecycle
from .presets import DashboardPreset
from .response import decode_discharge_series, decode_prediction, decode_weather

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Error fetching data. Please try again later."


def reconcile(
    bodies: Sequence[Any],
    preset: DashboardPreset,
    labels: Sequence[str] = DEFAULT_DAY_LABELS,
) -> DashboardModel:
    """
    Map raw JSON bodies onto a DashboardModel.

    Bodies are paired positionally with ``preset.endpoints``. The function is
    pure: the same bodies always produce an equal model.

    Args:
        bodies: Parsed JSON bodies in the preset's dispatch order
        preset: Preset the bodies were acquired with
        labels: Day labels for the discharge series

    Returns:
        DashboardModel

    Raises:
        FloodWatchDecodeError: If the body count does not match the preset or
            any body fails to decode
    """
    if len(bodies) != len(preset.endpoints):
        raise FloodWatchDecodeError(
            f"Preset '{preset.name}' expects {len(preset.endpoints)} bodies, "
            f"got {len(bodies)}"
        )

    by_endpoint: Dict[Endpoint, Any] = dict(zip(preset.endpoints, bodies))

    weather, latest_discharge = decode_weather(by_endpoint[Endpoint.WEATHER_LATEST])
    discharge = decode_discharge_series(by_endpoint[Endpoint.DISCHARGE_7DAY], labels)

    prediction = None
    if preset.includes_prediction:
        prediction = decode_prediction(by_endpoint[Endpoint.PREDICT])

    return DashboardModel(
        weather=weather,
        discharge=discharge,
        prediction=prediction,
        latest_discharge=latest_discharge,
        includes_prediction=preset.includes_prediction,
    )


class DashboardState:
    """
    View-local state: lifecycle flag, model and error message.

    Starts in LOADING and moves exactly once, to READY or ERROR. The model is
    exposed only once READY, so a view can never observe a half-populated
    dashboard.
    """

    def __init__(self) -> None:
        self._lifecycle = FetchLifecycle.LOADING
        self._model: Optional[DashboardModel] = None
        self.error_message: Optional[str] = None
        self.error: Optional[FloodWatchError] = None

    @property
    def lifecycle(self) -> FetchLifecycle:
        return self._lifecycle

    @property
    def model(self) -> Optional[DashboardModel]:
        if self._lifecycle is not FetchLifecycle.READY:
            return None
        return self._model

    @property
    def is_loading(self) -> bool:
        return self._lifecycle is FetchLifecycle.LOADING

    def _transition(self, target: FetchLifecycle) -> None:
        if self._lifecycle is not FetchLifecycle.LOADING:
            raise LifecycleError(
                f"Cannot move from {self._lifecycle.value} to {target.value}; "
                "a new activation is required"
            )
        self._lifecycle = target

    def resolve(self, model: DashboardModel) -> None:
        """LOADING -> READY with a fully populated model."""
        self._transition(FetchLifecycle.READY)
        self._model = model

    def fail(self, exc: FloodWatchError) -> None:
        """LOADING -> ERROR. The surfaced message is generic; the cause is kept."""
        self._transition(FetchLifecycle.ERROR)
        self.error = exc
        self.error_message = GENERIC_ERROR_MESSAGE
        logger.error(f"Dashboard fetch failed ({type(exc).__name__}): {exc}")

    def __repr__(self) -> str:
        return f"DashboardState(lifecycle={self._lifecycle.value})"
