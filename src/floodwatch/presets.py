"""
Named endpoint sets for the dashboard page variants.
"""

from dataclasses import dataclass
from typing import Tuple

from .models import Endpoint

REQUIRED_ENDPOINTS = (Endpoint.WEATHER_LATEST, Endpoint.DISCHARGE_7DAY)


@dataclass(frozen=True)
class DashboardPreset:
    """Which endpoints a dashboard page fetches, in dispatch order."""

    name: str
    endpoints: Tuple[Endpoint, ...]

    def __post_init__(self) -> None:
        if len(set(self.endpoints)) != len(self.endpoints):
            raise ValueError(f"Preset '{self.name}' lists an endpoint twice")
        missing = [e.value for e in REQUIRED_ENDPOINTS if e not in self.endpoints]
        if missing:
            raise ValueError(
                f"Preset '{self.name}' is missing required endpoints: {', '.join(missing)}"
            )

    @property
    def includes_prediction(self) -> bool:
        return Endpoint.PREDICT in self.endpoints


class DashboardPresets:
    """
    Predefined endpoint sets.

    FULL is the polished page (weather, prediction, 7-day series); BASIC is
    the simpler page without the prediction panel. Pass either to
    fetch_dashboard() or DashboardSession instead of listing endpoints by hand.
    """

    FULL = DashboardPreset(
        name="full",
        endpoints=(Endpoint.WEATHER_LATEST, Endpoint.PREDICT, Endpoint.DISCHARGE_7DAY),
    )

    BASIC = DashboardPreset(
        name="basic",
        endpoints=(Endpoint.WEATHER_LATEST, Endpoint.DISCHARGE_7DAY),
    )

    @classmethod
    def get(cls, name: str) -> DashboardPreset:
        """Look up a preset by name (case-insensitive)."""
        for preset in (cls.FULL, cls.BASIC):
            if preset.name == name.lower():
                return preset
        raise ValueError(f"Unknown preset '{name}'. Available presets: full, basic")
