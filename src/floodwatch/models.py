"""
Data models for the flood-monitoring dashboard.
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

SERIES_LENGTH = 7

DEFAULT_DAY_LABELS: Tuple[str, ...] = (
    "6 Days Ago",
    "5 Days Ago",
    "4 Days Ago",
    "3 Days Ago",
    "2 Days Ago",
    "Yesterday",
    "Today",
)

CHART_DATASET_LABEL = "River Discharge (m³/s)"


class Endpoint(str, Enum):
    """Backend endpoints, relative to the configured base URL."""

    WEATHER_LATEST = "api/weather/latest"
    DISCHARGE_7DAY = "api/river_discharge_7day"
    PREDICT = "api/predict"


class FetchLifecycle(str, Enum):
    """Tri-state flag gating what the view renders."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Latest weather measurements. ``None`` means not available."""

    temperature_2m: Optional[float] = None
    relative_humidity_2m: Optional[float] = None
    dew_point_2m: Optional[float] = None
    pressure_msl: Optional[float] = None
    cloud_cover: Optional[float] = None
    wind_speed_10m: Optional[float] = None
    soil_temperature_0cm: Optional[float] = None

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass(frozen=True)
class DischargeSeries:
    """
    Seven daily river-discharge samples, oldest first, paired positionally
    with fixed day labels.

    Build instances with :meth:`from_samples`, which enforces the length
    invariant by left-padding short input with ``None`` and keeping only the
    most recent samples of long input.
    """

    values: Tuple[Optional[float], ...]
    labels: Tuple[str, ...] = DEFAULT_DAY_LABELS
    raw_length: int = field(default=SERIES_LENGTH, compare=False)

    @classmethod
    def from_samples(
        cls,
        samples: Sequence[Optional[float]],
        labels: Sequence[str] = DEFAULT_DAY_LABELS,
    ) -> "DischargeSeries":
        """
        Align raw samples against the day labels.

        Args:
            samples: Discharge samples in chronological order
            labels: Day labels, oldest first

        Returns:
            DischargeSeries with exactly ``len(labels)`` values
        """
        labels = tuple(labels)
        size = len(labels)
        raw = list(samples)

        if len(raw) < size:
            logger.warning(
                f"Discharge series has {len(raw)} samples, expected {size}; "
                "padding oldest days with N/A"
            )
            aligned = [None] * (size - len(raw)) + raw
        elif len(raw) > size:
            logger.warning(
                f"Discharge series has {len(raw)} samples, expected {size}; "
                f"keeping the most recent {size}"
            )
            aligned = raw[len(raw) - size :]
        else:
            aligned = raw

        return cls(values=tuple(aligned), labels=labels, raw_length=len(raw))

    @property
    def latest(self) -> Optional[float]:
        """Most recent sample, if any."""
        return self.values[-1] if self.values else None

    @property
    def is_complete(self) -> bool:
        """True when the backend sent exactly one sample per label."""
        return self.raw_length == len(self.labels)

    def to_chart_data(self) -> Dict[str, Any]:
        """Fixed-shape payload for a line chart."""
        return {
            "labels": list(self.labels),
            "datasets": [
                {
                    "label": CHART_DATASET_LABEL,
                    "data": list(self.values),
                }
            ],
        }

    def to_pandas(self) -> "pd.DataFrame":
        """Series as a two-column DataFrame (``label``, ``discharge``)."""
        import pandas as pd

        return pd.DataFrame(
            {
                "label": list(self.labels),
                "discharge": pd.array(list(self.values), dtype="Float64"),
            }
        )


@dataclass(frozen=True)
class DashboardModel:
    """
    Unified, render-ready view model.

    ``includes_prediction`` is False for pages fetched without the prediction
    endpoint, so views know to omit that panel rather than show N/A.
    """

    weather: WeatherSnapshot
    discharge: DischargeSeries
    prediction: Optional[float] = None
    latest_discharge: Optional[float] = None
    includes_prediction: bool = True
