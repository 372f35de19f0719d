"""
Typed decoding of backend JSON bodies into dashboard models.

Per-field absences become ``None``; structural problems (wrong body type,
missing required arrays, non-numeric values) raise FloodWatchDecodeError.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .exceptions import FloodWatchDecodeError
from .models import DEFAULT_DAY_LABELS, DischargeSeries, Endpoint, WeatherSnapshot

logger = logging.getLogger(__name__)

WEATHER_DATA_KEY = "latest_weather_data"
LATEST_DISCHARGE_KEY = "latest_river_discharge"
DISCHARGE_SERIES_KEY = "river_discharge_7day"
PREDICTION_KEY = "predictions_tomorrow"


def _require_object(body: Any, endpoint: Endpoint) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise FloodWatchDecodeError(
            f"Expected a JSON object, got {type(body).__name__}",
            endpoint=endpoint.value,
        )
    return body


def _to_number(
    value: Any, field_name: str, endpoint: Endpoint
) -> Optional[float]:
    """Convert a JSON scalar to float, keeping null as None."""
    if value is None:
        return None
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FloodWatchDecodeError(
            f"Field '{field_name}' must be numeric, got {type(value).__name__}",
            endpoint=endpoint.value,
            details={"field": field_name, "value": value},
        )
    number = float(value)
    if math.isnan(number):
        return None
    return number


def decode_weather(body: Any) -> Tuple[WeatherSnapshot, Optional[float]]:
    """
    Decode the ``/api/weather/latest`` body.

    Args:
        body: Parsed JSON body

    Returns:
        Tuple of (WeatherSnapshot, latest river discharge or None)

    Raises:
        FloodWatchDecodeError: If the body or ``latest_weather_data`` is not an
            object, or a present field is not numeric
    """
    payload = _require_object(body, Endpoint.WEATHER_LATEST)

    raw_weather = payload.get(WEATHER_DATA_KEY)
    if raw_weather is None:
        logger.debug(f"'{WEATHER_DATA_KEY}' missing, all weather fields N/A")
        raw_weather = {}
    elif not isinstance(raw_weather, dict):
        raise FloodWatchDecodeError(
            f"'{WEATHER_DATA_KEY}' must be an object",
            endpoint=Endpoint.WEATHER_LATEST.value,
        )

    values = {
        name: _to_number(raw_weather.get(name), name, Endpoint.WEATHER_LATEST)
        for name in WeatherSnapshot.field_names()
    }
    missing = [name for name, value in values.items() if value is None]
    if missing:
        logger.debug(f"Weather fields not available: {', '.join(missing)}")

    latest_discharge = _to_number(
        payload.get(LATEST_DISCHARGE_KEY), LATEST_DISCHARGE_KEY, Endpoint.WEATHER_LATEST
    )

    return WeatherSnapshot(**values), latest_discharge


def decode_discharge_series(
    body: Any, labels: Sequence[str] = DEFAULT_DAY_LABELS
) -> DischargeSeries:
    """
    Decode the ``/api/river_discharge_7day`` body.

    The array is required; its length is reconciled against ``labels`` by
    DischargeSeries.from_samples.
    """
    payload = _require_object(body, Endpoint.DISCHARGE_7DAY)

    if DISCHARGE_SERIES_KEY not in payload:
        raise FloodWatchDecodeError(
            f"Missing required field '{DISCHARGE_SERIES_KEY}'",
            endpoint=Endpoint.DISCHARGE_7DAY.value,
        )

    raw_series = payload[DISCHARGE_SERIES_KEY]
    if not isinstance(raw_series, list):
        raise FloodWatchDecodeError(
            f"'{DISCHARGE_SERIES_KEY}' must be an array",
            endpoint=Endpoint.DISCHARGE_7DAY.value,
        )

    samples: List[Optional[float]] = [
        _to_number(item, f"{DISCHARGE_SERIES_KEY}[{i}]", Endpoint.DISCHARGE_7DAY)
        for i, item in enumerate(raw_series)
    ]
    return DischargeSeries.from_samples(samples, labels)


def decode_prediction(body: Any) -> Optional[float]:
    """Decode the ``/api/predict`` body into the next-day forecast."""
    payload = _require_object(body, Endpoint.PREDICT)
    return _to_number(payload.get(PREDICTION_KEY), PREDICTION_KEY, Endpoint.PREDICT)
