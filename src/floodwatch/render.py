"""
Plain-text rendering of the dashboard state.
"""

from typing import List, Optional, Tuple

from .models import DashboardModel, FetchLifecycle
from .reconcile import DashboardState

NOT_AVAILABLE = "N/A"
LOADING_MESSAGE = "Loading data..."
DASHBOARD_TITLE = "Flood Monitoring in Phra Nakhon Si Ayutthaya"

# (field, label, unit)
WEATHER_FIELDS: List[Tuple[str, str, str]] = [
    ("temperature_2m", "Temperature", "°C"),
    ("relative_humidity_2m", "Humidity", "%"),
    ("dew_point_2m", "Dew Point", "°C"),
    ("pressure_msl", "Pressure", "hPa"),
    ("cloud_cover", "Cloud Cover", "%"),
    ("wind_speed_10m", "Wind Speed", "km/h"),
    ("soil_temperature_0cm", "Soil Temperature", "°C"),
]


def format_value(value: Optional[float], unit: str = "") -> str:
    """Format a measurement with its unit, or the N/A sentinel."""
    if value is None:
        text = NOT_AVAILABLE
    elif float(value).is_integer():
        text = str(int(value))
    else:
        text = repr(float(value))
    return f"{text} {unit}".rstrip()


def _render_weather(model: DashboardModel) -> List[str]:
    width = max(len(label) for _, label, _ in WEATHER_FIELDS) + 1
    lines = ["Weather Data"]
    for name, label, unit in WEATHER_FIELDS:
        value = getattr(model.weather, name)
        lines.append(f"  {label + ':':<{width}} {format_value(value, unit)}")
    if model.latest_discharge is not None:
        lines.append(
            f"  River Discharge (Latest): {format_value(model.latest_discharge, 'm³/s')}"
        )
    return lines


def _render_discharge(model: DashboardModel) -> List[str]:
    df = model.discharge.to_pandas()
    df["discharge"] = [format_value(v) for v in model.discharge.values]
    table = df.to_string(index=False, header=["Day", "m³/s"])
    lines = ["River Discharge Over the Last 7 Days"]
    lines.extend(f"  {row}" for row in table.splitlines())
    return lines


def render_model(model: DashboardModel) -> str:
    """Render a populated model as a text dashboard."""
    sections = [
        [DASHBOARD_TITLE, "=" * len(DASHBOARD_TITLE)],
        _render_discharge(model),
        _render_weather(model),
    ]
    if model.includes_prediction:
        sections.append(
            ["River Discharge Tomorrow", f"  {format_value(model.prediction, 'm³/s')}"]
        )
    return "\n\n".join("\n".join(section) for section in sections)


def render_dashboard(state: DashboardState) -> str:
    """Render whichever of the three view states is current."""
    if state.lifecycle is FetchLifecycle.ERROR:
        return state.error_message or NOT_AVAILABLE
    model = state.model
    if model is None:
        return LOADING_MESSAGE
    return render_model(model)
