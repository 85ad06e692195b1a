"""Human-readable formatting of dashboard values."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

_BITRATE_UNITS = ("bps", "Kbps", "Mbps", "Gbps", "Tbps")
_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")

_SPARK_WIDTH = 240.0
_SPARK_HEIGHT = 72.0
_SPARK_PAD_X = 8.0
_SPARK_PAD_Y = 8.0


def format_interval(seconds: int) -> str:
    """Describe a sampling interval in seconds."""
    if seconds <= 1:
        return "1 second"
    return f"{seconds} seconds"


def format_clock(value: Optional[datetime]) -> str:
    """Local wall-clock time of a sample, or a waiting message."""
    if value is None:
        return "Waiting for samples"
    return value.astimezone().strftime("%H:%M:%S")


def _scale(value: float, units: tuple) -> tuple:
    index = 0
    while value >= 1000 and index < len(units) - 1:
        value /= 1000
        index += 1
    return value, index


def format_bitrate(bits_per_second: float) -> str:
    """Format a rate with decimal units from bps to Tbps."""
    value, index = _scale(float(bits_per_second), _BITRATE_UNITS)
    if index == 0:
        return f"{value:.0f} {_BITRATE_UNITS[0]}"
    return f"{value:.1f} {_BITRATE_UNITS[index]}"


def format_bytes(count: int) -> str:
    """Format a byte count with decimal units from B to PB."""
    value, index = _scale(float(count), _BYTE_UNITS)
    if index == 0:
        return f"{count} {_BYTE_UNITS[0]}"
    return f"{value:.1f} {_BYTE_UNITS[index]}"


def format_milliseconds(value: float) -> str:
    """Format a duration in milliseconds; non-positive values read as zero."""
    if value <= 0:
        return "0.0 ms"
    return f"{value:.1f} ms"


def format_percent(value: float) -> str:
    """Format a percentage without decimals."""
    return f"{value:.0f}%"


def _duration_text(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def format_retention_window(seconds: int) -> str:
    """Describe a retention window in the largest whole unit that fits."""
    if seconds <= 0:
        return "Disabled"
    if seconds % 86400 == 0:
        return f"{seconds // 86400} days"
    if seconds % 3600 == 0:
        return f"{seconds // 3600} hours"
    if seconds % 60 == 0:
        return f"{seconds // 60} minutes"
    return _duration_text(seconds)


def format_date_time(value: Optional[datetime]) -> str:
    """Local date and time, or "Pending" when unset."""
    if value is None:
        return "Pending"
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def title_case(value: str) -> str:
    """Capitalise the first character; empty text becomes "Alert"."""
    if not value:
        return "Alert"
    return value[0].upper() + value[1:]


def scaled_y(value: float, max_value: float, height: float, pad_y: float) -> float:
    """Vertical chart coordinate of a value relative to the maximum."""
    usable_height = height - pad_y * 2
    if usable_height <= 0:
        return height / 2
    return pad_y + usable_height * (1 - min(value / max_value, 1))


def sparkline_points(values: Iterable[float]) -> str:
    """SVG polyline points for a 240x72 sparkline of the given values."""
    values = list(values)
    left = _SPARK_PAD_X
    right = _SPARK_WIDTH - _SPARK_PAD_X

    if not values:
        baseline = _SPARK_HEIGHT - _SPARK_PAD_Y
        return f"{left:.0f},{baseline:.0f} {right:.0f},{baseline:.0f}"

    max_value = max(0.0, *values)
    if max_value <= 0:
        max_value = 1.0

    if len(values) == 1:
        y = scaled_y(values[0], max_value, _SPARK_HEIGHT, _SPARK_PAD_Y)
        return f"{left:.0f},{y:.2f} {right:.0f},{y:.2f}"

    step_x = (_SPARK_WIDTH - _SPARK_PAD_X * 2) / (len(values) - 1)
    return " ".join(
        f"{left + index * step_x:.2f},"
        f"{scaled_y(value, max_value, _SPARK_HEIGHT, _SPARK_PAD_Y):.2f}"
        for index, value in enumerate(values)
    )