"""Value formatters for metrics table cells.

Every formatter maps a missing value (None) to the default metric
placeholder and otherwise keeps the numeric meaning of its input:
- format_count: plain numbers (RPS, connection counts)
- format_byte_rate: bytes per second
- format_latency: latency given in milliseconds
- format_success_rate: success rate given as a 0..1 fraction
"""

from __future__ import annotations

from meshtable.constants.values import DEFAULT_METRIC_VALUE

# Module-level constants to avoid re-creating on every function call.
_COUNT_SUFFIXES: tuple[tuple[float, str], ...] = (
    (1e9, "G"),
    (1e6, "M"),
    (1e3, "k"),
)
_BYTE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB")


def _trim(value: float, decimals: int = 1) -> str:
    text = f"{value:,.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_count(value: float | None) -> str:
    """Format a plain number, abbreviating thousands.

    Examples: 0 -> "0", 1.25 -> "1.25", 12.345 -> "12.3", 4200 -> "4.2k".
    """
    if value is None:
        return DEFAULT_METRIC_VALUE
    number = float(value)
    magnitude = abs(number)
    for threshold, suffix in _COUNT_SUFFIXES:
        if magnitude >= threshold:
            return f"{_trim(number / threshold)}{suffix}"
    if magnitude and magnitude < 10:
        return _trim(number, 2)
    return _trim(number)


def format_byte_rate(value: float | None) -> str:
    """Format a byte rate using decimal units, e.g. 1500 -> "1.5 kB/s"."""
    if value is None:
        return DEFAULT_METRIC_VALUE
    number = float(value)
    unit_index = 0
    while abs(number) >= 1000 and unit_index < len(_BYTE_UNITS) - 1:
        number /= 1000
        unit_index += 1
    return f"{_trim(number)} {_BYTE_UNITS[unit_index]}/s"


def format_latency(value_ms: float | None) -> str:
    """Format a millisecond latency in the most readable unit."""
    if value_ms is None:
        return DEFAULT_METRIC_VALUE
    seconds = float(value_ms) / 1000
    if seconds == 0:
        return "0 s"
    if seconds < 0.001:
        return f"{round(seconds * 1_000_000):,} µs"
    if seconds < 1:
        return f"{round(seconds * 1000):,} ms"
    return f"{_trim(seconds, 2)} s"


def format_success_rate(rate: float | None) -> str:
    """Format a 0..1 success rate as a percentage with two decimals."""
    if rate is None:
        return DEFAULT_METRIC_VALUE
    return f"{float(rate) * 100:.2f}%"
