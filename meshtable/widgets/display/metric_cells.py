"""Rich renderables for metrics table cells."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import RenderableType
from rich.text import Text

from meshtable.constants.enums import SuccessRateStatus
from meshtable.constants.values import (
    ERROR_INDICATOR_GLYPH,
    ERROR_INDICATOR_STYLE,
    SUCCESS_RATE_GLYPH,
    SUCCESS_RATE_POOR_BELOW,
    SUCCESS_RATE_STYLES,
    SUCCESS_RATE_WARNING_BELOW,
)
from meshtable.utils.formatters import format_success_rate


def classify_success_rate(rate: float | None) -> SuccessRateStatus:
    """Classify a 0..1 success rate into good / warning / poor."""
    if rate is None:
        return SuccessRateStatus.DEFAULT
    if rate < SUCCESS_RATE_POOR_BELOW:
        return SuccessRateStatus.POOR
    if rate < SUCCESS_RATE_WARNING_BELOW:
        return SuccessRateStatus.WARNING
    return SuccessRateStatus.GOOD


def success_rate_cell(rate: float | None) -> Text:
    """Render a success rate as a colored status dot followed by a percentage."""
    style = SUCCESS_RATE_STYLES[classify_success_rate(rate).value]
    return Text.assemble((SUCCESS_RATE_GLYPH, style), " ", format_success_rate(rate))


def count_errors(errors: Mapping[str, Any] | None) -> int:
    if not errors:
        return 0
    total = 0
    for entries in errors.values():
        if isinstance(entries, (list, tuple)):
            total += len(entries)
        elif isinstance(entries, Mapping):
            total += sum(len(v) if isinstance(v, (list, tuple)) else 1 for v in entries.values())
        else:
            total += 1
    return total


def error_indicator(errors: Mapping[str, Any] | None) -> Text | None:
    """Return a warning marker with the error count, or None without errors."""
    if not errors:
        return None
    count = count_errors(errors)
    return Text(f"{ERROR_INDICATOR_GLYPH} {count}", style=ERROR_INDICATOR_STYLE)


def with_error_indicator(contents: RenderableType, errors: Mapping[str, Any] | None) -> RenderableType:
    """Append the error indicator (if any) to a name cell."""
    indicator = error_indicator(errors)
    if indicator is None:
        return contents
    cell = contents.copy() if isinstance(contents, Text) else Text(str(contents))
    cell.append(" ")
    cell.append_text(indicator)
    return cell
