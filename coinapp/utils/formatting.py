"""String formatting for prices, percentages and large market figures."""

from __future__ import annotations

import math
from typing import Callable, Optional

NOT_AVAILABLE = "N/A"

ABBREVIATIONS = (
    (1_000_000_000_000.0, "T"),
    (1_000_000_000.0, "B"),
    (1_000_000.0, "M"),
    (1_000.0, "K"),
)


def _significant(value: float, digits: int) -> str:
    if value == 0 or not math.isfinite(value):
        return f"{value:.2f}"
    decimals = max(digits - 1 - math.floor(math.log10(abs(value))), 0)
    return f"{value:.{decimals}f}"


def as_currency_string(value: float, symbol: str = "$") -> str:
    """Price with precision that grows as the value shrinks."""
    if value < 0.01:
        return f"{symbol}{_significant(value, 4)}"
    if value < 1:
        return f"{symbol}{value:.4f}"
    return f"{symbol}{value:,.2f}"


def as_percentage_string(value: float) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def as_abbreviated_string(value: float, symbol: str = "$") -> str:
    for threshold, suffix in ABBREVIATIONS:
        if value >= threshold:
            return f"{symbol}{value / threshold:,.2f}{suffix}"
    return f"{symbol}{value:,.2f}"


def or_na(value: Optional[float], formatter: Callable[..., str], *args) -> str:
    if value is None:
        return NOT_AVAILABLE
    return formatter(value, *args)
