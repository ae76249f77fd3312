"""Display helpers for weights and volumes."""

from __future__ import annotations

from voicelift.core.enums import WeightUnit


def format_weight(value: float, unit: WeightUnit) -> str:
    """'135 lbs', or '1.5K lbs' from 1000 up."""
    if value >= 1000:
        return f"{value / 1000:.1f}K {unit.value}"
    return f"{int(value)} {unit.value}"


def volume_string(value: float) -> str:
    """Compact volume: '640', '3.6K', '1.2M'."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1000:
        return f"{value / 1000:.1f}K"
    return str(int(value))


def pluralize(count: int, word: str) -> str:
    """'1 set', '3 sets'."""
    return f"{count} {word}{'' if count == 1 else 's'}"
