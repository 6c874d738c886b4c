"""Presentation-boundary rounding for engine results."""

from dataclasses import asdict, is_dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

TWO_PLACES = Decimal("0.01")


def round_money(value: Any) -> Any:
    """Quantize every Decimal in a (nested) dict/list structure to 2 places."""
    if isinstance(value, Decimal):
        return value.quantize(TWO_PLACES, ROUND_HALF_UP)
    if isinstance(value, dict):
        return {k: round_money(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [round_money(v) for v in value]
    return value


def rounded_dict(result: Any) -> dict[str, Any]:
    """Engine dataclass -> plain dict with money rounded for display."""
    if not is_dataclass(result):
        raise TypeError(f"Expected a dataclass instance, got {type(result).__name__}")
    return round_money(asdict(result))
