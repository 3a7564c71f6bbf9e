"""Lenient field extraction for raw API payloads."""

import math
import re
from typing import Any, Optional

# Plain decimal or exponent notation, optionally signed and space-padded
NUMERIC_STRING = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")


def is_numeric(value: Any) -> bool:
    """True for ints, finite floats and decimal numeric strings (bools excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return NUMERIC_STRING.fullmatch(value) is not None and math.isfinite(float(value))
    return False


def str_or_none(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def float_or_default(data: dict[str, Any], key: str, default: Optional[float]) -> Optional[float]:
    value = data.get(key)
    return float(value) if is_numeric(value) else default


def int_or_default(data: dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key)
    if not is_numeric(value):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    return int(float(value))


def dict_or_none(data: dict[str, Any], key: str) -> Optional[dict[str, Any]]:
    value = data.get(key)
    return value if isinstance(value, dict) else None
