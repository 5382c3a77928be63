"""Normalisation of raw numeric form input."""

from __future__ import annotations

import math
from typing import Any

# unsigned integer literals a browser number field also accepts
RADIX_PREFIXES = ("0x", "0o", "0b")


def _as_number(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            # browsers coerce an empty field to zero
            return 0.0
        if "_" in stripped:
            return None
        try:
            if stripped[:2].lower() in RADIX_PREFIXES:
                return float(int(stripped, 0))
            return float(stripped)
        except (ValueError, OverflowError):
            return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def clamp_int(value: Any, minimum: int, maximum: int, fallback: int) -> int:
    """
    Coerce ``value`` into an integer inside ``[minimum, maximum]``.

    Strings are parsed the way a browser number field parses them: ``"0x1A"`` is 26
    while digit separators such as ``"1_000"`` are not numbers. Non-numeric and
    non-finite input yields ``fallback``. Fractions are truncated toward zero before
    clamping, so ``7.9`` becomes ``7`` and ``-2.5`` becomes ``-2``.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return min(maximum, max(minimum, value))

    number = _as_number(value)
    if number is None or not math.isfinite(number):
        return fallback
    truncated = math.trunc(number)
    return min(maximum, max(minimum, truncated))
