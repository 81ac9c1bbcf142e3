"""Utilities for parsing human friendly time expressions."""

from __future__ import annotations

import math


def parse_time(text: str) -> float:
    """Parse ``text`` as a time value in milliseconds.

    Accepted formats are:

    * ``250`` or ``250ms`` (milliseconds)
    * ``1.5s`` (seconds)
    * ``HH:MM:SS`` and ``MM:SS``
    * ``50%`` (scroll timelines; the percentage is returned unchanged)
    * ``inf`` / ``infinity``

    Fractional values are supported.  ``ValueError`` is raised on
    malformed input.
    """

    value = text.strip().lower()
    if not value:
        raise ValueError("empty time string")

    if value in {"inf", "+inf", "infinity", "infinite"}:
        return math.inf

    unit = None
    for suffix in ("%", "ms", "s"):
        if value.endswith(suffix):
            unit = suffix
            value = value[: -len(suffix)]
            break
    scale = 1000.0 if unit == "s" else 1.0

    parts = value.strip().split(":")
    try:
        parts_f = [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"invalid time value: {text!r}") from exc
    if any(math.isnan(p) for p in parts_f):
        raise ValueError(f"invalid time value: {text!r}")

    if len(parts_f) == 1:
        return parts_f[0] * scale
    if unit is not None:
        raise ValueError("units cannot be combined with clock notation")
    if len(parts_f) == 2:
        minutes, seconds = parts_f
        seconds += minutes * 60
    elif len(parts_f) == 3:
        hours, minutes, seconds = parts_f
        seconds += minutes * 60 + hours * 3600
    else:
        raise ValueError("too many components in time string")
    return seconds * 1000.0
