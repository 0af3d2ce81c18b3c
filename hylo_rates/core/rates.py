"""Rate normalization and percent formatting.

``normalize`` is total: whatever the upstream payload looks like, the result
holds every slot of :class:`RateSnapshot`, with ``None`` for anything that is
missing or not a finite real number.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

from hylo_rates.schemas.rates import RATE_SLOTS, RateSnapshot

UNAVAILABLE_GLYPH = "—"

_TIMESTAMP_KEYS = ("fetched_at", "fetchedAt")
_THOUSANDTH = Decimal("0.001")
# wide enough for every finite float at three decimals
_PERCENT_CONTEXT = Context(prec=400)


def to_rate(value: Any) -> Optional[float]:
    """Coerce one raw field to a finite float, or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize(raw: Any) -> RateSnapshot:
    """Build a fresh snapshot from an untrusted upstream payload."""
    if not isinstance(raw, Mapping):
        raw = {}

    fields = {slot: to_rate(raw.get(slot)) for slot in RATE_SLOTS}

    fetched_at = None
    for key in _TIMESTAMP_KEYS:
        if raw.get(key) is not None:
            fetched_at = raw[key]
            break
    fields["fetched_at"] = fetched_at

    return RateSnapshot(**fields)


def format_percent(value: Any) -> str:
    """``12.5`` -> ``"12.500%"``; unavailable or non-finite -> ``"—"``."""
    number = to_rate(value)
    if number is None:
        return UNAVAILABLE_GLYPH
    # half up on the exact binary value
    rounded = Decimal(number).quantize(
        _THOUSANDTH, rounding=ROUND_HALF_UP, context=_PERCENT_CONTEXT
    )
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}%"
