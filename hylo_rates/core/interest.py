"""Interest calculator: quoted rate to projected balance and profit.

Day count is a fixed 365-day year, leap years included. That is a deliberate
simplification shared with the dashboard, not a bug.
"""

from __future__ import annotations

import math

from hylo_rates.core.errors import InvalidInput
from hylo_rates.schemas.calculation import RATE_TYPES, CalculationRequest, CalculationResult

DAYS_PER_YEAR = 365


def _growth(base: float, exponent: float) -> float:
    """``base ** exponent`` that yields nan instead of a complex number."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        # negative base with a fractional exponent
        return math.nan
    except OverflowError:
        return math.inf


def validate_request(req: CalculationRequest) -> None:
    if not isinstance(req.rate, (int, float)) or not math.isfinite(req.rate):
        raise InvalidInput("Invalid rate")
    if not isinstance(req.principal, (int, float)) or not math.isfinite(req.principal):
        raise InvalidInput("Invalid principal")
    if req.principal <= 0:
        raise InvalidInput("Principal must be positive")
    if req.horizon_days < 0:
        raise InvalidInput("Days must not be negative")
    if req.rate_type not in RATE_TYPES:
        raise InvalidInput(f"Unknown rate type: {req.rate_type}")
    if req.rate_type == "APR" and req.compounding_per_year < 1:
        raise InvalidInput("Compounding per year must be at least 1")


def calculate(req: CalculationRequest) -> CalculationResult:
    """Project ``req.principal`` over ``req.horizon_days`` at ``req.rate`` percent."""
    validate_request(req)

    try:
        years = req.horizon_days / DAYS_PER_YEAR
        if req.rate_type == "APY":
            factor = _growth(1 + req.rate / 100, years)
        else:
            periods = req.compounding_per_year
            factor = _growth(1 + req.rate / 100 / periods, periods * years)
    except OverflowError as e:
        # integer inputs too large to convert to float
        raise InvalidInput("Days or compounding per year too large") from e

    final = req.principal * factor
    return CalculationResult(
        principal=req.principal,
        final=final,
        profit=final - req.principal,
    )
