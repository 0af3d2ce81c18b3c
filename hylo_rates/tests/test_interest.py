import math

import pytest

from hylo_rates.core.errors import InvalidInput
from hylo_rates.core.interest import calculate
from hylo_rates.schemas.calculation import CalculationRequest


def make_request(**overrides) -> CalculationRequest:
    fields = {
        "principal": 1000.0,
        "rate": 10.0,
        "rate_type": "APY",
        "horizon_days": 365,
        "compounding_per_year": 365,
    }
    fields.update(overrides)
    return CalculationRequest(**fields)


@pytest.mark.parametrize("rate_type", ["APY", "APR"])
def test_zero_horizon_returns_principal_exactly(rate_type):
    result = calculate(make_request(rate=7.5, rate_type=rate_type, horizon_days=0))

    assert result.final == 1000
    assert result.profit == 0


def test_apy_one_year():
    result = calculate(make_request(rate=10, horizon_days=365))

    assert result.final == pytest.approx(1100)
    assert result.profit == pytest.approx(100)
    assert result.principal == 1000


def test_apr_monthly_compounding():
    result = calculate(
        make_request(rate=12, rate_type="APR", horizon_days=365, compounding_per_year=12)
    )

    assert result.final == pytest.approx(1000 * 1.01 ** 12)
    assert result.final == pytest.approx(1126.825, abs=1e-3)


def test_apy_ignores_compounding_frequency():
    monthly = calculate(make_request(rate=5, horizon_days=90, compounding_per_year=12))
    daily = calculate(make_request(rate=5, horizon_days=90, compounding_per_year=365))

    assert monthly.final == daily.final


def test_apr_beats_apy_at_same_quote():
    apy = calculate(make_request(rate=20, rate_type="APY"))
    apr = calculate(make_request(rate=20, rate_type="APR"))

    assert apr.final > apy.final


def test_zero_and_negative_rates():
    flat = calculate(make_request(rate=0, horizon_days=180))
    losing = calculate(make_request(rate=-3.5, horizon_days=365))

    assert flat.final == 1000
    assert flat.profit == 0
    assert losing.profit == pytest.approx(-35)


def test_total_loss_is_not_special_cased():
    result = calculate(make_request(rate=-100, horizon_days=30))

    assert result.final == 0
    assert result.profit == -1000


def test_negative_base_propagates_nan():
    result = calculate(make_request(rate=-150, horizon_days=30))

    assert math.isnan(result.final)
    assert math.isnan(result.profit)


@pytest.mark.parametrize(
    "overrides",
    [
        {"rate": float("nan")},
        {"rate": float("inf")},
        {"principal": float("nan")},
        {"principal": 0},
        {"horizon_days": -1},
        {"rate_type": "APX"},
        {"rate_type": "APR", "compounding_per_year": 0},
    ],
)
def test_invalid_input_is_rejected(overrides):
    with pytest.raises(InvalidInput):
        calculate(make_request(**overrides))


@pytest.mark.parametrize(
    "overrides",
    [
        {"horizon_days": 10 ** 400},
        {"rate_type": "APR", "compounding_per_year": 10 ** 400},
    ],
)
def test_oversized_integers_are_invalid_input(overrides):
    with pytest.raises(InvalidInput, match="too large"):
        calculate(make_request(**overrides))


def test_invalid_rate_message():
    with pytest.raises(InvalidInput, match="Invalid rate"):
        calculate(make_request(rate=float("nan"), horizon_days=30))
