"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from hylo_rates.core.errors import InvalidInput, UpstreamUnavailable
from hylo_rates.core.interest import calculate
from hylo_rates.schemas.calculation import CalculationEnvelope, CalculationPayload
from hylo_rates.schemas.rates import RatesEnvelope

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _envelope(model) -> Dict[str, Any]:
    return {key: value for key, value in model.model_dump().items() if value is not None}


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON envelopes."""
    body = CalculationEnvelope(
        ok=False,
        error=_describe(exc),
        detail=exc.errors(include_url=False, include_context=False),
    )
    return jsonify(_envelope(body)), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    body = CalculationEnvelope(ok=False, error=exc.message)
    return jsonify(_envelope(body)), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(UpstreamUnavailable)
def _handle_upstream_unavailable(exc: UpstreamUnavailable):
    body = RatesEnvelope(ok=False, error=exc.message)
    return jsonify(_envelope(body)), HTTPStatus.BAD_GATEWAY


@api_bp.get("/apy")
@api_bp.get("/rates")
def rates() -> Any:
    """Raw rate payload; ``?force=1`` bypasses the feed cache."""
    force = request.args.get("force", "").lower() in _TRUTHY
    data = current_app.extensions["rate_feed"].fetch(force=force)
    return jsonify(_envelope(RatesEnvelope(ok=True, data=data)))


@api_bp.post("/calc")
@api_bp.post("/calculate")
def calc() -> Any:
    """Projected balance and profit for one quoted rate."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        raise InvalidInput("Request body must be a JSON object")

    payload = CalculationPayload.model_validate(raw_payload)
    result = calculate(payload.to_request())
    logger.debug(
        f"calc {payload.rateType} rate={payload.rate} days={payload.days} -> {result.final}"
    )
    return jsonify(_envelope(CalculationEnvelope.from_result(result)))
