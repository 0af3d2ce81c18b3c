"""HTTP client for the rates and calculate endpoints."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from hylo_rates.core.errors import CalculationFailed, UpstreamUnavailable
from hylo_rates.schemas.calculation import CalculationEnvelope, CalculationResult

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper over ``GET /api/apy`` and ``POST /api/calc``."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "HyloDashboard/1.0"})

    def fetch_rates(self, force: bool = False) -> dict:
        """Return the raw rate payload from the ``data`` field."""
        url = f"{self.base_url}/api/apy"
        params = {"force": "1"} if force else None
        try:
            logger.info(f"GET {url} params={params}")
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailable(f"Failed to fetch APY: {e}") from e

        body = self._json(resp)
        if body is None:
            raise UpstreamUnavailable(f"Failed to fetch APY: HTTP {resp.status_code}")
        if not body.get("ok"):
            raise UpstreamUnavailable(
                f"API error: {body.get('error') or 'Unknown'}",
                rejected=200 <= resp.status_code < 300,
            )

        data = body.get("data")
        return data if isinstance(data, dict) else {}

    def calculate(
        self,
        principal: float,
        rate: float,
        rate_type: str = "APY",
        days: int = 30,
        compounding_per_year: int = 365,
    ) -> CalculationResult:
        url = f"{self.base_url}/api/calc"
        payload = {
            "principal": principal,
            "rate": rate,
            "rateType": rate_type,
            "days": days,
            "compoundingPerYear": compounding_per_year,
        }
        try:
            logger.info(f"POST {url} payload={payload}")
            resp = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise CalculationFailed(f"Calculation failed: {e}") from e

        body = self._json(resp)
        if body is None:
            raise CalculationFailed(f"Calculation failed: HTTP {resp.status_code}")
        if not body.get("ok"):
            raise CalculationFailed(f"Calculation failed: {body.get('error') or 'Unknown'}")

        try:
            return CalculationEnvelope.model_validate(body).to_result()
        except ValueError as e:
            raise CalculationFailed(f"Calculation failed: {e}") from e

    @staticmethod
    def _json(resp: Any) -> Optional[dict]:
        """Decoded object body, or ``None`` when the response carries none."""
        try:
            body = resp.json()
        except ValueError:
            logger.error(f"Non-JSON response (HTTP {resp.status_code})")
            return None
        return body if isinstance(body, dict) else None
