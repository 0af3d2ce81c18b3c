"""Dashboard application state and the controller that mutates it."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

from hylo_rates.core.errors import CalculationFailed, InvalidInput, UpstreamUnavailable
from hylo_rates.core.rates import normalize, to_rate
from hylo_rates.dashboard.client import ApiClient
from hylo_rates.schemas.calculation import CalculationResult
from hylo_rates.schemas.rates import RateSnapshot

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    rates: Optional[RateSnapshot] = None
    result: Optional[CalculationResult] = None
    loading: bool = False
    calc_loading: bool = False
    error: Optional[str] = None

    # calculator inputs
    principal: float = 1000.0
    days: int = 30
    rate_type: str = "APY"
    compounding_per_year: int = 365


class Dashboard:
    """Owns a :class:`DashboardState` and updates it from the API.

    A refresh that fails in transport clears the snapshot, while an
    ``ok: false`` answer keeps it. A failed calculation keeps the previous
    result on display.
    """

    def __init__(self, client: ApiClient, state: Optional[DashboardState] = None):
        self.client = client
        self.state = state or DashboardState()
        self._lock = threading.Lock()

    def refresh(self, force: bool = False) -> Optional[RateSnapshot]:
        with self._lock:
            self.state.loading = True
        try:
            raw = self.client.fetch_rates(force=force)
        except UpstreamUnavailable as e:
            logger.error(f"Failed to fetch APY: {e.message}")
            with self._lock:
                if not e.rejected:
                    self.state.rates = None
                self.state.error = e.message
            return None
        finally:
            with self._lock:
                self.state.loading = False

        snapshot = normalize(raw)
        with self._lock:
            self.state.rates = snapshot
            self.state.error = None
        return snapshot

    def compute(self, rate: Any) -> Optional[CalculationResult]:
        """Run the calculator for ``rate`` with the current inputs.

        A rate that is not a finite number raises :class:`InvalidInput`
        before any request is made.
        """
        value = to_rate(rate)
        if value is None:
            with self._lock:
                self.state.error = "Invalid rate"
            raise InvalidInput("Invalid rate")

        with self._lock:
            self.state.calc_loading = True
            inputs = (
                self.state.principal,
                self.state.days,
                self.state.rate_type,
                self.state.compounding_per_year,
            )
        principal, days, rate_type, compounding = inputs
        try:
            result = self.client.calculate(
                principal=principal,
                rate=value,
                rate_type=rate_type,
                days=days,
                compounding_per_year=compounding,
            )
        except CalculationFailed as e:
            logger.error(e.message)
            with self._lock:
                self.state.error = e.message
            return None
        finally:
            with self._lock:
                self.state.calc_loading = False

        with self._lock:
            self.state.result = result
            self.state.error = None
        return result

    def compute_slot(self, slot: str) -> Optional[CalculationResult]:
        """Run the calculator with the current snapshot's value for ``slot``."""
        snapshot = self.state.rates
        rate = snapshot.rate(slot) if snapshot is not None else None
        return self.compute(rate)
