"""Data contracts for rate snapshots and the rates endpoint."""

from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class RateSnapshot(BaseModel):
    """Canonical normalized record: one nullable rate per tracked pool.

    ``None`` marks a slot whose upstream value was missing or malformed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Exponent
    exponent_xSOL_1: Optional[float] = None
    exponent_PT_xSOL_1: Optional[float] = None
    exponent_xSOL_2: Optional[float] = None
    exponent_PT_xSOL_2: Optional[float] = None
    exponent_hyUSD: Optional[float] = None
    exponent_PT_hyUSD: Optional[float] = None
    exponent_hylosolplus: Optional[float] = None
    exponent_hylosol: Optional[float] = None
    exponent_sHYUSD: Optional[float] = None

    # Rate-X
    ratex_xSOL: Optional[float] = None
    ratex_PT_xSOL: Optional[float] = None
    ratex_hyUSD: Optional[float] = None
    ratex_PT_hyUSD: Optional[float] = None
    ratex_hylosolplus: Optional[float] = None
    ratex_PT_hylosolplus: Optional[float] = None
    ratex_hylosol: Optional[float] = None
    ratex_PT_hylosol: Optional[float] = None
    ratex_sHYUSD: Optional[float] = None
    ratex_PT_sHYUSD: Optional[float] = None

    # Loopscale (APY only)
    loopscale_hyusd_one: Optional[float] = None
    loopscale_xsOL_one: Optional[float] = None
    loopscale_hyusd_15dec25: Optional[float] = None
    loopscale_shYUSD_18nov25: Optional[float] = None
    loopscale_shYUSD_hyusd: Optional[float] = None
    loopscale_shYUSD_2601: Optional[float] = None

    fetched_at: Optional[Any] = None

    def rate(self, slot: str) -> Optional[float]:
        """Return the value of ``slot``; unknown names raise ``KeyError``."""
        if slot not in RATE_SLOTS:
            raise KeyError(slot)
        return getattr(self, slot)

    def items(self) -> Iterator[Tuple[str, Optional[float]]]:
        for slot in RATE_SLOTS:
            yield slot, getattr(self, slot)

    def available(self) -> Dict[str, float]:
        return {slot: value for slot, value in self.items() if value is not None}


RATE_SLOTS: Tuple[str, ...] = tuple(
    name for name in RateSnapshot.model_fields if name != "fetched_at"
)


class RatesEnvelope(BaseModel):
    """Response body of ``GET /api/apy``."""

    ok: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = Field(default=None, description="Set when ok is false.")
