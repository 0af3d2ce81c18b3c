"""Data contracts for the profit calculator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

RateType = Literal["APY", "APR"]
RATE_TYPES: tuple[str, ...] = ("APY", "APR")


@dataclass(frozen=True)
class CalculationRequest:
    principal: float
    rate: float
    rate_type: str = "APY"
    horizon_days: int = 0
    compounding_per_year: int = 365


@dataclass(frozen=True)
class CalculationResult:
    principal: float
    final: float
    profit: float


class CalculationPayload(BaseModel):
    """Body of ``POST /api/calc`` as the dashboard sends it."""

    model_config = ConfigDict(extra="ignore")

    principal: float
    rate: float = Field(..., description="Quoted rate in percentage points.")
    rateType: RateType = "APY"
    days: int = Field(..., description="Horizon in days.")
    compoundingPerYear: int = 365

    @field_validator("rateType", mode="before")
    @classmethod
    def _strip_label(cls, value: Any) -> Any:
        # the dashboard select sends its display label, e.g. "APY (recommended)"
        if isinstance(value, str) and value.strip():
            return value.strip().split()[0].upper()
        return value

    def to_request(self) -> CalculationRequest:
        return CalculationRequest(
            principal=self.principal,
            rate=self.rate,
            rate_type=self.rateType,
            horizon_days=self.days,
            compounding_per_year=self.compoundingPerYear,
        )


class CalculationEnvelope(BaseModel):
    """Response body of ``POST /api/calc``."""

    ok: bool
    principal: Optional[float] = None
    final: Optional[float] = None
    profit: Optional[float] = None
    error: Optional[str] = None
    detail: Optional[List[Any]] = None

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationEnvelope":
        return cls(
            ok=True,
            principal=result.principal,
            final=result.final,
            profit=result.profit,
        )

    def to_result(self) -> CalculationResult:
        if not self.ok or None in (self.principal, self.final, self.profit):
            raise ValueError("envelope does not carry a result")
        return CalculationResult(
            principal=self.principal, final=self.final, profit=self.profit
        )
