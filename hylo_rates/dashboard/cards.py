"""Pool card catalog and plain-text rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

from hylo_rates.core.rates import format_percent
from hylo_rates.schemas.calculation import CalculationResult
from hylo_rates.schemas.rates import RATE_SLOTS, RateSnapshot

FAMILIES = ("xSOL", "hyUSD", "sHYUSD", "hyloSOL+", "hyloSOL")


@dataclass(frozen=True)
class Card:
    title: str
    slot: str
    label: str
    family: str
    link: str
    calc_label: str

    @property
    def venue(self) -> str:
        if self.title.startswith("Rate-X"):
            return "Rate-X"
        if "Loopscale" in self.title:
            return "Loopscale"
        return "Exponent"


CARDS: tuple[Card, ...] = (
    # xSOL
    Card("Pool 1 (xsol-26Nov25-1)", "exponent_PT_xSOL_1", "PT-xSOL Fixed APY", "xSOL",
         "https://www.exponent.finance/liquidity/xsol-26Nov25-1", "Pool 1: PT-xSOL"),
    Card("Pool 2 (xsol-26Nov25)", "exponent_PT_xSOL_2", "PT-xSOL Fixed APY", "xSOL",
         "https://www.exponent.finance/liquidity/xsol-26Nov25", "Pool 2: PT-xSOL"),
    Card("Rate-X xSOL", "ratex_xSOL", "Variable APY", "xSOL",
         "https://app.rate-x.io/points?symbol=xSOL-2511", "Rate-X: xSOL"),
    Card("Rate-X PT-xSOL", "ratex_PT_xSOL", "Fixed APY", "xSOL",
         "https://app.rate-x.io/points?symbol=xSOL-2511", "Rate-X: PT-xSOL"),
    Card("Loopscale xSOL ONE", "loopscale_xsOL_one", "xSOL ONE APY", "xSOL",
         "https://app.loopscale.com/vault/xsol_one", "Loopscale xSOL ONE"),
    # hyUSD
    Card("hyUSD (15Dec25)", "exponent_PT_hyUSD", "PT-hyUSD Fixed APY", "hyUSD",
         "https://www.exponent.finance/liquidity/hyusd-15Dec25", "hyUSD: PT-hyUSD"),
    Card("Rate-X hyUSD", "ratex_hyUSD", "Variable APY", "hyUSD",
         "https://app.rate-x.io/points?symbol=hyUSD-2601", "Rate-X: hyUSD"),
    Card("Rate-X PT-hyUSD", "ratex_PT_hyUSD", "Fixed APY", "hyUSD",
         "https://app.rate-x.io/points?symbol=hyUSD-2601", "Rate-X: PT-hyUSD"),
    Card("Loopscale hyUSD ONE", "loopscale_hyusd_one", "hyUSD ONE APY", "hyUSD",
         "https://app.loopscale.com/vault/hyusd_one", "Loopscale hyUSD ONE"),
    Card("Loopscale hyUSD 15dec25", "loopscale_hyusd_15dec25", "hyUSD 15dec25 APY", "hyUSD",
         "https://app.loopscale.com/loops/hyusd-15dec25-hyusd", "Loopscale hyUSD"),
    # sHYUSD
    Card("sHYUSD (18Nov25)", "exponent_sHYUSD", "sHYUSD Fixed APY", "sHYUSD",
         "https://www.exponent.finance/liquidity/shyusd-18Nov25", "sHYUSD"),
    Card("Rate-X sHYUSD", "ratex_sHYUSD", "Variable APY", "sHYUSD",
         "https://app.rate-x.io/points?symbol=sHYUSD-2601", "Rate-X: sHYUSD"),
    Card("Rate-X PT-sHYUSD", "ratex_PT_sHYUSD", "Fixed APY", "sHYUSD",
         "https://app.rate-x.io/points?symbol=sHYUSD-2601", "Rate-X: PT-sHYUSD"),
    Card("Loopscale sHYUSD 18nov25", "loopscale_shYUSD_18nov25", "sHYUSD 18nov25 APY", "sHYUSD",
         "https://app.loopscale.com/loops/shyusd-18nov25-hyusd", "Loopscale sHYUSD"),
    Card("Loopscale sHYUSD", "loopscale_shYUSD_hyusd", "sHYUSD/hyUSD APY", "sHYUSD",
         "https://app.loopscale.com/loops/shyusd-hyusd", "Loopscale sHYUSD"),
    Card("Loopscale sHYUSD 2601", "loopscale_shYUSD_2601", "sHYUSD 2601 APY", "sHYUSD",
         "https://app.loopscale.com/loops/shyusd-2601-hyusd", "Loopscale sHYUSD"),
    # hyloSOL+
    Card("hyloSOL+ (15Dec25)", "exponent_hylosolplus", "PT-hyloSOL+ Fixed APY", "hyloSOL+",
         "https://www.exponent.finance/liquidity/hylosolplus-15Dec25", "hyloSOL+: PT"),
    Card("Rate-X hyloSOL+", "ratex_hylosolplus", "Variable APY", "hyloSOL+",
         "https://app.rate-x.io/points?symbol=hyloSOL%252B-2511", "Rate-X: hyloSOL+"),
    Card("Rate-X PT-hyloSOL+", "ratex_PT_hylosolplus", "Fixed APY", "hyloSOL+",
         "https://app.rate-x.io/points?symbol=hyloSOL%252B-2511", "Rate-X: PT-hyloSOL+"),
    # hyloSOL
    Card("hyloSOL (10Dec25)", "exponent_hylosol", "PT-hyloSOL Fixed APY", "hyloSOL",
         "https://www.exponent.finance/liquidity/hylosol-10Dec25", "hyloSOL: PT"),
    Card("Rate-X hyloSOL", "ratex_hylosol", "Variable APY", "hyloSOL",
         "https://app.rate-x.io/points?symbol=hyloSOL-2511", "Rate-X: hyloSOL"),
    Card("Rate-X PT-hyloSOL", "ratex_PT_hylosol", "Fixed APY", "hyloSOL",
         "https://app.rate-x.io/points?symbol=hyloSOL-2511", "Rate-X: PT-hyloSOL"),
)


def card_for(slot: str) -> Optional[Card]:
    for card in CARDS:
        if card.slot == slot:
            return card
    return None


def format_amount(value: Any) -> str:
    """Thousands separators and at most 6 fractional digits."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"
    text = f"{number:,.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_updated(fetched_at: Any) -> Optional[str]:
    """Local wall-clock time for ``fetched_at`` (ISO string or epoch millis)."""
    if fetched_at is None:
        return None
    try:
        if isinstance(fetched_at, (int, float)) and not isinstance(fetched_at, bool):
            moment = datetime.fromtimestamp(fetched_at / 1000, tz=timezone.utc)
        else:
            moment = datetime.fromisoformat(str(fetched_at).replace("Z", "+00:00"))
    except (TypeError, ValueError, OverflowError, OSError):
        return str(fetched_at)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone().strftime("%H:%M:%S")


def render_cards(snapshot: Optional[RateSnapshot]) -> List[str]:
    if snapshot is None:
        return ["No APY data."]

    lines: List[str] = []
    for family in FAMILIES:
        lines.append(f"== {family}")
        for card in CARDS:
            if card.family != family:
                continue
            value = format_percent(snapshot.rate(card.slot))
            lines.append(f"  {card.title:<28} {value:>10}  {card.label}  (view on {card.venue})")

    lines.append(f"Live pools: {len(snapshot.available())}/{len(RATE_SLOTS)}")
    updated = format_updated(snapshot.fetched_at)
    if updated:
        lines.append(f"Updated: {updated}")
    return lines


def render_result(result: Optional[CalculationResult]) -> List[str]:
    if result is None:
        return []
    return [
        f"Principal: ${format_amount(result.principal)}",
        f"Final: ${format_amount(result.final)}",
        f"Profit: ${format_amount(result.profit)}",
    ]
