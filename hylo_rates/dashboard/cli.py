"""Terminal front end: ``dashboard show`` and ``dashboard calc``."""

from __future__ import annotations

import time
from typing import Optional

import click

from hylo_rates.config import Config, configure_logging
from hylo_rates.core.errors import InvalidInput
from hylo_rates.dashboard.cards import card_for, render_cards, render_result
from hylo_rates.dashboard.client import ApiClient
from hylo_rates.dashboard.scheduler import RefreshScheduler
from hylo_rates.dashboard.state import Dashboard, DashboardState
from hylo_rates.schemas.rates import RATE_SLOTS


def _make_dashboard(api_url: str, **inputs) -> Dashboard:
    return Dashboard(ApiClient(api_url), DashboardState(**inputs))


def _echo_rates(dashboard: Dashboard) -> None:
    for line in render_cards(dashboard.state.rates):
        click.echo(line)
    if dashboard.state.error:
        click.echo(f"Error: {dashboard.state.error}", err=True)


@click.group("dashboard")
@click.option("--api-url", default=Config.HYLO_API_URL, show_default=True,
              help="Base URL of the rates API.")
@click.option("--log-level", default="WARNING", show_default=True)
@click.pass_context
def dashboard_cli(ctx: click.Context, api_url: str, log_level: str) -> None:
    """Live APY cards and profit calculator."""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["api_url"] = api_url


@dashboard_cli.command("show")
@click.option("--force", is_flag=True, help="Ask the API to bypass its cache.")
@click.option("--watch", is_flag=True, help="Keep refreshing until interrupted.")
@click.option("--interval", type=float, default=Config.REFRESH_INTERVAL_SECONDS,
              show_default=True, help="Seconds between refreshes with --watch.")
@click.pass_context
def show(ctx: click.Context, force: bool, watch: bool, interval: float) -> None:
    """Print every pool card once, or on a fixed interval with --watch."""
    dashboard = _make_dashboard(ctx.obj["api_url"])

    if not watch:
        dashboard.refresh(force=force)
        _echo_rates(dashboard)
        if dashboard.state.rates is None:
            ctx.exit(1)
        return

    def tick() -> None:
        dashboard.refresh(force=force)
        _echo_rates(dashboard)

    scheduler = RefreshScheduler(tick, interval_seconds=interval)
    scheduler.start()
    try:
        while scheduler.running:
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.stop()


@dashboard_cli.command("calc")
@click.option("--slot", type=click.Choice(RATE_SLOTS), default=None,
              help="Use the live rate of this pool.")
@click.option("--rate", type=float, default=None, help="Quoted rate in percent.")
@click.option("--principal", type=float, default=1000.0, show_default=True)
@click.option("--days", type=int, default=30, show_default=True)
@click.option("--rate-type", type=click.Choice(["APY", "APR"], case_sensitive=False),
              default="APY", show_default=True)
@click.option("--compounding", type=int, default=365, show_default=True,
              help="Compounding periods per year (APR only).")
@click.pass_context
def calc(ctx: click.Context, slot: Optional[str], rate: Optional[float], principal: float,
         days: int, rate_type: str, compounding: int) -> None:
    """Project profit for one rate."""
    if (slot is None) == (rate is None):
        raise click.UsageError("Pass exactly one of --slot or --rate.")

    dashboard = _make_dashboard(
        ctx.obj["api_url"],
        principal=principal,
        days=days,
        rate_type=rate_type.upper(),
        compounding_per_year=compounding,
    )

    try:
        if slot is not None:
            dashboard.refresh()
            if dashboard.state.rates is None:
                raise click.ClickException(dashboard.state.error or "No APY data")
            card = card_for(slot)
            click.echo(f"Calculate {card.calc_label if card else slot}")
            result = dashboard.compute_slot(slot)
        else:
            result = dashboard.compute(rate)
    except InvalidInput as e:
        raise click.ClickException(e.message) from e

    if result is None:
        raise click.ClickException(dashboard.state.error or "Calculation failed")
    for line in render_result(result):
        click.echo(line)
