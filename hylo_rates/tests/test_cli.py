import pytest

from hylo_rates.dashboard import cli
from hylo_rates.dashboard.client import ApiClient
from hylo_rates.tests.fakes import FakeResponse, FakeSession


@pytest.fixture()
def session(monkeypatch) -> FakeSession:
    fake = FakeSession()
    monkeypatch.setattr(cli, "ApiClient", lambda base_url: ApiClient(base_url, session=fake))
    return fake


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


def test_show_prints_cards(runner, session):
    session.responses.append(
        FakeResponse({"ok": True, "data": {"exponent_PT_xSOL_1": 12.5, "fetched_at": "2025-11-01T12:00:00Z"}})
    )

    result = runner.invoke(args=["dashboard", "--api-url", "http://api.local", "show", "--force"])

    assert result.exit_code == 0
    assert "Pool 1 (xsol-26Nov25-1)" in result.output
    assert "12.500%" in result.output
    assert "Updated:" in result.output
    assert session.calls[0]["url"] == "http://api.local/api/apy"
    assert session.calls[0]["params"] == {"force": "1"}


def test_show_fails_without_data(runner, session):
    session.responses.append(FakeResponse({"ok": False, "error": "venue down"}, status_code=502))

    result = runner.invoke(args=["dashboard", "show"])

    assert result.exit_code == 1
    assert "No APY data." in result.output


def test_calc_with_explicit_rate(runner, session):
    session.responses.append(
        FakeResponse({"ok": True, "principal": 1000.0, "final": 1100.0, "profit": 100.0})
    )

    result = runner.invoke(args=["dashboard", "calc", "--rate", "10", "--days", "365"])

    assert result.exit_code == 0
    assert "Final: $1,100" in result.output
    assert "Profit: $100" in result.output
    assert session.calls[0]["json"]["days"] == 365


def test_calc_with_slot_uses_live_rate(runner, session):
    session.responses.append(FakeResponse({"ok": True, "data": {"ratex_hyUSD": 6.5}}))
    session.responses.append(
        FakeResponse({"ok": True, "principal": 1000.0, "final": 1005.0, "profit": 5.0})
    )

    result = runner.invoke(
        args=["dashboard", "calc", "--slot", "ratex_hyUSD", "--rate-type", "apr", "--compounding", "12"]
    )

    assert result.exit_code == 0
    assert "Calculate Rate-X: hyUSD" in result.output
    body = session.calls[1]["json"]
    assert body["rate"] == 6.5
    assert body["rateType"] == "APR"
    assert body["compoundingPerYear"] == 12


def test_calc_with_unavailable_slot(runner, session):
    session.responses.append(FakeResponse({"ok": True, "data": {}}))

    result = runner.invoke(args=["dashboard", "calc", "--slot", "ratex_hyUSD"])

    assert result.exit_code == 1
    assert "Invalid rate" in result.output
    assert len(session.calls) == 1


def test_calc_requires_one_rate_source(runner, session):
    result = runner.invoke(args=["dashboard", "calc"])

    assert result.exit_code == 2
    assert session.calls == []
