from __future__ import annotations

from typing import List, Optional

import pytest
from flask.testing import FlaskClient

from hylo_rates.app import create_app
from hylo_rates.config import TestingConfig


class StubFeed:
    """Rate feed that returns canned payloads and records force flags."""

    def __init__(self, payload: Optional[dict] = None, error: Optional[Exception] = None):
        self.payload = payload or {}
        self.error = error
        self.forced: List[bool] = []

    def fetch(self, force: bool = False) -> dict:
        self.forced.append(force)
        if self.error is not None:
            raise self.error
        return dict(self.payload)


@pytest.fixture()
def raw_payload() -> dict:
    return {
        "exponent_PT_xSOL_1": 12.5,
        "exponent_PT_hyUSD": "8.25",
        "ratex_xSOL": 0,
        "ratex_PT_xSOL": -3.5,
        "loopscale_hyusd_one": None,
        "ratex_hyUSD": "not-a-number",
        "fetched_at": "2025-11-01T12:00:00+00:00",
    }


@pytest.fixture()
def stub_feed(raw_payload) -> StubFeed:
    return StubFeed(raw_payload)


@pytest.fixture()
def app(stub_feed):
    return create_app(TestingConfig, rate_feed=stub_feed)


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
