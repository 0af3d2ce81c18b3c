"""Raw rate payload source for the ``/api/apy`` endpoint."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Callable, Optional

import requests

from hylo_rates.core.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


class RateFeed:
    """Fetches the raw rate payload from one upstream JSON URL.

    The last payload is kept for ``ttl_seconds``; ``fetch(force=True)`` skips
    the cache. Failures raise :class:`UpstreamUnavailable` and never fall back
    to a stale payload.
    """

    def __init__(
        self,
        url: str,
        ttl_seconds: float = 60.0,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.url = url
        self.ttl_seconds = ttl_seconds
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "HyloRates/1.0"})
        self._clock = clock
        self._lock = threading.Lock()
        self._cached: Optional[dict] = None
        self._cached_at: float = 0.0

    @classmethod
    def from_config(cls, config: Mapping) -> "RateFeed":
        return cls(
            url=config.get("UPSTREAM_RATES_URL", ""),
            ttl_seconds=config.get("RATES_CACHE_SECONDS", 60.0),
            timeout=config.get("UPSTREAM_TIMEOUT_SECONDS", 10.0),
        )

    def fetch(self, force: bool = False) -> dict:
        with self._lock:
            if not force and self._is_fresh():
                logger.debug("Serving cached rate payload")
                return dict(self._cached)

            payload = self._download()
            self._cached = payload
            self._cached_at = self._clock()
            return dict(payload)

    def _is_fresh(self) -> bool:
        if self._cached is None:
            return False
        return self._clock() - self._cached_at < self.ttl_seconds

    def _download(self) -> dict:
        if not self.url:
            raise UpstreamUnavailable("No upstream rates URL configured")

        try:
            logger.info(f"GET {self.url}")
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            logger.error(f"Upstream request failed: {e}")
            raise UpstreamUnavailable(f"Upstream request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Upstream returned invalid JSON: {e}")
            raise UpstreamUnavailable("Upstream returned invalid JSON") from e

        if isinstance(body, Mapping) and "ok" in body:
            if not body.get("ok"):
                raise UpstreamUnavailable(str(body.get("error") or "Unknown"))
            body = body.get("data")

        if not isinstance(body, Mapping):
            logger.error(f"Unexpected upstream payload: {type(body)}")
            raise UpstreamUnavailable("Upstream payload is not an object")

        payload = dict(body)
        if payload.get("fetched_at") is None:
            payload["fetched_at"] = datetime.now(timezone.utc).isoformat()
        return payload
