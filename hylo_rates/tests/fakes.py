from __future__ import annotations

from typing import Any, List, Optional

import requests


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, json_error: bool = False):
        self.body = body
        self.status_code = status_code
        self.json_error = json_error

    def json(self) -> Any:
        if self.json_error:
            raise ValueError("No JSON object could be decoded")
        return self.body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for ``requests.Session``; replays queued responses in order."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[dict] = []
        self.headers: dict = {}

    def _next(self, method: str, url: str, **kwargs) -> Any:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs) -> Any:
        return self._next("GET", url, **kwargs)

    def post(self, url: str, **kwargs) -> Any:
        return self._next("POST", url, **kwargs)
