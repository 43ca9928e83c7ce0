from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from beneficios.adapters.http_client import HttpConfig, HttpTransport

BASE_URL = "http://api.local/api/v1/beneficios"


class ResponseStub:
    """Minimal response double compatible with adapter parsing helpers."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        if text is not None:
            self.text = text
        else:
            self.text = "" if payload is None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class SessionStub:
    """Records ``request`` calls and replays queued responses or exceptions."""

    def __init__(self, responses: Sequence[Union[ResponseStub, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(
        self,
        method: str,
        url: str,
        *,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> ResponseStub:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "body": None if data is None else json.loads(data),
                "headers": dict(headers or {}),
                "timeout": timeout,
            }
        )
        if not self._responses:
            raise RuntimeError("No stub response configured")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


def make_transport(
    responses: Sequence[Union[ResponseStub, Exception]],
    *,
    api_key: Optional[str] = None,
) -> HttpTransport:
    transport = HttpTransport(HttpConfig(base_url=BASE_URL, request_timeout_s=7, api_key=api_key))
    transport.session = SessionStub(responses)  # type: ignore[assignment]
    return transport


__all__ = ["BASE_URL", "ResponseStub", "SessionStub", "make_transport"]
