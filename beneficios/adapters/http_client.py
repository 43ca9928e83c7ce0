"""Shared HTTP transport for the benefícios REST adapter.

This module provides a thin wrapper around ``requests.Session`` that the
adapter awaits from the UI event loop. Blocking I/O runs on a worker thread
via ``asyncio.to_thread`` so NiceGUI handlers never stall.

Dependencies:
    - ``requests`` for network I/O.
    - ``beneficios.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``beneficios.app.controller.AppController`` from settings.
    - Used only by ``BeneficioRestAdapter``; use cases interact through ports.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from beneficios.adapters.api_errors import ApiError, ApiNetworkError, raise_for_status


LOGGER = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Endpoint and timeout configuration for adapter HTTP calls.

    Attributes:
        base_url: Root of the benefícios resource, e.g.
            ``http://localhost:8080/backend-module/api/v1/beneficios``.
        request_timeout_s: Timeout in seconds for each JSON API call.
        api_key: Optional value sent as ``X-API-Key``.
    """
    base_url: str
    request_timeout_s: int = 10
    api_key: Optional[str] = None


class HttpTransport:
    """Single-shot JSON transport; a failed call surfaces immediately.

    Callers pass paths relative to ``HttpConfig.base_url``. Non-2xx responses
    are converted into the ``ApiError`` hierarchy before returning.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create the transport.

        Args:
            cfg: Base URL, timeout, and API key.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        if not (cfg.base_url or "").strip():
            raise ValueError("HttpTransport requires a base URL")
        self.session = requests.Session()
        self.cfg = cfg

    def url_for(self, path: str) -> str:
        base = self.cfg.base_url.strip().rstrip("/")
        tail = (path or "").strip().lstrip("/")
        return f"{base}/{tail}" if tail else base

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.cfg.api_key:
            headers["X-API-Key"] = self.cfg.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str = "",
        body: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Send one request without blocking the event loop.

        Args:
            method: HTTP verb (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the configured base URL.
            body: Optional payload serialized to JSON text.

        Returns:
            The 2xx ``requests.Response``.

        Raises:
            ApiNetworkError: On timeout or connectivity failure.
            ApiError: Typed subclass for any non-2xx status.
        """
        return await asyncio.to_thread(self.send, method, path, body)

    def send(
        self,
        method: str,
        path: str = "",
        body: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Blocking variant of :meth:`request`, executed on a worker thread."""
        verb = method.upper()
        url = self.url_for(path)
        context = f"{verb} {url}"
        data = None if body is None else json.dumps(body)
        LOGGER.debug("HTTP %s", context)
        try:
            resp = self.session.request(
                verb,
                url,
                data=data,
                headers=self._headers(json_body=body is not None),
                timeout=self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiNetworkError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc
        LOGGER.debug("HTTP %s -> %s", context, resp.status_code)
        raise_for_status(resp, context)
        return resp

    def close(self) -> None:
        self.session.close()


__all__ = ["HttpConfig", "HttpTransport"]
