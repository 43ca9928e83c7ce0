from __future__ import annotations

from typing import Any, List, Optional


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the benefícios API."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, hint=hint, payload=payload, context=context)


class ApiNotFoundError(ApiClientError):
    """HTTP 404: the benefit id is unknown or already deleted."""


class ApiConflictError(ApiClientError):
    """HTTP 409: stale ``version`` on update."""


class ApiValidationError(ApiClientError):
    """HTTP 400/422 with field detail from the backend."""


class ApiServerError(ApiError):
    """HTTP 5xx from the benefícios API."""

    def __init__(self, message: str, *, status: int, payload: Any = None, context: Optional[str] = None) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiNetworkError(ApiError):
    """Timeout or connectivity failure; no response was received."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


_CLIENT_ERRORS = {
    400: ApiValidationError,
    404: ApiNotFoundError,
    409: ApiConflictError,
    422: ApiValidationError,
}

# Spring error bodies carry "message"; problem+json carries "detail"/"title".
_DETAIL_KEYS = ("message", "detail", "error", "title")
# Bean validation lists rejected fields under one of these keys.
_FIELD_KEYS = ("fieldErrors", "errors", "details")
_HINT_LIMIT = 200


def raise_for_status(resp: Any, ctx: str) -> None:
    """Raise the typed ``ApiError`` matching a non-2xx response."""
    status = resp.status_code
    if 200 <= status < 300:
        return
    payload = read_error_body(resp)
    detail = error_detail(payload)
    message = f"{ctx}: {detail} (HTTP {status})" if detail else f"{ctx}: HTTP {status}"
    if 400 <= status < 500:
        error_cls = _CLIENT_ERRORS.get(status, ApiClientError)
        raise error_cls(message, status=status, hint=field_hint(payload), payload=payload, context=ctx)
    if 500 <= status < 600:
        raise ApiServerError(message, status=status, payload=payload, context=ctx)
    raise ApiError(message, status=status, payload=payload, context=ctx)


def read_error_body(resp: Any) -> Any:
    """JSON body of an error response, else a text snippet, else None."""
    try:
        return resp.json()
    except ValueError:
        snippet = (getattr(resp, "text", "") or "").strip()
        return snippet[:400] or None


def error_detail(payload: Any) -> Optional[str]:
    """First human-readable message found in an error body."""
    if isinstance(payload, str):
        return payload.strip() or None
    if isinstance(payload, list):
        for item in payload:
            detail = error_detail(item)
            if detail:
                return detail
        return None
    if isinstance(payload, dict):
        for key in _DETAIL_KEYS:
            detail = error_detail(payload.get(key))
            if detail:
                return detail
    return None


def field_hint(payload: Any) -> Optional[str]:
    """Summarise rejected fields, e.g. ``"nome: obrigatório; valor: negativo"``."""
    if not isinstance(payload, dict):
        return None
    for key in _FIELD_KEYS:
        entries = payload.get(key)
        if isinstance(entries, dict):
            entries = [{"field": name, "message": text} for name, text in entries.items()]
        if not isinstance(entries, list):
            continue
        parts: List[str] = []
        for entry in entries[:3]:
            text = _describe_field(entry)
            if text:
                parts.append(text)
        if parts:
            return "; ".join(parts)[:_HINT_LIMIT]
    return None


def _describe_field(entry: Any) -> Optional[str]:
    if not isinstance(entry, dict):
        return error_detail(entry)
    message = error_detail(entry) or error_detail(entry.get("defaultMessage"))
    field = entry.get("field")
    if field and message:
        return f"{field}: {message}"
    return message


__all__ = [
    "ApiClientError",
    "ApiConflictError",
    "ApiError",
    "ApiNetworkError",
    "ApiNotFoundError",
    "ApiServerError",
    "ApiValidationError",
    "error_detail",
    "field_hint",
    "raise_for_status",
    "read_error_body",
]
