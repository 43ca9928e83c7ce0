"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from beneficios.adapters.api_errors import (
    ApiClientError,
    ApiConflictError,
    ApiError,
    ApiNetworkError,
    ApiNotFoundError,
    ApiServerError,
    ApiValidationError,
    error_detail,
)
from beneficios.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a port call.
        default_code: Code used for errors outside the ``ApiError`` hierarchy.
        default_message: Message used for those errors when ``str(exc)`` is empty.

    Returns:
        UseCaseError carrying a code and a message fit for a notification.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiNetworkError):
        return UseCaseError("NETWORK_ERROR", "Sem resposta do servidor. Verifique a conexão.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        detail = _server_detail(exc)
        if isinstance(exc, ApiNotFoundError):
            return UseCaseError("NOT_FOUND", _compose_error_message("Benefício não encontrado", detail))
        if isinstance(exc, ApiConflictError):
            return UseCaseError(
                "CONFLICT",
                _compose_error_message(
                    "Registro alterado por outro usuário; recarregue e tente novamente", detail
                ),
            )
        if isinstance(exc, ApiValidationError):
            return UseCaseError("INVALID_PARAMS", _compose_error_message("Dados inválidos", detail))
        if status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Acesso negado pelo servidor.")
        label = f"Falha na requisição (HTTP {status})" if status else "Falha na requisição"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, detail))
    if isinstance(exc, ApiServerError):
        detail = error_detail(exc.payload)
        return UseCaseError("SERVER_ERROR", _compose_error_message("Erro no servidor", detail))
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Erro inesperado."
    return UseCaseError(default_code, message)


def _server_detail(err: ApiClientError) -> Optional[str]:
    return err.hint or error_detail(err.payload)


def _compose_error_message(base: str, detail: Optional[str]) -> str:
    detail_text = (detail or "").strip()
    if detail_text and detail_text != base:
        return f"{base}: {detail_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
