from __future__ import annotations

import pytest

from beneficios.adapters.api_errors import (
    ApiClientError,
    ApiConflictError,
    ApiError,
    ApiNetworkError,
    ApiNotFoundError,
    ApiServerError,
    ApiValidationError,
)
from beneficios.domain.ports import UseCaseError
from beneficios.usecases.error_mapping import map_api_error


@pytest.mark.parametrize(
    "exc, code",
    [
        (ApiNetworkError("Timeout contacting x"), "NETWORK_ERROR"),
        (ApiNotFoundError("nf", status=404), "NOT_FOUND"),
        (ApiConflictError("c", status=409), "CONFLICT"),
        (ApiValidationError("v", status=422, hint="nome=obrigatório"), "INVALID_PARAMS"),
        (ApiClientError("forbidden", status=403), "AUTH_FAILED"),
        (ApiClientError("teapot", status=418), "REQUEST_FAILED"),
        (ApiServerError("boom", status=500), "SERVER_ERROR"),
        (ApiError("weird"), "API_ERROR"),
        (RuntimeError("unexpected"), "SAVE_FAILED"),
    ],
)
def test_codes(exc: Exception, code: str) -> None:
    assert map_api_error(exc, default_code="SAVE_FAILED").code == code


def test_use_case_error_passes_through() -> None:
    err = UseCaseError("INVALID_PARAMS", "x")

    assert map_api_error(err, default_code="LIST_FAILED") is err


def test_server_message_is_appended() -> None:
    exc = ApiNotFoundError("nf", status=404, payload={"message": "Beneficio não encontrado: 2"})

    mapped = map_api_error(exc, default_code="DELETE_FAILED")

    assert mapped.message == "Benefício não encontrado: Beneficio não encontrado: 2"


def test_validation_falls_back_to_hint() -> None:
    exc = ApiValidationError("v", status=400, hint="nome: obrigatório")

    mapped = map_api_error(exc, default_code="SAVE_FAILED")

    assert mapped.message == "Dados inválidos: nome: obrigatório"


def test_messages_without_detail() -> None:
    assert map_api_error(ApiServerError("x", status=502), default_code="X").message == "Erro no servidor."
    assert (
        map_api_error(ApiClientError("x", status=418), default_code="X").message
        == "Falha na requisição (HTTP 418)."
    )
