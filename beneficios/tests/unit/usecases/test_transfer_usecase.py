from __future__ import annotations

import asyncio

import pytest

from beneficios.adapters.beneficio_mock import BeneficioMock
from beneficios.domain.entities import Benefit, TransferRequest
from beneficios.domain.ports import UseCaseError
from beneficios.usecases.transfer_between_beneficios import TransferBetweenBeneficios


def _port() -> BeneficioMock:
    return BeneficioMock(seed=(Benefit(nome="A", valor=100.0), Benefit(nome="B", valor=10.0)))


@pytest.mark.parametrize(
    "request_",
    [
        TransferRequest(1, 1, 5.0),
        TransferRequest(1, 2, 0.0),
        TransferRequest(1, 2, -1.0),
        TransferRequest(1, 2, float("nan")),
        TransferRequest(1, 2, float("inf")),
    ],
)
def test_invalid_requests_never_reach_port(request_: TransferRequest) -> None:
    port = _port()

    with pytest.raises(UseCaseError) as info:
        asyncio.run(TransferBetweenBeneficios(port)(request_))

    assert info.value.code == "INVALID_PARAMS"
    assert port.calls == []


def test_successful_transfer() -> None:
    port = _port()

    asyncio.run(TransferBetweenBeneficios(port)(TransferRequest(1, 2, 50.0)))

    assert port.calls == ["transfer:1->2"]


def test_backend_rejection_maps_to_invalid_params() -> None:
    port = _port()

    with pytest.raises(UseCaseError) as info:
        asyncio.run(TransferBetweenBeneficios(port)(TransferRequest(2, 1, 500.0)))

    assert info.value.code == "INVALID_PARAMS"
    assert "Saldo insuficiente" in info.value.message
