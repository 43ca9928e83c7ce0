from __future__ import annotations

import pytest

from beneficios.domain.entities import TransferRequest
from beneficios.viewmodels.transfer_vm import TransferFormVM


def test_prefill_sets_origin_only() -> None:
    form = TransferFormVM()
    form.set_field("amount", "10")

    form.prefill(3)

    assert form.from_id == 3
    assert form.to_id is None and form.amount is None
    assert form.touched == set()


def test_empty_form_reports_every_field() -> None:
    form = TransferFormVM()
    form.mark_all_touched()

    assert form.errors_for_display() == {
        "from_id": "Origem é obrigatória.",
        "to_id": "Destino é obrigatório.",
        "amount": "Valor é obrigatório.",
    }


def test_same_origin_and_destination_rejected() -> None:
    form = TransferFormVM()
    form.prefill(1)
    form.set_field("to_id", "1")
    form.set_field("amount", "5")

    assert form.validate() == {"to_id": "Destino deve ser diferente da origem."}


@pytest.mark.parametrize("amount", ["0", "0,001", "-3"])
def test_amount_below_minimum_rejected(amount: str) -> None:
    form = TransferFormVM()
    form.prefill(1)
    form.set_field("to_id", 2)
    form.set_field("amount", amount)

    assert form.validate() == {"amount": "Valor mínimo é 0.01."}


def test_to_request_parses_inputs() -> None:
    form = TransferFormVM()
    form.prefill(1)
    form.set_field("to_id", "2")
    form.set_field("amount", "50,00")

    assert form.is_valid()
    assert form.to_request() == TransferRequest(from_id=1, to_id=2, amount=50.0)


def test_to_request_refuses_invalid_form() -> None:
    with pytest.raises(ValueError):
        TransferFormVM().to_request()


@pytest.mark.parametrize("amount", ["nan", "inf", "-inf", float("inf")])
def test_non_finite_amount_is_rejected(amount) -> None:
    form = TransferFormVM()
    form.prefill(1)
    form.set_field("to_id", 2)
    form.set_field("amount", amount)

    assert form.validate() == {"amount": "Valor deve ser um número."}


@pytest.mark.parametrize("raw", ["²", "1.5", "abc", 2.5, float("nan")])
def test_malformed_destination_is_a_field_error(raw) -> None:
    form = TransferFormVM()
    form.prefill(1)
    form.set_field("to_id", raw)
    form.set_field("amount", "5")

    assert form.validate() == {"to_id": "Destino inválido."}
