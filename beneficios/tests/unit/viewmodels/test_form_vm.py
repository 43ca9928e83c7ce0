from __future__ import annotations

import pytest

from beneficios.domain.entities import Benefit
from beneficios.viewmodels.form_vm import BeneficioFormVM, parse_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" 12,5 ", 12.5),
        ("3", 3.0),
        (7, 7.0),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        ("nan", None),
        ("inf", None),
        ("-inf", None),
        (float("nan"), None),
        (float("inf"), None),
    ],
)
def test_parse_number(raw, expected) -> None:
    assert parse_number(raw) == expected


def test_defaults_are_create_mode() -> None:
    form = BeneficioFormVM()

    assert form.is_edit is False
    assert form.title == "Novo Benefício"
    assert form.valor == 0
    assert form.ativo is True


def test_errors_only_shown_for_touched_fields() -> None:
    form = BeneficioFormVM()

    assert form.validate() == {"nome": "Nome é obrigatório."}
    assert form.errors_for_display() == {}

    form.set_field("valor", "-1")
    assert form.errors_for_display() == {"valor": "Valor não pode ser negativo."}

    form.mark_all_touched()
    assert set(form.errors_for_display()) == {"nome", "valor"}


def test_blank_valor_is_required() -> None:
    form = BeneficioFormVM()
    form.set_field("nome", "Vale")
    form.set_field("valor", "  ")

    assert form.validate() == {"valor": "Valor é obrigatório."}
    with pytest.raises(ValueError):
        form.to_benefit()


def test_unknown_field_rejected() -> None:
    with pytest.raises(KeyError):
        BeneficioFormVM().set_field("id", 3)


def test_load_then_to_benefit_preserves_identity_and_version() -> None:
    form = BeneficioFormVM()
    form.load(Benefit(nome="Vale", descricao="VR", valor=500.0, id=1, version=3))

    assert form.is_edit is True
    assert form.title == "Editar Benefício"
    assert form.ativo is True

    form.set_field("nome", "  Vale Refeição ")
    form.set_field("descricao", "")
    benefit = form.to_benefit()

    assert benefit == Benefit(nome="Vale Refeição", valor=500.0, descricao=None, id=1, ativo=True, version=3)


def test_reset_clears_edit_state() -> None:
    form = BeneficioFormVM()
    form.load(Benefit(nome="Vale", valor=1.0, id=1, ativo=False))
    form.set_field("nome", "x")

    form.reset()

    assert form.id is None and form.version is None
    assert form.nome == "" and form.ativo is True
    assert form.touched == set()


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", float("nan")])
def test_non_finite_valor_is_rejected(raw) -> None:
    form = BeneficioFormVM()
    form.set_field("nome", "Vale")
    form.set_field("valor", raw)

    assert form.validate() == {"valor": "Valor deve ser um número."}
    assert form.is_valid() is False
