from __future__ import annotations

from beneficios.domain.entities import Benefit
from beneficios.viewmodels.list_vm import filter_beneficios, format_valor, to_row

ITEMS = [
    Benefit(nome="Vale Refeição", descricao="Crédito mensal", valor=800.0, id=1, ativo=True),
    Benefit(nome="Vale Transporte", valor=220.0, id=2, ativo=False),
    Benefit(nome="Bônus", descricao="Pago em VALE", valor=1234.5, id=3),
]


def test_filter_is_case_insensitive_over_name_and_description() -> None:
    assert [b.id for b in filter_beneficios(ITEMS, "vale")] == [1, 2, 3]
    assert [b.id for b in filter_beneficios(ITEMS, "MENSAL")] == [1]
    assert filter_beneficios(ITEMS, "inexistente") == []


def test_blank_filter_keeps_everything_in_order() -> None:
    assert filter_beneficios(ITEMS, "  ") == ITEMS
    assert filter_beneficios(ITEMS, None) == ITEMS


def test_format_valor_uses_brazilian_separators() -> None:
    assert format_valor(1234.5) == "1.234,50"
    assert format_valor(0) == "0,00"


def test_to_row_renders_optional_flag() -> None:
    rows = [to_row(item) for item in ITEMS]

    assert [r.ativo for r in rows] == ["Sim", "Não", "-"]
    assert rows[1].descricao == ""
    assert rows[2].valor == "1.234,50"
