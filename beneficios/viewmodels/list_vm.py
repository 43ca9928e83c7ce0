"""Table projection of the loaded benefit list.

Call context:
    ``BeneficioScreen`` filters its snapshot through ``filter_beneficios`` and
    the NiceGUI page renders ``BeneficioRow`` objects in the table widget.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from beneficios.domain.entities import Benefit


@dataclass
class BeneficioRow:
    """Display row model consumed by the benefit table widget."""
    id: Optional[int]
    nome: str
    descricao: str
    valor: str
    ativo: str


def normalize_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def matches(benefit: Benefit, term: str) -> bool:
    """Case-insensitive substring match against ``nome`` and ``descricao``."""
    needle = normalize_term(term)
    if not needle:
        return True
    if needle in benefit.nome.lower():
        return True
    return bool(benefit.descricao) and needle in benefit.descricao.lower()


def filter_beneficios(items: Iterable[Benefit], term: Optional[str]) -> List[Benefit]:
    """Return the subset matching ``term``; a blank term keeps everything."""
    return [item for item in items if matches(item, term or "")]


def format_valor(valor: float) -> str:
    """Render money with two decimals, e.g. ``1234.5`` -> ``"1.234,50"``."""
    text = f"{valor:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def to_row(benefit: Benefit) -> BeneficioRow:
    if benefit.ativo is None:
        ativo = "-"
    else:
        ativo = "Sim" if benefit.ativo else "Não"
    return BeneficioRow(
        id=benefit.id,
        nome=benefit.nome,
        descricao=benefit.descricao or "",
        valor=format_valor(benefit.valor),
        ativo=ativo,
    )


__all__ = ["BeneficioRow", "filter_beneficios", "format_valor", "matches", "to_row"]
