"""Form state for creating and editing a benefit.

Call context:
    ``BeneficioScreen`` owns one instance, resets or loads it on list -> form
    transitions, and asks it for validation before any backend call.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Set

from beneficios.domain.entities import Benefit

FIELDS = ("nome", "descricao", "valor", "ativo")


def parse_number(value: Any) -> Optional[float]:
    """Parse user input into a finite float; accepts a decimal comma. None if invalid."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class BeneficioFormVM:
    """Editable projection of a ``Benefit`` with touched-field validation."""

    def __init__(self) -> None:
        self.nome: str = ""
        self.descricao: str = ""
        self.valor: Any = 0
        self.ativo: bool = True
        self.id: Optional[int] = None
        self.version: Optional[int] = None
        self.touched: Set[str] = set()

    @property
    def is_edit(self) -> bool:
        return self.id is not None

    @property
    def title(self) -> str:
        return "Editar Benefício" if self.is_edit else "Novo Benefício"

    def reset(self) -> None:
        """Return to create-mode defaults (``valor=0``, ``ativo=True``)."""
        self.nome = ""
        self.descricao = ""
        self.valor = 0
        self.ativo = True
        self.id = None
        self.version = None
        self.touched = set()

    def load(self, benefit: Benefit) -> None:
        self.nome = benefit.nome
        self.descricao = benefit.descricao or ""
        self.valor = benefit.valor
        self.ativo = True if benefit.ativo is None else bool(benefit.ativo)
        self.id = benefit.id
        self.version = benefit.version
        self.touched = set()

    def set_field(self, name: str, value: Any) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self, name, value)
        self.touched.add(name)

    def mark_all_touched(self) -> None:
        self.touched = set(FIELDS)

    def validate(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        if not str(self.nome or "").strip():
            errors["nome"] = "Nome é obrigatório."
        valor = parse_number(self.valor)
        if is_blank(self.valor):
            errors["valor"] = "Valor é obrigatório."
        elif valor is None:
            errors["valor"] = "Valor deve ser um número."
        elif valor < 0:
            errors["valor"] = "Valor não pode ser negativo."
        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def errors_for_display(self) -> Dict[str, str]:
        """Validation messages limited to fields the user has touched."""
        return {name: msg for name, msg in self.validate().items() if name in self.touched}

    def to_benefit(self) -> Benefit:
        """Build the payload entity; call only after ``validate`` passes."""
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors.values()))
        descricao = str(self.descricao or "").strip()
        return Benefit(
            nome=str(self.nome).strip(),
            valor=parse_number(self.valor) or 0.0,
            descricao=descricao or None,
            id=self.id,
            ativo=bool(self.ativo),
            version=self.version,
        )


__all__ = ["BeneficioFormVM", "FIELDS", "is_blank", "parse_number"]
