"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

BenefitId = int


def _optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be an integer.") from exc


@dataclass(frozen=True)
class Benefit:
    """A named monetary allotment ("benefício").

    ``ativo`` and ``version`` are both optional: one backend variant exposes
    the active flag, the other an optimistic-concurrency token, and the client
    forwards whichever the backend returned.
    """

    nome: str
    valor: float = 0.0
    descricao: Optional[str] = None
    id: Optional[BenefitId] = None
    ativo: Optional[bool] = None
    version: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.nome, str) or not self.nome.strip():
            raise ValueError("Benefit.nome must be a non-empty string.")
        if isinstance(self.valor, bool) or not isinstance(self.valor, (int, float)):
            raise TypeError("Benefit.valor must be numeric.")
        if not math.isfinite(self.valor):
            raise ValueError("Benefit.valor must be a finite number.")
        if self.valor < 0:
            raise ValueError("Benefit.valor must not be negative.")

    @property
    def is_new(self) -> bool:
        return self.id is None

    def with_id(self, benefit_id: BenefitId) -> "Benefit":
        if self.id is not None and self.id != benefit_id:
            raise ValueError("Benefit.id is immutable once assigned.")
        return replace(self, id=benefit_id)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Benefit":
        """Parse a backend JSON object; unknown keys are ignored."""
        if not isinstance(payload, Mapping):
            raise ValueError("Benefit payload must be an object.")
        nome = payload.get("nome")
        if not isinstance(nome, str) or not nome.strip():
            raise ValueError("Benefit payload requires 'nome'.")
        raw_valor = payload.get("valor")
        try:
            valor = float(raw_valor) if raw_valor is not None else 0.0
        except (TypeError, ValueError) as exc:
            raise ValueError("Benefit payload 'valor' must be numeric.") from exc
        descricao = payload.get("descricao")
        ativo = payload.get("ativo")
        return cls(
            nome=nome,
            valor=valor,
            descricao=str(descricao) if descricao is not None else None,
            id=_optional_int(payload.get("id"), "id"),
            ativo=bool(ativo) if ativo is not None else None,
            version=_optional_int(payload.get("version"), "version"),
        )

    def to_payload(self, *, include_id: bool = True) -> Dict[str, Any]:
        """Serialize to the backend JSON shape, omitting absent optionals."""
        payload: Dict[str, Any] = {"nome": self.nome, "valor": self.valor}
        if include_id and self.id is not None:
            payload["id"] = self.id
        if self.descricao is not None:
            payload["descricao"] = self.descricao
        if self.ativo is not None:
            payload["ativo"] = self.ativo
        if self.version is not None:
            payload["version"] = self.version
        return payload


@dataclass(frozen=True)
class TransferRequest:
    """Command to move ``amount`` from one benefit to another."""

    from_id: BenefitId
    to_id: BenefitId
    amount: float

    def to_payload(self) -> Dict[str, Any]:
        return {"fromId": self.from_id, "toId": self.to_id, "amount": self.amount}


__all__ = ["Benefit", "BenefitId", "TransferRequest"]
