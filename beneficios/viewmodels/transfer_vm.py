from __future__ import annotations

from typing import Any, Dict, Optional, Set

from beneficios.domain.entities import TransferRequest

from .form_vm import is_blank, parse_number

MIN_AMOUNT = 0.01
FIELDS = ("from_id", "to_id", "amount")


def _parse_id(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class TransferFormVM:
    """Form state for moving value between two benefits."""

    def __init__(self) -> None:
        self.from_id: Any = None
        self.to_id: Any = None
        self.amount: Any = None
        self.touched: Set[str] = set()

    def reset(self) -> None:
        self.from_id = None
        self.to_id = None
        self.amount = None
        self.touched = set()

    def prefill(self, from_id: Optional[int]) -> None:
        self.reset()
        self.from_id = from_id

    def set_field(self, name: str, value: Any) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown transfer field: {name}")
        setattr(self, name, value)
        self.touched.add(name)

    def mark_all_touched(self) -> None:
        self.touched = set(FIELDS)

    def validate(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        from_id = _parse_id(self.from_id)
        to_id = _parse_id(self.to_id)
        if from_id is None:
            errors["from_id"] = "Origem é obrigatória." if is_blank(self.from_id) else "Origem inválida."
        if to_id is None:
            errors["to_id"] = "Destino é obrigatório." if is_blank(self.to_id) else "Destino inválido."
        elif from_id is not None and from_id == to_id:
            errors["to_id"] = "Destino deve ser diferente da origem."
        amount = parse_number(self.amount)
        if is_blank(self.amount):
            errors["amount"] = "Valor é obrigatório."
        elif amount is None:
            errors["amount"] = "Valor deve ser um número."
        elif amount < MIN_AMOUNT:
            errors["amount"] = f"Valor mínimo é {MIN_AMOUNT:.2f}."
        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def errors_for_display(self) -> Dict[str, str]:
        return {name: msg for name, msg in self.validate().items() if name in self.touched}

    def to_request(self) -> TransferRequest:
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors.values()))
        return TransferRequest(
            from_id=_parse_id(self.from_id),
            to_id=_parse_id(self.to_id),
            amount=parse_number(self.amount),
        )


__all__ = ["MIN_AMOUNT", "TransferFormVM"]
