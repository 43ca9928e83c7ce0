from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List

from beneficios.domain.entities import Benefit, BenefitId, TransferRequest
from beneficios.domain.ports import BeneficioPort

from .api_errors import ApiConflictError, ApiNotFoundError, ApiValidationError


@dataclass
class BeneficioMock(BeneficioPort):
    """Offline substitute for ``BeneficioRestAdapter`` with backend semantics.

    Ids are assigned sequentially, ``version`` starts at 0 and is bumped on
    every update, and stale versions are rejected with a 409.
    """

    seed: Iterable[Benefit] = ()
    calls: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._rows: Dict[BenefitId, Benefit] = {}
        self._next_id = 1
        for benefit in self.seed:
            self._insert(benefit)

    def _insert(self, benefit: Benefit) -> Benefit:
        benefit_id = benefit.id if benefit.id is not None else self._next_id
        self._next_id = max(self._next_id, benefit_id + 1)
        stored = replace(
            benefit,
            id=benefit_id,
            version=benefit.version if benefit.version is not None else 0,
        )
        self._rows[benefit_id] = stored
        return stored

    def _require(self, benefit_id: BenefitId) -> Benefit:
        try:
            return self._rows[benefit_id]
        except KeyError:
            raise ApiNotFoundError(
                f"Beneficio não encontrado: {benefit_id}",
                status=404,
                payload={"message": f"Beneficio não encontrado: {benefit_id}"},
                context=f"mock[{benefit_id}]",
            ) from None

    # ---------- BeneficioPort ----------

    async def list(self) -> List[Benefit]:
        self.calls.append("list")
        return list(self._rows.values())

    async def get(self, benefit_id: BenefitId) -> Benefit:
        self.calls.append(f"get:{benefit_id}")
        return self._require(benefit_id)

    async def create(self, benefit: Benefit) -> Benefit:
        self.calls.append("create")
        return self._insert(replace(benefit, id=None, version=None))

    async def update(self, benefit_id: BenefitId, benefit: Benefit) -> Benefit:
        self.calls.append(f"update:{benefit_id}")
        current = self._require(benefit_id)
        if benefit.version is not None and benefit.version != current.version:
            raise ApiConflictError(
                "Registro alterado por outro usuário.",
                status=409,
                payload={"message": f"Versão {benefit.version} desatualizada (atual: {current.version})."},
                context=f"mock[{benefit_id}]",
            )
        stored = replace(benefit, id=benefit_id, version=(current.version or 0) + 1)
        self._rows[benefit_id] = stored
        return stored

    async def delete(self, benefit_id: BenefitId) -> None:
        self.calls.append(f"delete:{benefit_id}")
        self._require(benefit_id)
        del self._rows[benefit_id]

    async def transfer(self, request: TransferRequest) -> None:
        self.calls.append(f"transfer:{request.from_id}->{request.to_id}")
        if request.from_id == request.to_id:
            raise self._invalid("Origem e destino devem ser diferentes.")
        if not request.amount > 0:
            raise self._invalid("Valor da transferência deve ser positivo.")
        source = self._require(request.from_id)
        target = self._require(request.to_id)
        if source.valor < request.amount:
            raise self._invalid("Saldo insuficiente.")
        self._rows[source.id] = replace(
            source, valor=source.valor - request.amount, version=(source.version or 0) + 1
        )
        self._rows[target.id] = replace(
            target, valor=target.valor + request.amount, version=(target.version or 0) + 1
        )

    @staticmethod
    def _invalid(message: str) -> ApiValidationError:
        return ApiValidationError(
            message,
            status=422,
            hint=message,
            payload={"message": message},
            context="mock[transfer]",
        )


__all__ = ["BeneficioMock"]
