from __future__ import annotations

from dataclasses import dataclass

from beneficios.domain.entities import BenefitId
from beneficios.domain.ports import BeneficioPort

from .error_mapping import map_api_error


@dataclass
class DeleteBeneficio:
    port: BeneficioPort

    async def __call__(self, benefit_id: BenefitId) -> None:
        try:
            await self.port.delete(benefit_id)
        except Exception as exc:
            raise map_api_error(exc, default_code="DELETE_FAILED") from exc
