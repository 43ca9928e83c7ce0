from __future__ import annotations

from dataclasses import dataclass

from beneficios.domain.entities import Benefit, BenefitId
from beneficios.domain.ports import BeneficioPort

from .error_mapping import map_api_error


@dataclass
class LoadBeneficio:
    port: BeneficioPort

    async def __call__(self, benefit_id: BenefitId) -> Benefit:
        try:
            return await self.port.get(benefit_id)
        except Exception as exc:
            raise map_api_error(exc, default_code="LOAD_FAILED") from exc
