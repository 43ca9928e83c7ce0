from __future__ import annotations

from dataclasses import dataclass
from typing import List

from beneficios.domain.entities import Benefit
from beneficios.domain.ports import BeneficioPort

from .error_mapping import map_api_error


@dataclass
class ListBeneficios:
    port: BeneficioPort

    async def __call__(self) -> List[Benefit]:
        try:
            return list(await self.port.list())
        except Exception as exc:
            raise map_api_error(exc, default_code="LIST_FAILED") from exc
