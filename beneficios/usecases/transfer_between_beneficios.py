from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from beneficios.domain.entities import TransferRequest
from beneficios.domain.ports import BeneficioPort, UseCaseError

from .error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)


@dataclass
class TransferBetweenBeneficios:
    """Submit a transfer; atomicity is the backend's responsibility."""

    port: BeneficioPort

    async def __call__(self, request: TransferRequest) -> None:
        if request.from_id == request.to_id:
            raise UseCaseError("INVALID_PARAMS", "Origem e destino devem ser diferentes.")
        if not request.amount > 0 or not math.isfinite(request.amount):
            raise UseCaseError("INVALID_PARAMS", "Valor da transferência deve ser positivo.")
        LOGGER.info(
            "Transfer requested: from=%s to=%s amount=%s",
            request.from_id,
            request.to_id,
            request.amount,
        )
        try:
            await self.port.transfer(request)
        except Exception as exc:
            raise map_api_error(exc, default_code="TRANSFER_FAILED") from exc
