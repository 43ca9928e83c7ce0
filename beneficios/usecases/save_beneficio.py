from __future__ import annotations

import logging
from dataclasses import dataclass

from beneficios.domain.entities import Benefit
from beneficios.domain.ports import BeneficioPort

from .error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)


@dataclass
class SaveBeneficio:
    """Create or update depending on whether the benefit already has an id.

    Updates forward ``version`` untouched; the backend decides whether it is
    stale and answers 409, which surfaces as ``UseCaseError("CONFLICT")``.
    """

    port: BeneficioPort

    async def __call__(self, benefit: Benefit) -> Benefit:
        try:
            if benefit.is_new:
                saved = await self.port.create(benefit)
                LOGGER.info("Created benefit id=%s", saved.id)
            else:
                saved = await self.port.update(benefit.id, benefit)
                LOGGER.info("Updated benefit id=%s version=%s", saved.id, saved.version)
        except Exception as exc:
            raise map_api_error(exc, default_code="SAVE_FAILED") from exc
        return saved
