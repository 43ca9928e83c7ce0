"""Domain package exports for value objects and ports."""

from .entities import Benefit, BenefitId, TransferRequest
from .ports import BeneficioPort, ConfirmFn, UseCaseError

__all__ = [
    "Benefit",
    "BenefitId",
    "BeneficioPort",
    "ConfirmFn",
    "TransferRequest",
    "UseCaseError",
]
