from __future__ import annotations

from typing import Awaitable, Callable, List, Optional, Protocol, Union

from .entities import Benefit, BenefitId, TransferRequest


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


# ---- Ports (Hexagonal boundaries) ----
class BeneficioPort(Protocol):
    """CRUD and transfer operations against the benefícios REST API."""

    async def list(self) -> List[Benefit]: ...
    async def get(self, benefit_id: BenefitId) -> Benefit: ...
    async def create(self, benefit: Benefit) -> Benefit: ...
    async def update(self, benefit_id: BenefitId, benefit: Benefit) -> Benefit: ...
    async def delete(self, benefit_id: BenefitId) -> None: ...
    async def transfer(self, request: TransferRequest) -> None: ...


# Yes/no gate in front of destructive actions; may be sync or async.
ConfirmFn = Callable[[str], Union[bool, Awaitable[bool]]]
