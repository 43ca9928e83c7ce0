from __future__ import annotations

from typing import Any, List

import requests

from beneficios.domain.entities import Benefit, BenefitId, TransferRequest
from beneficios.domain.ports import BeneficioPort

from .api_errors import ApiError
from .http_client import HttpTransport


class BeneficioRestAdapter(BeneficioPort):
    """Stateless REST adapter: each port call maps to exactly one HTTP call."""

    def __init__(self, transport: HttpTransport, *, transfer_path: str = "/transfer") -> None:
        self.transport = transport
        self.transfer_path = transfer_path

    async def list(self) -> List[Benefit]:
        resp = await self.transport.request("GET", "/")
        data = self._json_any(resp, "list")
        if not isinstance(data, list):
            raise ApiError("list: expected list response", payload=data, context="list")
        return [self._parse(entry, f"list[{index}]") for index, entry in enumerate(data)]

    async def get(self, benefit_id: BenefitId) -> Benefit:
        resp = await self.transport.request("GET", f"/{int(benefit_id)}")
        return self._benefit(resp, f"get[{benefit_id}]")

    async def create(self, benefit: Benefit) -> Benefit:
        # The server assigns the id; never send one on create.
        resp = await self.transport.request("POST", "/", benefit.to_payload(include_id=False))
        return self._benefit(resp, "create")

    async def update(self, benefit_id: BenefitId, benefit: Benefit) -> Benefit:
        resp = await self.transport.request(
            "PUT", f"/{int(benefit_id)}", benefit.to_payload(include_id=True)
        )
        return self._benefit(resp, f"update[{benefit_id}]")

    async def delete(self, benefit_id: BenefitId) -> None:
        await self.transport.request("DELETE", f"/{int(benefit_id)}")

    async def transfer(self, request: TransferRequest) -> None:
        await self.transport.request("POST", self.transfer_path, request.to_payload())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @classmethod
    def _benefit(cls, resp: requests.Response, ctx: str) -> Benefit:
        return cls._parse(cls._json_any(resp, ctx), ctx)

    @staticmethod
    def _parse(data: Any, ctx: str) -> Benefit:
        if not isinstance(data, dict):
            raise ApiError(f"{ctx}: expected object", payload=data, context=ctx)
        try:
            return Benefit.from_payload(data)
        except ValueError as exc:
            raise ApiError(f"{ctx}: {exc}", payload=data, context=ctx) from exc

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc


__all__ = ["BeneficioRestAdapter"]
