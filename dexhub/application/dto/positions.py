from __future__ import annotations

from dataclasses import dataclass

from dexhub.domain.entities.position import LpPool, Position


@dataclass(frozen=True)
class GetPositionsInput:
    chain_id: str
    address: str


@dataclass(frozen=True)
class GetPositionsOutput:
    chain_id: str
    positions: list[Position] | None = None
    pools: list[LpPool] | None = None
    source: str | None = None
    error: str | None = None
