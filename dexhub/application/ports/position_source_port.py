from __future__ import annotations

from typing import Protocol

from dexhub.domain.entities.position import LpPool, Position


class PositionSourcePort(Protocol):
    source: str

    def fetch_positions(self, *, address: str) -> list[Position]:
        ...


class LpPoolSourcePort(Protocol):
    source: str

    def fetch_pools(self) -> list[LpPool]:
        ...
