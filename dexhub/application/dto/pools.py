from __future__ import annotations

from dataclasses import dataclass, field

from dexhub.domain.entities.pool import PoolListing


@dataclass(frozen=True)
class ListPoolsOutput:
    pools: list[PoolListing] = field(default_factory=list)
    source: str | None = None
    error: str | None = None
    details: str | None = None
