from __future__ import annotations

from typing import Protocol

from dexhub.domain.entities.pool import PoolListing


class PoolListingSourcePort(Protocol):
    source: str

    def fetch_pools(self) -> list[PoolListing]:
        ...
