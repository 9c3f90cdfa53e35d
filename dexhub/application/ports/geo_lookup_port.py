from __future__ import annotations

from typing import Protocol

from dexhub.domain.entities.geo import GeoLocation


class GeoLookupPort(Protocol):
    def lookup(self, *, ip: str) -> GeoLocation:
        ...
