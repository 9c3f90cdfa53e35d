from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoLocation:
    ip: str
    country: str | None = None
    city: str | None = None
    region: str | None = None
