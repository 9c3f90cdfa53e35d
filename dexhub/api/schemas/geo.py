from __future__ import annotations

from pydantic import BaseModel


class GeoResponse(BaseModel):
    country: str | None = None
    city: str | None = None
    region: str | None = None
    ip: str
