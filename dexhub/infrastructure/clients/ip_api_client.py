from __future__ import annotations

import logging

import httpx

from dexhub.domain.entities.geo import GeoLocation
from dexhub.domain.exceptions import UpstreamUnavailableError


logger = logging.getLogger(__name__)


class IpApiGeoClient:
    def __init__(self, api_base: str, timeout_seconds: float):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout_seconds

    def lookup(self, *, ip: str) -> GeoLocation:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(
                    f"{self.api_base}/json/{ip}",
                    params={"fields": "status,country,regionName,city"},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError(f"ip-api: {exc}") from exc

        if not isinstance(payload, dict) or payload.get("status") != "success":
            status = payload.get("status") if isinstance(payload, dict) else None
            logger.info("ip_api_client: unresolved ip=%s status=%s", ip, status)
            return GeoLocation(ip=ip)
        logger.info("ip_api_client: resolved ip=%s country=%s", ip, payload.get("country"))
        return GeoLocation(
            ip=ip,
            country=payload.get("country"),
            city=payload.get("city"),
            region=payload.get("regionName"),
        )
