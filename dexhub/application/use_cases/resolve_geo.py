from __future__ import annotations

import logging

from dexhub.application.dto.geo import ResolveGeoInput
from dexhub.application.ports.geo_lookup_port import GeoLookupPort
from dexhub.domain.entities.geo import GeoLocation
from dexhub.domain.exceptions import UpstreamUnavailableError
from dexhub.domain.services.client_ip import extract_client_ip, is_resolvable_ip


logger = logging.getLogger(__name__)


class ResolveGeoUseCase:
    def __init__(self, *, geo_lookup_port: GeoLookupPort):
        self._geo_lookup_port = geo_lookup_port

    def execute(self, command: ResolveGeoInput) -> GeoLocation:
        ip = extract_client_ip(command.headers)
        if not is_resolvable_ip(ip):
            return GeoLocation(ip=ip)
        try:
            return self._geo_lookup_port.lookup(ip=ip)
        except UpstreamUnavailableError as exc:
            logger.warning("resolve_geo: lookup_failed ip=%s error=%s", ip, exc)
            return GeoLocation(ip=ip)
