from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from dexhub.api.deps import get_resolve_geo_use_case
from dexhub.api.schemas.geo import GeoResponse
from dexhub.application.dto.geo import ResolveGeoInput
from dexhub.application.use_cases.resolve_geo import ResolveGeoUseCase

router = APIRouter()


@router.api_route("/v1/geo", methods=["GET", "POST"], response_model=GeoResponse)
def resolve_geo(
    request: Request,
    use_case: ResolveGeoUseCase = Depends(get_resolve_geo_use_case),
):
    location = use_case.execute(ResolveGeoInput(headers=dict(request.headers)))
    return GeoResponse(
        country=location.country,
        city=location.city,
        region=location.region,
        ip=location.ip,
    )
