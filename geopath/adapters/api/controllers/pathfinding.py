from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geopath.adapters.api.dependencies import (
    get_location_service,
    get_pathfinding_service,
)
from geopath.adapters.api.schemas.pathfinding import (
    AlgorithmSchema,
    FindPathRequestSchema,
    FindPathResponseSchema,
    GeocodeRequestSchema,
    GeoPointSchema,
    IpLocationSchema,
    LocationSchema,
    PlaceSchema,
    WaypointSchema,
)
from geopath.app.services.location_service import LocationService
from geopath.app.services.pathfinding_service import (
    Location,
    PathfindingService,
    PlannedPath,
)
from geopath.domain.models import Algorithm, GeoPoint, Place

router = APIRouter(prefix="/api/pathfinding", tags=["pathfinding"])


def _to_location(value: LocationSchema) -> Location:
    if isinstance(value, GeoPointSchema):
        return GeoPoint(lat=value.lat, lng=value.lng)
    return value.strip()


def _point_schema(point: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=point.lat, lng=point.lng)


def _planned_path_to_schema(planned: PlannedPath) -> FindPathResponseSchema:
    result = planned.result
    return FindPathResponseSchema(
        path=[WaypointSchema(id=w.id, lat=w.lat, lng=w.lng) for w in result.path],
        distance=result.distance_km,
        algorithm=result.algorithm.display_name,
        start_location=_point_schema(planned.start),
        destination=_point_schema(planned.destination),
        expanded_nodes=result.expanded,
    )


def _place_to_schema(place: Place) -> PlaceSchema:
    return PlaceSchema(
        lat=place.location.lat,
        lng=place.location.lng,
        display_name=place.display_name,
        address=dict(place.address),
    )


@router.post("/find-path", response_model=FindPathResponseSchema)
async def find_path(
    req: FindPathRequestSchema,
    service: PathfindingService = Depends(get_pathfinding_service),
) -> FindPathResponseSchema:
    planned = await service.find_path(
        start=_to_location(req.start_location),
        destination=_to_location(req.destination),
        algorithm=Algorithm(req.algorithm),
    )
    if not planned.result.found:
        raise HTTPException(status_code=404, detail=planned.result.error_message)
    return _planned_path_to_schema(planned)


@router.post("/geocode", response_model=PlaceSchema)
async def geocode(
    req: GeocodeRequestSchema,
    service: LocationService = Depends(get_location_service),
) -> PlaceSchema:
    place = await service.geocode(address=req.address)
    return _place_to_schema(place)


@router.post("/reverse-geocode", response_model=PlaceSchema)
async def reverse_geocode(
    req: GeoPointSchema,
    service: LocationService = Depends(get_location_service),
) -> PlaceSchema:
    place = await service.reverse_geocode(point=GeoPoint(lat=req.lat, lng=req.lng))
    return _place_to_schema(place)


@router.get("/current-location", response_model=IpLocationSchema)
async def current_location(
    service: LocationService = Depends(get_location_service),
) -> IpLocationSchema:
    found = await service.current_location()
    return IpLocationSchema(
        lat=found.location.lat,
        lng=found.location.lng,
        city=found.city,
        country=found.country,
    )


@router.get("/algorithms", response_model=list[AlgorithmSchema])
def list_algorithms() -> list[AlgorithmSchema]:
    return [AlgorithmSchema(**entry) for entry in PathfindingService.list_algorithms()]
