from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


LocationSchema = Union[GeoPointSchema, str]


class FindPathRequestSchema(BaseModel):
    start_location: LocationSchema
    destination: LocationSchema
    algorithm: Literal["dijkstra", "astar"]

    @field_validator("algorithm", mode="before")
    @classmethod
    def _lowercase_algorithm(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("start_location", "destination")
    @classmethod
    def _non_blank_address(cls, value: LocationSchema) -> LocationSchema:
        if isinstance(value, str) and not value.strip():
            raise ValueError("Address must not be empty")
        return value


class WaypointSchema(BaseModel):
    id: int | str
    lat: float
    lng: float


class FindPathResponseSchema(BaseModel):
    path: list[WaypointSchema]
    distance: float
    algorithm: str
    start_location: GeoPointSchema
    destination: GeoPointSchema
    units: Literal["kilometers"] = "kilometers"
    expanded_nodes: int = 0


class GeocodeRequestSchema(BaseModel):
    address: str = Field(..., min_length=1)


class PlaceSchema(BaseModel):
    lat: float
    lng: float
    display_name: str | None = None
    address: dict[str, str] = {}


class IpLocationSchema(BaseModel):
    lat: float
    lng: float
    city: str | None = None
    country: str | None = None


class AlgorithmSchema(BaseModel):
    id: str
    name: str
    description: str
