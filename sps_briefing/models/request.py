"""
Request Models.

Pydantic models for the briefing, geocode, route and road-event endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field, validator

from sps_briefing.data_models import Coordinate


def _check_lat(v):
    if v is not None and not (-90 <= v <= 90):
        raise ValueError(f"Invalid latitude: {v}. Must be between -90 and 90.")
    return v


def _check_lng(v):
    if v is not None and not (-180 <= v <= 180):
        raise ValueError(f"Invalid longitude: {v}. Must be between -180 and 180.")
    return v


def _check_pair(lng, values, lat_field: str):
    """Latitude and longitude must be given together."""
    if (values.get(lat_field) is None) != (lng is None):
        raise ValueError(f"{lat_field} and its longitude must be provided together")
    return lng


class BriefingRequest(BaseModel):
    """
    Request for a full dispatch briefing.

    The origin is either free text or a coordinate pair, never both.
    """
    community: str = Field(..., min_length=1, description="Destination community, e.g. 'Pemberton'")
    fire_number: Optional[str] = Field(None, description="Incident number to single out, e.g. 'K71234'")
    origin: Optional[str] = Field(None, description="Departure point as free text")
    origin_lat: Optional[float] = Field(None, description="Departure latitude")
    origin_lng: Optional[float] = Field(None, description="Departure longitude")

    @validator('community')
    def validate_community(cls, v):
        if not v.strip():
            raise ValueError("Community must not be blank")
        return v.strip()

    @validator('origin_lat')
    def validate_origin_lat(cls, v):
        return _check_lat(v)

    @validator('origin_lng', always=True)
    def validate_origin_lng(cls, v, values):
        _check_lng(v)
        _check_pair(v, values, 'origin_lat')
        if v is not None and values.get('origin'):
            raise ValueError("Give either origin text or origin coordinates, not both")
        return v

    def origin_value(self):
        """Coordinate, free text or None."""
        if self.origin_lat is not None and self.origin_lng is not None:
            return Coordinate(self.origin_lat, self.origin_lng)
        if self.origin and self.origin.strip():
            return self.origin.strip()
        return None


class GeocodeRequest(BaseModel):
    address: str = Field(..., min_length=1, description="Place name or address")

    @validator('address')
    def validate_address(cls, v):
        if not v.strip():
            raise ValueError("Address must not be blank")
        return v.strip()


class RouteRequest(BaseModel):
    """Drive estimate between two coordinates."""
    origin_lat: float = Field(..., description="Origin latitude")
    origin_lng: float = Field(..., description="Origin longitude")
    dest_lat: float = Field(..., description="Destination latitude")
    dest_lng: float = Field(..., description="Destination longitude")
    origin: Optional[str] = Field(None, description="Origin address passed to directions")
    destination: Optional[str] = Field(None, description="Destination address passed to directions")

    @validator('origin_lat', 'dest_lat')
    def validate_lat(cls, v):
        return _check_lat(v)

    @validator('origin_lng', 'dest_lng')
    def validate_lng(cls, v):
        return _check_lng(v)


class RoadEventsRequest(BaseModel):
    """
    Road events around a point, or along the corridor between two points.

    Corridor mode is used when both origin and destination are given.
    """
    lat: Optional[float] = Field(None, description="Point-mode latitude")
    lng: Optional[float] = Field(None, description="Point-mode longitude")
    radius_km: Optional[float] = Field(None, gt=0, le=500, description="Point-mode radius in km")
    origin_lat: Optional[float] = Field(None, description="Corridor start latitude")
    origin_lng: Optional[float] = Field(None, description="Corridor start longitude")
    dest_lat: Optional[float] = Field(None, description="Corridor end latitude")
    dest_lng: Optional[float] = Field(None, description="Corridor end longitude")

    @validator('lat', 'origin_lat', 'dest_lat')
    def validate_lat(cls, v):
        return _check_lat(v)

    @validator('lng', always=True)
    def validate_point_lng(cls, v, values):
        return _check_pair(_check_lng(v), values, 'lat')

    @validator('origin_lng', always=True)
    def validate_origin_lng(cls, v, values):
        return _check_pair(_check_lng(v), values, 'origin_lat')

    @validator('dest_lng', always=True)
    def validate_dest_lng(cls, v, values):
        _check_pair(_check_lng(v), values, 'dest_lat')
        has_point = values.get('lat') is not None
        has_corridor = values.get('origin_lat') is not None and v is not None
        if not has_point and not has_corridor:
            raise ValueError("Provide lat/lng, or origin and destination coordinates")
        return v

    def center(self) -> Optional[Coordinate]:
        return Coordinate(self.lat, self.lng) if self.lat is not None else None

    def origin(self) -> Optional[Coordinate]:
        return Coordinate(self.origin_lat, self.origin_lng) if self.origin_lat is not None else None

    def destination(self) -> Optional[Coordinate]:
        return Coordinate(self.dest_lat, self.dest_lng) if self.dest_lat is not None else None
