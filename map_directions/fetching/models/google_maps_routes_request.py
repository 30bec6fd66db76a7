from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, model_validator


class TravelMode(str, Enum):
    TRAVEL_MODE_UNSPECIFIED = "TRAVEL_MODE_UNSPECIFIED"
    DRIVE = "DRIVE"
    BICYCLE = "BICYCLE"
    WALK = "WALK"
    TWO_WHEELER = "TWO_WHEELER"
    TRANSIT = "TRANSIT"


class RoutingPreference(str, Enum):
    ROUTING_PREFERENCE_UNSPECIFIED = "ROUTING_PREFERENCE_UNSPECIFIED"
    TRAFFIC_UNAWARE = "TRAFFIC_UNAWARE"
    TRAFFIC_AWARE = "TRAFFIC_AWARE"
    TRAFFIC_AWARE_OPTIMAL = "TRAFFIC_AWARE_OPTIMAL"


class Units(str, Enum):
    METRIC = "METRIC"
    IMPERIAL = "IMPERIAL"


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    latLng: LatLng
    heading: Optional[int] = None


class Waypoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    via: Optional[bool] = None
    vehicleStopover: Optional[bool] = None
    sideOfRoad: Optional[bool] = None
    location: Optional[Location] = None
    placeId: Optional[str] = None
    address: Optional[str] = None

    @model_validator(mode="after")
    def require_place(self):
        if self.location is None and not self.placeId and not self.address:
            raise ValueError("Waypoint needs a location, placeId or address")
        return self


class RouteModifiers(BaseModel):
    model_config = ConfigDict(frozen=True)

    avoidTolls: Optional[bool] = None
    avoidHighways: Optional[bool] = None
    avoidFerries: Optional[bool] = None


Endpoint = Union[LatLng, Waypoint]


class RawRequest(BaseModel):
    """Caller-facing request. Endpoints are either bare coordinates or place references."""
    model_config = ConfigDict(frozen=True)

    origin: Endpoint
    destination: Endpoint
    travelMode: Optional[TravelMode] = None
    routingPreference: Optional[RoutingPreference] = None
    units: Optional[Units] = None
    languageCode: Optional[str] = None
    routeModifiers: Optional[RouteModifiers] = None
    computeAlternativeRoutes: Optional[bool] = None


class RouteRequest(BaseModel):
    origin: Waypoint
    destination: Waypoint
    routingPreference: RoutingPreference
    travelMode: TravelMode
    units: Units
    languageCode: str
    computeAlternativeRoutes: bool
    routeModifiers: Optional[RouteModifiers] = None
