from .google_maps_routes_request import (
    Endpoint,
    LatLng,
    Location,
    RawRequest,
    RouteModifiers,
    RouteRequest,
    RoutingPreference,
    TravelMode,
    Units,
    Waypoint,
)
from .google_maps_routes_response import Leg, Route, RoutePolyline, RouteResponse, Step, Viewport

__all__ = [
    "Endpoint", "LatLng", "Location", "RawRequest", "RouteModifiers", "RouteRequest",
    "RoutingPreference", "TravelMode", "Units", "Waypoint",
    "Leg", "Route", "RoutePolyline", "RouteResponse", "Step", "Viewport",
]
