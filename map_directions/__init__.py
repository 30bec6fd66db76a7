from .directions import DirectionsResult, DirectionsStatus, fetch_directions
from .errors import DecodeError, DirectionsError, MissingCredentialError, RouteRequestError
from .fetching.models import (
    LatLng, RawRequest, Route, RouteModifiers, RouteResponse, RoutingPreference, TravelMode, Units, Waypoint,
)
from .fetching.routes import GoogleMapsRouteFetcher
from .logging_config import configure_logging
from .preprocessing.polyline_decoder import Coordinate, decode, encode

__version__ = "0.1.0"

__all__ = [
    "Coordinate", "DecodeError", "DirectionsError", "DirectionsResult", "DirectionsStatus",
    "GoogleMapsRouteFetcher", "LatLng", "MissingCredentialError", "RawRequest", "Route",
    "RouteModifiers", "RouteRequestError", "RouteResponse", "RoutingPreference", "TravelMode",
    "Units", "Waypoint", "configure_logging", "decode", "encode", "fetch_directions",
]
