import requests
import structlog
from typing import Any, Optional, Union
from pydantic import ValidationError
from ..config import get_api_key
from ..errors import MissingCredentialError, RouteRequestError
from ..preprocessing.polyline_decoder import decode
from .models.google_maps_routes_request import (
    Endpoint, LatLng, Location, RawRequest, RouteRequest, RoutingPreference, TravelMode, Units, Waypoint,
)
from .models.google_maps_routes_response import RouteResponse

__all__ = ["GoogleMapsRouteFetcher", "decode"]

logger = structlog.get_logger(__name__)

Timeout = Union[None, float, tuple[float, float]]

class GoogleMapsRouteFetcher(requests.Session):
    BASE_URL: str = "https://routes.googleapis.com/directions/v2:computeRoutes"
    HEADERS: dict[str, str] = {
        "Content-Type": "application/json",
        "X-Goog-FieldMask": "*",
    }
    DEFAULT_ROUTING_PREFERENCE: RoutingPreference = RoutingPreference.ROUTING_PREFERENCE_UNSPECIFIED
    DEFAULT_TRAVEL_MODE: TravelMode = TravelMode.TRAVEL_MODE_UNSPECIFIED
    DEFAULT_UNITS: Units = Units.METRIC
    DEFAULT_LANGUAGE_CODE: str = "en-US"

    def __init__(self, api_key: Optional[str] = None):
        super().__init__()
        self.api_key: Optional[str] = api_key or get_api_key()

    def get_route(self, api_key: Optional[str], request: Union[RawRequest, dict[str, Any]],
                  timeout: Timeout = None) -> RouteResponse:
        api_key = api_key or self.api_key
        if not api_key:
            raise MissingCredentialError()

        if not isinstance(request, RawRequest):
            request = RawRequest.model_validate(request)
        req_body = self.build_request_body(request).model_dump(mode="json", exclude_none=True)

        headers = self.HEADERS.copy()
        headers["X-Goog-Api-Key"] = api_key

        logger.debug("route.request", travel_mode=req_body["travelMode"], units=req_body["units"])
        try:
            response = self.post(self.BASE_URL, json=req_body, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            logger.warning("route.request_failed", error=str(e))
            raise RouteRequestError(f"Error on GMAPS route request: {e}") from e

        if not response.ok:
            message = self._error_message(response)
            logger.warning("route.request_failed", status_code=response.status_code, error=message)
            raise RouteRequestError(
                f"Error on GMAPS route request: received status code {response.status_code}: {message}",
                status_code=response.status_code,
            )

        try:
            data = RouteResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("route.parse_failed", status_code=response.status_code, error=str(e))
            raise RouteRequestError(f"Error on GMAPS route request: {e}", status_code=response.status_code) from e

        logger.debug("route.response", route_count=len(data.routes or []))
        return data

    @classmethod
    def build_request_body(cls, request: RawRequest) -> RouteRequest:
        return RouteRequest(
            origin=cls._to_waypoint(request.origin),
            destination=cls._to_waypoint(request.destination),
            routingPreference=request.routingPreference or cls.DEFAULT_ROUTING_PREFERENCE,
            travelMode=request.travelMode or cls.DEFAULT_TRAVEL_MODE,
            units=request.units or cls.DEFAULT_UNITS,
            languageCode=request.languageCode or cls.DEFAULT_LANGUAGE_CODE,
            computeAlternativeRoutes=request.computeAlternativeRoutes or False,
            routeModifiers=request.routeModifiers,
        )

    @staticmethod
    def _to_waypoint(endpoint: Endpoint) -> Waypoint:
        if isinstance(endpoint, LatLng):
            return Waypoint(location=Location(latLng=endpoint))
        return endpoint

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text or response.reason or ""
