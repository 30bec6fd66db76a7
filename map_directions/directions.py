import structlog
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional
from haversine import haversine, Unit
from .errors import DecodeError, RouteRequestError
from .fetching.models import Endpoint, RawRequest, Route, TravelMode, Units
from .fetching.routes import GoogleMapsRouteFetcher
from .preprocessing.polyline_decoder import DEFAULT_PRECISION, Coordinate, decode, scale_factor

logger = structlog.get_logger(__name__)


class DirectionsStatus(str, Enum):
    OK = "OK"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INCOMPLETE_REQUEST = "INCOMPLETE_REQUEST"
    EMPTY_RESULT = "EMPTY_RESULT"
    ERROR = "ERROR"


@dataclass(frozen=True)
class DirectionsResult:
    status: DirectionsStatus
    route: Optional[Route] = None
    coordinates: Optional[list[Coordinate]] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status is DirectionsStatus.OK

    @property
    def distance_meters(self) -> Optional[int]:
        return self.route.distanceMeters if self.route else None

    @property
    def duration_s(self) -> Optional[float]:
        if not self.route or not self.route.duration:
            return None
        return float(self.route.duration.replace('s', ''))

    @property
    def path_length_m(self) -> Optional[float]:
        if self.coordinates is None:
            return None
        return sum(haversine(start, end, unit=Unit.METERS) for start, end in zip(self.coordinates, self.coordinates[1:]))


def fetch_directions(origin: Optional[Endpoint],
                     destination: Optional[Endpoint],
                     api_key: Optional[str],
                     travel_mode: Optional[TravelMode] = None,
                     language_code: str = "en-US",
                     units: Units = Units.METRIC,
                     precision: int = DEFAULT_PRECISION,
                     on_start: Optional[Callable[[RawRequest], Any]] = None,
                     on_ready: Optional[Callable[[Route], Any]] = None,
                     on_error: Optional[Callable[[Exception], Any]] = None,
                     fetcher: Optional[GoogleMapsRouteFetcher] = None,
                     timeout: Optional[float] = None) -> DirectionsResult:
    if not api_key:
        logger.info("directions.skipped", reason=DirectionsStatus.MISSING_CREDENTIAL.value)
        return DirectionsResult(DirectionsStatus.MISSING_CREDENTIAL)

    if not origin or not destination:
        logger.debug("directions.skipped", reason=DirectionsStatus.INCOMPLETE_REQUEST.value)
        return DirectionsResult(DirectionsStatus.INCOMPLETE_REQUEST)

    try:
        scale_factor(precision)
    except ValueError as e:
        return _failed(e, on_error)

    request = RawRequest(
        origin=origin,
        destination=destination,
        travelMode=travel_mode,
        languageCode=language_code,
        units=units,
    )

    if on_start:
        on_start(request)

    if fetcher is not None:
        return _fetch_and_decode(fetcher, api_key, request, precision, on_ready, on_error, timeout)
    with GoogleMapsRouteFetcher() as owned_fetcher:
        return _fetch_and_decode(owned_fetcher, api_key, request, precision, on_ready, on_error, timeout)


def _fetch_and_decode(fetcher: GoogleMapsRouteFetcher,
                      api_key: str,
                      request: RawRequest,
                      precision: int,
                      on_ready: Optional[Callable[[Route], Any]],
                      on_error: Optional[Callable[[Exception], Any]],
                      timeout: Optional[float]) -> DirectionsResult:
    try:
        response = fetcher.get_route(api_key, request, timeout=timeout)
        if not response.routes:
            logger.info("directions.empty_result")
            return DirectionsResult(DirectionsStatus.EMPTY_RESULT)

        route = response.routes[0]
        encoded_polyline = route.encoded_polyline
        coordinates = decode(encoded_polyline, precision) if encoded_polyline else None
    except (RouteRequestError, DecodeError) as e:
        return _failed(e, on_error)

    if on_ready:
        on_ready(route)

    return DirectionsResult(DirectionsStatus.OK, route=route, coordinates=coordinates)


def _failed(error: Exception, on_error: Optional[Callable[[Exception], Any]]) -> DirectionsResult:
    logger.warning("directions.failed", error=str(error), error_type=type(error).__name__)
    if on_error:
        on_error(error)
    return DirectionsResult(DirectionsStatus.ERROR, error=error)
