from typing import Optional


class DirectionsError(Exception):
    pass


class MissingCredentialError(DirectionsError):
    def __init__(self, message: str = "Google Maps API Key is missing. Pass it explicitly or set GOOGLE_MAPS_API_KEY."):
        super().__init__(message)


class RouteRequestError(DirectionsError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code: Optional[int] = status_code


class DecodeError(DirectionsError, ValueError):
    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (position {position})")
        self.position: int = position
