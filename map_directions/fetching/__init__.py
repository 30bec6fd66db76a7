from .routes import GoogleMapsRouteFetcher

__all__ = ["GoogleMapsRouteFetcher"]
