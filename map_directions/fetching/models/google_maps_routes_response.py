from typing import Any, Optional
from pydantic import BaseModel
from .google_maps_routes_request import LatLng, Location

class RoutePolyline(BaseModel):
    encodedPolyline: Optional[str] = None

class LocalizedText(BaseModel):
    text: Optional[str] = None

class StepLocalizedValues(BaseModel):
    distance: Optional[LocalizedText] = None
    staticDuration: Optional[LocalizedText] = None

class LegLocalizedValues(StepLocalizedValues):
    duration: Optional[LocalizedText] = None

class NavigationInstruction(BaseModel):
    maneuver: Optional[str] = None
    instructions: Optional[str] = None

class Step(BaseModel):
    distanceMeters: Optional[int] = None
    staticDuration: Optional[str] = None
    polyline: Optional[RoutePolyline] = None
    startLocation: Optional[Location] = None
    endLocation: Optional[Location] = None
    navigationInstruction: Optional[NavigationInstruction] = None
    localizedValues: Optional[StepLocalizedValues] = None
    travelMode: Optional[str] = None

class Leg(BaseModel):
    distanceMeters: Optional[int] = None
    duration: Optional[str] = None
    staticDuration: Optional[str] = None
    polyline: Optional[RoutePolyline] = None
    startLocation: Optional[Location] = None
    endLocation: Optional[Location] = None
    steps: list[Step] = []
    localizedValues: Optional[LegLocalizedValues] = None

class Viewport(BaseModel):
    low: LatLng
    high: LatLng

class Route(BaseModel):
    legs: list[Leg] = []
    distanceMeters: Optional[int] = None
    duration: Optional[str] = None
    staticDuration: Optional[str] = None
    polyline: Optional[RoutePolyline] = None
    description: Optional[str] = None
    warnings: list[str] = []
    viewport: Optional[Viewport] = None
    travelAdvisory: Optional[dict[str, Any]] = None
    localizedValues: Optional[LegLocalizedValues] = None
    routeLabels: list[str] = []
    polylineDetails: Optional[dict[str, Any]] = None

    @property
    def encoded_polyline(self) -> Optional[str]:
        return self.polyline.encodedPolyline if self.polyline else None

class RouteResponse(BaseModel):
    routes: Optional[list[Route]] = []
