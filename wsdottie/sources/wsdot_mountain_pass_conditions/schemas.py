"""Models for the WSDOT Mountain Pass Conditions API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from wsdottie.endpoints.types import WsdotInput, WsdotModel


class PassConditionIdInput(WsdotInput):
    PassConditionID: int


class TravelRestriction(WsdotModel):
    TravelDirection: Optional[str] = None
    RestrictionText: Optional[str] = None


class MountainPassCondition(WsdotModel):
    DateUpdated: Optional[datetime] = None
    ElevationInFeet: Optional[int] = None
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    MountainPassId: int
    MountainPassName: Optional[str] = None
    RestrictionOne: Optional[TravelRestriction] = None
    RestrictionTwo: Optional[TravelRestriction] = None
    RoadCondition: Optional[str] = None
    TemperatureInFahrenheit: Optional[int] = None
    TravelAdvisoryActive: Optional[bool] = None
    WeatherCondition: Optional[str] = None
