"""Models for the WSDOT Travel Times API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel
from wsdottie.sources.shared import RoadwayLocation


class TravelTimeIdInput(WsdotInput):
    TravelTimeID: int


class TravelTimeRoute(WsdotModel):
    AverageTime: Optional[int] = Field(default=None, description="Typical travel time in minutes.")
    CurrentTime: Optional[int] = Field(default=None, description="Current travel time in minutes.")
    Description: Optional[str] = None
    Distance: Optional[float] = None
    EndPoint: Optional[RoadwayLocation] = None
    Name: Optional[str] = None
    StartPoint: Optional[RoadwayLocation] = None
    TimeUpdated: Optional[datetime] = None
    TravelTimeID: int
