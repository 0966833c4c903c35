"""Models shared by several WSDOT Traveler Information APIs."""

from __future__ import annotations

from typing import Optional

from wsdottie.endpoints.types import WsdotModel


class RoadwayLocation(WsdotModel):
    """A point on a state highway."""

    Description: Optional[str] = None
    Direction: Optional[str] = None
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    MilePost: Optional[float] = None
    RoadName: Optional[str] = None
