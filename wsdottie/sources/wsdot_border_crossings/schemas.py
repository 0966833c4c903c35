"""Models for the WSDOT Border Crossings API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotModel
from wsdottie.sources.shared import RoadwayLocation


class BorderCrossing(WsdotModel):
    BorderCrossingLocation: Optional[RoadwayLocation] = None
    CrossingName: Optional[str] = Field(default=None, description="Crossing and lane, e.g. 'I5General'.")
    Time: Optional[datetime] = None
    WaitTime: int = Field(description="Current wait in minutes; -1 when unavailable.")
