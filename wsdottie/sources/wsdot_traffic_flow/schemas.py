"""Models for the WSDOT Traffic Flow API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel
from wsdottie.sources.shared import RoadwayLocation


class FlowDataIdInput(WsdotInput):
    FlowDataID: int


class TrafficFlow(WsdotModel):
    FlowDataID: int
    FlowReadingValue: int = Field(
        description="0 unknown, 1 wide open, 2 moderate, 3 heavy, 4 stop and go, 5 no data.",
    )
    FlowStationLocation: Optional[RoadwayLocation] = None
    Region: Optional[str] = None
    StationName: Optional[str] = None
    Time: Optional[datetime] = None
