"""Models for the WSDOT Bridge Clearances API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel


class RouteInput(WsdotInput):
    route: str = Field(description="State route number with leading zeros, e.g. '005'.")


class BridgeClearance(WsdotModel):
    """Vertical clearance of one structure over or under a state route."""

    APILastUpdate: Optional[datetime] = None
    BridgeNumber: Optional[str] = None
    ControlEntityGuid: Optional[str] = None
    CrossingDescription: Optional[str] = None
    CrossingLocationId: Optional[int] = None
    CrossingRecordGuid: Optional[str] = None
    InventoryDirection: Optional[str] = None
    Latitude: Optional[float] = None
    LocationGuid: Optional[str] = None
    Longitude: Optional[float] = None
    RouteDate: Optional[datetime] = None
    SRMP: Optional[float] = Field(default=None, description="State route milepost.")
    SRMPAheadBackIndicator: Optional[str] = None
    StateRouteID: Optional[str] = None
    StateStructureId: Optional[str] = None
    VerticalClearanceMaximumFeetInch: Optional[str] = None
    VerticalClearanceMaximumInches: Optional[int] = None
    VerticalClearanceMinimumFeetInch: Optional[str] = None
    VerticalClearanceMinimumInches: Optional[int] = None
