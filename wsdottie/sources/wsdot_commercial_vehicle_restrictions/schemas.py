"""Models for the WSDOT Commercial Vehicle Restrictions API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotModel
from wsdottie.sources.shared import RoadwayLocation


class CommercialVehicleRestriction(WsdotModel):
    """Weight, size or axle restriction on a bridge or road segment."""

    BLMaxAxle: Optional[int] = None
    BridgeName: Optional[str] = None
    BridgeNumber: Optional[str] = None
    CL8MaxAxle: Optional[int] = None
    DateEffective: Optional[datetime] = None
    DateExpires: Optional[datetime] = None
    DatePosted: Optional[datetime] = None
    EndRoadwayLocation: Optional[RoadwayLocation] = None
    IsDetourAvailable: Optional[bool] = None
    IsExceptionsAllowed: Optional[bool] = None
    IsPermanentRestriction: Optional[bool] = None
    IsWarning: Optional[bool] = None
    Latitude: Optional[float] = None
    LocationDescription: Optional[str] = None
    LocationName: Optional[str] = None
    Longitude: Optional[float] = None
    MaximumGrossVehicleWeightInPounds: Optional[int] = None
    RestrictionComment: Optional[str] = None
    RestrictionHeightInInches: Optional[int] = None
    RestrictionLengthInInches: Optional[int] = None
    RestrictionType: Optional[int] = Field(
        default=None, description="0 = Bridge, 1 = Road."
    )
    RestrictionWeightInPounds: Optional[int] = None
    RestrictionWidthInInches: Optional[int] = None
    SAMaxAxle: Optional[int] = None
    StartRoadwayLocation: Optional[RoadwayLocation] = None
    State: Optional[str] = None
    StateRouteID: Optional[str] = None
    TDMaxAxle: Optional[int] = None
    VehicleType: Optional[str] = None


class CommercialVehicleRestrictionWithId(CommercialVehicleRestriction):
    UniqueID: Optional[str] = None
