"""Models for the WSF Terminals API.

Every terminal record starts with the same identifying fields
(``TerminalBase``); the per-endpoint models add one facet each and
``TerminalVerbose`` carries all of them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel


class TerminalIdInput(WsdotInput):
    terminalId: int = Field(description="Unique identifier for a terminal.")


class TerminalBase(WsdotModel):
    TerminalID: int
    TerminalSubjectID: Optional[int] = None
    RegionID: Optional[int] = None
    TerminalName: Optional[str] = None
    TerminalAbbrev: Optional[str] = None
    SortSeq: Optional[int] = None


class TerminalBasics(TerminalBase):
    OverheadPassengerLoading: Optional[bool] = None
    Elevator: Optional[bool] = None
    WaitingRoom: Optional[bool] = None
    FoodService: Optional[bool] = None
    Restroom: Optional[bool] = None


class Bulletin(WsdotModel):
    BulletinTitle: Optional[str] = None
    BulletinText: Optional[str] = None
    BulletinSortSeq: Optional[int] = None
    BulletinLastUpdated: Optional[datetime] = None
    BulletinLastUpdatedSortable: Optional[str] = None


class TerminalBulletins(TerminalBase):
    Bulletins: list[Bulletin] = Field(default_factory=list)


class GisZoomLocation(WsdotModel):
    ZoomLevel: int
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None


class TerminalLocation(TerminalBase):
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    AddressLineOne: Optional[str] = None
    AddressLineTwo: Optional[str] = None
    City: Optional[str] = None
    State: Optional[str] = None
    ZipCode: Optional[str] = None
    Country: Optional[str] = None
    MapLink: Optional[str] = None
    Directions: Optional[str] = None
    DispGISZoomLoc: Optional[list[GisZoomLocation]] = None


class SpaceForArrivalTerminal(WsdotModel):
    TerminalID: Optional[int] = None
    TerminalName: Optional[str] = None
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    DisplayReservableSpace: Optional[bool] = None
    ReservableSpaceCount: Optional[int] = None
    ReservableSpaceHexColor: Optional[str] = None
    DisplayDriveUpSpace: Optional[bool] = None
    DriveUpSpaceCount: Optional[int] = None
    DriveUpSpaceHexColor: Optional[str] = None
    MaxSpaceCount: Optional[int] = None
    ArrivalTerminalIDs: Optional[list[int]] = None


class DepartingSpace(WsdotModel):
    Departure: Optional[datetime] = None
    IsCancelled: Optional[bool] = None
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    MaxSpaceCount: Optional[int] = Field(
        default=None, description="Maximum space available on the vessel making this departure."
    )
    SpaceForArrivalTerminals: list[SpaceForArrivalTerminal] = Field(default_factory=list)


class TerminalSailingSpace(TerminalBase):
    """Drive-up and reservable space for upcoming departures."""

    DepartingSpaces: list[DepartingSpace] = Field(default_factory=list)
    IsNoFareCollected: Optional[bool] = None
    NoFareCollectedMsg: Optional[str] = None


class TransitLink(WsdotModel):
    LinkURL: Optional[str] = None
    LinkName: Optional[str] = None
    SortSeq: Optional[int] = None


class TerminalTransports(TerminalBase):
    ParkingInfo: Optional[str] = None
    ParkingShuttleInfo: Optional[str] = None
    AirportInfo: Optional[str] = None
    AirportShuttleInfo: Optional[str] = None
    MotorcycleInfo: Optional[str] = None
    TruckInfo: Optional[str] = None
    BikeInfo: Optional[str] = None
    TrainInfo: Optional[str] = None
    TaxiInfo: Optional[str] = None
    HovInfo: Optional[str] = None
    TransitLinks: list[TransitLink] = Field(default_factory=list)


class WaitTime(WsdotModel):
    RouteID: Optional[int] = None
    RouteName: Optional[str] = None
    WaitTimeNotes: Optional[str] = None
    WaitTimeLastUpdated: Optional[datetime] = None
    WaitTimeIVRNotes: Optional[str] = None


class TerminalWaitTimes(TerminalBase):
    WaitTimes: list[WaitTime] = Field(default_factory=list)


class TerminalVerbose(
    TerminalBasics,
    TerminalBulletins,
    TerminalLocation,
    TerminalSailingSpace,
    TerminalTransports,
    TerminalWaitTimes,
):
    """Everything WSF publishes about a terminal in one record."""

    RealtimeIntroMsg: Optional[str] = None
    AdditionalInfo: Optional[str] = None
    LostAndFoundInfo: Optional[str] = None
    SecurityInfo: Optional[str] = None
    ConstructionInfo: Optional[str] = None
    FoodServiceInfo: Optional[str] = None
    AdaInfo: Optional[str] = None
    FareDiscountInfo: Optional[str] = None
    TallySystemInfo: Optional[str] = None
    ChamberOfCommerce: Optional[Any] = None
    FacInfo: Optional[str] = None
    ResourceStatus: Optional[str] = None
    TypeDesc: Optional[str] = None
    VisitorLinks: Optional[list[Any]] = None
