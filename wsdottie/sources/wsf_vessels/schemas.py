"""Models for the WSF Vessels API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import Field, model_validator

from wsdottie.endpoints.types import WsdotInput, WsdotModel, check_date_range


class VesselIdInput(WsdotInput):
    vesselId: int = Field(description="Unique identifier for a vessel.")


class VesselHistoryInput(WsdotInput):
    vesselName: str = Field(description="Name of the vessel, e.g. 'Tacoma'.")
    dateStart: date
    dateEnd: date

    @model_validator(mode="after")
    def _ordered(self):
        check_date_range(self.dateStart, self.dateEnd, start_field="dateStart", end_field="dateEnd")
        return self


class FleetHistoryInput(WsdotInput):
    dateStart: date
    dateEnd: date
    batchSize: int = Field(default=6, ge=1, le=20, description="Requests sent concurrently per batch.")

    @model_validator(mode="after")
    def _ordered(self):
        check_date_range(self.dateStart, self.dateEnd, start_field="dateStart", end_field="dateEnd")
        return self


class MultipleVesselHistoriesInput(FleetHistoryInput):
    vesselNames: list[Annotated[str, Field(min_length=1)]] = Field(
        min_length=1, description="Vessel names without the 'M/V' prefix, e.g. ['Cathlamet', 'Walla Walla']."
    )


class VesselClass(WsdotModel):
    ClassID: int = Field(description="Unique identifier for a vessel class.")
    ClassSubjectID: Optional[int] = None
    ClassName: Optional[str] = None
    SortSeq: Optional[int] = None
    DrawingImg: Optional[str] = None
    SilhouetteImg: Optional[str] = None
    PublicDisplayName: Optional[str] = None


class VesselBasic(WsdotModel):
    VesselID: int = Field(description="Unique identifier for a vessel.")
    VesselSubjectID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselAbbrev: Optional[str] = None
    Class: Optional[VesselClass] = None
    Status: Optional[int] = Field(
        default=None, description="1 = In Service, 2 = Maintenance, 3 = Out of Service."
    )
    OwnedByWSF: Optional[bool] = None


class VesselAccommodations(WsdotModel):
    VesselID: int
    VesselSubjectID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselAbbrev: Optional[str] = None
    Class: Optional[VesselClass] = None
    CarDeckRestroom: Optional[bool] = None
    CarDeckShelter: Optional[bool] = None
    Elevator: Optional[bool] = None
    ADAAccessible: Optional[bool] = None
    MainCabinGalley: Optional[bool] = None
    MainCabinRestroom: Optional[bool] = None
    PublicWifi: Optional[bool] = None
    ADAInfo: Optional[str] = None
    AdditionalInfo: Optional[str] = None


class VesselStats(WsdotModel):
    VesselID: int
    VesselSubjectID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselAbbrev: Optional[str] = None
    Class: Optional[VesselClass] = None
    VesselNameDesc: Optional[str] = None
    VesselHistory: Optional[str] = None
    Beam: Optional[str] = None
    CityBuilt: Optional[str] = None
    SpeedInKnots: Optional[float] = None
    Draft: Optional[str] = None
    EngineCount: Optional[int] = None
    Horsepower: Optional[int] = None
    Length: Optional[str] = None
    MaxPassengerCount: Optional[int] = None
    PassengerOnly: Optional[bool] = None
    FastFerry: Optional[bool] = None
    PropulsionInfo: Optional[str] = None
    TallDeckClearance: Optional[int] = None
    RegDeckSpace: Optional[int] = None
    TallDeckSpace: Optional[int] = None
    Tonnage: Optional[int] = None
    Displacement: Optional[int] = None
    YearBuilt: Optional[int] = None
    YearRebuilt: Optional[int] = None
    VesselDrawingImg: Optional[str] = None
    SolasCertified: Optional[bool] = None
    MaxPassengerCountForInternational: Optional[int] = None


class VesselLocation(WsdotModel):
    """Real-time position of one vessel."""

    VesselID: int
    VesselName: Optional[str] = None
    Mmsi: Optional[int] = Field(default=None, description="Maritime Mobile Service Identity.")
    DepartingTerminalID: Optional[int] = None
    DepartingTerminalName: Optional[str] = None
    DepartingTerminalAbbrev: Optional[str] = None
    ArrivingTerminalID: Optional[int] = None
    ArrivingTerminalName: Optional[str] = None
    ArrivingTerminalAbbrev: Optional[str] = None
    Latitude: float
    Longitude: float
    Speed: Optional[float] = Field(default=None, description="Speed in knots.")
    Heading: Optional[float] = Field(default=None, description="Heading in degrees.")
    InService: Optional[bool] = None
    AtDock: Optional[bool] = None
    LeftDock: Optional[datetime] = None
    Eta: Optional[datetime] = None
    EtaBasis: Optional[str] = None
    ScheduledDeparture: Optional[datetime] = None
    OpRouteAbbrev: list[str] = Field(default_factory=list)
    VesselPositionNum: Optional[int] = None
    SortSeq: Optional[int] = None
    ManagedBy: Optional[int] = Field(default=None, description="1 = WSF, 2 = KCM.")
    TimeStamp: Optional[datetime] = None


class VesselVerbose(VesselAccommodations, VesselStats):
    """Basics, accommodations and stats of one vessel in a single record."""

    Status: Optional[int] = None
    OwnedByWSF: Optional[bool] = None


class VesselHistory(WsdotModel):
    VesselId: int
    Vessel: Optional[str] = None
    Departing: Optional[str] = None
    Arriving: Optional[str] = None
    ScheduledDepart: Optional[datetime] = None
    ActualDepart: Optional[datetime] = None
    EstArrival: Optional[datetime] = None
    Date: Optional[datetime] = None
