"""Models for the WSF Schedule API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class TripDateInput(WsdotInput):
    tripDate: date


class TripDateRouteInput(TripDateInput):
    routeId: int


class TerminalMatesInput(TripDateInput):
    terminalId: int


class TripDateTerminalsInput(TripDateInput):
    departingTerminalId: int
    arrivingTerminalId: int


class RouteIdInput(WsdotInput):
    routeId: int


class SchedRouteIdInput(WsdotInput):
    schedRouteId: int


class SeasonIdInput(WsdotInput):
    seasonId: int


class SubjectNameInput(WsdotInput):
    subjectName: str


class ScheduleTodayByTerminalsInput(WsdotInput):
    departingTerminalId: int
    arrivingTerminalId: int
    onlyRemainingTimes: bool = Field(description="Only include departures that have not left yet.")


class ScheduleTodayByRouteInput(WsdotInput):
    routeId: int
    onlyRemainingTimes: bool


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class ValidDateRange(WsdotModel):
    DateFrom: datetime
    DateThru: datetime


class ScheduleTerminal(WsdotModel):
    TerminalID: int
    Description: str


class TerminalMate(WsdotModel):
    DepartingTerminalID: int
    DepartingDescription: str
    ArrivingTerminalID: int
    ArrivingDescription: str


class ServiceDisruption(WsdotModel):
    BulletinID: int
    BulletinFlag: Optional[bool] = None
    PublishDate: Optional[datetime] = None
    DisruptionDescription: Optional[str] = None


class Route(WsdotModel):
    RouteID: int
    RouteAbbrev: Optional[str] = None
    Description: Optional[str] = None
    RegionID: Optional[int] = None
    ServiceDisruptions: list[ServiceDisruption] = Field(default_factory=list)


class RouteAlert(WsdotModel):
    BulletinID: int
    BulletinFlag: Optional[bool] = None
    CommunicationFlag: Optional[bool] = None
    PublishDate: Optional[datetime] = None
    AlertDescription: Optional[str] = None
    DisruptionDescription: Optional[str] = None
    AlertFullTitle: Optional[str] = None
    AlertFullText: Optional[str] = None
    IVRText: Optional[str] = None


class RouteDetail(WsdotModel):
    RouteID: int
    RouteAbbrev: Optional[str] = None
    Description: Optional[str] = None
    RegionID: Optional[int] = None
    VesselWatchID: Optional[int] = None
    ReservationFlag: Optional[bool] = None
    InternationalFlag: Optional[bool] = None
    PassengerOnlyFlag: Optional[bool] = None
    CrossingTime: Optional[str] = Field(default=None, description="Estimated crossing time in minutes.")
    AdaNotes: Optional[str] = None
    GeneralRouteNotes: Optional[str] = None
    SeasonalRouteNotes: Optional[str] = None
    Alerts: list[RouteAlert] = Field(default_factory=list)


class ActiveSeason(WsdotModel):
    ScheduleID: int
    ScheduleName: Optional[str] = None
    ScheduleSeason: Optional[int] = Field(default=None, description="0 = Spring, 1 = Summer, 2 = Fall, 3 = Winter.")
    SchedulePDFUrl: Optional[str] = None
    ScheduleStart: Optional[datetime] = None
    ScheduleEnd: Optional[datetime] = None


class ContingencyAdjustment(WsdotModel):
    DateFrom: Optional[datetime] = None
    DateThru: Optional[datetime] = None
    EventID: Optional[int] = None
    EventDescription: Optional[str] = None
    AdjType: Optional[int] = Field(default=None, description="1 = Addition, 2 = Cancellation.")
    ReplacedBySchedRouteID: Optional[int] = None


class SchedRoute(WsdotModel):
    ScheduleID: int
    SchedRouteID: int
    ContingencyOnly: Optional[bool] = None
    RouteID: int
    RouteAbbrev: Optional[str] = None
    Description: Optional[str] = None
    SeasonalRouteNotes: Optional[str] = None
    RegionID: Optional[int] = None
    ServiceDisruptions: list[ServiceDisruption] = Field(default_factory=list)
    ContingencyAdj: list[ContingencyAdjustment] = Field(default_factory=list)


class ActiveDateRange(WsdotModel):
    DateFrom: Optional[datetime] = None
    DateThru: Optional[datetime] = None
    EventID: Optional[int] = None
    EventDescription: Optional[str] = None


class Annotation(WsdotModel):
    AnnotationID: int
    AnnotationText: Optional[str] = None
    AnnotationIVRText: Optional[str] = None
    AdjustedCrossingTime: Optional[int] = None
    AnnotationImg: Optional[str] = None
    TypeDescription: Optional[str] = None
    SortSeq: Optional[int] = None


class TerminalTime(WsdotModel):
    JourneyTerminalID: int
    TerminalID: int
    TerminalDescription: Optional[str] = None
    TerminalBriefDescription: Optional[str] = None
    Time: Optional[datetime] = None
    DepArrIndicator: Optional[int] = Field(default=None, description="1 = Departure, 2 = Arrival.")
    IsNA: Optional[bool] = None
    Annotations: list[Annotation] = Field(default_factory=list)


class Journey(WsdotModel):
    JourneyID: int
    ReservationInd: Optional[bool] = None
    InternationalInd: Optional[bool] = None
    InterislandInd: Optional[bool] = None
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    TerminalTimes: list[TerminalTime] = Field(default_factory=list)


class Sailing(WsdotModel):
    """One column of a printed schedule: a set of journeys on given days."""

    ScheduleID: int
    SchedRouteID: int
    RouteID: int
    SailingID: int
    SailingDescription: Optional[str] = None
    SailingNotes: Optional[str] = None
    DisplayColNum: Optional[int] = None
    SailingDir: Optional[int] = Field(default=None, description="1 = Westbound, 2 = Eastbound.")
    DayOpDescription: Optional[str] = None
    DayOpUseForHoliday: Optional[bool] = None
    ActiveDateRanges: list[ActiveDateRange] = Field(default_factory=list)
    Journs: list[Journey] = Field(default_factory=list)


class TimeAdjustment(WsdotModel):
    ScheduleID: int
    SchedRouteID: int
    RouteID: int
    RouteDescription: Optional[str] = None
    RouteSortSeq: Optional[int] = None
    SailingID: int
    SailingDescription: Optional[str] = None
    ActiveSailingDateRange: Optional[ActiveDateRange] = None
    SailingDir: Optional[int] = None
    JourneyID: int
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    JourneyTerminalID: Optional[int] = None
    TerminalID: int
    TerminalDescription: Optional[str] = None
    TerminalBriefDescription: Optional[str] = None
    TimeToAdj: Optional[datetime] = None
    AdjDateFrom: Optional[datetime] = None
    AdjDateThru: Optional[datetime] = None
    TidalAdj: Optional[bool] = None
    EventID: Optional[int] = None
    EventDescription: Optional[str] = None
    DepArrIndicator: Optional[int] = None
    AdjType: Optional[int] = None
    Annotations: list[Annotation] = Field(default_factory=list)


class ScheduleTime(WsdotModel):
    DepartingTime: datetime
    ArrivingTime: Optional[datetime] = None
    LoadingRule: Optional[int] = Field(default=None, description="1 = Passenger, 2 = Vehicle, 3 = Both.")
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    Routes: list[int] = Field(default_factory=list)
    AnnotationIndexes: list[int] = Field(default_factory=list)


class ScheduleTerminalCombo(WsdotModel):
    DepartingTerminalID: int
    DepartingTerminalName: Optional[str] = None
    ArrivingTerminalID: int
    ArrivingTerminalName: Optional[str] = None
    SailingNotes: Optional[str] = None
    Annotations: list[str] = Field(default_factory=list)
    Times: list[ScheduleTime] = Field(default_factory=list)
    AnnotationsIVR: list[str] = Field(default_factory=list)


class Schedule(WsdotModel):
    ScheduleID: int
    ScheduleName: Optional[str] = None
    ScheduleSeason: Optional[int] = None
    SchedulePDFUrl: Optional[str] = None
    ScheduleStart: Optional[datetime] = None
    ScheduleEnd: Optional[datetime] = None
    AllRoutes: list[int] = Field(default_factory=list)
    TerminalCombos: list[ScheduleTerminalCombo] = Field(default_factory=list)


class AlertDetail(WsdotModel):
    BulletinID: int
    BulletinFlag: Optional[bool] = None
    BulletinText: Optional[str] = None
    CommunicationFlag: Optional[bool] = None
    CommunicationText: Optional[str] = None
    RouteAlertFlag: Optional[bool] = None
    RouteAlertText: Optional[str] = None
    HomepageAlertText: Optional[str] = None
    PublishDate: Optional[datetime] = None
    DisruptionDescription: Optional[str] = None
    AllRoutesFlag: Optional[bool] = None
    SortSeq: Optional[int] = None
    AlertTypeID: Optional[int] = None
    AlertType: Optional[str] = None
    AlertFullTitle: Optional[str] = None
    AffectedRouteIDs: list[int] = Field(default_factory=list)
    IVRText: Optional[str] = None


class AlternativeFormat(WsdotModel):
    """Schedule document in another format (PDF, accessible text, ...)."""

    AltID: int
    SubjectID: Optional[int] = None
    SubjectName: Optional[str] = None
    AltTitle: Optional[str] = None
    AltUrl: Optional[str] = None
    AltDesc: Optional[str] = None
    FileType: Optional[str] = None
    Status: Optional[str] = None
    SortSeq: Optional[int] = None
    FromDate: Optional[datetime] = None
    ThruDate: Optional[datetime] = None
    ModifiedDate: Optional[datetime] = None
    ModifiedBy: Optional[str] = None
