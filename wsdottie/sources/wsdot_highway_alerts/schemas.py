"""Models for the WSDOT Highway Alerts API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from wsdottie.endpoints.types import WsdotInput, WsdotModel, check_date_range
from wsdottie.sources.shared import RoadwayLocation


class AlertIdInput(WsdotInput):
    AlertID: int


class MapAreaInput(WsdotInput):
    MapArea: str = Field(description="Map area code from fetch_map_areas, e.g. 'L2CE'.")


class RegionIdInput(WsdotInput):
    RegionId: int


class AlertSearchInput(WsdotInput):
    """All criteria are optional; omitted ones are left out of the query."""

    StateRoute: Optional[str] = None
    Region: Optional[str] = None
    SearchTimeStart: Optional[date] = None
    SearchTimeEnd: Optional[date] = None
    StartingMilepost: Optional[float] = None
    EndingMilepost: Optional[float] = None

    @model_validator(mode="after")
    def _ordered(self):
        if self.SearchTimeStart is not None and self.SearchTimeEnd is not None:
            check_date_range(
                self.SearchTimeStart, self.SearchTimeEnd, start_field="SearchTimeStart", end_field="SearchTimeEnd"
            )
        return self


class HighwayAlert(WsdotModel):
    AlertID: int
    County: Optional[str] = None
    EndRoadwayLocation: Optional[RoadwayLocation] = None
    EndTime: Optional[datetime] = None
    EventCategory: Optional[str] = None
    EventStatus: Optional[str] = None
    ExtendedDescription: Optional[str] = None
    HeadlineDescription: Optional[str] = None
    LastUpdatedTime: Optional[datetime] = None
    Priority: Optional[str] = None
    Region: Optional[str] = None
    StartRoadwayLocation: Optional[RoadwayLocation] = None
    StartTime: Optional[datetime] = None


class MapAreaInfo(WsdotModel):
    MapArea: str
    MapAreaDescription: Optional[str] = None
