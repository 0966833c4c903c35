"""Models for the WSDOT Toll Rates API.

Toll amounts are reported in cents.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from wsdottie.endpoints.types import WsdotInput, WsdotModel, check_date_range


class TripRatesByDateInput(WsdotInput):
    fromDate: date
    toDate: date

    @model_validator(mode="after")
    def _ordered(self):
        check_date_range(self.fromDate, self.toDate, start_field="fromDate", end_field="toDate")
        return self


class _TollEndpoints(WsdotModel):
    StartLocationName: Optional[str] = None
    StartMilepost: Optional[float] = None
    StartLatitude: Optional[float] = None
    StartLongitude: Optional[float] = None
    EndLocationName: Optional[str] = None
    EndMilepost: Optional[float] = None
    EndLatitude: Optional[float] = None
    EndLongitude: Optional[float] = None
    TravelDirection: Optional[str] = None
    TripName: str


class TollRate(_TollEndpoints):
    CurrentMessage: Optional[str] = None
    CurrentToll: int = Field(description="Current toll in cents.")
    StateRoute: Optional[str] = None
    TimeUpdated: Optional[datetime] = None


class TollTripInfo(_TollEndpoints):
    Geometry: Optional[str] = Field(default=None, description="Serialized line geometry of the trip.")
    # Reported as a /Date()/ string but routed through the MM/DD/YYYY parser,
    # so it is usually None after normalization.
    ModifiedDate: Optional[datetime] = None


class TollTripRate(WsdotModel):
    Message: Optional[str] = None
    MessageUpdateTime: Optional[datetime] = None
    Toll: int = Field(description="Toll in cents.")
    TripName: str


class TollTripRates(WsdotModel):
    LastUpdated: Optional[datetime] = None
    Trips: list[TollTripRate] = []
    Version: Optional[int] = None


class TollTripVersion(WsdotModel):
    TimeStamp: Optional[datetime] = None
    Version: int
