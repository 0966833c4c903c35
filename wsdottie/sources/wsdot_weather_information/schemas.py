"""Models for the WSDOT Weather Information API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import model_validator

from wsdottie.endpoints.types import WsdotInput, WsdotModel, check_date_range


class StationIdInput(WsdotInput):
    StationID: int


class StationListInput(WsdotInput):
    StationList: list[int]


class WeatherSearchInput(WsdotInput):
    StationID: int
    SearchStartTime: date
    SearchEndTime: date

    @model_validator(mode="after")
    def _ordered(self):
        check_date_range(
            self.SearchStartTime, self.SearchEndTime, start_field="SearchStartTime", end_field="SearchEndTime"
        )
        return self


class WeatherInfo(WsdotModel):
    BarometricPressure: Optional[float] = None
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    PrecipitationInInches: Optional[float] = None
    ReadingTime: Optional[datetime] = None
    RelativeHumidity: Optional[int] = None
    SkyCoverage: Optional[str] = None
    StationID: int
    StationName: Optional[str] = None
    TemperatureInFahrenheit: Optional[float] = None
    Visibility: Optional[int] = None
    WindDirection: Optional[float] = None
    WindDirectionCardinal: Optional[str] = None
    WindGustSpeedInMPH: Optional[float] = None
    WindSpeedInMPH: Optional[float] = None
