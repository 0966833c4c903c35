"""Models for the WSDOT Weather Stations API."""

from __future__ import annotations

from typing import Optional

from wsdottie.endpoints.types import WsdotModel


class WeatherStation(WsdotModel):
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    StationCode: int
    StationName: Optional[str] = None
