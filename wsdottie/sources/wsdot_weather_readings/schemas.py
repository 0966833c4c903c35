"""Models for the extended weather readings feed (Scanweb).

Units here are metric, unlike the Weather Information API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from wsdottie.endpoints.types import WsdotModel


class SurfaceMeasurement(WsdotModel):
    SensorId: int
    SurfaceTemperature: Optional[float] = None
    RoadFreezingTemperature: Optional[float] = None
    RoadSurfaceCondition: Optional[int] = None


class SubSurfaceMeasurement(WsdotModel):
    SensorId: int
    SubSurfaceTemperature: Optional[float] = None


class WeatherReading(WsdotModel):
    StationId: str
    StationName: Optional[str] = None
    Latitude: Optional[float] = None
    Longitude: Optional[float] = None
    Elevation: Optional[int] = None
    ReadingTime: Optional[datetime] = None
    AirTemperature: Optional[float] = None
    # Upstream spelling
    RelativeHumidty: Optional[int] = None
    AverageWindSpeed: Optional[int] = None
    AverageWindDirection: Optional[int] = None
    WindGust: Optional[int] = None
    Visibility: Optional[int] = None
    PrecipitationIntensity: Optional[int] = None
    PrecipitationType: Optional[int] = None
    PrecipitationPast1Hour: Optional[float] = None
    PrecipitationPast3Hours: Optional[float] = None
    PrecipitationPast6Hours: Optional[float] = None
    PrecipitationPast12Hours: Optional[float] = None
    PrecipitationPast24Hours: Optional[float] = None
    PrecipitationAccumulation: Optional[float] = None
    BarometricPressure: Optional[int] = None
    SnowDepth: Optional[int] = None
    SurfaceMeasurements: Optional[list[SurfaceMeasurement]] = None
    SubSurfaceMeasurements: Optional[list[SubSurfaceMeasurement]] = None
