"""Models for the WSDOT Highway Cameras API."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel
from wsdottie.sources.shared import RoadwayLocation


class CameraIdInput(WsdotInput):
    CameraID: int


class CameraSearchInput(WsdotInput):
    StateRoute: Optional[str] = None
    Region: Optional[str] = Field(default=None, description="Region code: NW, NC, SC, SW, ER or OL.")
    StartingMilepost: Optional[float] = None
    EndingMilepost: Optional[float] = None


class Camera(WsdotModel):
    CameraID: int
    CameraLocation: Optional[RoadwayLocation] = None
    CameraOwner: Optional[str] = None
    Description: Optional[str] = None
    DisplayLatitude: Optional[float] = None
    DisplayLongitude: Optional[float] = None
    ImageHeight: Optional[int] = None
    ImageURL: Optional[str] = None
    ImageWidth: Optional[int] = None
    IsActive: Optional[bool] = None
    OwnerURL: Optional[str] = None
    Region: Optional[str] = None
    SortOrder: Optional[int] = None
    Title: Optional[str] = None
