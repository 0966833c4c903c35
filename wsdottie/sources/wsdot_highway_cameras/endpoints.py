"""Endpoint definitions for the WSDOT Highway Cameras API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import Camera, CameraIdInput, CameraSearchInput

wsdot_highway_cameras_api = ApiDefinition(
    name="wsdot-highway-cameras",
    title="WSDOT Highway Cameras API",
    base_path="/Traffic/api/HighwayCameras/HighwayCamerasREST.svc",
    description="Traffic camera locations and still-image URLs.",
    groups=(
        EndpointGroup(
            name="cameras",
            description="Camera metadata; images themselves refresh every few minutes.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_highway_cameras",
                    endpoint="/GetCamerasAsJson",
                    output_type=list[Camera],
                    description="List all highway cameras.",
                ),
                EndpointMeta(
                    function_name="fetch_highway_camera_by_camera_id",
                    endpoint="/GetCameraAsJson?CameraID={CameraID}",
                    input_model=CameraIdInput,
                    output_type=Camera,
                    description="Get one highway camera.",
                    sample_params={"CameraID": 9818},
                ),
                EndpointMeta(
                    function_name="search_highway_cameras",
                    endpoint=(
                        "/SearchCamerasAsJson?StateRoute={StateRoute}&Region={Region}"
                        "&StartingMilepost={StartingMilepost}&EndingMilepost={EndingMilepost}"
                    ),
                    input_model=CameraSearchInput,
                    output_type=list[Camera],
                    description="Search cameras by route, region and milepost range.",
                    sample_params={"StateRoute": "9", "StartingMilepost": 10, "EndingMilepost": 20},
                ),
            ),
        ),
    ),
)
