"""Endpoint definitions for the WSDOT Highway Alerts API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    AlertIdInput,
    AlertSearchInput,
    HighwayAlert,
    MapAreaInfo,
    MapAreaInput,
    RegionIdInput,
)


def _search_sample() -> dict:
    return {
        "StateRoute": "405",
        "SearchTimeStart": days_from_today(-1),
        "SearchTimeEnd": days_from_today(0),
    }


wsdot_highway_alerts_api = ApiDefinition(
    name="wsdot-highway-alerts",
    title="WSDOT Highway Alerts API",
    base_path="/Traffic/api/HighwayAlerts/HighwayAlertsREST.svc",
    description="Incidents, construction and other traffic alerts on state highways.",
    groups=(
        EndpointGroup(
            name="alerts",
            description="Current highway alerts.",
            cache_strategy=CacheStrategy.MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_alerts",
                    endpoint="/GetAlertsAsJson",
                    output_type=list[HighwayAlert],
                    description="List all current highway alerts.",
                ),
                EndpointMeta(
                    function_name="fetch_alert_by_id",
                    endpoint="/GetAlertAsJson?AlertID={AlertID}",
                    input_model=AlertIdInput,
                    output_type=HighwayAlert,
                    description="Get one highway alert.",
                    sample_params={"AlertID": 468632},
                ),
                EndpointMeta(
                    function_name="fetch_alerts_by_map_area",
                    endpoint="/GetAlertsByMapAreaAsJson?MapArea={MapArea}",
                    input_model=MapAreaInput,
                    output_type=list[HighwayAlert],
                    description="List alerts in one map area.",
                    sample_params={"MapArea": "Seattle"},
                ),
                EndpointMeta(
                    function_name="fetch_alerts_by_region_id",
                    endpoint="/GetAlertsByRegionIDAsJson?RegionId={RegionId}",
                    input_model=RegionIdInput,
                    output_type=list[HighwayAlert],
                    description="List alerts in one WSDOT region.",
                    sample_params={"RegionId": 9},
                ),
                EndpointMeta(
                    function_name="search_alerts",
                    endpoint=(
                        "/SearchAlertsAsJson?StateRoute={StateRoute}&Region={Region}"
                        "&SearchTimeStart={SearchTimeStart}&SearchTimeEnd={SearchTimeEnd}"
                        "&StartingMilepost={StartingMilepost}&EndingMilepost={EndingMilepost}"
                    ),
                    input_model=AlertSearchInput,
                    output_type=list[HighwayAlert],
                    description="Search alerts by route, region, time window and milepost range.",
                    sample_params=_search_sample,
                ),
            ),
        ),
        EndpointGroup(
            name="alert-lookups",
            description="Reference values used to filter alerts.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_event_categories",
                    endpoint="/GetEventCategoriesAsJson",
                    output_type=list[str],
                    description="List the event categories alerts are filed under.",
                ),
                EndpointMeta(
                    function_name="fetch_map_areas",
                    endpoint="/GetMapAreasAsJson",
                    output_type=list[MapAreaInfo],
                    description="List map areas usable with fetch_alerts_by_map_area.",
                ),
            ),
        ),
    ),
)
