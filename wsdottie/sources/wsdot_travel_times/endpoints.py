"""Endpoint definitions for the WSDOT Travel Times API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import TravelTimeIdInput, TravelTimeRoute

wsdot_travel_times_api = ApiDefinition(
    name="wsdot-travel-times",
    title="WSDOT Travel Times API",
    base_path="/Traffic/api/TravelTimes/TravelTimesREST.svc",
    description="Current and typical travel times for commute routes.",
    groups=(
        EndpointGroup(
            name="travel-times",
            description="Travel time estimates per route.",
            cache_strategy=CacheStrategy.MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_travel_times",
                    endpoint="/GetTravelTimesAsJson",
                    output_type=list[TravelTimeRoute],
                    description="List travel times for every monitored route.",
                ),
                EndpointMeta(
                    function_name="fetch_travel_time_by_id",
                    endpoint="/GetTravelTimeAsJson?TravelTimeID={TravelTimeID}",
                    input_model=TravelTimeIdInput,
                    output_type=TravelTimeRoute,
                    description="Get the travel time for one route.",
                    sample_params={"TravelTimeID": 2},
                ),
            ),
        ),
    ),
)
