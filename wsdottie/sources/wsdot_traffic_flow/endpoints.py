"""Endpoint definitions for the WSDOT Traffic Flow API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import FlowDataIdInput, TrafficFlow

wsdot_traffic_flow_api = ApiDefinition(
    name="wsdot-traffic-flow",
    title="WSDOT Traffic Flow API",
    base_path="/traffic/api/TrafficFlow/TrafficFlowREST.svc",
    description="Congestion readings from loop detector stations.",
    groups=(
        EndpointGroup(
            name="flow-data",
            description="Flow readings, updated every minute or so.",
            cache_strategy=CacheStrategy.MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_traffic_flows",
                    endpoint="/GetTrafficFlowsAsJson",
                    output_type=list[TrafficFlow],
                    description="List readings for every flow station.",
                ),
                EndpointMeta(
                    function_name="fetch_traffic_flow_by_id",
                    endpoint="/GetTrafficFlowAsJson?FlowDataID={FlowDataID}",
                    input_model=FlowDataIdInput,
                    output_type=TrafficFlow,
                    description="Get the reading for one flow station.",
                    sample_params={"FlowDataID": 2482},
                ),
            ),
        ),
    ),
)
