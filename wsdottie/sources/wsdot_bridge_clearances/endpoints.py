"""Endpoint definitions for the WSDOT Bridge Clearances API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import BridgeClearance, RouteInput

wsdot_bridge_clearances_api = ApiDefinition(
    name="wsdot-bridge-clearances",
    title="WSDOT Bridge Clearances API",
    base_path="/Traffic/api/Bridges/ClearanceREST.svc",
    description="Vertical clearances of bridges and overpasses on state routes.",
    groups=(
        EndpointGroup(
            name="bridge-clearances",
            description="Minimum and maximum vertical clearance per structure.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_bridge_clearances",
                    endpoint="/GetClearancesAsJson",
                    output_type=list[BridgeClearance],
                    description="List clearances for every state route.",
                ),
                EndpointMeta(
                    function_name="fetch_bridge_clearances_by_route",
                    endpoint="/GetClearancesAsJson?Route={route}",
                    input_model=RouteInput,
                    output_type=list[BridgeClearance],
                    description="List clearances along one state route.",
                    sample_params={"route": "005"},
                ),
            ),
        ),
    ),
)
