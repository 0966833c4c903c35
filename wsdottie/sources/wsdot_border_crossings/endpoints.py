"""Endpoint definitions for the WSDOT Border Crossings API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import BorderCrossing

wsdot_border_crossings_api = ApiDefinition(
    name="wsdot-border-crossings",
    title="WSDOT Border Crossings API",
    base_path="/Traffic/api/BorderCrossings/BorderCrossingsREST.svc",
    description="Wait times at the Washington/British Columbia border crossings.",
    groups=(
        EndpointGroup(
            name="border-crossing-data",
            description="Current northbound and southbound wait times by crossing and lane.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_border_crossings",
                    endpoint="/GetBorderCrossingsAsJson",
                    output_type=list[BorderCrossing],
                    description="List current wait times for every border crossing lane.",
                ),
            ),
        ),
    ),
)
