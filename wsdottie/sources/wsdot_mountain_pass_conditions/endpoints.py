"""Endpoint definitions for the WSDOT Mountain Pass Conditions API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import MountainPassCondition, PassConditionIdInput

wsdot_mountain_pass_conditions_api = ApiDefinition(
    name="wsdot-mountain-pass-conditions",
    title="WSDOT Mountain Pass Conditions API",
    base_path="/Traffic/api/MountainPassConditions/MountainPassConditionsREST.svc",
    description="Road, weather and restriction reports for Cascade mountain passes.",
    groups=(
        EndpointGroup(
            name="pass-conditions",
            description="Current conditions and traction restrictions per pass.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_mountain_pass_conditions",
                    endpoint="/GetMountainPassConditionsAsJson",
                    output_type=list[MountainPassCondition],
                    description="List conditions for every monitored mountain pass.",
                ),
                # The upstream operation name really is spelled "AsJon"
                EndpointMeta(
                    function_name="fetch_mountain_pass_condition_by_id",
                    endpoint="/GetMountainPassConditionAsJon?PassConditionID={PassConditionID}",
                    input_model=PassConditionIdInput,
                    output_type=MountainPassCondition,
                    description="Get conditions for one mountain pass.",
                    sample_params={"PassConditionID": 12},
                ),
            ),
        ),
    ),
)
