"""Endpoint definitions for the WSDOT Commercial Vehicle Restrictions API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import CommercialVehicleRestriction, CommercialVehicleRestrictionWithId

wsdot_commercial_vehicle_restrictions_api = ApiDefinition(
    name="wsdot-commercial-vehicle-restrictions",
    title="WSDOT Commercial Vehicle Restrictions API",
    base_path="/Traffic/api/CVRestrictions/CVRestrictionsREST.svc",
    description="Weight, height, length and axle restrictions for trucks on state highways.",
    groups=(
        EndpointGroup(
            name="cv-restriction-data",
            description="Active restrictions for commercial vehicles.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_commercial_vehicle_restrictions",
                    endpoint="/GetCommercialVehicleRestrictionsAsJson",
                    output_type=list[CommercialVehicleRestriction],
                    description="List all commercial vehicle restrictions.",
                ),
            ),
        ),
        EndpointGroup(
            name="cv-restriction-data-with-id",
            description="Active restrictions with a stable unique identifier.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_commercial_vehicle_restrictions_with_id",
                    endpoint="/GetCommercialVehicleRestrictionsWithIdAsJson",
                    output_type=list[CommercialVehicleRestrictionWithId],
                    description="List all commercial vehicle restrictions with their unique IDs.",
                ),
            ),
        ),
    ),
)
