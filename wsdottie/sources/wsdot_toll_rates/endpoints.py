"""Endpoint definitions for the WSDOT Toll Rates API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    TollRate,
    TollTripInfo,
    TollTripRates,
    TollTripVersion,
    TripRatesByDateInput,
)

wsdot_toll_rates_api = ApiDefinition(
    name="wsdot-toll-rates",
    title="WSDOT Toll Rates API",
    base_path="/Traffic/api/TollRates/TollRatesREST.svc",
    description="Dynamic toll pricing for the SR 167, I-405 and SR 99 express lanes.",
    groups=(
        EndpointGroup(
            name="toll-rates",
            description="Current tolls, refreshed every few minutes.",
            cache_strategy=CacheStrategy.MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_toll_rates",
                    endpoint="/GetTollRatesAsJson",
                    output_type=list[TollRate],
                    description="List the current toll for every trip.",
                ),
                EndpointMeta(
                    function_name="fetch_toll_trip_rates",
                    endpoint="/GetTollTripRatesAsJson",
                    output_type=TollTripRates,
                    description="Get current trip tolls with the rate table version.",
                ),
                EndpointMeta(
                    function_name="fetch_toll_trip_version",
                    endpoint="/GetTollTripVersionAsJson",
                    output_type=TollTripVersion,
                    description="Get the current rate table version.",
                ),
            ),
        ),
        EndpointGroup(
            name="toll-trip-info",
            description="Trip geometry and endpoints.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_toll_trip_info",
                    endpoint="/GetTollTripInfoAsJson",
                    output_type=list[TollTripInfo],
                    description="List every toll trip with its location details.",
                ),
            ),
        ),
        EndpointGroup(
            name="toll-trip-history",
            description="Historical trip tolls.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_trip_rates_by_date",
                    endpoint="/GetTripRatesByDateAsJson?fromDate={fromDate}&toDate={toDate}",
                    input_model=TripRatesByDateInput,
                    output_type=list[TollTripRates],
                    description="List trip tolls published between two dates.",
                    sample_params=lambda: {
                        "fromDate": days_from_today(-2),
                        "toDate": days_from_today(-1),
                    },
                ),
            ),
        ),
    ),
)
