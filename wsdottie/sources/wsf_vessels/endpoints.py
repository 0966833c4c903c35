"""Endpoint definitions for the WSF Vessels API."""

from __future__ import annotations

from datetime import datetime

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    VesselAccommodations,
    VesselBasic,
    VesselHistory,
    VesselHistoryInput,
    VesselIdInput,
    VesselLocation,
    VesselStats,
    VesselVerbose,
)

SAMPLE_VESSEL_ID = {"vesselId": 74}


def _history_sample() -> dict:
    return {
        "vesselName": "Tacoma",
        "dateStart": days_from_today(-7),
        "dateEnd": days_from_today(-1),
    }


def _by_id_pair(name: str, path: str, model, noun: str) -> tuple[EndpointMeta, EndpointMeta]:
    return (
        EndpointMeta(
            function_name=f"fetch_{name}",
            endpoint=f"/{path}",
            output_type=list[model],
            description=f"List {noun} for every vessel.",
        ),
        EndpointMeta(
            function_name=f"fetch_{name}_by_vessel_id",
            endpoint=f"/{path}/{{vesselId}}",
            input_model=VesselIdInput,
            output_type=model,
            description=f"Get {noun} for one vessel.",
            sample_params=SAMPLE_VESSEL_ID,
        ),
    )


wsf_vessels_api = ApiDefinition(
    name="wsf-vessels",
    title="WSF Vessels API",
    base_path="/ferries/api/vessels/rest",
    description="Vessel details, accommodations, statistics, history and real-time positions.",
    groups=(
        EndpointGroup(
            name="cache-flush-date",
            description="When the cacheable data of this API last changed.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_cache_flush_date_vessels",
                    endpoint="/cacheflushdate",
                    output_type=datetime,
                    description="Get the time the vessels data cache was last flushed.",
                ),
            ),
        ),
        EndpointGroup(
            name="vessel-basics",
            description="Name, class, status and ownership of each vessel.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=_by_id_pair("vessel_basics", "vesselbasics", VesselBasic, "basic details"),
        ),
        EndpointGroup(
            name="vessel-accommodations",
            description="Onboard amenities and accessibility features.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=_by_id_pair(
                "vessel_accommodations", "vesselaccommodations", VesselAccommodations, "accommodations"
            ),
        ),
        EndpointGroup(
            name="vessel-stats",
            description="Dimensions, capacity, propulsion and build history.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=_by_id_pair("vessel_stats", "vesselstats", VesselStats, "specifications"),
        ),
        EndpointGroup(
            name="vessel-verbose",
            description="Basics, accommodations and stats combined.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=_by_id_pair("vessel_verbose", "vesselverbose", VesselVerbose, "all details"),
        ),
        EndpointGroup(
            name="vessel-locations",
            description="Real-time vessel positions, speed, heading and ETA.",
            cache_strategy=CacheStrategy.REALTIME_UPDATES,
            endpoints=_by_id_pair("vessel_locations", "vessellocations", VesselLocation, "the current position"),
        ),
        EndpointGroup(
            name="vessel-histories",
            description="Past sailings with scheduled and actual departure times.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_vessel_history_by_vessel_and_date_range",
                    endpoint="/vesselhistory/{vesselName}/{dateStart}/{dateEnd}",
                    input_model=VesselHistoryInput,
                    output_type=list[VesselHistory],
                    description="List sailings of one vessel between two dates.",
                    sample_params=_history_sample,
                ),
            ),
        ),
    ),
)
