"""Endpoint definitions for the WSF Schedule API."""

from __future__ import annotations

from datetime import datetime

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    ActiveSeason,
    AlertDetail,
    AlternativeFormat,
    Route,
    RouteDetail,
    RouteIdInput,
    SchedRoute,
    SchedRouteIdInput,
    Schedule,
    ScheduleTerminal,
    ScheduleTodayByRouteInput,
    ScheduleTodayByTerminalsInput,
    SeasonIdInput,
    Sailing,
    SubjectNameInput,
    TerminalMate,
    TerminalMatesInput,
    TimeAdjustment,
    TripDateInput,
    TripDateRouteInput,
    TripDateTerminalsInput,
    ValidDateRange,
)

# Seattle / Bainbridge Island
SEATTLE = 7
BAINBRIDGE = 3
SEATTLE_BAINBRIDGE_ROUTE = 5
SAMPLE_SCHED_ROUTE_ID = 2401
SAMPLE_SEASON_ID = 193


def _trip_date() -> dict:
    return {"tripDate": days_from_today(1)}


def _trip_date_route() -> dict:
    return {**_trip_date(), "routeId": SEATTLE_BAINBRIDGE_ROUTE}


def _trip_date_terminals() -> dict:
    return {**_trip_date(), "departingTerminalId": SEATTLE, "arrivingTerminalId": BAINBRIDGE}


def _terminal_mates() -> dict:
    return {**_trip_date(), "terminalId": SEATTLE}


TERMINALS = "{departingTerminalId}/{arrivingTerminalId}"

wsf_schedule_api = ApiDefinition(
    name="wsf-schedule",
    title="WSF Schedule API",
    base_path="/ferries/api/schedule/rest",
    description="Sailing schedules, routes, seasons, time adjustments and service alerts.",
    groups=(
        EndpointGroup(
            name="cache-flush-date",
            description="When the cacheable data of this API last changed.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_cache_flush_date_schedule",
                    endpoint="/cacheflushdate",
                    output_type=datetime,
                    description="Get the time the schedule data cache was last flushed.",
                ),
            ),
        ),
        EndpointGroup(
            name="schedule-valid-date-range",
            description="Range of trip dates schedules are published for.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_schedule_valid_date_range",
                    endpoint="/validdaterange",
                    output_type=ValidDateRange,
                    description="Get the first and last trip dates with a published schedule.",
                ),
            ),
        ),
        EndpointGroup(
            name="schedule-terminals",
            description="Terminals and the terminals they sail to.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_schedule_terminals",
                    endpoint="/terminals/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[ScheduleTerminal],
                    description="List departing terminals for a trip date.",
                    sample_params=_trip_date,
                ),
                EndpointMeta(
                    function_name="fetch_schedule_terminal_mates",
                    endpoint="/terminalmates/{tripDate}/{terminalId}",
                    input_model=TerminalMatesInput,
                    output_type=list[ScheduleTerminal],
                    description="List arriving terminals reachable from one terminal.",
                    sample_params=_terminal_mates,
                ),
                EndpointMeta(
                    function_name="fetch_terminals_and_mates",
                    endpoint="/terminalsandmates/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[TerminalMate],
                    description="List every valid departing/arriving terminal pair.",
                    sample_params=_trip_date,
                ),
                EndpointMeta(
                    function_name="fetch_terminals_and_mates_by_route",
                    endpoint="/terminalsandmatesbyroute/{tripDate}/{routeId}",
                    input_model=TripDateRouteInput,
                    output_type=list[TerminalMate],
                    description="List the terminal pairs served by one route.",
                    sample_params=_trip_date_route,
                ),
            ),
        ),
        EndpointGroup(
            name="routes",
            description="Routes in service on a trip date.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_routes",
                    endpoint="/routes/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[Route],
                    description="List routes for a trip date.",
                    sample_params=_trip_date,
                ),
                EndpointMeta(
                    function_name="fetch_routes_by_terminals",
                    endpoint=f"/routes/{{tripDate}}/{TERMINALS}",
                    input_model=TripDateTerminalsInput,
                    output_type=list[Route],
                    description="List routes between two terminals.",
                    sample_params=_trip_date_terminals,
                ),
                EndpointMeta(
                    function_name="fetch_routes_having_service_disruptions",
                    endpoint="/routeshavingservicedisruptions/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[Route],
                    description="List routes with service disruptions on a trip date.",
                    sample_params=_trip_date,
                ),
            ),
        ),
        EndpointGroup(
            name="route-details",
            description="Route notes, crossing times and alerts.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_route_details",
                    endpoint="/routedetails/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[RouteDetail],
                    description="List detailed information for every route.",
                    sample_params=_trip_date,
                ),
                EndpointMeta(
                    function_name="fetch_route_details_by_route",
                    endpoint="/routedetails/{tripDate}/{routeId}",
                    input_model=TripDateRouteInput,
                    output_type=RouteDetail,
                    description="Get detailed information for one route.",
                    sample_params=_trip_date_route,
                ),
                EndpointMeta(
                    function_name="fetch_route_details_by_terminals",
                    endpoint=f"/routedetails/{{tripDate}}/{TERMINALS}",
                    input_model=TripDateTerminalsInput,
                    output_type=list[RouteDetail],
                    description="List detailed information for routes between two terminals.",
                    sample_params=_trip_date_terminals,
                ),
            ),
        ),
        EndpointGroup(
            name="scheduled-routes",
            description="Seasons and the routes scheduled within them.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_active_seasons",
                    endpoint="/activeseasons",
                    output_type=list[ActiveSeason],
                    description="List the current and upcoming schedule seasons.",
                ),
                EndpointMeta(
                    function_name="fetch_scheduled_routes",
                    endpoint="/schedroutes",
                    output_type=list[SchedRoute],
                    description="List scheduled routes for the current and upcoming seasons.",
                ),
                EndpointMeta(
                    function_name="fetch_scheduled_routes_by_season",
                    endpoint="/schedroutes/{seasonId}",
                    input_model=SeasonIdInput,
                    output_type=list[SchedRoute],
                    description="List scheduled routes for one season.",
                    sample_params={"seasonId": SAMPLE_SEASON_ID},
                ),
            ),
        ),
        EndpointGroup(
            name="sailings",
            description="Sailings (schedule columns) of a scheduled route.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_sailings_by_route_id",
                    endpoint="/sailings/{schedRouteId}",
                    input_model=SchedRouteIdInput,
                    output_type=list[Sailing],
                    description="List active sailings of a scheduled route.",
                    sample_params={"schedRouteId": SAMPLE_SCHED_ROUTE_ID},
                ),
                EndpointMeta(
                    function_name="fetch_all_sailings_by_sched_route_id",
                    endpoint="/allsailings/{schedRouteId}",
                    input_model=SchedRouteIdInput,
                    output_type=list[Sailing],
                    description="List all sailings of a scheduled route, including inactive ones.",
                    sample_params={"schedRouteId": SAMPLE_SCHED_ROUTE_ID},
                ),
            ),
        ),
        EndpointGroup(
            name="schedules",
            description="Departure and arrival times.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_schedule_by_trip_date_and_route_id",
                    endpoint="/schedule/{tripDate}/{routeId}",
                    input_model=TripDateRouteInput,
                    output_type=Schedule,
                    description="Get the schedule of one route on a trip date.",
                    sample_params=_trip_date_route,
                ),
                EndpointMeta(
                    function_name="fetch_schedule_by_trip_date_and_terminals",
                    endpoint=f"/schedule/{{tripDate}}/{TERMINALS}",
                    input_model=TripDateTerminalsInput,
                    output_type=Schedule,
                    description="Get the schedule between two terminals on a trip date.",
                    sample_params=_trip_date_terminals,
                ),
            ),
        ),
        EndpointGroup(
            name="schedule-today",
            description="Today's departures, optionally only those still to come.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_schedule_today_by_terminals",
                    endpoint=f"/scheduletoday/{TERMINALS}/{{onlyRemainingTimes}}",
                    input_model=ScheduleTodayByTerminalsInput,
                    output_type=Schedule,
                    description="Get today's schedule between two terminals.",
                    sample_params={
                        "departingTerminalId": SEATTLE,
                        "arrivingTerminalId": BAINBRIDGE,
                        "onlyRemainingTimes": False,
                    },
                ),
                EndpointMeta(
                    function_name="fetch_schedule_today_by_route",
                    endpoint="/scheduletoday/{routeId}/{onlyRemainingTimes}",
                    input_model=ScheduleTodayByRouteInput,
                    output_type=Schedule,
                    description="Get today's schedule of one route.",
                    sample_params={"routeId": SEATTLE_BAINBRIDGE_ROUTE, "onlyRemainingTimes": False},
                ),
            ),
        ),
        EndpointGroup(
            name="time-adjustments",
            description="Departure times that differ from the published schedule.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_time_adjustments",
                    endpoint="/timeadj",
                    output_type=list[TimeAdjustment],
                    description="List all time adjustments.",
                ),
                EndpointMeta(
                    function_name="fetch_time_adjustments_by_route",
                    endpoint="/timeadjbyroute/{routeId}",
                    input_model=RouteIdInput,
                    output_type=list[TimeAdjustment],
                    description="List time adjustments for one route.",
                    sample_params={"routeId": SEATTLE_BAINBRIDGE_ROUTE},
                ),
                EndpointMeta(
                    function_name="fetch_time_adjustments_by_sched_route",
                    endpoint="/timeadjbyschedroute/{schedRouteId}",
                    input_model=SchedRouteIdInput,
                    output_type=list[TimeAdjustment],
                    description="List time adjustments for one scheduled route.",
                    sample_params={"schedRouteId": SAMPLE_SCHED_ROUTE_ID},
                ),
            ),
        ),
        EndpointGroup(
            name="schedule-alerts",
            description="Service alerts published with the schedule.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_schedule_alerts",
                    endpoint="/alerts",
                    output_type=list[AlertDetail],
                    description="List all current schedule alerts.",
                ),
            ),
        ),
        EndpointGroup(
            name="schedule-alternative-formats",
            description="Schedule documents in other formats.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_alternative_formats",
                    endpoint="/alternativeformats/{subjectName}",
                    input_model=SubjectNameInput,
                    output_type=list[AlternativeFormat],
                    description="List alternative schedule formats for a subject.",
                    sample_params={"subjectName": "Fauntleroy-Southworth"},
                ),
            ),
        ),
    ),
)
