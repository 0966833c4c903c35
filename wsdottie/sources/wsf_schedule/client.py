"""Fetch functions for the WSF Schedule API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsf_schedule_api as api

fetch_cache_flush_date_schedule = make_fetch_function(api.endpoint("fetch_cache_flush_date_schedule"))
fetch_schedule_valid_date_range = make_fetch_function(api.endpoint("fetch_schedule_valid_date_range"))
fetch_schedule_terminals = make_fetch_function(api.endpoint("fetch_schedule_terminals"))
fetch_schedule_terminal_mates = make_fetch_function(api.endpoint("fetch_schedule_terminal_mates"))
fetch_terminals_and_mates = make_fetch_function(api.endpoint("fetch_terminals_and_mates"))
fetch_terminals_and_mates_by_route = make_fetch_function(api.endpoint("fetch_terminals_and_mates_by_route"))
fetch_routes = make_fetch_function(api.endpoint("fetch_routes"))
fetch_routes_by_terminals = make_fetch_function(api.endpoint("fetch_routes_by_terminals"))
fetch_routes_having_service_disruptions = make_fetch_function(
    api.endpoint("fetch_routes_having_service_disruptions")
)
fetch_route_details = make_fetch_function(api.endpoint("fetch_route_details"))
fetch_route_details_by_route = make_fetch_function(api.endpoint("fetch_route_details_by_route"))
fetch_route_details_by_terminals = make_fetch_function(api.endpoint("fetch_route_details_by_terminals"))
fetch_active_seasons = make_fetch_function(api.endpoint("fetch_active_seasons"))
fetch_scheduled_routes = make_fetch_function(api.endpoint("fetch_scheduled_routes"))
fetch_scheduled_routes_by_season = make_fetch_function(api.endpoint("fetch_scheduled_routes_by_season"))
fetch_sailings_by_route_id = make_fetch_function(api.endpoint("fetch_sailings_by_route_id"))
fetch_all_sailings_by_sched_route_id = make_fetch_function(
    api.endpoint("fetch_all_sailings_by_sched_route_id")
)
fetch_schedule_by_trip_date_and_route_id = make_fetch_function(
    api.endpoint("fetch_schedule_by_trip_date_and_route_id")
)
fetch_schedule_by_trip_date_and_terminals = make_fetch_function(
    api.endpoint("fetch_schedule_by_trip_date_and_terminals")
)
fetch_schedule_today_by_terminals = make_fetch_function(api.endpoint("fetch_schedule_today_by_terminals"))
fetch_schedule_today_by_route = make_fetch_function(api.endpoint("fetch_schedule_today_by_route"))
fetch_time_adjustments = make_fetch_function(api.endpoint("fetch_time_adjustments"))
fetch_time_adjustments_by_route = make_fetch_function(api.endpoint("fetch_time_adjustments_by_route"))
fetch_time_adjustments_by_sched_route = make_fetch_function(
    api.endpoint("fetch_time_adjustments_by_sched_route")
)
fetch_schedule_alerts = make_fetch_function(api.endpoint("fetch_schedule_alerts"))
fetch_alternative_formats = make_fetch_function(api.endpoint("fetch_alternative_formats"))
