"""Fetch functions for the WSF Terminals API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsf_terminals_api as api

fetch_cache_flush_date_terminals = make_fetch_function(api.endpoint("fetch_cache_flush_date_terminals"))

fetch_terminal_basics = make_fetch_function(api.endpoint("fetch_terminal_basics"))
fetch_terminal_basics_by_terminal_id = make_fetch_function(api.endpoint("fetch_terminal_basics_by_terminal_id"))

fetch_terminal_bulletins = make_fetch_function(api.endpoint("fetch_terminal_bulletins"))
fetch_terminal_bulletins_by_terminal_id = make_fetch_function(
    api.endpoint("fetch_terminal_bulletins_by_terminal_id")
)

fetch_terminal_locations = make_fetch_function(api.endpoint("fetch_terminal_locations"))
fetch_terminal_locations_by_terminal_id = make_fetch_function(
    api.endpoint("fetch_terminal_locations_by_terminal_id")
)

fetch_terminal_sailing_space = make_fetch_function(api.endpoint("fetch_terminal_sailing_space"))
fetch_terminal_sailing_space_by_terminal_id = make_fetch_function(
    api.endpoint("fetch_terminal_sailing_space_by_terminal_id")
)

fetch_terminal_transports = make_fetch_function(api.endpoint("fetch_terminal_transports"))
fetch_terminal_transports_by_terminal_id = make_fetch_function(
    api.endpoint("fetch_terminal_transports_by_terminal_id")
)

fetch_terminal_verbose = make_fetch_function(api.endpoint("fetch_terminal_verbose"))
fetch_terminal_verbose_by_terminal_id = make_fetch_function(api.endpoint("fetch_terminal_verbose_by_terminal_id"))

fetch_terminal_wait_times = make_fetch_function(api.endpoint("fetch_terminal_wait_times"))
fetch_terminal_wait_times_by_terminal_id = make_fetch_function(
    api.endpoint("fetch_terminal_wait_times_by_terminal_id")
)
