"""Fetch functions for the WSF Fares API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsf_fares_api as api

fetch_cache_flush_date_fares = make_fetch_function(api.endpoint("fetch_cache_flush_date_fares"))
fetch_fares_valid_date_range = make_fetch_function(api.endpoint("fetch_fares_valid_date_range"))
fetch_fares_terminals = make_fetch_function(api.endpoint("fetch_fares_terminals"))
fetch_fares_terminal_mates = make_fetch_function(api.endpoint("fetch_fares_terminal_mates"))
fetch_terminal_combo = make_fetch_function(api.endpoint("fetch_terminal_combo"))
fetch_terminal_combo_verbose = make_fetch_function(api.endpoint("fetch_terminal_combo_verbose"))
fetch_fare_line_items_basic = make_fetch_function(api.endpoint("fetch_fare_line_items_basic"))
fetch_fare_line_items = make_fetch_function(api.endpoint("fetch_fare_line_items"))
fetch_fare_line_items_verbose = make_fetch_function(api.endpoint("fetch_fare_line_items_verbose"))
fetch_fare_totals = make_fetch_function(api.endpoint("fetch_fare_totals"))
