"""Fetch functions for the WSDOT Highway Alerts API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_highway_alerts_api as api

fetch_alerts = make_fetch_function(api.endpoint("fetch_alerts"))
fetch_alert_by_id = make_fetch_function(api.endpoint("fetch_alert_by_id"))
fetch_alerts_by_map_area = make_fetch_function(api.endpoint("fetch_alerts_by_map_area"))
fetch_alerts_by_region_id = make_fetch_function(api.endpoint("fetch_alerts_by_region_id"))
search_alerts = make_fetch_function(api.endpoint("search_alerts"))
fetch_event_categories = make_fetch_function(api.endpoint("fetch_event_categories"))
fetch_map_areas = make_fetch_function(api.endpoint("fetch_map_areas"))
