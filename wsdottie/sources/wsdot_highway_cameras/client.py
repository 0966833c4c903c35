"""Fetch functions for the WSDOT Highway Cameras API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_highway_cameras_api as api

fetch_highway_cameras = make_fetch_function(api.endpoint("fetch_highway_cameras"))
fetch_highway_camera_by_camera_id = make_fetch_function(api.endpoint("fetch_highway_camera_by_camera_id"))
search_highway_cameras = make_fetch_function(api.endpoint("search_highway_cameras"))
