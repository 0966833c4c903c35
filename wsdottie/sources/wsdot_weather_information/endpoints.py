"""Endpoint definitions for the WSDOT Weather Information API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import StationIdInput, StationListInput, WeatherInfo, WeatherSearchInput

wsdot_weather_information_api = ApiDefinition(
    name="wsdot-weather-information",
    title="WSDOT Weather Information API",
    base_path="/Traffic/api/WeatherInformation/WeatherInformationREST.svc",
    description="Current readings from roadside weather stations.",
    groups=(
        EndpointGroup(
            name="weather-info",
            description="Latest weather reading per station.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_weather_information",
                    endpoint="/GetCurrentWeatherInformationAsJson",
                    output_type=list[WeatherInfo],
                    description="List the current reading for every station.",
                ),
                EndpointMeta(
                    function_name="fetch_weather_information_by_station_id",
                    endpoint="/GetCurrentWeatherInformationByStationIDAsJson?StationID={StationID}",
                    input_model=StationIdInput,
                    output_type=WeatherInfo,
                    description="Get the current reading for one station.",
                    sample_params={"StationID": 1909},
                ),
                EndpointMeta(
                    function_name="fetch_weather_information_for_stations",
                    endpoint="/GetCurrentWeatherForStationsAsJson?StationList={StationList}",
                    input_model=StationListInput,
                    output_type=list[WeatherInfo],
                    description="List current readings for several stations.",
                    sample_params={"StationList": [1909, 1966, 1970]},
                ),
            ),
        ),
        EndpointGroup(
            name="weather-history",
            description="Past readings for a station.",
            cache_strategy=CacheStrategy.HOURLY_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="search_weather_information",
                    endpoint=(
                        "/SearchWeatherInformationAsJson?StationID={StationID}"
                        "&SearchStartTime={SearchStartTime}&SearchEndTime={SearchEndTime}"
                    ),
                    input_model=WeatherSearchInput,
                    output_type=list[WeatherInfo],
                    description="List readings for one station between two dates.",
                    sample_params=lambda: {
                        "StationID": 1909,
                        "SearchStartTime": days_from_today(-1),
                        "SearchEndTime": days_from_today(0),
                    },
                ),
            ),
        ),
    ),
)
