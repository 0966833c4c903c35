"""Endpoint definitions for the WSF Fares API."""

from __future__ import annotations

from datetime import datetime

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.dates import days_from_today
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    FaresTerminal,
    FareLineItemsInput,
    FareTotal,
    FareTotalsInput,
    LineItem,
    LineItemVerbose,
    TerminalCombo,
    TerminalComboInput,
    TerminalComboVerbose,
    TerminalMatesInput,
    TripDateInput,
    ValidDateRange,
)

# Bainbridge Island -> Seattle
BAINBRIDGE = 3
SEATTLE = 7


def _trip_date() -> dict:
    return {"tripDate": days_from_today(1)}


def _terminal_mates() -> dict:
    return {**_trip_date(), "terminalID": BAINBRIDGE}


def _terminal_combo() -> dict:
    return {**_trip_date(), "departingTerminalID": BAINBRIDGE, "arrivingTerminalID": SEATTLE}


def _line_items() -> dict:
    return {**_terminal_combo(), "roundTrip": False}


def _fare_totals() -> dict:
    return {**_line_items(), "fareLineItemIDs": [1, 2], "quantities": [3, 1]}


COMBO_PATH = "{tripDate}/{departingTerminalID}/{arrivingTerminalID}"

wsf_fares_api = ApiDefinition(
    name="wsf-fares",
    title="WSF Fares API",
    base_path="/ferries/api/fares/rest",
    description="Fare line items, terminal combinations and fare totals for Washington State Ferries.",
    groups=(
        EndpointGroup(
            name="cache-flush-date",
            description="When the cacheable data of this API last changed.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_cache_flush_date_fares",
                    endpoint="/cacheflushdate",
                    output_type=datetime,
                    description="Get the time the fares data cache was last flushed.",
                ),
            ),
        ),
        EndpointGroup(
            name="fares-valid-date-range",
            description="Range of trip dates fares can be queried for.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_fares_valid_date_range",
                    endpoint="/validdaterange",
                    output_type=ValidDateRange,
                    description="Get the first and last trip dates with published fares.",
                ),
            ),
        ),
        EndpointGroup(
            name="fares-terminals",
            description="Terminals that collect fares on a trip date.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_fares_terminals",
                    endpoint="/terminals/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[FaresTerminal],
                    description="List departing terminals for a trip date.",
                    sample_params=_trip_date,
                ),
                EndpointMeta(
                    function_name="fetch_fares_terminal_mates",
                    endpoint="/terminalmates/{tripDate}/{terminalID}",
                    input_model=TerminalMatesInput,
                    output_type=list[FaresTerminal],
                    description="List arriving terminals reachable from one terminal on a trip date.",
                    sample_params=_terminal_mates,
                ),
            ),
        ),
        EndpointGroup(
            name="terminal-combo",
            description="How fares are collected between two terminals.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_terminal_combo",
                    endpoint=f"/terminalcombo/{COMBO_PATH}",
                    input_model=TerminalComboInput,
                    output_type=TerminalCombo,
                    description="Get the fare collection description for one terminal pair.",
                    sample_params=_terminal_combo,
                ),
                EndpointMeta(
                    function_name="fetch_terminal_combo_verbose",
                    endpoint="/terminalcomboverbose/{tripDate}",
                    input_model=TripDateInput,
                    output_type=list[TerminalComboVerbose],
                    description="List fare collection descriptions for every terminal pair.",
                    sample_params=_trip_date,
                ),
            ),
        ),
        EndpointGroup(
            name="fare-line-items",
            description="Individual fares (adult, vehicle, bicycle, ...) for a route.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_fare_line_items_basic",
                    endpoint=f"/farelineitemsbasic/{COMBO_PATH}/{{roundTrip}}",
                    input_model=FareLineItemsInput,
                    output_type=list[LineItem],
                    description="List the most popular fares for a terminal pair.",
                    sample_params=_line_items,
                ),
                EndpointMeta(
                    function_name="fetch_fare_line_items",
                    endpoint=f"/farelineitems/{COMBO_PATH}/{{roundTrip}}",
                    input_model=FareLineItemsInput,
                    output_type=list[LineItem],
                    description="List every fare for a terminal pair.",
                    sample_params=_line_items,
                ),
                EndpointMeta(
                    function_name="fetch_fare_line_items_verbose",
                    endpoint="/farelineitemsverbose/{tripDate}",
                    input_model=TripDateInput,
                    output_type=LineItemVerbose,
                    description="Get every fare for every terminal pair on a trip date.",
                    sample_params=_trip_date,
                ),
            ),
        ),
        EndpointGroup(
            name="fare-totals",
            description="Price of a set of fares.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_fare_totals",
                    endpoint=f"/faretotals/{COMBO_PATH}/{{roundTrip}}/{{fareLineItemIDs}}/{{quantities}}",
                    input_model=FareTotalsInput,
                    output_type=list[FareTotal],
                    description="Total the given fare line items and quantities.",
                    sample_params=_fare_totals,
                ),
            ),
        ),
    ),
)
