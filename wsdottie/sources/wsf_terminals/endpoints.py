"""Endpoint definitions for the WSF Terminals API."""

from __future__ import annotations

from datetime import datetime

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import (
    TerminalBasics,
    TerminalBulletins,
    TerminalIdInput,
    TerminalLocation,
    TerminalSailingSpace,
    TerminalTransports,
    TerminalVerbose,
    TerminalWaitTimes,
)

# Bainbridge Island
SAMPLE_TERMINAL_ID = {"terminalId": 3}


def _group(name: str, path: str, model, noun: str, strategy: CacheStrategy, description: str) -> EndpointGroup:
    fn = name.replace("-", "_")
    return EndpointGroup(
        name=name,
        description=description,
        cache_strategy=strategy,
        endpoints=(
            EndpointMeta(
                function_name=f"fetch_{fn}",
                endpoint=f"/{path}",
                output_type=list[model],
                description=f"List {noun} for every terminal.",
            ),
            EndpointMeta(
                function_name=f"fetch_{fn}_by_terminal_id",
                endpoint=f"/{path}/{{terminalId}}",
                input_model=TerminalIdInput,
                output_type=model,
                description=f"Get {noun} for one terminal.",
                sample_params=SAMPLE_TERMINAL_ID,
            ),
        ),
    )


wsf_terminals_api = ApiDefinition(
    name="wsf-terminals",
    title="WSF Terminals API",
    base_path="/ferries/api/terminals/rest",
    description="Terminal facilities, locations, bulletins, transport options, wait times and sailing space.",
    groups=(
        EndpointGroup(
            name="cache-flush-date",
            description="When the cacheable data of this API last changed.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_cache_flush_date_terminals",
                    endpoint="/cacheflushdate",
                    output_type=datetime,
                    description="Get the time the terminals data cache was last flushed.",
                ),
            ),
        ),
        _group(
            "terminal-basics",
            "terminalbasics",
            TerminalBasics,
            "basic facility details",
            CacheStrategy.DAILY_STATIC,
            "Names, regions and onboard-facility flags.",
        ),
        _group(
            "terminal-bulletins",
            "terminalbulletins",
            TerminalBulletins,
            "bulletins",
            CacheStrategy.HOURLY_UPDATES,
            "Alerts and announcements posted for terminals.",
        ),
        _group(
            "terminal-locations",
            "terminallocations",
            TerminalLocation,
            "address and coordinates",
            CacheStrategy.DAILY_STATIC,
            "Addresses, coordinates, map links and driving directions.",
        ),
        _group(
            "terminal-sailing-space",
            "terminalsailingspace",
            TerminalSailingSpace,
            "remaining vehicle space on upcoming sailings",
            CacheStrategy.REALTIME_UPDATES,
            "Drive-up and reservation space for upcoming departures.",
        ),
        _group(
            "terminal-transports",
            "terminaltransports",
            TerminalTransports,
            "parking and transit options",
            CacheStrategy.DAILY_STATIC,
            "Parking, shuttles, transit and other ways to reach terminals.",
        ),
        _group(
            "terminal-verbose",
            "terminalverbose",
            TerminalVerbose,
            "all published details",
            CacheStrategy.DAILY_STATIC,
            "Every terminal facet combined in one record.",
        ),
        _group(
            "terminal-wait-times",
            "terminalwaittimes",
            TerminalWaitTimes,
            "wait time notes",
            CacheStrategy.FIVE_MINUTE_UPDATES,
            "Posted wait time notes per route.",
        ),
    ),
)
