"""Fetch functions for the WSF Vessels API."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from pydantic import ValidationError

from wsdottie.core.errors import create_validation_error
from wsdottie.core.fetch import WsdotClient, get_default_client, make_fetch_function

from .endpoints import wsf_vessels_api as api
from .schemas import FleetHistoryInput, MultipleVesselHistoriesInput

logger = logging.getLogger(__name__)


fetch_cache_flush_date_vessels = make_fetch_function(api.endpoint("fetch_cache_flush_date_vessels"))

fetch_vessel_basics = make_fetch_function(api.endpoint("fetch_vessel_basics"))
fetch_vessel_basics_by_vessel_id = make_fetch_function(api.endpoint("fetch_vessel_basics_by_vessel_id"))

fetch_vessel_accommodations = make_fetch_function(api.endpoint("fetch_vessel_accommodations"))
fetch_vessel_accommodations_by_vessel_id = make_fetch_function(
    api.endpoint("fetch_vessel_accommodations_by_vessel_id")
)

fetch_vessel_stats = make_fetch_function(api.endpoint("fetch_vessel_stats"))
fetch_vessel_stats_by_vessel_id = make_fetch_function(api.endpoint("fetch_vessel_stats_by_vessel_id"))

fetch_vessel_verbose = make_fetch_function(api.endpoint("fetch_vessel_verbose"))
fetch_vessel_verbose_by_vessel_id = make_fetch_function(api.endpoint("fetch_vessel_verbose_by_vessel_id"))

fetch_vessel_locations = make_fetch_function(api.endpoint("fetch_vessel_locations"))
fetch_vessel_locations_by_vessel_id = make_fetch_function(api.endpoint("fetch_vessel_locations_by_vessel_id"))

fetch_vessel_history_by_vessel_and_date_range = make_fetch_function(
    api.endpoint("fetch_vessel_history_by_vessel_and_date_range")
)
_HISTORY = fetch_vessel_history_by_vessel_and_date_range.endpoint


# Fleet as listed by WSF in 2024
FLEET_VESSEL_NAMES = (
    "Cathlamet",
    "Chelan",
    "Chetzemoka",
    "Chimacum",
    "Issaquah",
    "Kaleetan",
    "Kennewick",
    "Kitsap",
    "Kittitas",
    "Puyallup",
    "Salish",
    "Samish",
    "Sealth",
    "Spokane",
    "Tacoma",
    "Tillikum",
    "Tokitae",
    "Walla Walla",
    "Wenatchee",
    "Yakima",
    "Zumwalt",
)


def _validated(model, params: dict, context: str):
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise create_validation_error(e, context, endpoint=_HISTORY.id) from e


def fetch_multiple_vessel_histories(
    params: Optional[dict] = None,
    *,
    client: WsdotClient | None = None,
    validate: bool = True,
    **kwargs: Any,
) -> list:
    """
    Sailing history of several vessels over one date range, flattened.

    Requests go out `batchSize` at a time (default 6, at most 20); each
    batch finishes before the next starts. Results keep the order of
    `vesselNames`.

        fetch_multiple_vessel_histories(
            vesselNames=["Spokane", "Walla Walla"],
            dateStart=date(2024, 1, 1),
            dateEnd=date(2024, 1, 2),
        )

    Raises:
        WsdotApiError: TRANSFORM_ERROR for bad params (nothing is fetched),
            otherwise the first failure of any vessel's request.
    """
    args = _validated(
        MultipleVesselHistoriesInput,
        {**(params or {}), **kwargs},
        "fetch_multiple_vessel_histories input validation",
    )
    client = client or get_default_client()
    names = args.vesselNames

    results: list = []
    with ThreadPoolExecutor(max_workers=args.batchSize) as executor:
        for i in range(0, len(names), args.batchSize):
            batch = names[i:i + args.batchSize]
            logger.debug("vessel histories batch %d: %s", i // args.batchSize + 1, batch)
            batch_results = executor.map(
                lambda name: fetch_vessel_history_by_vessel_and_date_range(
                    {"vesselName": name, "dateStart": args.dateStart, "dateEnd": args.dateEnd},
                    client=client,
                    validate=validate,
                ),
                batch,
            )
            for history in batch_results:
                results.extend(history)
    return results


def fetch_all_vessel_histories(
    params: Optional[dict] = None,
    *,
    client: WsdotClient | None = None,
    validate: bool = True,
    **kwargs: Any,
) -> list:
    """Sailing history of every vessel in FLEET_VESSEL_NAMES over one date range."""
    args = _validated(
        FleetHistoryInput,
        {**(params or {}), **kwargs},
        "fetch_all_vessel_histories input validation",
    )
    return fetch_multiple_vessel_histories(
        {
            "vesselNames": list(FLEET_VESSEL_NAMES),
            "dateStart": args.dateStart,
            "dateEnd": args.dateEnd,
            "batchSize": args.batchSize,
        },
        client=client,
        validate=validate,
    )
