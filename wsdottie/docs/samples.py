"""
Capture live sample responses for every endpoint.

Each endpoint is called with its sample params (unvalidated, normalized)
and the result is stored as docs/generated/sample-data/<api>/<function>.json.
The OpenAPI generator uses these files as response examples.

Requires WSDOT_ACCESS_TOKEN.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import orjson
from tqdm import tqdm

from wsdottie.config.settings import get_config
from wsdottie.core.errors import WsdotError
from wsdottie.core.fetch import WsdotClient
from wsdottie.docs.openapi import DEFAULT_SAMPLES_DIR
from wsdottie.endpoints import endpoints_flat
from wsdottie.endpoints.types import Endpoint
from wsdottie.utils import timed_block

logger = logging.getLogger(__name__)

# Upstream answers HTTP 400 for these with the documented sample params
SKIP_ENDPOINTS = frozenset(
    {
        "wsdot-toll-rates:fetch_toll_trip_info",
    }
)


def sample_path(out_dir: Path, endpoint: Endpoint) -> Path:
    return Path(out_dir) / endpoint.api / f"{endpoint.function_name}.json"


def save_sample(out_dir: Path, endpoint: Endpoint, data) -> Path:
    path = sample_path(out_dir, endpoint)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
    return path


def capture_sample_data(
    out_dir: Path = DEFAULT_SAMPLES_DIR,
    *,
    client: WsdotClient | None = None,
    api_filter: Optional[str] = None,
    endpoint_filter: Optional[str] = None,
) -> dict:
    """
    Fetch and store a sample response for each selected endpoint.

    Args:
        out_dir: Root directory of the sample files.
        client: Client to use; one with logging disabled is built when omitted.
        api_filter: Only endpoints of this API family.
        endpoint_filter: Only the endpoint with this function name.

    Returns:
        dict with "saved", "failed" and "skipped" lists of endpoint ids.
    """
    client = client or WsdotClient(get_config().with_overrides(log_mode="none"))
    selected = [
        ep
        for ep in endpoints_flat()
        if (api_filter is None or ep.api == api_filter)
        and (endpoint_filter is None or ep.function_name == endpoint_filter)
    ]

    summary: dict[str, list[str]] = {"saved": [], "failed": [], "skipped": []}
    for endpoint in tqdm(selected, desc="  Capturing samples", unit="endpoint"):
        if endpoint.id in SKIP_ENDPOINTS:
            summary["skipped"].append(endpoint.id)
            continue
        try:
            data = client.fetch(endpoint, endpoint.get_sample_params(), validate=False)
        except WsdotError as e:
            tqdm.write(f"  ✗ Failed to fetch {endpoint.id}: {e}")
            summary["failed"].append(endpoint.id)
            continue
        save_sample(out_dir, endpoint, data)
        summary["saved"].append(endpoint.id)

    logger.info(
        "samples: %d saved, %d failed, %d skipped",
        len(summary["saved"]),
        len(summary["failed"]),
        len(summary["skipped"]),
    )
    return summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Capture sample responses from the WSDOT/WSF APIs")
    parser.add_argument("--out", type=Path, default=DEFAULT_SAMPLES_DIR, help="Output directory")
    parser.add_argument("--api", help="Only this API family (e.g. wsf-vessels)")
    parser.add_argument("--endpoint", help="Only this function name")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    with timed_block("Capturing sample data", log=logger) as timer:
        summary = capture_sample_data(args.out, api_filter=args.api, endpoint_filter=args.endpoint)

    print(f"✓ {len(summary['saved'])} saved, {len(summary['skipped'])} skipped in {timer.elapsed:.1f}s")
    if summary["failed"]:
        print(f"✗ Failed to capture {len(summary['failed'])} endpoint(s):")
        for endpoint_id in summary["failed"]:
            print(f"  - {endpoint_id}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
