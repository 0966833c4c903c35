"""
Command line access to every registered endpoint.

    fetch-dottie fetch_vessel_locations --pretty
    fetch-dottie fetch_fare_line_items '{"tripDate": "2025-08-26", "departingTerminalID": 1,
        "arrivingTerminalID": 10, "roundTrip": false}'
    fetch-native fetch_border_crossings --head 20

`fetch-dottie` validates params and responses with the endpoint models;
`fetch-native` returns the normalized upstream JSON as is.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional

import orjson

from wsdottie.config.settings import get_config
from wsdottie.core.dates import coerce_iso_datetime
from wsdottie.core.errors import ParseError, WsdotApiError
from wsdottie.core.fetch import WsdotClient, to_jsonable
from wsdottie.endpoints import endpoints_by_api, find_endpoint

logger = logging.getLogger(__name__)


def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("function_name", nargs="?", help="Endpoint function name, e.g. fetch_vessel_locations")
    parser.add_argument("params", nargs="?", help="Parameters as a JSON object (defaults to sample params)")
    parser.add_argument("--list", action="store_true", help="List all available endpoints")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output with 2-space indentation")
    parser.add_argument("--quiet", action="store_true", help="Suppress status messages")
    parser.add_argument("--silent", action="store_true", help="Suppress everything except the JSON output")
    parser.add_argument("--head", type=int, metavar="N", help="Truncate output to the first N lines")
    return parser


def coerce_params(value: Any) -> Any:
    """Turn ISO date strings anywhere in decoded params into datetimes."""
    if isinstance(value, dict):
        return {k: coerce_params(v) for k, v in value.items()}
    if isinstance(value, list):
        return [coerce_params(v) for v in value]
    if isinstance(value, str):
        parsed = coerce_iso_datetime(value)
        return parsed if parsed is not None else value
    return value


def parse_params(raw: Optional[str]) -> Optional[dict]:
    """
    Decode the params argument.

    Raises:
        ValueError: If it is not a JSON object.
    """
    if raw is None:
        return None
    try:
        decoded = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise ValueError(f"Params must be valid JSON: {e}") from e
    if not isinstance(decoded, dict):
        raise ValueError("Params must be a JSON object")
    return coerce_params(decoded)


def format_output(data: Any, *, pretty: bool = False, head: Optional[int] = None) -> str:
    option = orjson.OPT_INDENT_2 if pretty or head else 0
    text = orjson.dumps(to_jsonable(data), option=option).decode()
    if head and head > 0:
        text = "\n".join(text.splitlines()[:head])
    return text


def list_endpoints() -> str:
    lines = []
    for api_name, groups in endpoints_by_api().items():
        lines.append(api_name)
        for endpoints in groups.values():
            for name, endpoint in endpoints.items():
                lines.append(f"  {name:<52} {endpoint.description}")
    return "\n".join(lines)


def run(argv: Optional[list[str]], *, validate: bool, prog: str) -> int:
    description = (
        "Fetch a WSDOT/WSF endpoint with parameter and response validation"
        if validate
        else "Fetch a WSDOT/WSF endpoint without validation"
    )
    args = build_parser(prog, description).parse_args(argv)
    quiet = args.quiet or args.silent or bool(args.head)

    def status(message: str) -> None:
        if not quiet:
            print(message, file=sys.stderr)

    def fail(message: str) -> int:
        if not args.silent:
            print(message, file=sys.stderr)
        return 1

    if args.list:
        print(list_endpoints())
        return 0

    if not args.function_name:
        return fail("❌ Function name is required (use --list to see available functions)")

    endpoint = find_endpoint(args.function_name)
    if endpoint is None:
        return fail(f"❌ Function '{args.function_name}' not found (use --list to see available functions)")

    try:
        params = parse_params(args.params)
    except ValueError as e:
        return fail(f"❌ {e}")
    if params is None:
        params = endpoint.get_sample_params()

    config = get_config()
    if quiet:
        config = config.with_overrides(log_mode="none")

    status(f"🔍 Calling {endpoint.function_name}...")
    try:
        with WsdotClient(config) as client:
            data = client.fetch(endpoint, params, validate=validate)
    except WsdotApiError as e:
        logger.debug("%r", e)
        return fail(f"❌ Error calling {endpoint.function_name}: {e.user_message}\n{e.message}")
    except ParseError as e:
        return fail(f"❌ Error calling {endpoint.function_name}: invalid JSON in response ({e})")

    print(format_output(data, pretty=args.pretty, head=args.head))
    return 0


def main_dottie(argv: Optional[list[str]] = None) -> int:
    return run(argv, validate=True, prog="fetch-dottie")


def main_native(argv: Optional[list[str]] = None) -> int:
    return run(argv, validate=False, prog="fetch-native")


if __name__ == "__main__":
    raise SystemExit(main_dottie())
