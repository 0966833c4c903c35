"""URL construction for endpoint path templates.

Templates use `{name}` placeholders in both the path and the query part:

    /ferries/api/schedule/rest/scheduletoday/{departingTerminalId}/{arrivingTerminalId}/{onlyRemainingTimes}
    /Traffic/api/Bridges/ClearanceREST.svc/GetClearancesAsJson?Route={route}
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping
from urllib.parse import quote

from wsdottie.core.dates import to_yyyy_mm_dd

PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

# Query pairs like "Name={name}" whose placeholder was never filled
_UNFILLED_PAIR_RE = re.compile(r"[A-Za-z0-9_]+=\{[A-Za-z_][A-Za-z0-9_]*\}")

WSDOT_KEY_PARAM = "AccessCode"
WSF_KEY_PARAM = "apiaccesscode"

_REDACT_RE = re.compile(r"((?:AccessCode|apiaccesscode)=)[^&]*", re.IGNORECASE)


def format_param_value(value: Any) -> str:
    """Render one parameter value the way the upstream APIs expect it."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return to_yyyy_mm_dd(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_param_value(v) for v in value)
    return str(value)


def template_placeholders(template: str) -> list[str]:
    """Names of the `{name}` placeholders in `template`, in order."""
    return PLACEHOLDER_RE.findall(template)


def api_key_param(path: str) -> str:
    """Query parameter name for the access code: WSDOT Traffic vs WSF."""
    return WSDOT_KEY_PARAM if "/traffic/" in path.lower() else WSF_KEY_PARAM


def fill_template(template: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Substitute `params` into `template`.

    Args:
        template: Endpoint path, optionally with a `?query` part.
        params: Placeholder values. None values count as not supplied.

    Returns:
        The filled path and query (no base URL, no API key).

    Raises:
        ValueError: If a parameter has no placeholder, or a placeholder in
            the path part is left unfilled.
    """
    params = {k: v for k, v in (params or {}).items() if v is not None}
    path, sep, query = template.partition("?")

    known = set(template_placeholders(template))
    unknown = sorted(set(params) - known)
    if unknown:
        raise ValueError(f"Unknown parameter(s) for {template}: {', '.join(unknown)}")

    def _sub_path(match: re.Match) -> str:
        name = match.group(1)
        if name not in params:
            raise ValueError(f"Missing required path parameter {name!r} for {template}")
        return quote(format_param_value(params[name]), safe=",")

    def _sub_query(match: re.Match) -> str:
        name = match.group(1)
        if name not in params:
            return match.group(0)
        return quote(format_param_value(params[name]), safe=",")

    filled_path = PLACEHOLDER_RE.sub(_sub_path, path)
    if not sep:
        return filled_path

    filled_query = PLACEHOLDER_RE.sub(_sub_query, query)
    pairs = [p for p in filled_query.split("&") if p and not _UNFILLED_PAIR_RE.fullmatch(p)]
    return f"{filled_path}?{'&'.join(pairs)}" if pairs else filled_path


def build_url(
    base_url: str,
    template: str,
    params: Mapping[str, Any] | None = None,
    *,
    api_key: str | None = None,
) -> str:
    """
    Build a complete request URL.

    Examples:
        build_url("https://www.wsdot.wa.gov", "/ferries/api/vessels/rest/vesselbasics/{vesselId}",
                  {"vesselId": 1}, api_key="K")
          -> "https://www.wsdot.wa.gov/ferries/api/vessels/rest/vesselbasics/1?apiaccesscode=K"
    """
    url = base_url.rstrip("/") + fill_template(template, params)
    if api_key:
        joiner = "&" if "?" in url else "?"
        url = f"{url}{joiner}{api_key_param(template)}={quote(api_key, safe='')}"
    return url


def redact_url(url: str | None) -> str | None:
    """Mask the access code in `url` for logs and error messages."""
    if url is None:
        return None
    return _REDACT_RE.sub(r"\1***", url)
