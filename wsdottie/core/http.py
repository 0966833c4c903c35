"""HTTP session and fetch strategies.

Both strategies take a finished URL and return the raw JSON text of the
response; decoding happens later in ``wsdottie.core.normalize``.
"""

from __future__ import annotations

import logging
import random
import re
import time
from typing import Callable

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from wsdottie.config.settings import WsdotConfig, get_user_agent

logger = logging.getLogger(__name__)

FetchStrategy = Callable[..., str]

# callback(...) with optional "/**/" prefix and trailing ";"
_JSONP_RE = re.compile(r"^\s*(?:/\*\*/\s*)?([A-Za-z_$][\w$.]*)\s*\((.*)\)\s*;?\s*$", re.DOTALL)


def make_session(
    *,
    user_agent: str | None = None,
    total_retries: int = 3,
    backoff: float = 1.0,
    pool_connections: int = 20,
    pool_maxsize: int = 20,
    status_forcelist: tuple[int, ...] = (429, 500, 502, 503, 504),
    allowed_methods: tuple[str, ...] = ("GET",),
) -> requests.Session:
    """
    Create a pre-configured requests.Session with retry + pooling.

    Retries cover transient upstream failures only; the final status is
    returned to the caller (``raise_on_status=False``) so it can be
    classified into a WsdotApiError.
    """
    s = requests.Session()
    ua = user_agent or get_user_agent()
    s.headers.update({"User-Agent": ua, "Accept": "application/json"})

    retry = Retry(
        total=total_retries,
        connect=total_retries,
        read=total_retries,
        status=total_retries,
        backoff_factor=backoff,
        status_forcelist=status_forcelist,
        allowed_methods=list(allowed_methods),
        respect_retry_after_header=True,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=pool_connections,
        pool_maxsize=pool_maxsize,
    )
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


def _get_text(url: str, *, session: requests.Session, timeout: float) -> str:
    r = session.get(url, timeout=timeout)
    try:
        r.raise_for_status()
    except requests.HTTPError as e:
        snippet = (r.text or "")[:300]
        raise requests.HTTPError(
            f"HTTP {r.status_code} ({r.reason}). Body starts: {snippet!r}",
            response=r,
        ) from e
    return r.text


def fetch_native(url: str, *, session: requests.Session, timeout: float) -> str:
    """
    GET `url` and return the body text.

    Raises:
        requests.HTTPError: On a non-2xx status (``response`` attached).
        requests.RequestException: On connection failures and timeouts.
    """
    return _get_text(url, session=session, timeout=timeout)


def make_callback_name() -> str:
    """Unique JSONP callback name, e.g. ``jsonp_1703123456789_48213``."""
    return f"jsonp_{int(time.time() * 1000)}_{random.randint(0, 99999)}"


def strip_jsonp_padding(text: str) -> str:
    """
    Return the JSON inside a ``callback(...)`` wrapper.

    Text without a wrapper is returned unchanged, since some endpoints
    ignore the callback parameter.
    """
    match = _JSONP_RE.match(text)
    if not match:
        return text
    return match.group(2)


def fetch_jsonp(url: str, *, session: requests.Session, timeout: float) -> str:
    """
    GET `url` with a JSONP ``callback`` parameter and unwrap the padding.

    The upstream APIs only send CORS headers on their JSONP variant. This
    mirrors what a script-tag request returns so the same endpoints can be
    exercised outside a browser.
    """
    joiner = "&" if "?" in url else "?"
    callback = make_callback_name()
    text = _get_text(f"{url}{joiner}callback={callback}", session=session, timeout=timeout)
    return strip_jsonp_padding(text)


def select_fetch_strategy(config: WsdotConfig) -> FetchStrategy:
    """Pick the fetch strategy for `config`; "auto" means native here."""
    if config.fetch_strategy == "jsonp":
        return fetch_jsonp
    return fetch_native
