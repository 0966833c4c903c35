"""Cache strategies and an in-process query cache.

Each endpoint group carries a ``CacheStrategy`` describing how fresh its
data needs to be. ``QueryCache`` applies those presets to calls made
through a ``WsdotClient``.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

import orjson

from wsdottie.core.errors import ErrorCode, WsdotApiError

if TYPE_CHECKING:
    from wsdottie.core.fetch import WsdotClient
    from wsdottie.endpoints.types import Endpoint

logger = logging.getLogger(__name__)

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)


@dataclass(frozen=True)
class CachePolicy:
    """Freshness settings for one strategy.

    Attributes:
        stale_time: Age after which a cached value is refetched on access.
        gc_time: Age after which an unused entry is dropped.
        refetch_interval: Suggested polling period, None for no polling.
        retry: Additional attempts after a failed fetch.
        retry_delay: Wait between attempts.
    """

    stale_time: timedelta
    gc_time: timedelta
    refetch_interval: Optional[timedelta]
    retry: int
    retry_delay: timedelta


class CacheStrategy(str, Enum):
    REALTIME_UPDATES = "REALTIME_UPDATES"
    MINUTE_UPDATES = "MINUTE_UPDATES"
    FIVE_MINUTE_UPDATES = "FIVE_MINUTE_UPDATES"
    HOURLY_UPDATES = "HOURLY_UPDATES"
    DAILY_UPDATES = "DAILY_UPDATES"
    DAILY_STATIC = "DAILY_STATIC"
    WEEKLY_STATIC = "WEEKLY_STATIC"
    NONE = "NONE"

    @property
    def policy(self) -> CachePolicy:
        return CACHE_POLICIES[self]


CACHE_POLICIES: dict[CacheStrategy, CachePolicy] = {
    CacheStrategy.REALTIME_UPDATES: CachePolicy(5 * SECOND, HOUR, 5 * SECOND, 1, 5 * SECOND),
    CacheStrategy.MINUTE_UPDATES: CachePolicy(MINUTE, HOUR, MINUTE, 0, 5 * SECOND),
    CacheStrategy.FIVE_MINUTE_UPDATES: CachePolicy(5 * MINUTE, HOUR, 5 * MINUTE, 3, 5 * SECOND),
    CacheStrategy.HOURLY_UPDATES: CachePolicy(HOUR, 6 * HOUR, HOUR, 5, 30 * SECOND),
    CacheStrategy.DAILY_UPDATES: CachePolicy(DAY, 2 * DAY, DAY, 5, MINUTE),
    CacheStrategy.DAILY_STATIC: CachePolicy(DAY, 2 * DAY, DAY, 5, 5 * SECOND),
    CacheStrategy.WEEKLY_STATIC: CachePolicy(WEEK, 2 * DAY, None, 5, 5 * SECOND),
    CacheStrategy.NONE: CachePolicy(timedelta(0), timedelta(0), None, 0, 5 * SECOND),
}


def _json_default(value: Any) -> Any:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def cache_key(endpoint_id: str, params: Optional[dict]) -> str:
    """Stable key: endpoint id plus the params serialized with sorted keys."""
    body = orjson.dumps(params or {}, option=orjson.OPT_SORT_KEYS, default=_json_default)
    return f"{endpoint_id}|{body.decode()}"


@dataclass
class _Entry:
    api: str
    value: Any
    fetched_at: float
    last_access: float
    gc_seconds: float


class QueryCache:
    """
    Thread-safe cache of endpoint results keyed by endpoint and params.

    Args:
        client: Client used for fetches; the default client when omitted.
        clock: Monotonic clock in seconds (injectable for tests).
        sleep: Sleep function used between retries.
    """

    def __init__(
        self,
        client: "WsdotClient | None" = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.RLock()
        self._entries: dict[str, _Entry] = {}
        self._flush_dates: dict[str, Any] = {}

    @property
    def client(self) -> "WsdotClient":
        if self._client is None:
            from wsdottie.core.fetch import get_default_client

            return get_default_client()
        return self._client

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(
        self,
        endpoint: "Endpoint",
        params: Optional[dict] = None,
        *,
        validate: bool = True,
        strategy: CacheStrategy | None = None,
    ) -> Any:
        """
        Return the cached value for `endpoint` + `params`, fetching when stale.

        Args:
            endpoint: Resolved registry endpoint.
            params: Endpoint parameters.
            validate: Passed through to ``WsdotClient.fetch``.
            strategy: Override of the endpoint's own cache strategy.

        Raises:
            WsdotApiError: When every attempt failed.
            ParseError: When the response body is not JSON.
        """
        policy = (strategy or endpoint.cache_strategy).policy
        key = cache_key(f"{endpoint.id}|{'v' if validate else 'n'}", params)
        now = self._clock()

        with self._lock:
            self._sweep_locked(now)
            entry = self._entries.get(key)
            if entry is not None and now - entry.fetched_at < policy.stale_time.total_seconds():
                entry.last_access = now
                logger.debug("cache hit %s", endpoint.id)
                return entry.value

        value = self._fetch_with_retry(endpoint, params, validate=validate, policy=policy)

        gc_seconds = policy.gc_time.total_seconds()
        if gc_seconds > 0:
            now = self._clock()
            with self._lock:
                self._entries[key] = _Entry(endpoint.api, value, now, now, gc_seconds)
        return value

    def _fetch_with_retry(self, endpoint, params, *, validate: bool, policy: CachePolicy) -> Any:
        attempt = 0
        while True:
            try:
                return self.client.fetch(endpoint, params, validate=validate)
            except WsdotApiError as e:
                # Shape errors do not fix themselves on retry
                if e.code == ErrorCode.TRANSFORM_ERROR or attempt >= policy.retry:
                    e.context.retry_count = attempt
                    raise
                attempt += 1
                logger.warning(
                    "%s failed (%s), retry %d/%d", endpoint.id, e.code.value, attempt, policy.retry
                )
                self._sleep(policy.retry_delay.total_seconds())

    def _sweep_locked(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if now - e.last_access >= e.gc_seconds]
        for k in expired:
            del self._entries[k]

    def sweep(self) -> int:
        """Drop entries unused for longer than their gc time; returns the count."""
        with self._lock:
            before = len(self._entries)
            self._sweep_locked(self._clock())
            return before - len(self._entries)

    def invalidate(self, api_name: str | None = None) -> int:
        """Drop all entries, or those of one API family. Returns the count."""
        with self._lock:
            if api_name is None:
                count = len(self._entries)
                self._entries.clear()
                return count
            keys = [k for k, e in self._entries.items() if e.api == api_name]
            for k in keys:
                del self._entries[k]
            return len(keys)

    def check_flush_date(self, api_name: str) -> bool:
        """
        Invalidate a WSF family's entries when its cache flush date moves.

        WSF publishes, per API, the last time its cacheable data changed.
        The first call only records the date.

        Returns:
            True if entries were invalidated.

        Raises:
            KeyError: If `api_name` has no cache flush date endpoint.
        """
        from wsdottie.endpoints import find_cache_flush_endpoint

        endpoint = find_cache_flush_endpoint(api_name)
        if endpoint is None:
            raise KeyError(f"No cache flush date endpoint for {api_name!r}")

        flush_date = self.client.fetch(endpoint, None, validate=False)
        with self._lock:
            previous = self._flush_dates.get(api_name)
            self._flush_dates[api_name] = flush_date
            if previous is None or previous == flush_date:
                return False

        dropped = self.invalidate(api_name)
        logger.info("%s cache flush date changed to %s, dropped %d entries", api_name, flush_date, dropped)
        return True
