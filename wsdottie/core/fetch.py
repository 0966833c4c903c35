"""Request pipeline: params -> URL -> fetch -> normalize -> validate."""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Any, Callable, Optional

import orjson
import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from wsdottie.config.settings import WsdotConfig, get_config
from wsdottie.core.errors import (
    ErrorCode,
    ErrorContext,
    WsdotApiError,
    check_api_message,
    create_api_error,
    create_validation_error,
)
from wsdottie.core.http import make_session, select_fetch_strategy
from wsdottie.core.normalize import parse_wsdot_json
from wsdottie.core.urls import build_url, redact_url

if TYPE_CHECKING:
    from wsdottie.endpoints.types import Endpoint

logger = logging.getLogger(__name__)

_adapters: dict[Any, TypeAdapter] = {}
_adapters_lock = threading.Lock()


def get_type_adapter(output_type: Any) -> TypeAdapter:
    """TypeAdapters are costly to build; keep one per output type."""
    with _adapters_lock:
        adapter = _adapters.get(output_type)
        if adapter is None:
            adapter = _adapters[output_type] = TypeAdapter(output_type)
        return adapter


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def to_jsonable(value: Any) -> Any:
    """Convert models and datetimes into plain JSON-compatible values."""
    return orjson.loads(orjson.dumps(value, default=_json_default))


def _summarize(value: Any) -> str:
    if isinstance(value, list):
        return f"{len(value)} items"
    if isinstance(value, dict):
        return f"{len(value)} fields"
    return type(value).__name__


class WsdotClient:
    """
    Client for the WSDOT Traveler Information and WSF APIs.

    Args:
        config: Settings for this client; read from the environment when
            omitted.
        session: requests.Session to reuse; a pooled one with retries is
            created when omitted.
    """

    def __init__(
        self,
        config: WsdotConfig | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or WsdotConfig.from_env()
        self.session = session or make_session()
        self._strategy = select_fetch_strategy(self.config)

    def __repr__(self) -> str:
        return (
            f"WsdotClient(base_url={self.config.base_url!r}, "
            f"fetch_strategy={self.config.fetch_strategy!r})"
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "WsdotClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def build_url(self, endpoint: "Endpoint", params: Optional[dict] = None) -> str:
        return build_url(
            self.config.base_url,
            endpoint.path,
            params,
            api_key=self.config.api_key,
        )

    def prepare_params(self, endpoint: "Endpoint", params: Optional[dict]) -> dict:
        """Validate and coerce `params` with the endpoint's input model."""
        try:
            model = endpoint.input_model.model_validate(params or {})
        except ValidationError as e:
            raise create_validation_error(e, f"{endpoint.id} input validation", endpoint=endpoint.id) from e
        return model.model_dump(exclude_none=True)

    def fetch_text(self, endpoint: "Endpoint", params: Optional[dict] = None) -> str:
        """Perform the HTTP call and return the raw body text."""
        if not self.config.api_key:
            raise WsdotApiError(
                "No API key configured. Set WSDOT_ACCESS_TOKEN or pass api_key in WsdotConfig.",
                ErrorCode.API_ERROR,
                context=ErrorContext(endpoint=endpoint.id),
            )

        try:
            url = self.build_url(endpoint, params)
        except ValueError as e:
            raise WsdotApiError(
                str(e), ErrorCode.TRANSFORM_ERROR, context=ErrorContext(endpoint=endpoint.id)
            ) from e

        safe_url = redact_url(url)
        if self.config.log_mode == "debug":
            logger.debug("GET %s", safe_url)

        try:
            text = self._strategy(url, session=self.session, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise create_api_error(e, endpoint.id, safe_url) from e

        if not text or not text.strip():
            raise WsdotApiError(
                "Empty body in response",
                ErrorCode.INVALID_RESPONSE,
                context=ErrorContext(endpoint=endpoint.id, url=safe_url),
            )
        return text

    def fetch(
        self,
        endpoint: "Endpoint",
        params: Optional[dict] = None,
        *,
        validate: bool = True,
    ) -> Any:
        """
        Call `endpoint` and return its normalized (and optionally validated) data.

        Args:
            endpoint: Resolved registry endpoint.
            params: Path/query parameters keyed by placeholder name.
            validate: When True, params go through the input model and the
                response through the output type, and model instances are
                returned. When False the normalized JSON value is returned.

        Raises:
            WsdotApiError: For HTTP, network, upstream and validation failures.
            ParseError: If the body is not valid JSON.
        """
        start = time.perf_counter()
        if validate:
            params = self.prepare_params(endpoint, params)

        if self.config.log_mode != "none":
            logger.info("%s %s", endpoint.id, params or {})

        text = self.fetch_text(endpoint, params)
        data = parse_wsdot_json(text)
        check_api_message(data, endpoint=endpoint.id)

        if validate:
            try:
                data = get_type_adapter(endpoint.output_type).validate_python(data)
            except ValidationError as e:
                raise create_validation_error(e, f"{endpoint.id} response validation", endpoint=endpoint.id) from e

        if self.config.log_mode != "none":
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("%s -> %s, %d bytes in %.0f ms", endpoint.id, _summarize(data), len(text), elapsed_ms)
        return data


_default_client: Optional[WsdotClient] = None
_default_lock = threading.Lock()


def get_default_client() -> WsdotClient:
    """Client built from ``get_config()``, created on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = WsdotClient(get_config())
        return _default_client


def reset_default_client() -> None:
    global _default_client
    with _default_lock:
        if _default_client is not None:
            _default_client.close()
        _default_client = None


def fetch_dottie(
    endpoint: "Endpoint",
    params: Optional[dict] = None,
    *,
    client: WsdotClient | None = None,
    validate: bool = True,
) -> Any:
    """Fetch through `client` (or the default client) with validation."""
    return (client or get_default_client()).fetch(endpoint, params, validate=validate)


def fetch_native(
    endpoint: "Endpoint",
    params: Optional[dict] = None,
    *,
    client: WsdotClient | None = None,
) -> Any:
    """Fetch and normalize without input or output validation."""
    return fetch_dottie(endpoint, params, client=client, validate=False)


def make_fetch_function(endpoint: "Endpoint") -> Callable[..., Any]:
    """
    Build a module-level fetch function for one endpoint.

    The returned function is named after ``endpoint.function_name`` and
    accepts parameters either as a dict or as keyword arguments:

        fetch_vessel_basics_by_vessel_id({"vesselId": 1})
        fetch_vessel_basics_by_vessel_id(vesselId=1, client=my_client)
    """

    def fetch_fn(
        params: Optional[dict] = None,
        *,
        client: WsdotClient | None = None,
        validate: bool = True,
        **kwargs: Any,
    ) -> Any:
        merged = {**(params or {}), **kwargs}
        return fetch_dottie(endpoint, merged, client=client, validate=validate)

    fetch_fn.__name__ = endpoint.function_name
    fetch_fn.__qualname__ = endpoint.function_name
    fetch_fn.__doc__ = f"{endpoint.description}\n\nGET {endpoint.path}"
    fetch_fn.endpoint = endpoint
    return fetch_fn
