"""Settings for wsdottie."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from wsdottie.config.env import get_env

DEFAULT_BASE_URL = "https://www.wsdot.wa.gov"
DEFAULT_TIMEOUT_SECS = 30.0
DEFAULT_USER_AGENT = "ws-dottie-python"

FETCH_STRATEGIES = ("auto", "native", "jsonp")
LOG_MODES = ("none", "info", "debug")


@dataclass(frozen=True)
class WsdotConfig:
    """Connection settings shared by every request of one client.

    Attributes:
        api_key: WSDOT Traveler Information API access code. The same code
            is accepted by the WSF APIs.
        base_url: Scheme and host the endpoint paths are appended to.
        timeout: Per-request timeout in seconds.
        fetch_strategy: "auto", "native" or "jsonp".
        log_mode: "none", "info" or "debug".
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECS
    fetch_strategy: str = "auto"
    log_mode: str = "none"

    def __post_init__(self) -> None:
        if self.fetch_strategy not in FETCH_STRATEGIES:
            raise ValueError(
                f"fetch_strategy must be one of {FETCH_STRATEGIES}, got {self.fetch_strategy!r}"
            )
        if self.log_mode not in LOG_MODES:
            raise ValueError(f"log_mode must be one of {LOG_MODES}, got {self.log_mode!r}")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        # Normalise once so URL joining never produces "//"
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "WsdotConfig":
        """Build a config from WSDOT_* environment variables (or .env)."""
        timeout_raw = get_env("WSDOT_TIMEOUT")
        strategy = (get_env("WSDOT_FETCH_STRATEGY") or "auto").strip().lower()
        if (get_env("FORCE_JSONP") or "").strip().lower() == "true":
            strategy = "jsonp"

        return cls(
            api_key=(get_env("WSDOT_ACCESS_TOKEN") or "").strip(),
            base_url=(get_env("WSDOT_BASE_URL") or DEFAULT_BASE_URL).strip(),
            timeout=float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECS,
            fetch_strategy=strategy,
            log_mode=(get_env("WSDOT_LOG_MODE") or "none").strip().lower(),
        )

    def with_overrides(self, **changes) -> "WsdotConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


_default_config: Optional[WsdotConfig] = None


def configure(config: WsdotConfig | None = None, **overrides) -> WsdotConfig:
    """Set the process-wide default config used by module-level fetch functions.

    Either pass a ready-made config or keyword overrides applied on top of
    the environment (e.g. ``configure(api_key="...")``). Returns the new
    default.
    """
    global _default_config
    base = config or WsdotConfig.from_env()
    _default_config = base.with_overrides(**overrides) if overrides else base

    # The cached default client was built from the previous config
    from wsdottie.core.fetch import reset_default_client

    reset_default_client()
    return _default_config


def get_config() -> WsdotConfig:
    """Return the default config, reading the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = WsdotConfig.from_env()
    return _default_config


def get_user_agent() -> str:
    return get_env("WSDOTTIE_USER_AGENT") or DEFAULT_USER_AGENT
