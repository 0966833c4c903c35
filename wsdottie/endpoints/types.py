"""Endpoint registry types.

Each API family declares an ``ApiDefinition`` made of groups of
``EndpointMeta``. ``ApiDefinition.resolve()`` flattens that into
``Endpoint`` records carrying everything needed to call, cache and
document a single endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict

from wsdottie.core.cache import CacheStrategy

SampleParams = Union[dict, Callable[[], dict], None]


class WsdotModel(BaseModel):
    """Base for response models; unknown upstream fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class WsdotInput(BaseModel):
    """Base for endpoint parameter models; unknown params are rejected."""

    model_config = ConfigDict(extra="forbid")


class NoInput(WsdotInput):
    """Endpoints that take no parameters."""


def check_date_range(start: Any, end: Any, *, start_field: str, end_field: str) -> None:
    """Raise ValueError when a range's start falls after its end."""
    if start > end:
        raise ValueError(f"{start_field} must be before or equal to {end_field}")


@dataclass(frozen=True)
class EndpointMeta:
    function_name: str
    endpoint: str
    output_type: Any
    description: str
    input_model: type[WsdotInput] = NoInput
    sample_params: SampleParams = None


@dataclass(frozen=True)
class EndpointGroup:
    name: str
    description: str
    cache_strategy: CacheStrategy
    endpoints: tuple[EndpointMeta, ...]


@dataclass(frozen=True)
class Endpoint:
    """One callable endpoint, resolved against its API and group."""

    api: str
    api_title: str
    group: str
    function_name: str
    path: str
    input_model: type[WsdotInput]
    output_type: Any
    description: str
    cache_strategy: CacheStrategy
    sample_params: SampleParams = None

    @property
    def id(self) -> str:
        return f"{self.api}:{self.function_name}"

    def get_sample_params(self) -> dict:
        """Sample params as a dict; callables are evaluated on each call."""
        sample = self.sample_params
        if callable(sample):
            sample = sample()
        return dict(sample or {})


@dataclass(frozen=True)
class ApiDefinition:
    name: str
    title: str
    base_path: str
    description: str = ""
    groups: tuple[EndpointGroup, ...] = field(default_factory=tuple)

    def resolve(self) -> list[Endpoint]:
        return [
            Endpoint(
                api=self.name,
                api_title=self.title,
                group=group.name,
                function_name=meta.function_name,
                path=f"{self.base_path}{meta.endpoint}",
                input_model=meta.input_model,
                output_type=meta.output_type,
                description=meta.description,
                cache_strategy=group.cache_strategy,
                sample_params=meta.sample_params,
            )
            for group in self.groups
            for meta in group.endpoints
        ]

    def endpoint(self, function_name: str) -> Endpoint:
        """Resolved endpoint by function name.

        Raises:
            KeyError: If no endpoint of this API has that name.
        """
        for ep in self.resolve():
            if ep.function_name == function_name:
                return ep
        raise KeyError(f"{self.name} has no endpoint {function_name!r}")
