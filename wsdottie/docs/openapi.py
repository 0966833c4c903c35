"""
OpenAPI 3.0 documents generated from the endpoint registry.

One document per API family. Input and output models are converted from
pydantic's JSON Schema (2020-12) to the OpenAPI 3.0 dialect by a static
mapping; nothing is patched onto the models themselves.

Usage:
    wsdottie-openapi --out docs/generated/openapi
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional

import orjson
import yaml
from pydantic import BaseModel, TypeAdapter

from wsdottie import __version__
from wsdottie.config.settings import DEFAULT_BASE_URL
from wsdottie.core.fetch import to_jsonable
from wsdottie.core.urls import api_key_param, template_placeholders
from wsdottie.endpoints import all_apis, find_api
from wsdottie.endpoints.types import ApiDefinition, Endpoint

OPENAPI_VERSION = "3.0.3"
REF_TEMPLATE = "#/components/schemas/{model}"

DEFAULT_OUT_DIR = Path("docs") / "generated" / "openapi"
DEFAULT_SAMPLES_DIR = Path("docs") / "generated" / "sample-data"

# JSON Schema keywords OpenAPI 3.0 does not understand
_DROPPED_KEYWORDS = ("$schema", "$id", "$defs", "examples")


def to_openapi_schema(schema: Any) -> Any:
    """Rewrite a JSON Schema fragment into its OpenAPI 3.0 equivalent.

    - ``anyOf: [X, {type: null}]`` becomes ``X`` with ``nullable: true``
      (wrapped in ``allOf`` when X is a ``$ref``)
    - ``const`` becomes a one-value ``enum``
    - keywords 3.0 lacks are dropped
    """
    if isinstance(schema, list):
        return [to_openapi_schema(s) for s in schema]
    if not isinstance(schema, dict):
        return schema

    out: dict[str, Any] = {}
    for key, value in schema.items():
        if key in _DROPPED_KEYWORDS:
            continue
        if key == "const":
            out["enum"] = [value]
        elif key in ("properties", "patternProperties"):
            out[key] = {name: to_openapi_schema(s) for name, s in value.items()}
        elif key in ("items", "additionalProperties", "not"):
            out[key] = to_openapi_schema(value)
        elif key in ("anyOf", "oneOf", "allOf"):
            out[key] = [to_openapi_schema(s) for s in value]
        else:
            out[key] = value

    variants = out.get("anyOf")
    if variants is not None:
        non_null = [v for v in variants if v.get("type") != "null"]
        if len(non_null) < len(variants):
            del out["anyOf"]
            if len(non_null) == 1:
                (only,) = non_null
                if "$ref" in only:
                    out["allOf"] = [only]
                else:
                    out = {**only, **out}
            elif non_null:
                out["anyOf"] = non_null
            out["nullable"] = True
    return out


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _register_schema(tp: Any, components: dict) -> dict:
    """JSON schema for `tp`, with every model hoisted into `components`."""
    schema = TypeAdapter(tp).json_schema(ref_template=REF_TEMPLATE, mode="serialization")
    for name, definition in schema.pop("$defs", {}).items():
        components.setdefault(name, to_openapi_schema(definition))
    if _is_model(tp):
        components.setdefault(tp.__name__, to_openapi_schema(schema))
        return {"$ref": REF_TEMPLATE.format(model=tp.__name__)}
    return to_openapi_schema(schema)


def _split_template(template: str) -> tuple[str, str]:
    path, _, query = template.partition("?")
    return path, query


def _parameters(endpoint: Endpoint, relative: str) -> list[dict]:
    path_part, _ = _split_template(relative)
    path_names = set(template_placeholders(path_part))
    schema = endpoint.input_model.model_json_schema(ref_template=REF_TEMPLATE)
    required = set(schema.get("required", []))
    samples = to_jsonable(endpoint.get_sample_params())

    params = []
    for name, prop in schema.get("properties", {}).items():
        location = "path" if name in path_names else "query"
        prop = dict(prop)
        description = prop.pop("description", None)
        prop.pop("title", None)
        param = {
            "name": name,
            "in": location,
            "required": location == "path" or name in required,
            "schema": to_openapi_schema(prop),
        }
        if description:
            param["description"] = description
        if name in samples:
            param["example"] = samples[name]
        params.append(param)
    return params


def load_sample(samples_dir: Optional[Path], endpoint: Endpoint) -> Any:
    """Recorded response for `endpoint`, arrays cut down to their first item."""
    if samples_dir is None:
        return None
    path = Path(samples_dir) / endpoint.api / f"{endpoint.function_name}.json"
    if not path.exists():
        return None
    data = orjson.loads(path.read_bytes())
    if isinstance(data, list):
        return data[:1]
    return data


def _operation(endpoint: Endpoint, relative: str, components: dict, samples_dir: Optional[Path]) -> dict:
    response: dict[str, Any] = {"schema": _register_schema(endpoint.output_type, components)}
    example = load_sample(samples_dir, endpoint)
    if example is not None:
        response["example"] = example

    operation = {
        "operationId": endpoint.function_name,
        "tags": [endpoint.group],
        "summary": endpoint.description,
        "description": f"{endpoint.description}\n\nGET {endpoint.path}",
        "parameters": _parameters(endpoint, relative),
        "responses": {
            "200": {
                "description": "Successful response",
                "content": {"application/json": response},
            },
            "400": {"description": "Invalid parameters"},
        },
        "x-cache-strategy": endpoint.cache_strategy.value,
    }
    if not operation["parameters"]:
        del operation["parameters"]
    return operation


def build_openapi_document(
    api: ApiDefinition,
    *,
    base_url: str = DEFAULT_BASE_URL,
    samples_dir: Optional[Path] = None,
) -> dict:
    """
    Build the OpenAPI document for one API family.

    Args:
        api: Family to document.
        base_url: Scheme and host of the upstream server.
        samples_dir: Directory written by ``capture_sample_data``; recorded
            responses found there become 200 examples.

    Returns:
        A plain dict ready for YAML or JSON serialization.
    """
    key_param = api_key_param(api.base_path)
    components: dict[str, Any] = {}
    paths: dict[str, dict] = {}

    for endpoint in api.resolve():
        relative = endpoint.path[len(api.base_path):]
        path_key, _ = _split_template(relative)
        # Two endpoints can differ only by their query string
        if path_key in paths:
            path_key = relative
        paths[path_key] = {"get": _operation(endpoint, relative, components, samples_dir)}

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": api.title,
            "version": __version__,
            "description": api.description,
        },
        "servers": [{"url": f"{base_url.rstrip('/')}{api.base_path}", "description": "Production server"}],
        "security": [{key_param: []}],
        "tags": [
            {
                "name": group.name,
                "description": group.description,
                "x-cache-strategy": group.cache_strategy.value,
            }
            for group in api.groups
        ],
        "paths": paths,
        "components": {
            "schemas": dict(sorted(components.items())),
            "securitySchemes": {
                key_param: {"type": "apiKey", "in": "query", "name": key_param},
            },
        },
    }


def write_openapi_documents(
    out_dir: Path = DEFAULT_OUT_DIR,
    *,
    apis: Optional[list[ApiDefinition]] = None,
    samples_dir: Optional[Path] = None,
) -> list[Path]:
    """Write `<api-name>.yaml` for every family (or just `apis`) into `out_dir`."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for api in apis or all_apis():
        doc = build_openapi_document(api, samples_dir=samples_dir)
        path = out_dir / f"{api.name}.yaml"
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(doc, f, default_flow_style=False, allow_unicode=True, sort_keys=False, width=120)
        print(
            f"✓ {api.name}: {path} - {len(doc['paths'])} paths, "
            f"{len(doc['tags'])} tags, {len(doc['components']['schemas'])} schemas"
        )
        written.append(path)
    return written


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate OpenAPI documents for the WSDOT/WSF APIs")
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT_DIR, help="Output directory")
    parser.add_argument(
        "--samples",
        type=Path,
        default=DEFAULT_SAMPLES_DIR,
        help="Sample data directory used for response examples",
    )
    parser.add_argument("--api", help="Only generate this API (e.g. wsf-vessels)")
    args = parser.parse_args(argv)

    apis = None
    if args.api:
        api = find_api(args.api)
        if api is None:
            print(f"Unknown API: {args.api}")
            return 1
        apis = [api]

    samples_dir = args.samples if args.samples.exists() else None
    write_openapi_documents(args.out, apis=apis, samples_dir=samples_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
