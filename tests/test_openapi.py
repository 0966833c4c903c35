import orjson
import yaml

from wsdottie.docs.openapi import (
    OPENAPI_VERSION,
    build_openapi_document,
    load_sample,
    to_openapi_schema,
    write_openapi_documents,
)
from wsdottie.endpoints import find_api, find_endpoint


def test_nullable_scalar():
    schema = {"anyOf": [{"type": "string"}, {"type": "null"}], "default": None, "title": "Name"}
    assert to_openapi_schema(schema) == {"type": "string", "nullable": True, "default": None, "title": "Name"}


def test_nullable_ref_is_wrapped_in_all_of():
    schema = {"anyOf": [{"$ref": "#/components/schemas/Loc"}, {"type": "null"}]}
    assert to_openapi_schema(schema) == {
        "allOf": [{"$ref": "#/components/schemas/Loc"}],
        "nullable": True,
    }


def test_nullable_union_keeps_remaining_variants():
    schema = {"anyOf": [{"type": "integer"}, {"type": "string"}, {"type": "null"}]}
    assert to_openapi_schema(schema) == {
        "anyOf": [{"type": "integer"}, {"type": "string"}],
        "nullable": True,
    }


def test_const_and_unsupported_keywords():
    schema = {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "properties": {"kind": {"const": "fixed"}, "tags": {"type": "array", "examples": [["a"]]}},
    }
    assert to_openapi_schema(schema) == {
        "type": "object",
        "properties": {"kind": {"enum": ["fixed"]}, "tags": {"type": "array"}},
    }


def test_wsf_document_basics():
    doc = build_openapi_document(find_api("wsf-vessels"))

    assert doc["openapi"] == OPENAPI_VERSION
    assert doc["servers"][0]["url"] == "https://www.wsdot.wa.gov/ferries/api/vessels/rest"
    assert doc["security"] == [{"apiaccesscode": []}]
    assert doc["components"]["securitySchemes"]["apiaccesscode"]["in"] == "query"

    operation = doc["paths"]["/vesselbasics/{vesselId}"]["get"]
    assert operation["operationId"] == "fetch_vessel_basics_by_vessel_id"
    (param,) = operation["parameters"]
    assert param["name"] == "vesselId"
    assert param["in"] == "path"
    assert param["required"] is True
    assert param["example"] == 74
    assert operation["responses"]["200"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/VesselBasic"
    }
    assert "VesselBasic" in doc["components"]["schemas"]


def test_wsdot_document_uses_access_code_and_nullable_models():
    doc = build_openapi_document(find_api("wsdot-border-crossings"))

    assert doc["security"] == [{"AccessCode": []}]
    operation = doc["paths"]["/GetBorderCrossingsAsJson"]["get"]
    assert "parameters" not in operation
    assert operation["responses"]["200"]["content"]["application/json"]["schema"] == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/BorderCrossing"},
    }
    crossing = doc["components"]["schemas"]["BorderCrossing"]
    assert crossing["properties"]["BorderCrossingLocation"]["nullable"] is True
    assert crossing["properties"]["BorderCrossingLocation"]["allOf"] == [
        {"$ref": "#/components/schemas/RoadwayLocation"}
    ]
    assert "RoadwayLocation" in doc["components"]["schemas"]


def test_paths_that_differ_by_query_get_separate_keys():
    doc = build_openapi_document(find_api("wsdot-bridge-clearances"))

    assert set(doc["paths"]) == {"/GetClearancesAsJson", "/GetClearancesAsJson?Route={route}"}
    (param,) = doc["paths"]["/GetClearancesAsJson?Route={route}"]["get"]["parameters"]
    assert param["in"] == "query"


def test_tags_carry_cache_strategy():
    doc = build_openapi_document(find_api("wsf-fares"))
    names = [tag["name"] for tag in doc["tags"]]
    assert len(names) == len(set(names))
    assert all(tag["x-cache-strategy"] for tag in doc["tags"])


def test_sample_examples_are_truncated(tmp_path):
    endpoint = find_endpoint("fetch_border_crossings")
    sample_dir = tmp_path / endpoint.api
    sample_dir.mkdir()
    rows = [{"CrossingName": "I5General", "WaitTime": 5}, {"CrossingName": "SR539", "WaitTime": 10}]
    (sample_dir / "fetch_border_crossings.json").write_bytes(orjson.dumps(rows))

    assert load_sample(tmp_path, endpoint) == rows[:1]
    assert load_sample(None, endpoint) is None

    doc = build_openapi_document(find_api("wsdot-border-crossings"), samples_dir=tmp_path)
    content = doc["paths"]["/GetBorderCrossingsAsJson"]["get"]["responses"]["200"]["content"]
    assert content["application/json"]["example"] == rows[:1]


def test_write_documents_produce_loadable_yaml(tmp_path):
    written = write_openapi_documents(tmp_path, apis=[find_api("wsf-terminals")])

    assert written == [tmp_path / "wsf-terminals.yaml"]
    loaded = yaml.safe_load(written[0].read_text(encoding="utf-8"))
    assert loaded["info"]["title"] == find_api("wsf-terminals").title
    assert loaded["paths"]
