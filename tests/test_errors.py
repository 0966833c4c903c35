import pytest
import requests
from pydantic import BaseModel, ValidationError

from wsdottie.core.errors import (
    USER_MESSAGES,
    ErrorCode,
    WsdotApiError,
    check_api_message,
    create_api_error,
    create_validation_error,
    is_soft_error_message,
)


def _http_error(status):
    response = requests.Response()
    response.status_code = status
    return requests.HTTPError(f"HTTP {status}", response=response)


def test_existing_error_is_returned_unchanged():
    original = WsdotApiError("boom", ErrorCode.API_ERROR)
    assert create_api_error(original, "wsf-vessels:fetch_vessel_basics") is original


@pytest.mark.parametrize(
    "error,code",
    [
        (requests.Timeout("read timed out"), ErrorCode.TIMEOUT_ERROR),
        (requests.ConnectionError("refused"), ErrorCode.NETWORK_ERROR),
        (_http_error(429), ErrorCode.RATE_LIMIT_ERROR),
        (_http_error(404), ErrorCode.API_ERROR),
        (_http_error(500), ErrorCode.API_ERROR),
        (RuntimeError("Request timeout after 30s"), ErrorCode.TIMEOUT_ERROR),
        (RuntimeError("Script load failed"), ErrorCode.NETWORK_ERROR),
        (RuntimeError("Blocked by CORS policy"), ErrorCode.CORS_ERROR),
        (RuntimeError("Invalid response from server"), ErrorCode.INVALID_RESPONSE),
        (RuntimeError("something odd"), ErrorCode.NETWORK_ERROR),
    ],
)
def test_classification(error, code):
    api_error = create_api_error(error, "ep", "https://x?AccessCode=***")
    assert api_error.code == code
    assert api_error.__cause__ is error
    assert api_error.context.endpoint == "ep"
    assert api_error.user_message == USER_MESSAGES[code]


def test_status_read_from_response():
    api_error = create_api_error(_http_error(503), "ep")
    assert api_error.status == 503


def test_non_exception_value():
    api_error = create_api_error("plain failure", "ep")
    assert api_error.code == ErrorCode.NETWORK_ERROR
    assert api_error.message == "plain failure"


def test_to_dict():
    api_error = create_api_error(_http_error(400), "wsf-fares:fetch_fare_totals", "https://x?apiaccesscode=***")
    body = api_error.to_dict()
    assert body["error"] == "API_ERROR"
    assert body["endpoint"] == "wsf-fares:fetch_fare_totals"
    assert body["status"] == 400
    assert body["url"].endswith("***")
    assert body["timestamp"].endswith("+00:00")


@pytest.mark.parametrize(
    "message,expected",
    [
        ("The request is invalid.", True),
        ("Operation FAILED", True),
        ("Date is not valid for this route", True),
        ("This terminal cannot be used", True),
        ("An error has occurred.", True),
        ("Service normal", False),
    ],
)
def test_soft_error_keywords(message, expected):
    assert is_soft_error_message(message) is expected


def test_check_api_message_raises_on_soft_error():
    with pytest.raises(WsdotApiError) as excinfo:
        check_api_message({"Message": "The request is invalid."}, endpoint="ep")
    assert excinfo.value.code == ErrorCode.API_ERROR
    assert str(excinfo.value) == "The request is invalid."


@pytest.mark.parametrize("data", [[{"Message": "error"}], {"Message": "All good"}, {"Message": 5}, "error", None])
def test_check_api_message_ignores_other_shapes(data):
    check_api_message(data)


class _Sample(BaseModel):
    VesselID: int
    Name: str


def test_validation_error_message_lists_fields():
    with pytest.raises(ValidationError) as excinfo:
        _Sample.model_validate({"VesselID": "abc"})
    api_error = create_validation_error(excinfo.value, "wsf-vessels:fetch_vessel_basics response validation")
    assert api_error.code == ErrorCode.TRANSFORM_ERROR
    assert api_error.message.startswith("wsf-vessels:fetch_vessel_basics response validation failed: ")
    assert "VesselID: " in api_error.message
    assert "Name: Field required" in api_error.message
