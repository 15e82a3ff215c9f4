"""Unit tests for the exception hierarchy."""

import json

from tiktok_business_api.exceptions import (
    APIError,
    DownloadError,
    ResponseDecodeError,
    TikTokBusinessError,
    TimeoutError,
    TransportError,
    ValidationError,
)


def test_api_error_fields_and_serialization():
    err = APIError(code=40002, message="Invalid param", request_id="r1")

    assert isinstance(err, TikTokBusinessError)
    assert str(err) == "Invalid param"
    assert err.to_dict() == {
        "error": "API_ERROR",
        "message": "Invalid param",
        "details": {"code": 40002, "request_id": "r1"},
    }
    assert json.loads(err.to_json())["details"]["code"] == 40002


def test_api_error_without_request_id():
    err = APIError(code=1, message="")
    assert err.request_id == ""
    assert "request_id" not in err.details


def test_timeout_is_transport_error():
    err = TimeoutError("slow")
    assert isinstance(err, TransportError)
    assert err.error_type == "TIMEOUT_ERROR"


def test_validation_error_details():
    err = ValidationError("too many", field="video_ids", value=61)
    assert err.field == "video_ids"
    assert err.details == {"field": "video_ids", "value": "61"}


def test_decode_error_truncates_body():
    err = ResponseDecodeError("bad", status_code=500, response_body="x" * 1000)
    assert len(err.details["response_body"]) == 500
    assert len(err.response_body) == 1000


def test_download_error_status():
    err = DownloadError("nope", url="https://cdn.test/a.mp4", status_code=404)
    assert err.status_code == 404
    assert err.details["url"] == "https://cdn.test/a.mp4"
