from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def test_validate_reports_code_kind(client: TestClient) -> None:
    r = client.get("/v1/codes/validate", params={"code": "8fwcx400+"})
    assert r.status_code == 200, r.text
    assert r.json() == {
        "code": "8fwcx400+",
        "is_valid": True,
        "is_short": False,
        "is_full": True,
        "is_padded": True,
    }

    r = client.get("/v1/codes/validate", params={"code": "8FWC2300+G6"})
    assert r.status_code == 200, r.text
    assert r.json()["is_valid"] is False


def test_encode_uses_configured_default_length(client: TestClient) -> None:
    r = client.get(
        "/v1/codes/encode", params={"latitude": 47.0000625, "longitude": 8.0000625}
    )
    assert r.status_code == 200, r.text
    assert r.json() == {"code": "8FVC2222+22", "digits": "8FVC222222"}


def test_encode_with_explicit_length(client: TestClient) -> None:
    r = client.get(
        "/v1/codes/encode",
        params={"latitude": 20.375, "longitude": 2.775, "length": 6},
    )
    assert r.status_code == 200, r.text
    assert r.json() == {"code": "7FG49Q00+", "digits": "7FG49Q"}


def test_encode_rejects_illegal_length_with_error_envelope(client: TestClient) -> None:
    r = client.get(
        "/v1/codes/encode",
        params={"latitude": 20.375, "longitude": 2.775, "length": 5},
        headers={"X-Trace-Id": "trace-encode"},
    )
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "PLUS_CODE_LENGTH_INVALID"
    assert body["trace_id"] == "trace-encode"
    assert r.headers["X-Trace-Id"] == "trace-encode"


def test_encode_rejects_non_finite_coordinates(client: TestClient) -> None:
    r = client.get("/v1/codes/encode", params={"latitude": "nan", "longitude": 0})
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "COORDINATE_OUT_OF_RANGE"


def test_encode_missing_parameter_is_validation_error(client: TestClient) -> None:
    r = client.get("/v1/codes/encode", params={"latitude": 1})
    assert r.status_code == 422, r.text
    body = r.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]
    assert r.headers.get("X-Trace-Id")


def test_decode_returns_area(client: TestClient) -> None:
    r = client.get("/v1/codes/decode", params={"code": "7fg49qcj+2v"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["code"] == "7FG49QCJ+2V"
    assert body["code_length"] == 10
    assert body["south"] == pytest.approx(20.37)
    assert body["west"] == pytest.approx(2.782125)
    assert body["north"] == pytest.approx(20.370125)
    assert body["east"] == pytest.approx(2.78225)
    assert body["center_latitude"] == pytest.approx(20.3700625)
    assert body["center_longitude"] == pytest.approx(2.7821875)


@pytest.mark.parametrize(
    ("code", "error_code"),
    [
        ("INVALID", "PLUS_CODE_INVALID"),
        ("9QCJ+2VX", "PLUS_CODE_NOT_FULL"),
    ],
)
def test_decode_errors(client: TestClient, code: str, error_code: str) -> None:
    r = client.get("/v1/codes/decode", params={"code": code})
    assert r.status_code == 400, r.text
    assert r.json()["code"] == error_code


def test_shorten_and_recover(client: TestClient) -> None:
    ref = {"latitude": 51.3701125, "longitude": -1.217765625}
    r = client.get("/v1/codes/shorten", params={"code": "9C3W9QCJ+2VX", **ref})
    assert r.status_code == 200, r.text
    assert r.json() == {"code": "9C3W9QCJ+2VX", "short_code": "+2VX"}

    r = client.get("/v1/codes/recover", params={"code": "+2VX", **ref})
    assert r.status_code == 200, r.text
    assert r.json() == {"short_code": "+2VX", "code": "9C3W9QCJ+2VX"}


def test_shorten_eight_digit_code(client: TestClient) -> None:
    ref = {"latitude": 51.37125, "longitude": -1.21875}
    r = client.get("/v1/codes/shorten", params={"code": "9C3W9QCJ+", **ref})
    assert r.status_code == 200, r.text
    assert r.json() == {"code": "9C3W9QCJ+", "short_code": "CJ+"}

    r = client.get("/v1/codes/recover", params={"code": "CJ+", **ref})
    assert r.status_code == 200, r.text
    assert r.json()["code"] == "9C3W9QCJ+"


def test_encode_wraps_huge_longitude(client: TestClient) -> None:
    r = client.get("/v1/codes/encode", params={"latitude": 10, "longitude": "1e50"})
    assert r.status_code == 200, r.text
    expected = client.get(
        "/v1/codes/encode", params={"latitude": 10, "longitude": -80}
    )
    assert r.json() == expected.json()


@pytest.mark.parametrize(
    ("code", "latitude", "status_code", "error_code"),
    [
        ("9C3W9Q00+", 51.37, 400, "PLUS_CODE_PADDED"),
        ("2222+22", 51.37, 400, "PLUS_CODE_NOT_FULL"),
        ("9C3W9QCJ+2VX", 0.0, 422, "PLUS_CODE_REFERENCE_TOO_FAR"),
    ],
)
def test_shorten_errors(
    client: TestClient,
    code: str,
    latitude: float,
    status_code: int,
    error_code: str,
) -> None:
    r = client.get(
        "/v1/codes/shorten",
        params={"code": code, "latitude": latitude, "longitude": -1.2},
    )
    assert r.status_code == status_code, r.text
    assert r.json()["code"] == error_code


def test_recover_rejects_full_code(client: TestClient) -> None:
    r = client.get(
        "/v1/codes/recover",
        params={"code": "9C3W9QCJ+2VX", "latitude": 51.37, "longitude": -1.2},
    )
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "PLUS_CODE_NOT_SHORT"


def test_encode_batch_rejects_bad_items_individually(client: TestClient) -> None:
    r = client.post(
        "/v1/codes/encode/batch",
        json={
            "items": [
                {"latitude": 20.375, "longitude": 2.775, "length": 6},
                {"latitude": "north", "longitude": 2.775},
                {"latitude": 47.0000625, "longitude": 8.0000625},
                {"latitude": 1, "longitude": 1, "length": 3},
            ]
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["items"] == [
        {"index": 0, "code": "7FG49Q00+"},
        {"index": 2, "code": "8FVC2222+22"},
    ]
    rejected = {item["index"]: item["reason_code"] for item in body["rejected"]}
    assert rejected == {
        1: "CODES_BATCH_ITEM_INVALID",
        3: "PLUS_CODE_LENGTH_INVALID",
    }


def test_encode_batch_refuses_oversized_batch(client: TestClient) -> None:
    # conftest caps batches at 5 items.
    items = [{"latitude": 0, "longitude": 0}] * 6
    r = client.post("/v1/codes/encode/batch", json={"items": items})
    assert r.status_code == 413, r.text
    body = r.json()
    assert body["code"] == "CODES_BATCH_TOO_LARGE"
    assert body["details"] == {"max_batch_items": 5}


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    r = client.get("/v1/codes/nope")
    assert r.status_code == 404, r.text
    assert r.json()["code"] == "HTTP_ERROR"
