"""
Error handling tests for the HTTP surface.

Covers the failure taxonomy and its status mapping:
- Unauthorized (401): missing or blank session token
- NotFound (404): unknown meal, other session's meal, empty log
- InvalidInput (400): malformed meal id, payload shape/type mismatch, bad JSON

Every error body has the same shape and never leaks a stack trace.
"""

import pytest

from test_helpers import auth, meal_payload, new_token

SOME_UUID = "0d9f6a5e-1c2b-4a3d-8e7f-6a5b4c3d2e1f"


def _assert_error_body(r, status_code, code=None):
    assert r.status_code == status_code
    body = r.json()
    assert body["success"] is False
    assert body["error"]["message"]
    assert "timestamp" in body
    assert "Traceback" not in r.text
    if code:
        assert body["error"]["code"] == code
    return body


# =============================================================================
# UNAUTHORIZED
# =============================================================================


@pytest.mark.parametrize(
    "method, path",
    [
        ("post", "/meals"),
        ("get", "/meals"),
        ("get", "/meals/metrics"),
        ("get", f"/meals/{SOME_UUID}"),
        ("put", f"/meals/{SOME_UUID}"),
        ("delete", f"/meals/{SOME_UUID}"),
    ],
)
def test_every_meal_route_requires_a_session(client, method, path):
    kwargs = {"json": meal_payload()} if method in ("post", "put") else {}

    r = getattr(client, method)(path, **kwargs)

    _assert_error_body(r, 401, "UNAUTHORIZED")


def test_blank_bearer_token_is_rejected(client):
    r = client.get("/meals", headers={"Authorization": "Bearer   "})
    _assert_error_body(r, 401)


def test_unauthorized_request_does_not_write(client):
    token = new_token()
    client.post("/meals", json=meal_payload())

    assert client.get("/meals", headers=auth(token)).status_code == 404


# =============================================================================
# NOT FOUND
# =============================================================================


def test_unknown_meal_is_not_found(client):
    token = new_token()

    _assert_error_body(client.get(f"/meals/{SOME_UUID}", headers=auth(token)), 404, "NOT_FOUND")
    _assert_error_body(
        client.put(f"/meals/{SOME_UUID}", json=meal_payload(), headers=auth(token)), 404
    )
    _assert_error_body(client.delete(f"/meals/{SOME_UUID}", headers=auth(token)), 404)


def test_empty_log_is_not_found(client):
    body = _assert_error_body(client.get("/meals", headers=auth(new_token())), 404)
    assert "no meals" in body["error"]["message"]


# =============================================================================
# INVALID INPUT
# =============================================================================


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_malformed_meal_id(client, method):
    kwargs = {"json": meal_payload()} if method == "put" else {}

    r = getattr(client, method)("/meals/not-a-uuid", headers=auth(new_token()), **kwargs)

    _assert_error_body(r, 400, "INVALID_MEAL_ID")


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "No name", "is_on_diet": True},
        {"name": "Soup", "description": "Hot", "is_on_diet": "true"},
        {"name": ["Soup"], "description": "Hot", "is_on_diet": True},
        [1, 2, 3],
    ],
)
def test_malformed_create_payload(client, payload):
    token = new_token()

    r = client.post("/meals", json=payload, headers=auth(token))

    _assert_error_body(r, 400)
    assert client.get("/meals", headers=auth(token)).status_code == 404


def test_missing_body(client):
    r = client.post("/meals", headers=auth(new_token()))
    _assert_error_body(r, 400)


def test_invalid_json_body(client):
    r = client.post(
        "/meals",
        content=b"{not json",
        headers={**auth(new_token()), "Content-Type": "application/json"},
    )
    _assert_error_body(r, 400, "VALIDATION_ERROR")


def test_create_payload_errors_name_the_fields(client):
    r = client.post(
        "/meals", json={"name": "Soup", "description": "Hot"}, headers=auth(new_token())
    )

    body = _assert_error_body(r, 400, "INVALID_MEAL")
    assert "is_on_diet" in body["error"]["details"]


def test_malformed_update_leaves_meal_untouched(client):
    token = new_token()
    client.post("/meals", json=meal_payload(name="Original"), headers=auth(token))
    meal_id = client.get("/meals", headers=auth(token)).json()["meals"][0]["id"]

    r = client.put(
        f"/meals/{meal_id}",
        json={"name": "Changed", "description": "x", "is_on_diet": None},
        headers=auth(token),
    )

    _assert_error_body(r, 400)
    assert client.get(f"/meals/{meal_id}", headers=auth(token)).json()["meal"]["name"] == "Original"
