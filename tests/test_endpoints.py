"""
HTTP-level tests for the meal routes.

MEAL LOG FLOW
=============

1. POST /meals            {"name", "description", "is_on_diet"}   -> 201, empty body
2. GET  /meals                                                    -> 200 {"meals": [...]}
3. GET  /meals/{id}                                               -> 200 {"meal": {...}}
4. PUT  /meals/{id}       {"name", "description", "is_on_diet"}   -> 200 {"data": {...}}
5. GET  /meals/metrics                                            -> 200 {"metrics": {...}}
6. DELETE /meals/{id}                                             -> 201, empty body

Every request carries the session token, as the sessionId cookie or as a
Bearer header.
"""

from test_helpers import at, auth, meal_payload, new_token


def _create(client, token, **kwargs):
    r = client.post("/meals", json=meal_payload(**kwargs), headers=auth(token))
    assert r.status_code == 201, r.text
    return r


def _only_meal_id(client, token):
    meals = client.get("/meals", headers=auth(token)).json()["meals"]
    assert len(meals) == 1
    return meals[0]["id"]


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "DietLog"


def test_meal_crud_flow(client):
    token = new_token()

    r = _create(client, token, name="Oatmeal", description="With banana", is_on_diet=True)
    assert r.content == b""

    meal_id = _only_meal_id(client, token)

    r = client.get(f"/meals/{meal_id}", headers=auth(token))
    assert r.status_code == 200
    meal = r.json()["meal"]
    assert meal["id"] == meal_id
    assert meal["name"] == "Oatmeal"
    assert meal["description"] == "With banana"
    assert meal["is_on_diet"] is True
    assert "created_at" in meal
    assert "user_id" not in meal

    changes = {"name": "Pancakes", "description": "Syrup", "is_on_diet": False}
    r = client.put(f"/meals/{meal_id}", json=changes, headers=auth(token))
    assert r.status_code == 200
    assert r.json() == {"data": changes}

    r = client.get(f"/meals/{meal_id}", headers=auth(token))
    assert r.json()["meal"]["name"] == "Pancakes"
    assert r.json()["meal"]["is_on_diet"] is False

    r = client.delete(f"/meals/{meal_id}", headers=auth(token))
    assert r.status_code == 201
    assert r.content == b""

    r = client.delete(f"/meals/{meal_id}", headers=auth(token))
    assert r.status_code == 404

    r = client.get("/meals", headers=auth(token))
    assert r.status_code == 404


def test_session_cookie_is_accepted(client):
    token = new_token()
    cookie = {"Cookie": f"sessionId={token}"}

    r = client.post("/meals", json=meal_payload(name="Apple"), headers=cookie)
    assert r.status_code == 201

    r = client.get("/meals", headers=cookie)
    assert r.status_code == 200
    assert [m["name"] for m in r.json()["meals"]] == ["Apple"]

    # The same scope is reachable through the Bearer header
    r = client.get("/meals", headers=auth(token))
    assert [m["name"] for m in r.json()["meals"]] == ["Apple"]


def test_meals_are_isolated_between_sessions(client):
    alice, bob = new_token(), new_token()
    _create(client, alice, name="Alice's lunch")
    meal_id = _only_meal_id(client, alice)

    assert client.get("/meals", headers=auth(bob)).status_code == 404
    assert client.get(f"/meals/{meal_id}", headers=auth(bob)).status_code == 404
    r = client.put(
        f"/meals/{meal_id}",
        json={"name": "Bob's now", "description": "", "is_on_diet": True},
        headers=auth(bob),
    )
    assert r.status_code == 404
    assert client.delete(f"/meals/{meal_id}", headers=auth(bob)).status_code == 404

    r = client.get(f"/meals/{meal_id}", headers=auth(alice))
    assert r.json()["meal"]["name"] == "Alice's lunch"


def test_list_meals_is_chronological(client):
    token = new_token()
    _create(client, token, name="Dinner", created_at=at(600))
    _create(client, token, name="Breakfast", created_at=at(0))
    _create(client, token, name="Lunch", created_at=at(300))

    r = client.get("/meals", headers=auth(token))

    assert r.status_code == 200
    assert [m["name"] for m in r.json()["meals"]] == ["Breakfast", "Lunch", "Dinner"]


def test_metrics_for_empty_log(client):
    r = client.get("/meals/metrics", headers=auth(new_token()))

    assert r.status_code == 200
    assert r.json() == {
        "metrics": {"total": 0, "diet_count": 0, "not_diet_count": 0, "streak": 0}
    }


def test_metrics_streak(client):
    token = new_token()
    for i, on_diet in enumerate([True, True, False, True]):
        _create(client, token, is_on_diet=on_diet, created_at=at(i))

    r = client.get("/meals/metrics", headers=auth(token))

    assert r.status_code == 200
    assert r.json()["metrics"] == {
        "total": 4,
        "diet_count": 3,
        "not_diet_count": 1,
        "streak": 1,
    }


def test_metrics_full_streak(client):
    token = new_token()
    for i in range(3):
        _create(client, token, is_on_diet=True, created_at=at(i))

    r = client.get("/meals/metrics", headers=auth(token))

    assert r.json()["metrics"]["streak"] == 3


def test_responses_carry_request_id(client):
    r = client.get("/meals/metrics", headers=auth(new_token()))

    assert r.headers.get("X-Request-ID")
    assert r.headers.get("X-Process-Time")


def test_long_bearer_token_scopes_meals(client):
    token = "eyJ" + "a" * 197

    _create(client, token, name="Lentil soup")
    r = client.get("/meals", headers=auth(token))

    assert r.status_code == 200
    assert [m["name"] for m in r.json()["meals"]] == ["Lentil soup"]
    assert client.get("/meals", headers=auth(token[:64])).status_code == 404
