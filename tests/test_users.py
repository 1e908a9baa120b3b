"""
Tests for signup and signin.

Covers:
- Account creation and the public fields it returns
- Name and session-token uniqueness
- Session cookie issuing on signup and signin
- Adoption of an anonymous session's meals at signup
"""

import uuid

from test_fixtures import (
    SESSION_COOKIE,
    client,
    make_client,
    create_meal,
    signup,
)


# =============================================================================
# SIGNUP
# =============================================================================


def test_signup_creates_user(client):
    """
    Verifies:
    1. POST /signup returns 201 with id and name
    2. The password is not echoed back
    3. A session cookie equal to the new id is set
    """
    r = signup(client, "John Doe", "123456")

    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "User created successfully"
    assert set(body["results"]) == {"id", "name"}
    assert body["results"]["name"] == "John Doe"
    assert r.cookies.get(SESSION_COOKIE) == body["results"]["id"]


def test_signup_duplicate_name(client, make_client):
    signup(client, "John Doe", "123456")

    r = signup(make_client(), "John Doe", "654321")

    assert r.status_code == 400
    assert r.json() == {"message": "User already exists"}


def test_signup_duplicate_session_id(make_client):
    """
    A session token that already is a user's id cannot register again,
    even under a different name.
    """
    session_id = str(uuid.uuid4())

    first = signup(make_client(session_id), "John Doe", "123456")
    assert first.status_code == 201
    assert first.json()["results"]["id"] == session_id

    r = signup(make_client(session_id), "John Doe 2", "123456")

    assert r.status_code == 400
    assert r.json() == {"message": "Session ID already exists"}


def test_signup_reuses_existing_cookie(make_client):
    """An incoming session token becomes the user id and no new cookie is sent"""
    session_id = str(uuid.uuid4())
    c = make_client(session_id)

    r = signup(c, "Jane Roe", "pw")

    assert r.status_code == 201
    assert r.json()["results"]["id"] == session_id
    assert SESSION_COOKIE not in r.cookies


def test_signup_without_fields(client):
    r = client.post("/signup", json={})

    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid input"
    assert {e["field"] for e in body["errors"]} == {"name", "password"}


def test_signup_rejects_non_string_password(client):
    r = client.post("/signup", json={"name": "John Doe", "password": 123456})

    assert r.status_code == 400
    assert [e["field"] for e in r.json()["errors"]] == ["password"]


def test_signup_adopts_anonymous_meals(client):
    """
    Anonymous session -> signup -> same session id -> same meals.

    The meal recorded before signing up stays visible afterwards because the
    user's id is the anonymous token.
    """
    meal = create_meal(client, name="Anonymous lunch")
    anonymous_token = client.cookies.get(SESSION_COOKIE)
    assert anonymous_token

    r = signup(client, "Late Joiner", "pw")
    assert r.status_code == 201
    assert r.json()["results"]["id"] == anonymous_token

    listed = client.get("/meals").json()["result"]
    assert [m["id"] for m in listed] == [meal["id"]]
    assert listed[0]["session_id"] == anonymous_token


# =============================================================================
# SIGNIN
# =============================================================================


def test_signin_sets_session_cookie(client, make_client):
    user_id = signup(client, "John Doe", "123456").json()["results"]["id"]

    c = make_client()
    r = c.post("/signin", json={"name": "John Doe", "password": "123456"})

    assert r.status_code == 200
    assert r.json() == {"message": "Login successful"}
    assert r.cookies.get(SESSION_COOKIE) == user_id


def test_signin_wrong_password(client):
    signup(client, "John Doe", "123456")

    r = client.post("/signin", json={"name": "John Doe", "password": "wrongpassword"})

    assert r.status_code == 404
    assert r.json() == {"message": "User not found"}


def test_signin_unknown_user(client):
    r = client.post("/signin", json={"name": "Nobody", "password": "x"})

    assert r.status_code == 404
    assert r.json() == {"message": "User not found"}


def test_signin_without_fields(client):
    r = client.post("/signin", json={})

    assert r.status_code == 400
    assert r.json()["message"] == "Invalid input"


def test_signin_replaces_existing_session(client, make_client):
    """
    Signing in overwrites whatever session the browser had, so meals of the
    previous anonymous session are no longer visible.
    """
    user_id = signup(client, "Owner", "pw").json()["results"]["id"]
    create_meal(client, name="Owner meal")

    c = make_client()
    create_meal(c, name="Anonymous snack")
    assert c.cookies.get(SESSION_COOKIE) != user_id

    r = c.post("/signin", json={"name": "Owner", "password": "pw"})
    assert r.status_code == 200
    assert r.cookies.get(SESSION_COOKIE) == user_id

    # Explicit cookie avoids relying on jar replacement order
    owner_view = make_client(user_id).get("/meals").json()["result"]
    assert [m["name"] for m in owner_view] == ["Owner meal"]
