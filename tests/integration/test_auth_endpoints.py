"""
Integration tests for email-link sign-in.

Covered:
- signin mails a callback link; the link yields a session token once
- the session token identifies the user on /auth/session and /workouts
- first sign-in creates the user, later sign-ins reuse it
- bad, reused and superseded tokens, bad session tokens (401)
"""

from urllib.parse import parse_qs, urlsplit

import pytest

pytestmark = pytest.mark.integration


async def request_link(client, mailer, email: str) -> str:
    response = await client.post("/api/auth/signin/email", json={"email": email})
    assert response.status_code == 202
    assert response.json() == {"success": True}
    return mailer.sent[-1][1]


async def test_sign_in_flow(client, mailer):
    url = await request_link(client, mailer, "New.Lifter@Example.com")
    to, _ = mailer.sent[-1]
    assert to == "new.lifter@example.com"
    assert url.startswith("http://test/api/auth/callback/email?")

    callback = await client.get(url)
    assert callback.status_code == 200
    token = callback.json()
    assert token["token_type"] == "bearer"

    session = await client.get("/api/auth/session", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert session.status_code == 200
    assert session.json()["email"] == "new.lifter@example.com"
    assert session.json()["email_verified"] is not None

    workouts = await client.get("/api/workouts", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert workouts.status_code == 200
    assert workouts.json() == []


async def test_link_works_once(client, mailer):
    url = await request_link(client, mailer, "lifter@example.com")
    assert (await client.get(url)).status_code == 200
    reused = await client.get(url)
    assert reused.status_code == 401
    assert reused.json()["error"] == "Invalid or expired sign-in link"


async def test_new_link_supersedes_old(client, mailer):
    first = await request_link(client, mailer, "lifter@example.com")
    second = await request_link(client, mailer, "lifter@example.com")
    assert (await client.get(first)).status_code == 401
    assert (await client.get(second)).status_code == 200


async def test_existing_user_is_reused(client, mailer, user):
    url = await request_link(client, mailer, user.email)
    token = (await client.get(url)).json()["access_token"]
    session = await client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})
    assert session.json()["id"] == str(user.id)
    assert session.json()["name"] == "Lifter"


async def test_wrong_token(client, mailer):
    url = await request_link(client, mailer, "lifter@example.com")
    email = parse_qs(urlsplit(url).query)["email"][0]
    response = await client.get("/api/auth/callback/email", params={"email": email, "token": "guess"})
    assert response.status_code == 401


async def test_signin_rejects_malformed_email(client, mailer):
    response = await client.post("/api/auth/signin/email", json={"email": "not-an-address"})
    assert response.status_code == 400
    assert mailer.sent == []


async def test_session_requires_valid_token(client):
    assert (await client.get("/api/auth/session")).status_code == 401
    response = await client.get("/api/auth/session", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid session token"
