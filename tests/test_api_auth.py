"""HTTP tests for registration, login and the session user."""

from app.core.security import decode_token
from app.models.user import ROLE_INSTRUCTOR


async def test_register_returns_created_user(client):
    response = await client.post(
        "/register",
        json={"email": "new@skillhub.dev", "password": "password123"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "new@skillhub.dev"
    assert body["user"]["role"] == "user"
    assert body["redirect_to"] == "/auth.html"
    assert "password" not in str(body)


async def test_register_instructor(client):
    response = await client.post(
        "/register",
        json={"email": "teach@skillhub.dev", "password": "password123", "role": "instructor"},
    )

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "instructor"


async def test_register_duplicate_email(client, student):
    response = await client.post(
        "/register",
        json={"email": "student@skillhub.dev", "password": "password123"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "EMAIL_EXISTS"


async def test_register_rejects_unknown_role(client):
    response = await client.post(
        "/register",
        json={"email": "admin@skillhub.dev", "password": "password123", "role": "admin"},
    )

    assert response.status_code == 422


async def test_login_wrong_password(client, student):
    response = await client.post(
        "/login",
        json={"email": "student@skillhub.dev", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"


async def test_login_unknown_email(client):
    response = await client.post(
        "/login",
        json={"email": "ghost@skillhub.dev", "password": "password123"},
    )

    assert response.status_code == 401


async def test_login_student(client, student):
    response = await client.post(
        "/login",
        json={"email": "student@skillhub.dev", "password": "password123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "user"
    assert body["redirect_to"] == "/dashboard.html"
    assert decode_token(body["access_token"])["sub"] == str(student.user_id)
    assert "session" in response.cookies


async def test_login_instructor_lands_on_instructor_page(client, make_user):
    await make_user("teach@skillhub.dev", ROLE_INSTRUCTOR)

    response = await client.post(
        "/login",
        json={"email": "teach@skillhub.dev", "password": "password123"},
    )

    assert response.json()["redirect_to"] == "/instructor.html"


async def test_me_anonymous_is_null(client):
    response = await client.get("/me")

    assert response.status_code == 200
    assert response.json() is None


async def test_me_with_bearer_token(client, student, auth_headers):
    response = await client.get("/me", headers=auth_headers(student))

    assert response.json() == {
        "id": student.user_id,
        "email": "student@skillhub.dev",
        "role": "user",
    }


async def test_me_with_garbage_token_is_anonymous(client):
    response = await client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 200
    assert response.json() is None


async def test_session_cookie_round_trip(client, student):
    await client.post(
        "/login",
        json={"email": "student@skillhub.dev", "password": "password123"},
    )

    me = await client.get("/me")
    assert me.json()["email"] == "student@skillhub.dev"

    logout = await client.post("/logout")
    assert logout.status_code == 200

    assert (await client.get("/me")).json() is None



async def test_register_form_post_redirects_to_login(client):
    response = await client.post(
        "/register",
        data={"email": "form@skillhub.dev", "password": "password123", "role": "instructor"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/auth.html"

    users = (await client.get("/users")).json()
    assert {"email": "form@skillhub.dev", "role": "instructor"} in [
        {"email": u["email"], "role": u["role"]} for u in users
    ]


async def test_login_form_post_redirects_by_role(client, instructor):
    response = await client.post(
        "/login",
        data={"email": "instructor@skillhub.dev", "password": "password123"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/instructor.html"
    assert "session" in response.cookies

    me = await client.get("/me")
    assert me.json()["id"] == instructor.user_id


async def test_login_form_post_wrong_password(client, student):
    response = await client.post(
        "/login",
        data={"email": "student@skillhub.dev", "password": "nope"},
    )

    assert response.status_code == 401


async def test_malformed_json_body(client):
    response = await client.post(
        "/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
