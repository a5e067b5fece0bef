"""HTTP tests for the request workflow, courses and skills endpoints."""

import pytest

from app.models.user import ROLE_INSTRUCTOR


async def test_full_session_request_flow(client, instructor, student, auth_headers):
    created = await client.post(
        "/courses", json={"title": "Intro to Web Development"}, headers=auth_headers(instructor)
    )
    assert created.status_code == 201
    course_id = created.json()["id"]

    request = await client.post(
        "/request", json={"course_id": course_id}, headers=auth_headers(student)
    )
    assert request.status_code == 200
    assert request.json()["status"] == "pending"
    request_id = request.json()["id"]

    inbox = await client.get("/requests", headers=auth_headers(instructor))
    assert inbox.json() == [
        {
            "id": request_id,
            "student": "student@skillhub.dev",
            "title": "Intro to Web Development",
            "status": "pending",
        }
    ]

    accepted = await client.post(
        f"/requests/{request_id}/accepted", headers=auth_headers(instructor)
    )
    assert accepted.json() == {"updated": 1}

    sessions = await client.get("/student-sessions", headers=auth_headers(student))
    assert sessions.json()[0]["status"] == "accepted"


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("post", "/request", {"course_id": 1}),
        ("get", "/student-sessions", None),
        ("post", "/requests/1/accepted", None),
        ("post", "/skill-request", {"mentor_id": 1, "skill_id": 1}),
        ("get", "/skill-requests-received", None),
        ("get", "/skill-requests-sent", None),
        ("post", "/skill-requests/1/accepted", None),
        ("get", "/user-skills", None),
    ],
)
async def test_anonymous_calls_are_unauthorized(client, method, path, body):
    response = await client.request(method.upper(), path, json=body)

    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"


async def test_student_cannot_read_instructor_inbox(client, student, auth_headers):
    response = await client.get("/requests", headers=auth_headers(student))

    assert response.status_code == 403


async def test_anonymous_cannot_read_instructor_inbox(client):
    response = await client.get("/requests")

    assert response.status_code == 403
    assert response.json()["error"] == "FORBIDDEN"


async def test_student_cannot_create_course(client, student, auth_headers):
    response = await client.post(
        "/courses", json={"title": "Sneaky"}, headers=auth_headers(student)
    )

    assert response.status_code == 403


async def test_other_instructor_cannot_decide(
    client, instructor, student, make_user, make_course, auth_headers
):
    course_id = await make_course(instructor)
    other = await make_user("other@skillhub.dev", ROLE_INSTRUCTOR)
    request = await client.post(
        "/request", json={"course_id": course_id}, headers=auth_headers(student)
    )

    response = await client.post(
        f"/requests/{request.json()['id']}/rejected", headers=auth_headers(other)
    )

    assert response.status_code == 403


async def test_invalid_status_is_rejected_before_lookup(client, instructor, auth_headers):
    response = await client.post("/requests/999/pending", headers=auth_headers(instructor))

    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_STATUS"


async def test_unknown_request_is_not_found(client, instructor, auth_headers):
    response = await client.post("/requests/999/accepted", headers=auth_headers(instructor))

    assert response.status_code == 404
    assert response.json()["error"] == "REQUEST_NOT_FOUND"


async def test_skill_request_flow(client, make_user, auth_headers):
    learner = await make_user("learner@skillhub.dev")
    mentor = await make_user("mentor@skillhub.dev")

    declared = await client.post(
        "/user-skills",
        json={"name": "CSS", "level": "Advanced", "description": "Flexbox"},
        headers=auth_headers(mentor),
    )
    assert declared.status_code == 200

    browse = await client.get("/browse-skills")
    assert [(r["email"], r["name"]) for r in browse.json()] == [("mentor@skillhub.dev", "CSS")]

    skill_id = (await client.get("/skills")).json()[0]["id"]
    body = {"mentor_id": mentor.user_id, "skill_id": skill_id}

    created = await client.post("/skill-request", json=body, headers=auth_headers(learner))
    assert created.status_code == 200
    request_id = created.json()["id"]

    duplicate = await client.post("/skill-request", json=body, headers=auth_headers(learner))
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "DUPLICATE_REQUEST"

    forbidden = await client.post(
        f"/skill-requests/{request_id}/accepted", headers=auth_headers(learner)
    )
    assert forbidden.status_code == 403

    received = await client.get("/skill-requests-received", headers=auth_headers(mentor))
    assert received.json() == [
        {"id": request_id, "learner": "learner@skillhub.dev", "skill": "CSS", "status": "pending"}
    ]

    accepted = await client.post(
        f"/skill-requests/{request_id}/accepted", headers=auth_headers(mentor)
    )
    assert accepted.json() == {"updated": 1}

    sent = await client.get("/skill-requests-sent", headers=auth_headers(learner))
    assert sent.json() == [
        {"id": request_id, "mentor": "mentor@skillhub.dev", "skill": "CSS", "status": "accepted"}
    ]

    again = await client.post("/skill-request", json=body, headers=auth_headers(learner))
    assert again.status_code == 409
    assert again.json()["error"] == "DUPLICATE_REQUEST"


async def test_self_skill_request(client, student, make_skill, auth_headers):
    skill_id = await make_skill("CSS")

    response = await client.post(
        "/skill-request",
        json={"mentor_id": student.user_id, "skill_id": skill_id},
        headers=auth_headers(student),
    )

    assert response.status_code == 400
    assert response.json()["error"] == "SELF_REQUEST"


async def test_user_skill_rejects_unknown_level(client, student, auth_headers):
    response = await client.post(
        "/user-skills",
        json={"name": "CSS", "level": "Expert"},
        headers=auth_headers(student),
    )

    assert response.status_code == 422


async def test_course_listing_is_public(client, instructor, make_course):
    await make_course(instructor, title="Databases 101")

    response = await client.get("/courses")

    assert response.json() == [
        {
            "id": 1,
            "title": "Databases 101",
            "instructor_id": instructor.user_id,
            "instructor": "instructor@skillhub.dev",
        }
    ]


async def test_users_listing(client, instructor, student):
    response = await client.get("/users")

    emails = {u["email"] for u in response.json()}
    assert emails == {"instructor@skillhub.dev", "student@skillhub.dev"}
    assert all("password_hash" not in u for u in response.json())
