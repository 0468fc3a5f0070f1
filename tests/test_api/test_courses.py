"""
Tests for the course catalog endpoints.
"""

COURSE = {
    "code": "CS 101",
    "name": "Intro to Programming",
    "instructor": "Prof. Test",
    "department": "Computer Science",
}


def _create(client, **overrides):
    payload = {**COURSE, **overrides}
    response = client.post("/api/courses/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_course_returns_camel_case_course(client):
    course = _create(client, description="Basics")

    assert course["id"]
    assert course["code"] == "CS 101"
    assert course["description"] == "Basics"
    assert course["semester"] == "Fall 2024"


def test_create_course_missing_required_field(client):
    payload = {k: v for k, v in COURSE.items() if k != "instructor"}

    response = client.post("/api/courses/", json=payload)

    assert response.status_code == 422
    assert "instructor" in response.text


def test_create_course_blank_required_field(client):
    response = client.post("/api/courses/", json={**COURSE, "name": "   "})

    assert response.status_code == 422


def test_create_course_duplicate_code_conflicts(client):
    _create(client)

    response = client.post("/api/courses/", json={**COURSE, "name": "Again"})

    assert response.status_code == 409
    assert "CS 101" in response.json()["detail"]


def test_list_courses_with_stats(client):
    course = _create(client)
    _create(client, code="CS 102")
    client.post("/api/feedback/", json={"courseId": course["id"], "rating": 4})
    client.post("/api/feedback/", json={"courseId": course["id"], "rating": 5})

    response = client.get("/api/courses/")

    assert response.status_code == 200
    rows = response.json()
    assert [row["code"] for row in rows] == ["CS 101", "CS 102"]
    assert rows[0]["averageRating"] == 4.5
    assert rows[0]["totalReviews"] == 2
    assert rows[1]["averageRating"] == 0
    assert rows[1]["totalReviews"] == 0


def test_list_courses_search_and_department(client):
    _create(client, name="Data Structures")
    _create(client, code="MATH 210", name="Linear Algebra", department="Mathematics")

    searched = client.get("/api/courses/", params={"search": "linear"}).json()
    filtered = client.get("/api/courses/", params={"department": "Computer Science"}).json()

    assert [row["code"] for row in searched] == ["MATH 210"]
    assert [row["code"] for row in filtered] == ["CS 101"]


def test_list_departments(client):
    _create(client)
    _create(client, code="MATH 210", department="Mathematics")
    _create(client, code="CS 102")

    response = client.get("/api/courses/departments")

    assert response.json() == ["Computer Science", "Mathematics"]


def test_get_course(client):
    course = _create(client)

    response = client.get(f"/api/courses/{course['id']}")

    assert response.status_code == 200
    assert response.json() == course


def test_get_missing_course_is_404(client):
    assert client.get("/api/courses/nope").status_code == 404
    assert client.get("/api/courses/nope/stats").status_code == 404
    assert client.get("/api/courses/nope/feedback").status_code == 404


def test_course_stats_and_feedback(client):
    course = _create(client)
    client.post("/api/feedback/", json={"courseId": course["id"], "rating": 3})

    stats = client.get(f"/api/courses/{course['id']}/stats").json()
    feedback = client.get(f"/api/courses/{course['id']}/feedback").json()

    assert stats["averageRating"] == 3.0
    assert stats["totalReviews"] == 1
    assert [fb["rating"] for fb in feedback] == [3]


def test_patch_course_partial_update(client):
    course = _create(client, description="Old")

    response = client.patch(
        f"/api/courses/{course['id']}", json={"instructor": "Prof. New"}
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["instructor"] == "Prof. New"
    assert updated["description"] == "Old"
    assert updated["code"] == "CS 101"


def test_patch_course_rejects_null_required_field(client):
    course = _create(client)

    response = client.patch(f"/api/courses/{course['id']}", json={"name": None})

    assert response.status_code == 422


def test_patch_course_duplicate_code_conflicts(client):
    _create(client)
    other = _create(client, code="CS 102")

    response = client.patch(f"/api/courses/{other['id']}", json={"code": "CS 101"})

    assert response.status_code == 409


def test_patch_missing_course_is_404(client):
    response = client.patch("/api/courses/nope", json={"name": "X"})

    assert response.status_code == 404


def test_delete_course_cascades(client):
    course = _create(client)
    client.post("/api/feedback/", json={"courseId": course["id"], "rating": 2})

    response = client.delete(f"/api/courses/{course['id']}")

    assert response.status_code == 200
    assert response.json() == {"deleted": True}
    assert client.get(f"/api/courses/{course['id']}").status_code == 404
    assert client.get("/api/feedback/").json() == []


def test_delete_missing_course_reports_false(client):
    response = client.delete("/api/courses/nope")

    assert response.status_code == 200
    assert response.json() == {"deleted": False}
