from datetime import datetime, timezone

import pytest

from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_not_found


def test_empty_catalog_is_not_an_error(client: TestClient):
    response = api_call(client, "GET", "/courses/")
    body = response.json()
    assert body["data"] == []
    assert body["message"] == "No courses found"


def test_catalog_sorted_by_published_date_desc(client: TestClient, course_factory):
    course_factory(slug="older", published_date=datetime(2023, 1, 1, tzinfo=timezone.utc))
    course_factory(slug="undated", published_date=None)
    course_factory(slug="newer", published_date=datetime(2024, 6, 1, tzinfo=timezone.utc))

    data = api_call(client, "GET", "/courses/").json()["data"]

    assert [c["slug"] for c in data] == ["newer", "older", "undated"]


def test_catalog_insertion_order_and_limit(client: TestClient, course_factory):
    course_factory(slug="first", published_date=datetime(2020, 1, 1, tzinfo=timezone.utc))
    course_factory(slug="second", published_date=datetime(2025, 1, 1, tzinfo=timezone.utc))
    course_factory(slug="third")

    data = api_call(client, "GET", "/courses/?sort=none&limit=2").json()["data"]

    assert [c["slug"] for c in data] == ["first", "second"]


def test_catalog_excludes_unpublished_and_slugless(client: TestClient, course_factory):
    course_factory(slug="visible")
    course_factory(slug="draft", is_published=False)
    course_factory(slug="")

    data = api_call(client, "GET", "/courses/").json()["data"]

    slugs = [c["slug"] for c in data]
    assert slugs == ["visible"]
    assert all(slugs)


def test_catalog_card_counts(client: TestClient, course_factory):
    course_factory(slug="mixed", lessons=[
        {"title": "One", "access_level": "free"},
        {"title": "Two", "access_level": "premium"},
        {"title": "Three", "access_level": "free"},
    ])

    card = api_call(client, "GET", "/courses/").json()["data"][0]

    assert card["lesson_count"] == 3
    assert card["free_lesson_count"] == 2
    assert card["level"] == "beginner"


def test_catalog_rejects_bad_limit(client: TestClient):
    response = client.get("/courses/?limit=0")
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_course_detail(client: TestClient, course_factory):
    related = course_factory(slug="bass-101")
    course_factory(slug="guitar-101", related_course_ids=[related.id])

    data = api_call(client, "GET", "/courses/guitar-101").json()["data"]

    assert data["slug"] == "guitar-101"
    assert data["lesson_count"] == 2
    assert data["free_lesson_count"] == 1
    assert [item["locked"] for item in data["lessons"]] == [False, True]
    assert [item["index"] for item in data["lessons"]] == [0, 1]
    assert [r["slug"] for r in data["related_courses"]] == ["bass-101"]


def test_course_detail_with_zero_lessons(client: TestClient, course_factory):
    course_factory(slug="coming-soon", lessons=[])
    data = api_call(client, "GET", "/courses/coming-soon").json()["data"]
    assert data["lessons"] == []
    assert data["lesson_count"] == 0


def test_course_detail_not_found(client: TestClient, course_factory):
    course_factory(slug="draft-course", is_published=False)
    assert_not_found(client, "/courses/missing")
    assert_not_found(client, "/courses/draft-course")


def test_course_metadata(client: TestClient, course_factory):
    course_factory(slug="seo", title="Seo Course", meta_description="Learn things")

    found = api_call(client, "GET", "/courses/seo/metadata").json()["data"]
    missing = api_call(client, "GET", "/courses/nope/metadata").json()["data"]

    assert found["title"] == "Seo Course"
    assert found["description"] == "Learn things"
    assert missing["title"] == "Course Not Found"


def test_course_and_lesson_params(client: TestClient, course_factory):
    course_factory(slug="guitar-101", lessons=[{"title": "A"}, {"title": "B"}, {"title": "C"}])
    course_factory(slug="empty", lessons=[])
    course_factory(slug="")

    course_params = api_call(client, "GET", "/static-params/courses").json()["data"]
    lesson_params = api_call(client, "GET", "/static-params/lessons").json()["data"]

    assert course_params == [{"slug": "guitar-101"}, {"slug": "empty"}]
    assert lesson_params == [
        {"slug": "guitar-101", "lesson_index": "0"},
        {"slug": "guitar-101", "lesson_index": "1"},
        {"slug": "guitar-101", "lesson_index": "2"},
    ]


@pytest.mark.parametrize("slug", ["params", "lesson-params", "static-params"])
def test_course_slugs_are_not_shadowed_by_other_routes(client: TestClient, course_factory, slug):
    course_factory(slug=slug)
    data = api_call(client, "GET", f"/courses/{slug}").json()["data"]
    assert data["slug"] == slug


def test_health_and_request_id(client: TestClient):
    response = api_call(client, "GET", "/health")
    assert response.json() == {"status": "ok"}
    assert response.headers.get("X-Request-ID")


def test_request_id_is_echoed_and_timing_reported(client: TestClient):
    response = api_call(client, "GET", "/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert float(response.headers["X-Process-Time"]) >= 0
