import pytest
from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_not_found


@pytest.fixture
def guitar_course(course_factory, media_factory):
    video = media_factory()
    sheet = media_factory(filename="chords.pdf", url="/media/chords.pdf", mime_type="application/pdf")
    return course_factory(slug="guitar-101", title="Guitar 101", lessons=[
        {
            "title": "Holding the pick",
            "access_level": "free",
            "duration": "5 min",
            "video_id": video.id,
            "content": {"root": {"children": []}},
            "resources": [{"label": "Chord sheet", "file_id": sheet.id}, {"file_id": sheet.id}],
        },
        {
            "title": "Open chords",
            "access_level": "premium",
            "duration": "12 min",
            "video_id": video.id,
            "content": {"root": {"children": ["secret"]}},
            "resources": [{"label": "Premium tab", "file_id": sheet.id}],
        },
        {"title": "Strumming", "access_level": "free", "duration": None},
    ])


def test_free_lesson_view(client: TestClient, guitar_course):
    data = api_call(client, "GET", "/courses/guitar-101/lessons/0").json()["data"]

    assert data["is_accessible"] is True
    assert data["index"] == 0
    assert data["lesson"]["locked"] is False
    assert data["position_label"] == "Lesson 1 of 3"
    assert data["course"]["slug"] == "guitar-101"
    assert data["lesson"]["video"]["url"] == "/media/lesson.mp4"
    assert data["lesson"]["content"] == {"root": {"children": []}}
    assert [r["label"] for r in data["lesson"]["resources"]] == ["Chord sheet", None]
    assert data["lesson"]["resources"][1]["file"]["filename"] == "chords.pdf"
    assert data["previous"] is None
    assert data["next"] == {"index": 1, "title": "Open chords"}
    assert [item["is_current"] for item in data["outline"]] == [True, False, False]


def test_premium_lesson_is_locked_but_navigable(client: TestClient, guitar_course, user_factory):
    subscriber = user_factory(role="subscriber")
    headers = {"X-User-Id": str(subscriber.id)}

    data = api_call(client, "GET", "/courses/guitar-101/lessons/1", headers=headers).json()["data"]

    assert data["is_accessible"] is False
    assert data["lesson"]["locked"] is True
    assert data["lesson"]["title"] == "Open chords"
    assert data["lesson"]["content"] is None
    assert data["lesson"]["video"] is None
    assert data["lesson"]["resources"] == []
    assert data["previous"] == {"index": 0, "title": "Holding the pick"}
    assert data["next"] == {"index": 2, "title": "Strumming"}


def test_last_lesson_has_no_next(client: TestClient, guitar_course):
    data = api_call(client, "GET", "/courses/guitar-101/lessons/2").json()["data"]
    assert data["next"] is None
    assert data["previous"]["index"] == 1


@pytest.mark.parametrize("raw_index", ["-1", "abc", "99999", "3", "1.5"])
def test_bad_lesson_index_is_not_found(client: TestClient, guitar_course, raw_index):
    response = assert_not_found(client, f"/courses/guitar-101/lessons/{raw_index}")
    assert response.json()["error"]["message"] == "Lesson not found."


def test_missing_course_and_bad_index_look_the_same(client: TestClient, guitar_course):
    missing_course = assert_not_found(client, "/courses/nope/lessons/0").json()
    bad_index = assert_not_found(client, "/courses/guitar-101/lessons/42").json()
    assert missing_course["error"] == bad_index["error"]


def test_lesson_on_empty_course_is_not_found(client: TestClient, course_factory):
    course_factory(slug="empty", lessons=[])
    assert_not_found(client, "/courses/empty/lessons/0")


def test_unknown_user_header_is_anonymous(client: TestClient, guitar_course):
    data = api_call(client, "GET", "/courses/guitar-101/lessons/0", headers={"X-User-Id": "999"}).json()["data"]
    assert data["is_accessible"] is True


def test_lesson_metadata(client: TestClient, guitar_course):
    data = api_call(client, "GET", "/courses/guitar-101/lessons/2/metadata").json()["data"]
    assert data["title"] == "Strumming - Guitar 101"
    assert data["description"] == "Lesson 3 of Guitar 101: Strumming. Duration: N/A"
    assert data["open_graph"]["title"] == data["title"]


def test_lesson_metadata_not_found(client: TestClient, guitar_course):
    data = api_call(client, "GET", "/courses/guitar-101/lessons/x/metadata").json()["data"]
    assert data == {"title": "Lesson Not Found", "description": None, "open_graph": None}
