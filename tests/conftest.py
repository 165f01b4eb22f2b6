import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import main
from app.core.database import Base
from app.crud.course import course as crud_course
from app.crud.media import media as crud_media
from app.crud.user import user as crud_user
from app.utils import cache
from app.utils import deps as deps_utils


@pytest.fixture(scope="function")
def database_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()

@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def media_factory(db_session):
    def _factory(filename="lesson.mp4", url="/media/lesson.mp4", mime_type="video/mp4", filesize=2048):
        return crud_media.create(db_session, obj_in={
            "filename": filename,
            "url": url,
            "mime_type": mime_type,
            "filesize": filesize,
        })
    return _factory

_AUTO_SLUG = object()

@pytest.fixture
def course_factory(db_session):
    counter = {"n": 0}

    def _factory(slug=_AUTO_SLUG, lessons=None, **overrides):
        counter["n"] += 1
        if lessons is None:
            lessons = [
                {"title": "Holding the pick", "access_level": "free", "duration": "5 min"},
                {"title": "Open chords", "access_level": "premium", "duration": "12 min"},
            ]
        course_data = {
            "slug": f"course-{counter['n']}" if slug is _AUTO_SLUG else slug,
            "title": f"Course {counter['n']}",
            "instrument": "guitar",
            "level": "beginner",
            "published_date": datetime(2024, 1, counter["n"], tzinfo=timezone.utc),
            "lessons": lessons,
        }
        course_data.update(overrides)
        return crud_course.create(db_session, obj_in=course_data)
    return _factory

@pytest.fixture
def user_factory(db_session):
    def _factory(email="student@test.com", role="free", subscription_status="none"):
        return crud_user.create(db_session, obj_in={
            "name": "Test User",
            "email": email,
            "role": role,
            "subscription_status": subscription_status,
        })
    return _factory
