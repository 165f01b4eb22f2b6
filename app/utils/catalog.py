"""Read-only rules over an ordered course/lesson projection.

Everything here works on plain objects exposing ``slug``, ``lessons``,
``updated_at`` (courses) and ``access_level`` (lessons), so the same rules
serve ORM rows, schemas and test doubles alike. ``None`` means not found.
"""
import re
from datetime import datetime, timezone
from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from app.schemas.sitemap import SitemapEntry
from app.schemas.user import AccessContext
from app.utils.access import AccessPolicy


LESSON_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


class LessonNavigation(NamedTuple):
    previous: Optional[Any]
    next: Optional[Any]


def _lessons_of(course) -> List[Any]:
    return list(getattr(course, "lessons", None) or [])


def has_slug(course) -> bool:
    return bool(getattr(course, "slug", None))


def parse_lesson_index(raw_index: Union[str, int, None]) -> Optional[int]:
    if raw_index is None or isinstance(raw_index, bool):
        return None
    if isinstance(raw_index, int):
        return raw_index
    text = str(raw_index).strip()
    # Optional sign and ASCII digits only.
    if not LESSON_INDEX_PATTERN.fullmatch(text):
        return None
    return int(text, 10)


def resolve_lesson_index(course, raw_index: Union[str, int, None]) -> Optional[int]:
    """Validate ``raw_index`` against ``course`` and return it as an int.

    Checks run in a fixed order and stop at the first failure: unparseable,
    negative, course without lessons, past the end.
    """
    index = parse_lesson_index(raw_index)
    if index is None:
        return None
    if index < 0:
        return None
    lessons = _lessons_of(course)
    if not lessons:
        return None
    if index >= len(lessons):
        return None
    return index


def resolve_lesson(course, raw_index: Union[str, int, None]):
    index = resolve_lesson_index(course, raw_index)
    if index is None:
        return None
    return _lessons_of(course)[index]


def compute_navigation(course, index: int) -> LessonNavigation:
    # Neighbours are exposed whatever their access level; the caller decides how to show them.
    lessons = _lessons_of(course)
    previous = lessons[index - 1] if index > 0 else None
    following = lessons[index + 1] if index < len(lessons) - 1 else None
    return LessonNavigation(previous=previous, next=following)


def build_lesson_outline(course, context: AccessContext = None, current_index: Optional[int] = None) -> List[dict]:
    outline = []
    for index, lesson in enumerate(_lessons_of(course)):
        outline.append({
            "index": index,
            "title": lesson.title,
            "duration": lesson.duration,
            "access_level": lesson.access_level,
            "locked": not AccessPolicy.is_lesson_accessible(lesson, context),
            "is_current": index == current_index,
        })
    return outline


def position_label(index: int, total: int) -> str:
    return f"Lesson {index + 1} of {total}"


def iter_course_params(courses: Iterable) -> Iterator[str]:
    for course in courses:
        if has_slug(course):
            yield course.slug


def iter_lesson_params(courses: Iterable) -> Iterator[Tuple[str, int]]:
    for course in courses:
        if not has_slug(course):
            continue
        for index in range(len(_lessons_of(course))):
            yield course.slug, index


def format_lastmod(value) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def iter_sitemap_entries(courses: Iterable, base_url: str, now: Optional[datetime] = None) -> Iterator[SitemapEntry]:
    base_url = base_url.rstrip("/")
    fallback = format_lastmod(now or datetime.now(timezone.utc))

    yield SitemapEntry(loc=f"{base_url}/courses", lastmod=fallback)

    for course in courses:
        if not has_slug(course):
            continue
        lastmod = format_lastmod(getattr(course, "updated_at", None)) or fallback
        course_url = f"{base_url}/courses/{course.slug}"
        yield SitemapEntry(loc=course_url, lastmod=lastmod)
        for index in range(len(_lessons_of(course))):
            yield SitemapEntry(loc=f"{course_url}/lessons/{index}", lastmod=lastmod)
