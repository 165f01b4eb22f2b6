import logging
from datetime import datetime, timezone
from typing import Iterator, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import (
    SITEMAP_CACHE_TAG,
    LESSON_NOT_FOUND_TITLE,
    COURSE_NOT_FOUND_TITLE,
    CourseSortEnum,
)
from app.crud.course import course as crud_course
from app.models.course import Course as CourseModel
from app.schemas.course import (
    CourseCard,
    CourseDetail,
    CourseSummary,
    Lesson,
    LessonOutlineItem,
    LessonRef,
    LessonView,
    PageMetadata,
)
from app.schemas.media import Media
from app.schemas.sitemap import SitemapEntry
from app.schemas.user import AccessContext
from app.utils import cache
from app.utils.access import AccessPolicy
from app.utils.catalog import (
    build_lesson_outline,
    compute_navigation,
    iter_course_params,
    iter_lesson_params,
    iter_sitemap_entries,
    position_label,
    resolve_lesson_index,
)

logger = logging.getLogger(__name__)


def _media(obj) -> Optional[Media]:
    return Media.model_validate(obj) if obj is not None else None


class CourseCatalogService:

    def list_courses(
        self,
        db: Session,
        sort: CourseSortEnum = CourseSortEnum.PUBLISHED_DESC,
        limit: int = settings.CATALOG_DEFAULT_LIMIT,
        context: Optional[AccessContext] = None,
    ) -> List[CourseCard]:
        courses = crud_course.get_published(db, sort=sort, limit=limit, depth=1, require_slug=True)
        return [self._to_card(course, context) for course in courses]

    def get_course_by_slug(self, db: Session, slug: Optional[str], depth: int = 1) -> Optional[CourseModel]:
        course = crud_course.get_by_slug(db, slug, depth=depth)
        if course is None:
            logger.info(f"Course not found for slug={slug!r}")
        return course

    def get_course_detail(self, db: Session, slug: Optional[str], context: Optional[AccessContext] = None) -> Optional[CourseDetail]:
        course = self.get_course_by_slug(db, slug, depth=1)
        if course is None:
            return None

        return CourseDetail(
            id=course.id,
            slug=course.slug,
            title=course.title,
            level=course.level,
            instrument=course.instrument,
            published_date=course.published_date,
            updated_at=course.updated_at,
            content=course.content,
            course_image=_media(course.course_image),
            course_video=_media(course.course_video),
            related_courses=[
                CourseSummary.model_validate(related) for related in course.related_courses if related.slug
            ],
            lessons=[LessonOutlineItem(**item) for item in build_lesson_outline(course, context)],
            lesson_count=len(course.lessons),
            free_lesson_count=AccessPolicy.count_accessible(course.lessons, context),
        )

    def get_lesson_view(
        self,
        db: Session,
        slug: Optional[str],
        raw_index,
        context: Optional[AccessContext] = None,
    ) -> Optional[LessonView]:
        resolved = self._resolve(db, slug, raw_index, depth=2)
        if resolved is None:
            return None
        course, index = resolved

        lessons = course.lessons
        lesson = lessons[index]
        accessible = AccessPolicy.is_lesson_accessible(lesson, context)
        navigation = compute_navigation(course, index)

        if accessible:
            lesson_payload = Lesson.model_validate(lesson)
        else:
            lesson_payload = Lesson(
                index=lesson.index,
                title=lesson.title,
                access_level=lesson.access_level,
                duration=lesson.duration,
                locked=True,
            )

        return LessonView(
            course=CourseSummary.model_validate(course),
            level=course.level,
            instrument=course.instrument,
            index=index,
            position_label=position_label(index, len(lessons)),
            is_accessible=accessible,
            lesson=lesson_payload,
            previous=self._to_ref(navigation.previous),
            next=self._to_ref(navigation.next),
            outline=[LessonOutlineItem(**item) for item in build_lesson_outline(course, context, current_index=index)],
        )

    def get_course_metadata(self, db: Session, slug: Optional[str]) -> PageMetadata:
        course = self.get_course_by_slug(db, slug, depth=1)
        if course is None:
            return PageMetadata(title=COURSE_NOT_FOUND_TITLE)

        title = course.meta_title or course.title or ""
        description = course.meta_description
        return PageMetadata(
            title=title,
            description=description,
            open_graph={"title": title, "description": description},
        )

    def get_lesson_metadata(self, db: Session, slug: Optional[str], raw_index) -> PageMetadata:
        resolved = self._resolve(db, slug, raw_index, depth=1)
        if resolved is None:
            return PageMetadata(title=LESSON_NOT_FOUND_TITLE)
        course, index = resolved

        lesson = course.lessons[index]
        title = f"{lesson.title} - {course.title}"
        description = (
            f"Lesson {index + 1} of {course.title}: {lesson.title}. "
            f"Duration: {lesson.duration or 'N/A'}"
        )
        return PageMetadata(
            title=title,
            description=description,
            open_graph={"title": title, "description": description},
        )

    def enumerate_course_params(self, db: Session) -> Iterator[str]:
        courses = crud_course.get_published(
            db, sort=CourseSortEnum.NONE, limit=settings.SITEMAP_COURSE_LIMIT, depth=0
        )
        return iter_course_params(courses)

    def enumerate_lesson_params(self, db: Session) -> Iterator[Tuple[str, int]]:
        courses = crud_course.get_published(
            db, sort=CourseSortEnum.NONE, limit=settings.SITEMAP_COURSE_LIMIT, depth=1
        )
        return iter_lesson_params(courses)

    def build_sitemap_entries(self, db: Session, base_url: Optional[str] = None) -> List[SitemapEntry]:
        base_url = base_url or settings.SITE_URL
        cache_key = f"{SITEMAP_CACHE_TAG}:{base_url}"

        cached_entries = cache.get(cache_key)
        if cached_entries is not None:
            logger.debug(f"Cache HIT for key: {cache_key}")
            return cached_entries

        logger.debug(f"Cache MISS for key: {cache_key}")
        courses = crud_course.get_published(
            db, sort=CourseSortEnum.NONE, limit=settings.SITEMAP_COURSE_LIMIT, depth=1
        )
        entries = list(iter_sitemap_entries(courses, base_url, now=datetime.now(timezone.utc)))
        cache.set(cache_key, entries, ttl=settings.SITEMAP_CACHE_TTL, tags=[SITEMAP_CACHE_TAG])
        logger.info(f"Built courses sitemap with {len(entries)} entries")
        return entries

    def _resolve(self, db: Session, slug: Optional[str], raw_index, depth: int) -> Optional[Tuple[CourseModel, int]]:
        course = self.get_course_by_slug(db, slug, depth=depth)
        if course is None:
            return None
        index = resolve_lesson_index(course, raw_index)
        if index is None:
            logger.info(f"Lesson not found for slug={slug!r} index={raw_index!r}")
            return None
        return course, index

    def _to_card(self, course: CourseModel, context: Optional[AccessContext]) -> CourseCard:
        return CourseCard.model_validate(course).model_copy(update={
            "lesson_count": len(course.lessons),
            "free_lesson_count": AccessPolicy.count_accessible(course.lessons, context),
        })

    @staticmethod
    def _to_ref(lesson) -> Optional[LessonRef]:
        if lesson is None:
            return None
        return LessonRef(index=lesson.index, title=lesson.title)


course_service = CourseCatalogService()
