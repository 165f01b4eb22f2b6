import logging
from sqlalchemy.orm import Session, selectinload, joinedload
from typing import Any, Dict, List, Optional, Union

from app.core.constants import SITEMAP_CACHE_TAG, CourseSortEnum
from app.crud.base import CRUDBase
from app.models.course import Course, Lesson, LessonResource
from app.schemas.course import CourseCreate, CourseUpdate
from app.utils import cache

logger = logging.getLogger(__name__)


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):

    def _loader_options(self, depth: int):
        """Relationship loading for a given depth.

        0 loads the course row only, 1 adds lessons, related courses and
        course media, 2 adds lesson videos and resource files.
        """
        if depth <= 0:
            return []
        options = [
            selectinload(Course.lessons),
            selectinload(Course.related_courses),
            joinedload(Course.course_image),
            joinedload(Course.course_video),
            joinedload(Course.meta_image),
        ]
        if depth >= 2:
            options += [
                selectinload(Course.lessons).joinedload(Lesson.video),
                selectinload(Course.lessons).selectinload(Lesson.resources).joinedload(LessonResource.file),
            ]
        return options

    def _query(self, db: Session, depth: int = 1, published_only: bool = True):
        query = db.query(Course).options(*self._loader_options(depth))
        if published_only:
            query = query.filter(Course.is_published.is_(True))
        return query

    def get(self, db: Session, id: Any, depth: int = 1) -> Optional[Course]:
        return self._query(db, depth, published_only=False).filter(Course.id == id).first()

    def get_by_slug(self, db: Session, slug: Optional[str], *, depth: int = 1, published_only: bool = True) -> Optional[Course]:
        if not slug:
            return None
        return self._query(db, depth, published_only).filter(Course.slug == slug).first()

    def get_published(
        self,
        db: Session,
        *,
        sort: Union[CourseSortEnum, str] = CourseSortEnum.PUBLISHED_DESC,
        limit: int = 100,
        depth: int = 1,
        require_slug: bool = False,
    ) -> List[Course]:
        query = self._query(db, depth)
        if require_slug:
            query = query.filter(Course.slug.isnot(None), Course.slug != "")

        sort = CourseSortEnum(sort)
        if sort == CourseSortEnum.PUBLISHED_DESC:
            query = query.order_by(Course.published_date.is_(None), Course.published_date.desc(), Course.id)
        elif sort == CourseSortEnum.PUBLISHED_ASC:
            query = query.order_by(Course.published_date.is_(None), Course.published_date.asc(), Course.id)
        else:
            query = query.order_by(Course.id)

        return query.limit(limit).all()

    def create(self, db: Session, *, obj_in: Union[CourseCreate, Dict[str, Any]], commit: bool = True) -> Course:
        if isinstance(obj_in, dict):
            obj_in = CourseCreate(**obj_in)

        course_data = obj_in.model_dump(exclude={"lessons", "related_course_ids"})
        db_obj = Course(**course_data)
        for lesson_in in obj_in.lessons:
            lesson_data = lesson_in.model_dump(exclude={"resources"})
            lesson = Lesson(**lesson_data)
            for resource_in in lesson_in.resources:
                lesson.resources.append(LessonResource(**resource_in.model_dump()))
            db_obj.lessons.append(lesson)
        if obj_in.related_course_ids:
            db_obj.related_courses = db.query(Course).filter(Course.id.in_(obj_in.related_course_ids)).all()

        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        self._invalidate_sitemap()
        return db_obj

    def update(self, db: Session, *, db_obj: Course, obj_in: Union[CourseUpdate, Dict[str, Any]]) -> Course:
        updated = super().update(db, db_obj=db_obj, obj_in=obj_in)
        self._invalidate_sitemap()
        return updated

    def replace_lessons(self, db: Session, *, db_obj: Course, lessons: List[Lesson]) -> Course:
        """Swap the lesson sequence. Positions, and therefore lesson URLs, follow list order."""
        db_obj.lessons = lessons
        db_obj.lessons.reorder()
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        self._invalidate_sitemap()
        return db_obj

    def delete(self, db: Session, *, id: int) -> Optional[Course]:
        deleted = super().delete(db, id=id)
        if deleted is not None:
            self._invalidate_sitemap()
        return deleted

    def _invalidate_sitemap(self):
        cache.invalidate_tag(SITEMAP_CACHE_TAG)


course = CRUDCourse(Course)
