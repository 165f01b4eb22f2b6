from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Table, Enum, JSON
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import CourseLevelEnum, AccessLevelEnum

course_related_courses = Table(
    "course_related_courses",
    Base.metadata,
    Column("course_id", Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
    Column("related_course_id", Integer, ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
)

class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, index=True, nullable=True)
    title = Column(String, index=True, nullable=True)
    content = Column(JSON, nullable=True)
    level = Column(Enum(CourseLevelEnum), nullable=False, default=CourseLevelEnum.BEGINNER)
    instrument = Column(String, nullable=True)
    published_date = Column(DateTime(timezone=True), nullable=True)
    is_published = Column(Boolean, default=True)
    course_image_id = Column(Integer, ForeignKey("media.id"), nullable=True)
    course_video_id = Column(Integer, ForeignKey("media.id"), nullable=True)
    meta_title = Column(String, nullable=True)
    meta_description = Column(String, nullable=True)
    meta_image_id = Column(Integer, ForeignKey("media.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now())

    course_image = relationship("Media", foreign_keys=[course_image_id])
    course_video = relationship("Media", foreign_keys=[course_video_id])
    meta_image = relationship("Media", foreign_keys=[meta_image_id])
    lessons = relationship(
        "Lesson",
        back_populates="course",
        order_by="Lesson.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    related_courses = relationship(
        "Course",
        secondary=course_related_courses,
        primaryjoin=id == course_related_courses.c.course_id,
        secondaryjoin=id == course_related_courses.c.related_course_id,
    )

    @property
    def lesson_count(self):
        return len(self.lessons)


class Lesson(Base):
    """A lesson owned by its course.

    The primary key is internal. Public URLs address a lesson by ``position``,
    its zero-based index inside ``Course.lessons``.
    """
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    title = Column(String, nullable=False)
    access_level = Column(Enum(AccessLevelEnum), nullable=False, default=AccessLevelEnum.PREMIUM)
    video_id = Column(Integer, ForeignKey("media.id"), nullable=True)
    duration = Column(String, nullable=True)
    content = Column(JSON, nullable=True)

    course = relationship("Course", back_populates="lessons")
    video = relationship("Media", foreign_keys=[video_id])
    resources = relationship(
        "LessonResource",
        back_populates="lesson",
        order_by="LessonResource.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    @property
    def index(self):
        return self.position


class LessonResource(Base):
    __tablename__ = "lesson_resources"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    label = Column(String, nullable=True)
    file_id = Column(Integer, ForeignKey("media.id"), nullable=True)

    lesson = relationship("Lesson", back_populates="resources")
    file = relationship("Media", foreign_keys=[file_id])
