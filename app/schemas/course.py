from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List
from datetime import datetime
from app.core.constants import CourseLevelEnum, AccessLevelEnum
from app.schemas.media import Media


class LessonResourceCreate(BaseModel):
    label: Optional[str] = None
    file_id: Optional[int] = None

class LessonResource(BaseModel):
    label: Optional[str] = None
    file: Optional[Media] = None

    model_config = ConfigDict(from_attributes=True)


class LessonBase(BaseModel):
    title: str
    access_level: AccessLevelEnum = Field(default=AccessLevelEnum.PREMIUM)
    duration: Optional[str] = None  # free text, e.g. "12 min"

    model_config = ConfigDict(use_enum_values=True)

class LessonCreate(LessonBase):
    video_id: Optional[int] = None
    content: Optional[Any] = None
    resources: List[LessonResourceCreate] = Field(default_factory=list)

class Lesson(LessonBase):
    """Lesson payload. Video, content and resources stay empty while ``locked``."""
    index: int
    locked: bool = False
    video: Optional[Media] = None
    content: Optional[Any] = None
    resources: List[LessonResource] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class CourseBase(BaseModel):
    slug: Optional[str] = None
    title: Optional[str] = None
    level: CourseLevelEnum = Field(default=CourseLevelEnum.BEGINNER)
    instrument: Optional[str] = None
    published_date: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)

class CourseCreate(CourseBase):
    content: Optional[Any] = None
    is_published: bool = True
    course_image_id: Optional[int] = None
    course_video_id: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_image_id: Optional[int] = None
    lessons: List[LessonCreate] = Field(default_factory=list)
    related_course_ids: List[int] = Field(default_factory=list)

class CourseUpdate(BaseModel):
    slug: Optional[str] = None
    title: Optional[str] = None
    content: Optional[Any] = None
    level: Optional[CourseLevelEnum] = None
    instrument: Optional[str] = None
    published_date: Optional[datetime] = None
    is_published: Optional[bool] = None
    course_image_id: Optional[int] = None
    course_video_id: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_image_id: Optional[int] = None

    model_config = ConfigDict(use_enum_values=True)

class CourseSummary(BaseModel):
    id: int
    slug: Optional[str] = None
    title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class CourseCard(CourseBase):
    id: int
    course_image: Optional[Media] = None
    lesson_count: int = 0
    free_lesson_count: int = 0

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class LessonOutlineItem(BaseModel):
    index: int
    title: str
    duration: Optional[str] = None
    access_level: AccessLevelEnum
    locked: bool
    is_current: bool = False

    model_config = ConfigDict(use_enum_values=True)

class LessonRef(BaseModel):
    index: int
    title: str


class CourseDetail(CourseBase):
    id: int
    content: Optional[Any] = None
    updated_at: Optional[datetime] = None
    course_image: Optional[Media] = None
    course_video: Optional[Media] = None
    related_courses: List[CourseSummary] = Field(default_factory=list)
    lessons: List[LessonOutlineItem] = Field(default_factory=list)
    lesson_count: int = 0
    free_lesson_count: int = 0

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class LessonView(BaseModel):
    course: CourseSummary
    level: Optional[CourseLevelEnum] = None
    instrument: Optional[str] = None
    index: int
    position_label: str
    is_accessible: bool
    lesson: Lesson
    previous: Optional[LessonRef] = None
    next: Optional[LessonRef] = None
    outline: List[LessonOutlineItem] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True)


class PageMetadata(BaseModel):
    title: str
    description: Optional[str] = None
    open_graph: Optional[dict] = None


class CourseParams(BaseModel):
    slug: str

class LessonParams(BaseModel):
    slug: str
    lesson_index: str
