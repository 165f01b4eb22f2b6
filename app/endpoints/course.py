from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import CourseSortEnum
from app.schemas.course import CourseCard, CourseDetail, LessonView, PageMetadata
from app.schemas.response import APIResponse
from app.schemas.user import AccessContext
from app.services.course import course_service
from app.utils import deps

router = APIRouter()

LESSON_NOT_FOUND = "Lesson not found."
COURSE_NOT_FOUND = "Course not found."

@router.get("/", response_model=APIResponse[List[CourseCard]])
def list_courses(
    sort: CourseSortEnum = Query(default=CourseSortEnum.PUBLISHED_DESC),
    limit: int = Query(default=settings.CATALOG_DEFAULT_LIMIT, ge=1, le=settings.CATALOG_MAX_LIMIT),
    db: Session = Depends(deps.get_db),
    context: AccessContext = Depends(deps.get_access_context)
):
    courses = course_service.list_courses(db, sort=sort, limit=limit, context=context)
    if not courses:
        return APIResponse(message="No courses found", data=[])
    return APIResponse(message="Courses retrieved successfully", data=courses)

@router.get("/{slug}", response_model=APIResponse[CourseDetail])
def get_course(
    slug: str,
    db: Session = Depends(deps.get_db),
    context: AccessContext = Depends(deps.get_access_context)
):
    course = course_service.get_course_detail(db, slug, context=context)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COURSE_NOT_FOUND)
    return APIResponse(message="Course retrieved successfully", data=course)

@router.get("/{slug}/metadata", response_model=APIResponse[PageMetadata])
def get_course_metadata(slug: str, db: Session = Depends(deps.get_db)):
    metadata = course_service.get_course_metadata(db, slug)
    return APIResponse(message="Metadata retrieved successfully", data=metadata)

@router.get("/{slug}/lessons/{lesson_index}", response_model=APIResponse[LessonView])
def get_lesson(
    slug: str,
    lesson_index: str,
    db: Session = Depends(deps.get_db),
    context: AccessContext = Depends(deps.get_access_context)
):
    # A bad index and a missing course are deliberately indistinguishable to the client.
    view = course_service.get_lesson_view(db, slug, lesson_index, context=context)
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LESSON_NOT_FOUND)
    return APIResponse(message="Lesson retrieved successfully", data=view)

@router.get("/{slug}/lessons/{lesson_index}/metadata", response_model=APIResponse[PageMetadata])
def get_lesson_metadata(slug: str, lesson_index: str, db: Session = Depends(deps.get_db)):
    metadata = course_service.get_lesson_metadata(db, slug, lesson_index)
    return APIResponse(message="Metadata retrieved successfully", data=metadata)
