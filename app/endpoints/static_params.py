from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.schemas.course import CourseParams, LessonParams
from app.schemas.response import APIResponse
from app.services.course import course_service
from app.utils import deps

router = APIRouter()

@router.get("/courses", response_model=APIResponse[List[CourseParams]])
def get_course_params(db: Session = Depends(deps.get_db)):
    params = [CourseParams(slug=slug) for slug in course_service.enumerate_course_params(db)]
    return APIResponse(message="Course params retrieved successfully", data=params)

@router.get("/lessons", response_model=APIResponse[List[LessonParams]])
def get_lesson_params(db: Session = Depends(deps.get_db)):
    params = [
        LessonParams(slug=slug, lesson_index=str(index))
        for slug, index in course_service.enumerate_lesson_params(db)
    ]
    return APIResponse(message="Lesson params retrieved successfully", data=params)
