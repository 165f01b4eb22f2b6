from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.schemas.response import APIResponse
from app.schemas.user import AccessContext
from app.schemas.user_progress import UserProgress
from app.services.user_progress import user_progress_service
from app.utils import deps

router = APIRouter()

@router.get("/me", response_model=APIResponse[List[UserProgress]])
def get_my_progress(
    db: Session = Depends(deps.get_db),
    context: AccessContext = Depends(deps.get_access_context)
):
    records = user_progress_service.get_own_progress(db, context)
    return APIResponse(message="Progress retrieved successfully", data=records)
