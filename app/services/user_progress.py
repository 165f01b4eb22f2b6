from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.crud.user_progress import user_progress as crud_user_progress
from app.schemas.user import AccessContext
from app.schemas.user_progress import UserProgress


class UserProgressService:
    def get_own_progress(self, db: Session, context: AccessContext) -> List[UserProgress]:
        # Progress records are only ever visible to the user who owns them.
        if context.is_anonymous:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required.")
        records = crud_user_progress.get_by_user(db, user_id=context.user_id)
        return [UserProgress.model_validate(record) for record in records]

user_progress_service = UserProgressService()
