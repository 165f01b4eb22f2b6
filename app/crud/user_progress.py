from sqlalchemy.orm import Session, selectinload
from typing import Any, Dict, List, Union

from app.crud.base import CRUDBase
from app.models.user_progress import UserProgress, CompletedSection
from app.schemas.user_progress import UserProgressCreate

class CRUDUserProgress(CRUDBase[UserProgress, UserProgressCreate, UserProgressCreate]):
    def get_by_user(self, db: Session, *, user_id: int) -> List[UserProgress]:
        return (
            db.query(UserProgress)
            .options(selectinload(UserProgress.completed_sections))
            .filter(UserProgress.user_id == user_id)
            .order_by(UserProgress.id)
            .all()
        )

    def create(self, db: Session, *, obj_in: Union[UserProgressCreate, Dict[str, Any]], commit: bool = True) -> UserProgress:
        if isinstance(obj_in, dict):
            obj_in = UserProgressCreate(**obj_in)

        db_obj = UserProgress(**obj_in.model_dump(exclude={"completed_sections"}))
        for section_in in obj_in.completed_sections:
            db_obj.completed_sections.append(CompletedSection(**section_in.model_dump(exclude_none=True)))
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

user_progress = CRUDUserProgress(UserProgress)
