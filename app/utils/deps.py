import logging
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session
from app.core.database import SessionLocal
from app.crud.user import user as crud_user
from app.schemas.user import AccessContext
from app.utils.access import AccessPolicy

logger = logging.getLogger(__name__)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_access_context(
    db: Session = Depends(get_db),
    x_user_id: Optional[int] = Header(default=None),
) -> AccessContext:
    """Viewer entitlements, resolved from the user id set by the auth layer in front of us."""
    if x_user_id is None:
        return AccessContext.anonymous()

    user = crud_user.get(db, id=x_user_id)
    if user is None:
        logger.warning(f"Unknown user id {x_user_id} in X-User-Id header, treating as anonymous")
        return AccessContext.anonymous()
    return AccessPolicy.context_for_user(user)
