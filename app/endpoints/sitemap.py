from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.services.course import course_service
from app.utils import deps
from app.utils.sitemap import render_sitemap

router = APIRouter()

@router.get("/courses-sitemap.xml", response_class=Response)
def get_courses_sitemap(db: Session = Depends(deps.get_db)):
    entries = course_service.build_sitemap_entries(db, base_url=settings.SITE_URL)
    return Response(content=render_sitemap(entries), media_type="application/xml")
