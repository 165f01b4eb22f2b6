from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from app.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=True, index=True)
    progress = Column(Float, nullable=True)
    last_updated = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    user = relationship("User", back_populates="progress_records")
    course = relationship("Course")
    completed_sections = relationship(
        "CompletedSection",
        back_populates="progress_record",
        order_by="CompletedSection.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )


class CompletedSection(Base):
    __tablename__ = "completed_sections"

    id = Column(Integer, primary_key=True, index=True)
    user_progress_id = Column(Integer, ForeignKey("user_progress.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    section_title = Column(String, nullable=False)
    completed_at = Column(DateTime(timezone=True), default=_utcnow)

    progress_record = relationship("UserProgress", back_populates="completed_sections")
