from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base

class Media(Base):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    filename = Column(String, nullable=False)
    url = Column(String, nullable=True)
    mime_type = Column(String, nullable=True)
    filesize = Column(Integer, nullable=True)  # bytes
    alt = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
