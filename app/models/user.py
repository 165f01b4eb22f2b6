from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import UserRoleEnum, SubscriptionStatusEnum

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=False)
    role = Column(Enum(UserRoleEnum), nullable=False, default=UserRoleEnum.FREE)
    subscription_status = Column(Enum(SubscriptionStatusEnum), nullable=False, default=SubscriptionStatusEnum.NONE)
    photo_id = Column(Integer, ForeignKey("media.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    photo = relationship("Media", foreign_keys=[photo_id])
    progress_records = relationship("UserProgress", back_populates="user", cascade="all, delete-orphan")
