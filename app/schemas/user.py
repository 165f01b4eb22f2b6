from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.core.constants import UserRoleEnum, SubscriptionStatusEnum

class UserBase(BaseModel):
    """Base user schema with common fields."""
    name: Optional[str] = None
    email: str
    role: UserRoleEnum = UserRoleEnum.FREE
    subscription_status: SubscriptionStatusEnum = SubscriptionStatusEnum.NONE

    model_config = ConfigDict(use_enum_values=True)

class UserCreate(UserBase):
    pass

class User(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class AccessContext(BaseModel):
    """Entitlements of the current viewer, computed per request."""
    user_id: Optional[int] = None
    has_premium_access: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    @classmethod
    def anonymous(cls) -> "AccessContext":
        return cls()
