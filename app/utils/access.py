from typing import Iterable

from app.core.constants import AccessLevelEnum, UserRoleEnum, SubscriptionStatusEnum
from app.schemas.user import AccessContext


class AccessPolicy:
    """Single decision point for "can this viewer open this lesson".

    Callers must go through ``is_lesson_accessible`` rather than comparing
    ``access_level`` themselves, so entitlement rules change in one place.
    """

    @staticmethod
    def has_premium_entitlement(user) -> bool:
        if user is None:
            return False
        if user.role in (UserRoleEnum.ADMIN, UserRoleEnum.SUBSCRIBER):
            return True
        return user.subscription_status == SubscriptionStatusEnum.ACTIVE

    @staticmethod
    def context_for_user(user) -> AccessContext:
        if user is None:
            return AccessContext.anonymous()
        return AccessContext(
            user_id=user.id,
            has_premium_access=AccessPolicy.has_premium_entitlement(user),
        )

    @staticmethod
    def is_lesson_accessible(lesson, context: AccessContext = None) -> bool:
        # Premium lessons stay locked for everyone until subscriptions are enforced.
        return _access_level_value(lesson) == AccessLevelEnum.FREE.value

    @staticmethod
    def count_accessible(lessons: Iterable, context: AccessContext = None) -> int:
        return sum(1 for lesson in lessons if AccessPolicy.is_lesson_accessible(lesson, context))


def _access_level_value(lesson) -> str:
    level = getattr(lesson, "access_level", None)
    if isinstance(level, AccessLevelEnum):
        return level.value
    return level
