from enum import Enum


SITEMAP_CACHE_TAG = "courses-sitemap"
DEFAULT_COURSE_SORT = "-publishedDate"
LESSON_NOT_FOUND_TITLE = "Lesson Not Found"
COURSE_NOT_FOUND_TITLE = "Course Not Found"

class CourseLevelEnum(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

class AccessLevelEnum(str, Enum):
    FREE = "free"
    PREMIUM = "premium"

class UserRoleEnum(str, Enum):
    FREE = "free"
    SUBSCRIBER = "subscriber"
    ADMIN = "admin"

class SubscriptionStatusEnum(str, Enum):
    NONE = "none"
    ACTIVE = "active"
    EXPIRED = "expired"

class CourseSortEnum(str, Enum):
    PUBLISHED_DESC = "-publishedDate"
    PUBLISHED_ASC = "publishedDate"
    NONE = "none"
