from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Course Catalog"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Public site origin used for sitemap locations
    SITE_URL: str = "localhost:3000"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    DATABASE_URL: str = "sqlite:///./courses.db"
    TEST_DATABASE_URL: str = ""

    CATALOG_DEFAULT_LIMIT: int = 100
    CATALOG_MAX_LIMIT: int = 1000
    SITEMAP_COURSE_LIMIT: int = 1000
    SITEMAP_CACHE_TTL: int = 60 * 60  # 1 hour

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"

settings = Settings()
