from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"
    VERSION: str = "1.0.0"

    PORT: int = 3000
    # Falls back to http://localhost:<PORT> when unset
    BASE_URL: Optional[str] = None

    DB_FILE: str = "database.json"
    STATIC_DIR: str = "public"

    CLEANUP_DAYS: int = 90
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @model_validator(mode="after")
    def default_base_url(self):
        if not self.BASE_URL:
            self.BASE_URL = f"http://localhost:{self.PORT}"
        self.BASE_URL = self.BASE_URL.rstrip("/")
        return self

settings = Settings()
