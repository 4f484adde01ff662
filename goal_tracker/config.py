# goal_tracker/config.py
from pydantic_settings import BaseSettings
from typing import Optional
from pydantic import Field

class Settings(BaseSettings):
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./goal_tracker.db")
    SQL_ECHO: bool = Field(False)

    SECRET_KEY: str = Field("change-me-in-production")
    ALGORITHM: str = Field("HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24 * 30)

    # Shared login password. If empty or missing → auth disabled.
    APP_PASSWORD: Optional[str] = None
    # Bearer secret for /api/init and /api/cron. If missing → those routes reject everything.
    CRON_SECRET: Optional[str] = None

    RESEND_API_KEY: Optional[str] = None
    REMINDER_FROM: str = Field("Goal Tracker <onboarding@resend.dev>")
    RESEND_TIMEOUT: float = Field(10.0)

    DEFAULT_STATS_DAYS: int = Field(30)
    MAX_STATS_DAYS: int = Field(3650)
    LOG_LEVEL: str = Field("INFO")

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        db_url = self.DATABASE_URL
        # Ensure asyncpg is used
        if db_url.startswith("postgresql://") and "+asyncpg" not in db_url:
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return db_url

    @property
    def auth_enabled(self) -> bool:
        return bool(self.APP_PASSWORD)

settings = Settings()
