# app/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - SESSION_SECRET (signs the session cookie)

    Storage:
      - DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_DATABASE (MySQL)
      - DATABASE_URL overrides the DB_* parts when set
        (e.g. "sqlite://" for local tests)
    """

    PROJECT_NAME: str = "Optiq Backend"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # MySQL connection parts
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "optiq"
    DATABASE_URL: str | None = None

    # At most DB_POOL_SIZE storage connections; extra requests wait
    # up to DB_POOL_TIMEOUT seconds for a free one. DB_POOL_TIMEOUT=none
    # makes them wait with no limit.
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float | None = 30.0

    # Login sessions
    SESSION_SECRET: str
    SESSION_COOKIE_NAME: str = "connect.sid"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24
    SESSION_COOKIE_SECURE: bool = False

    BCRYPT_ROUNDS: int = 10

    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_parse_none_str="none",
    )

    @property
    def database_url(self) -> str | URL:
        """SQLAlchemy URL: DATABASE_URL if given, else built from DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )

    def get_cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
