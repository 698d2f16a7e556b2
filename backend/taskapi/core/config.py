from functools import lru_cache
from typing import Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Task List API"
    API_PREFIX: str = ""

    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # DB (PostgreSQL parts, DATABASE_URL wins when set)
    DB_HOST: str = "localhost"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "tasks"
    DB_PORT: int = 5432
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    def sqlalchemy_url(self) -> Union[str, URL]:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
