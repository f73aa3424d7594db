from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_openapi_docs: bool = Field(default=True, alias="ENABLE_OPENAPI_DOCS")

    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")
    gemini_api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_API_BASE_URL",
    )
    question_source_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        alias="QUESTION_SOURCE_TIMEOUT_SECONDS",
    )

    feedback_delay_seconds: float = Field(default=1.5, ge=0, alias="FEEDBACK_DELAY_SECONDS")
    quiz_categories: str = Field(
        default="Math,Science,General Knowledge",
        alias="QUIZ_CATEGORIES",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
