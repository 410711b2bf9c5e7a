# src/courseautoapprove/core/config.py
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- App ----
    LOG_LEVEL: str = "INFO"

    # ---- DB ----
    DATABASE_URL: str = Field(
        default="sqlite:///courseautoapprove.db",
        validation_alias=AliasChoices("COURSEAUTOAPPROVE_DATABASE_URL", "DATABASE_URL"),
    )
    DB_ECHO: bool = False

    # ---- Platform ----
    # Site-wide switch for course requests; owned by the platform, not this tool.
    ENABLE_COURSE_REQUESTS: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "COURSEAUTOAPPROVE_ENABLE_COURSE_REQUESTS", "ENABLE_COURSE_REQUESTS", "ENABLECOURSEREQUESTS"
        ),
    )
    # Role given to the requester in a course created from an approved request
    CREATOR_ROLE: str = "editingteacher"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COURSEAUTOAPPROVE_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )


settings = Settings()
__all__ = ["settings", "Settings"]
