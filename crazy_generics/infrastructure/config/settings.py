import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "crazy-generics"
    debug: bool = False

    # Logging - explicit level wins over the debug-derived one
    log_level: str | None = None

    # CollectionUtil.print
    print_prefix: str = " – "

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Accept only standard logging level names"""
        if v is None:
            return v
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid log_level '{v}'. "
                "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level

    def effective_log_level(self) -> int:
        """Resolve the numeric logging level"""
        if self.log_level:
            return logging.getLevelName(self.log_level)
        return logging.DEBUG if self.debug else logging.INFO

    model_config = SettingsConfigDict(
        env_prefix="CRAZY_GENERICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
