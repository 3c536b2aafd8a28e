from functools import lru_cache
from types import MappingProxyType
from typing import Literal, Mapping, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PRACTITIONER_MAP = {
    "Dr. Smith": "nookal_practitioner_id_1",
    "Dr. Johnson": "nookal_practitioner_id_2",
    "Dr. Brown": "nookal_practitioner_id_3",
}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings (BaseSettings):
    nookal_api_key: Optional[str] = None
    nookal_api_url: str = "https://au-apiv3.nookal.com"
    # None disables the timeout: wait for Nookal to answer
    nookal_timeout_seconds: Optional[float] = None

    practitioner_map: Mapping[str, str] = Field(default_factory=lambda: dict(DEFAULT_PRACTITIONER_MAP))
    default_practitioner_id: str = "default_practitioner_id"

    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        validate_default=True,
    )

    @field_validator("practitioner_map", mode="after")
    @classmethod
    def read_only_map(cls, value):
        return MappingProxyType(dict(value))

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
