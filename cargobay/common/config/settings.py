from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from cargobay.common.config.constants import (
    MESSAGE_FORMAT_JSON_ANSI,
    DEFAULT_STREAM_LIMIT_BYTES,
    MIN_STREAM_LIMIT_BYTES,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CARGOBAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cargo_path: str = Field(
        default="cargo",
        description="Cargo executable, looked up on PATH unless absolute"
    )
    message_format: str = Field(
        default=MESSAGE_FORMAT_JSON_ANSI,
        description="Value passed to --message-format"
    )
    stream_limit_bytes: int = Field(
        default=DEFAULT_STREAM_LIMIT_BYTES,
        ge=MIN_STREAM_LIMIT_BYTES,
        description="Longest stdout line the stream reader will buffer"
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Emit JSON log records")
    log_file: Optional[str] = Field(default=None)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("message_format")
    @classmethod
    def validate_message_format(cls, v: str) -> str:
        if not v.startswith("json"):
            raise ValueError(f"Message format must be a json variant, got: {v}")
        return v

    def message_format_arg(self) -> str:
        return f"--message-format={self.message_format}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
