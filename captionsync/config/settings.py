"""Pydantic settings with environment variable support."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from captionsync.config.validators import parse_extensions, validate_log_level
from captionsync.utils.constants import CAPTION_EXTENSIONS, MEDIA_EXTENSIONS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Caption settings
    caption_extensions: str = Field(
        default=",".join(CAPTION_EXTENSIONS),
        alias="CAPTION_EXTENSIONS",
        description="Comma-separated caption extensions in priority order (e.g., 'vtt,srt')",
    )
    media_extensions: str = Field(
        default=",".join(MEDIA_EXTENSIONS),
        alias="MEDIA_EXTENSIONS",
        description="Comma-separated media extensions tried when matching captions to media",
    )
    caption_encoding: str = Field(default="utf-8", alias="CAPTION_ENCODING")

    # Logging settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_use_colors: bool = Field(default=True, alias="LOG_USE_COLORS")
    log_json_format: bool = Field(default=False, alias="LOG_JSON_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    @property
    def caption_extensions_list(self) -> list[str]:
        """Get caption extensions in priority order."""
        return parse_extensions(self.caption_extensions, field_name="CAPTION_EXTENSIONS")

    @property
    def media_extensions_list(self) -> list[str]:
        """Get media extensions in lookup order."""
        return parse_extensions(self.media_extensions, field_name="MEDIA_EXTENSIONS")

    @field_validator("caption_extensions")
    @classmethod
    def validate_caption_extensions(cls, v: str) -> str:
        """Validate caption extension list."""
        return ",".join(parse_extensions(v, field_name="CAPTION_EXTENSIONS"))

    @field_validator("media_extensions")
    @classmethod
    def validate_media_extensions(cls, v: str) -> str:
        """Validate media extension list."""
        return ",".join(parse_extensions(v, field_name="MEDIA_EXTENSIONS"))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = Settings()
    return _settings
