"""Configuration management for the Kodik client."""

from pydantic import PositiveInt, field_validator
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from urllib.parse import urlparse

DEFAULT_API_URL = "https://kodikapi.com"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Kodik
    kodik_api_key: str
    kodik_api_url: str = DEFAULT_API_URL

    # Network settings
    request_timeout: PositiveInt = 30  # Per-request timeout in seconds
    # Proxy configuration in the format http://host:port or socks5://host:port
    proxy: str | None = None

    @field_validator("kodik_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Kodik API URL must be an absolute http(s) URL")
        return v.rstrip("/")

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: str | None) -> str | None:
        if v is None:
            return v

        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https", "socks4", "socks5", "socks5h"):
            raise ValueError(
                "Proxy must be a valid URL with scheme http/https/socks4/socks5/socks5h"
            )
        if not parsed.netloc:
            raise ValueError("Proxy must have a host and port")
        return v

    debug: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
