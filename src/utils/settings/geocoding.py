"""Reverse-geocoding provider settings configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeocodingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    GEOCODING_ENABLED: bool = True
    GEOCODING_ENDPOINT: str = "https://nominatim.openstreetmap.org/reverse"
    GEOCODING_CONTACT_EMAIL: str = "contact@precodicaju.gw"
    GEOCODING_ACCEPT_LANGUAGE: str = "pt,fr,en"
    GEOCODING_USER_AGENT: str = "pricegeo-api/0.1"
    GEOCODING_ZOOM: int = Field(default=18, ge=0, le=18)
    GEOCODING_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    GEOCODING_CACHE_ENABLED: bool = True
    GEOCODING_CACHE_CAPACITY: int = Field(default=1000, ge=1)


__all__ = ["GeocodingSettings"]
