"""
Configuration settings for the checkout API
Handles environment variables and application settings
"""
import json
from functools import lru_cache
from typing import Annotated, Optional, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. Built once per process and never mutated."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env file
        frozen=True,
    )

    # Application
    APP_NAME: str = "checkout-api"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Razorpay credentials: key id is publishable, key secret never leaves the server
    RAZORPAY_KEY_ID: Optional[str] = None
    RAZORPAY_KEY_SECRET: Optional[str] = None
    DEFAULT_CURRENCY: str = "INR"
    GATEWAY_TIMEOUT_SECONDS: float = 15.0

    # JWT Settings (tokens are issued by the auth service, we only verify them)
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"

    # CORS
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @field_validator("RAZORPAY_KEY_ID", "RAZORPAY_KEY_SECRET", "JWT_SECRET", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("DEFAULT_CURRENCY")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def razorpay_configured(self) -> bool:
        return bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
