"""
Application configuration.

Settings are read from the environment (and an optional .env file) exactly
once, frozen, and re-exported as module-level constants so the rest of the
code base can keep doing ``from config import DATABASE_URL``.

The defaults are for local development only. ``APP_ENV=production`` refuses
to start with the fallback JWT secret or with open admin promotion.
"""

import logging
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

INSECURE_JWT_SECRET = "dev_secret"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000

    # MongoDB
    database_url: str = Field(
        "mongodb://127.0.0.1:27017",
        validation_alias=AliasChoices("DATABASE_URL", "MONGO_URI"),
    )
    database_name: str = Field(
        "autodealer",
        validation_alias=AliasChoices("DATABASE_NAME", "DB_NAME"),
    )
    mongo_timeout_ms: int = 5000
    user_collection: str = "users"
    car_collection: str = "cars"
    review_collection: str = "reviews"

    # Auth
    jwt_secret_key: str = Field(
        INSECURE_JWT_SECRET,
        validation_alias=AliasChoices("JWT_SECRET_KEY", "JWT_SECRET"),
    )
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    open_admin_promotion: bool = False

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @field_validator("jwt_secret_key", mode="before")
    @classmethod
    def empty_secret_is_unset(cls, value):
        return value or INSECURE_JWT_SECRET

    @model_validator(mode="after")
    def check_production_safety(self) -> "Settings":
        """Refuse insecure defaults in production."""
        if self.is_production:
            if self.jwt_secret_key == INSECURE_JWT_SECRET:
                raise ValueError(
                    "JWT_SECRET_KEY is required in production. "
                    "Set it in the environment or .env file."
                )
            if len(self.jwt_secret_key) < 32:
                raise ValueError("JWT_SECRET_KEY must be at least 32 characters in production.")
            if self.open_admin_promotion:
                raise ValueError("OPEN_ADMIN_PROMOTION cannot be enabled in production.")
        return self

    def log_warnings(self) -> None:
        """Report insecure development settings; called once logging is configured."""
        if self.jwt_secret_key == INSECURE_JWT_SECRET:
            logger.warning("Using the insecure development JWT secret. Set JWT_SECRET_KEY before deploying.")
        if self.open_admin_promotion:
            logger.warning("OPEN_ADMIN_PROMOTION is on: /api/auth/make-admin accepts unauthenticated calls.")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

APP_ENV = settings.app_env
LOG_LEVEL = settings.log_level
HOST = settings.host
PORT = settings.port

DATABASE_URL = settings.database_url
DATABASE_NAME = settings.database_name
MONGO_TIMEOUT_MS = settings.mongo_timeout_ms
USER_COLLECTION = settings.user_collection
CAR_COLLECTION = settings.car_collection
REVIEW_COLLECTION = settings.review_collection

JWT_SECRET_KEY = settings.jwt_secret_key
ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
OPEN_ADMIN_PROMOTION = settings.open_admin_promotion
