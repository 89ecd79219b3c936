"""Configuration management for CareerPilot.

Settings are loaded from the environment (and an optional ``.env`` file) with
Pydantic Settings, validated once and cached for the life of the process.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from careerpilot.utils.logger import setup_logging


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="CareerPilot", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )
    APP_DEBUG: bool = Field(default=True, description="Debug mode")
    APP_HOST: str = Field(default="0.0.0.0", description="Application host")
    APP_PORT: int = Field(default=8000, description="Application port", ge=1, le=65535)

    # API Settings
    API_V1_PREFIX: str = Field(default="/api/v1", description="API v1 prefix")
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    ALLOWED_HOSTS: List[str] = Field(
        default=["localhost", "127.0.0.1"],
        description="Allowed hosts in production",
    )

    # Identity Settings
    JWT_SECRET_KEY: str = Field(
        default="careerpilot-jwt-secret-key-change-in-production",
        description="JWT secret key",
        min_length=32,
    )
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=1440, description="Access token expiration in minutes", ge=1
    )

    # Database Configuration
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL",
    )
    MONGODB_DB_NAME: str = Field(
        default="careerpilot", description="MongoDB database name"
    )
    MONGODB_MAX_POOL_SIZE: int = Field(
        default=50, description="MongoDB max connection pool size", ge=1
    )
    MONGODB_MIN_POOL_SIZE: int = Field(
        default=5, description="MongoDB min connection pool size", ge=0
    )
    MONGODB_CONNECT_TIMEOUT_MS: int = Field(
        default=10000, description="MongoDB connection timeout in milliseconds", ge=1000
    )

    # Redis Configuration
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0", description="Redis connection URL"
    )
    REDIS_MAX_CONNECTIONS: int = Field(
        default=50, description="Redis max connections", ge=1
    )

    # Feature Flags
    ENABLE_CACHE: bool = Field(default=True, description="Enable catalog caching")
    ENABLE_API_DOCS: bool = Field(default=True, description="Enable API documentation")
    ENABLE_METRICS: bool = Field(default=True, description="Enable Prometheus metrics")

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    LOG_FORMAT: str = Field(
        default="text", description="Log format", pattern="^(json|text)$"
    )
    LOG_FILE_PATH: Optional[str] = Field(
        default=None, description="Rotating log file path"
    )
    LOG_FILE_MAX_SIZE: int = Field(
        default=10485760, description="Log file max size in bytes", ge=1024
    )
    LOG_FILE_BACKUP_COUNT: int = Field(
        default=5, description="Log file backup count", ge=0
    )

    # Test Configuration
    TEST_MODE: bool = Field(default=False, description="Test mode enabled")
    TEST_DATABASE_URL: str = Field(
        default="mongodb://localhost:27017/careerpilot_test",
        description="Test database URL",
    )

    # Business Logic Configuration
    CAREER_RECOMMENDATION_COUNT: int = Field(
        default=3, description="Number of career recommendations", ge=1, le=10
    )
    CATALOG_CACHE_TTL_SECONDS: int = Field(
        default=300, description="Career catalog cache TTL in seconds", ge=0
    )
    ANALYTICS_TIMEZONE: str = Field(
        default="UTC", description="Timezone used to bucket session hours"
    )
    MATCH_SAMPLE_SIZE: int = Field(
        default=3, description="Assessments sampled for counselor matching", ge=1
    )
    DUPLICATE_SESSION_THRESHOLD: int = Field(
        default=3, description="Sessions per user above which a duplicate is flagged", ge=1
    )
    ADMIN_RECENT_ASSESSMENTS: int = Field(
        default=25, description="Assessments loaded for the admin overview", ge=1
    )
    USER_ASSESSMENT_HISTORY_LIMIT: int = Field(
        default=5, description="Assessments returned in a user's history", ge=1
    )

    @field_validator("JWT_SECRET_KEY")
    def validate_secret_key(cls, v: str, info) -> str:
        """Refuse the default secret in production."""
        if info.data.get("APP_ENV") == "production" and "change-in-production" in v:
            raise ValueError("JWT_SECRET_KEY must be changed from default in production")
        return v

    @field_validator("MONGODB_URL", "TEST_DATABASE_URL")
    def validate_mongodb_url(cls, v: str) -> str:
        """Validate MongoDB URL format."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MongoDB URL must start with mongodb:// or mongodb+srv://")
        return v

    @field_validator("REDIS_URL")
    def validate_redis_url(cls, v: str) -> str:
        """Validate Redis URL format."""
        if not v.startswith(("redis://", "rediss://")):
            raise ValueError("Redis URL must start with redis:// or rediss://")
        return v

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Apply environment-dependent overrides."""
        if self.TEST_MODE or self.APP_ENV == "test":
            self.ENABLE_CACHE = False
            self.ENABLE_METRICS = False

        if self.APP_ENV == "production":
            self.APP_DEBUG = False
            self.LOG_LEVEL = "INFO" if self.LOG_LEVEL == "DEBUG" else self.LOG_LEVEL

        return self

    def get_database_url(self) -> str:
        """Get the appropriate database URL based on environment."""
        if self.is_test():
            return self.TEST_DATABASE_URL
        return self.MONGODB_URL

    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    def is_test(self) -> bool:
        return self.APP_ENV == "test" or self.TEST_MODE


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    settings = Settings()

    setup_logging(
        environment="test" if settings.is_test() else settings.APP_ENV,
        log_level=settings.LOG_LEVEL,
        format_type=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE_PATH,
        max_bytes=settings.LOG_FILE_MAX_SIZE,
        backup_count=settings.LOG_FILE_BACKUP_COUNT,
    )

    return settings
