"""
Core configuration management for Course Feedback
Supports multiple environments
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from enum import Enum
from functools import lru_cache


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Base configuration settings"""

    # Application
    app_name: str = "Course Feedback"
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]

    # Store seeding
    seed_sample_data: bool = False
    seed_data_dir: Optional[str] = None  # directory holding courses.csv / feedback.csv

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )


class DevelopmentSettings(Settings):
    """Development environment settings"""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: str = "DEBUG"

    # Browse something on first start
    seed_sample_data: bool = True


class TestingSettings(Settings):
    """Testing environment settings"""

    environment: Environment = Environment.TESTING
    debug: bool = True

    # Every test starts from an empty store
    seed_sample_data: bool = False


class ProductionSettings(Settings):
    """Production environment settings"""

    environment: Environment = Environment.PRODUCTION
    debug: bool = False
    log_level: str = "WARNING"
    seed_sample_data: bool = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings based on environment variable
    Cached for performance
    """
    environment = Environment(os.getenv("ENVIRONMENT", "development"))

    if environment == Environment.TESTING:
        return TestingSettings()
    elif environment == Environment.PRODUCTION:
        return ProductionSettings()
    else:
        return DevelopmentSettings()


# Configuration validation
def validate_configuration(settings: Optional[Settings] = None):
    """Validate that the configuration is usable"""
    settings = settings or get_settings()
    errors = []

    if not settings.api_prefix.startswith("/"):
        errors.append("API_PREFIX must start with '/'")

    if settings.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"LOG_LEVEL {settings.log_level!r} is not a logging level")

    if settings.seed_data_dir and not os.path.isdir(settings.seed_data_dir):
        errors.append(f"SEED_DATA_DIR {settings.seed_data_dir!r} is not a directory")

    if settings.environment == Environment.PRODUCTION and settings.debug:
        errors.append("DEBUG must be disabled in production")

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return True
