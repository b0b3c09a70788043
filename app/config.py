"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Fitguide", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Relational database (activities, meals, workouts, profiles)
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/fitguide",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Document store (meal plans, coach messages)
    mongo_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="fitguide", description="MongoDB database name")

    # AI generation gateway
    ai_gateway_url: str = Field(
        default="http://localhost:8080", description="AI gateway base URL"
    )
    ai_gateway_api_key: str = Field(default="", description="AI gateway API key")
    ai_gateway_timeout_sec: float = Field(
        default=60.0, gt=0, description="Timeout for a single gateway call"
    )
    ai_text_temperature: float = Field(
        default=0.7, ge=0, le=2, description="Sampling temperature for plan generation"
    )
    ai_image_size: int = Field(
        default=1024, ge=64, le=2048, description="Square size of generated meal images"
    )
    meal_plan_images_enabled: bool = Field(
        default=True, description="Generate a photo for every meal plan entry"
    )

    # Nutrition and coaching defaults
    default_daily_calorie_goal: int = Field(
        default=2500, ge=0, description="Calorie goal used before onboarding"
    )
    coach_history_window: int = Field(
        default=10, ge=0, description="Messages of chat history sent to the coach"
    )
    coach_data_window_hours: int = Field(
        default=48, ge=1, description="Hours of logged data summarized for the coach"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:8081", "http://localhost:19006"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="Fitguide API", description="API documentation title"
    )
    api_description: str = Field(
        default="Fitness and nutrition coaching backend with AI-generated plans",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
