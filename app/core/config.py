from typing import List, Optional
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Explicitly load .env file and override existing environment variables
# This ensures that values from .env take precedence over system-wide environment variables.
load_dotenv(override=True)

class Settings(BaseSettings):
    """Base settings for the car rental API."""

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Car Rental API"
    LOG_LEVEL: str = "INFO"

    # CORS settings, comma-separated list of origins
    BACKEND_CORS_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]

    # Database settings
    # Default values for local development, override these in .env file
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "car_rental"
    POSTGRES_PORT: int = 5432

    # For hosted PostgreSQL (Supabase pooler), use the DATABASE_URL directly
    DATABASE_URL: Optional[str] = None

    SQLALCHEMY_DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        # If DATABASE_URL is provided, use it directly
        if info.data.get("DATABASE_URL"):
            return info.data["DATABASE_URL"]

        # Otherwise, build the connection string from individual components
        if isinstance(v, str):
            return v
        return (
            f"postgresql://{info.data.get('POSTGRES_USER')}:{info.data.get('POSTGRES_PASSWORD')}"
            f"@{info.data.get('POSTGRES_SERVER')}:{info.data.get('POSTGRES_PORT')}"
            f"/{info.data.get('POSTGRES_DB') or ''}"
        )

    # Pagination settings
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    NOTIFICATION_LIST_LIMIT: int = 20

    # JWT Authentication settings
    JWT_SECRET_KEY: str = "your-secret-key"  # Change this in production
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    model_config = {
        "case_sensitive": True,
        "env_file": ".env"
    }

# Create settings instance
settings = Settings()
