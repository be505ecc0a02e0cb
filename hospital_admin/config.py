"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
import logging
from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Only ever used outside production, see Settings.jwt_secret
DEV_SECRET_KEY = "hospital-dev-secret-key"


class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        environment: Deployment environment name (development, testing, production)
        database_url: SQLAlchemy connection string for the record store
        secret_key: Secret used to sign bearer tokens
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Access token lifetime in minutes (24h)
        password_min_length: Minimum accepted password length

        # Record route policy
        protect_records: Gate the doctor/specialty/medication/patient routes
            behind the access guard and role gate
        record_roles: Roles allowed through when protect_records is on

        # Bootstrap admin settings (optional)
        bootstrap_admin_email: Optional admin email for first admin creation
        bootstrap_admin_password: Optional admin password for first admin creation
    """
    environment: str = "development"
    log_level: str = "INFO"

    # Database settings
    database_url: str = "sqlite:///./hospital.db"

    # JWT settings
    secret_key: Optional[str] = None
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    password_min_length: int = 6

    # Record route policy
    protect_records: bool = False
    record_roles: List[str] = ["admin", "doctor", "receptionist"]

    # Frontend settings
    cors_origins: List[str] = ["*"]

    # Bootstrap admin settings (optional - only used for first admin creation)
    bootstrap_admin_email: Optional[str] = None
    bootstrap_admin_password: Optional[str] = None

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

    @model_validator(mode="after")
    def check_secret_key(self):
        if not self.secret_key:
            if self.is_production:
                raise ValueError("SECRET_KEY must be set when ENVIRONMENT=production")
            logger.warning("SECRET_KEY is not set, signing tokens with the development key")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def jwt_secret(self) -> str:
        """Signing secret, falling back to a development key outside production."""
        return self.secret_key or DEV_SECRET_KEY


# Create settings instance
settings = Settings()
