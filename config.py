"""
Configuration management for the Art Gallery maintenance scripts
Handles environment variables, validation, and configuration defaults
"""

import logging
from pydantic_settings import BaseSettings
from pydantic import EmailStr
from enum import Enum

class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

DEFAULT_MONGO_URL = "mongodb://localhost:27017"
DEFAULT_ADMIN_PASSWORD = "change-this-admin-password"

class Settings(BaseSettings):
    """Maintenance settings with validation"""

    # Database Configuration
    mongo_url: str = DEFAULT_MONGO_URL
    db_name: str = "artgallery"

    # Collections
    carts_collection: str = "carts"
    users_collection: str = "users"
    orders_collection: str = "orders"
    products_collection: str = "products"

    # Admin Account
    admin_email: EmailStr = "admin@sparklumeart.com"
    admin_name: str = "Admin User"
    admin_password: str = DEFAULT_ADMIN_PASSWORD

    # Application Settings
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: LogLevel = LogLevel.INFO

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment == Environment.DEVELOPMENT

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

# Global settings instance
settings = Settings()

def get_settings() -> Settings:
    """Get maintenance settings"""
    return settings

def setup_logging():
    """Setup logging based on configuration"""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if settings.is_development:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level.value),
        format=log_format,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler('maintenance.log') if not settings.is_development else logging.NullHandler()
        ]
    )

    # Reduce driver noise in production
    if settings.is_production:
        logging.getLogger("motor").setLevel(logging.WARNING)
        logging.getLogger("pymongo").setLevel(logging.WARNING)

def validate_environment():
    """Validate that production runs are not using development defaults"""
    errors = []

    if settings.is_production:
        if not settings.mongo_url or settings.mongo_url == DEFAULT_MONGO_URL:
            errors.append("MONGO_URL must be set for production")

        if settings.admin_password == DEFAULT_ADMIN_PASSWORD:
            errors.append("ADMIN_PASSWORD must be changed for production")

    if errors:
        raise ValueError(f"Environment validation failed: {'; '.join(errors)}")

# Initialize configuration
if __name__ != "__main__":
    setup_logging()
    validate_environment()

    logger = logging.getLogger(__name__)

    if settings.debug:
        logger.debug(f"Configuration loaded: Environment={settings.environment.value}")
        logger.debug(f"Database: {settings.db_name}")
