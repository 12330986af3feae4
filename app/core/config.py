# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        # DATABASE_URL is honoured for deployments that only expose that name
        self.mongo_uri: Final[str] = os.getenv(
            "MONGO_URI",
            os.getenv("DATABASE_URL", "mongodb://localhost:27017")
        )
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "blog-app")
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8080"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        
        # Sample data
        self.seed_sample_posts: Final[bool] = _env_bool("SEED_SAMPLE_POSTS")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
