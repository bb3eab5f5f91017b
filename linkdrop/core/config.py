from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fetching settings
    fetch_timeout: float = 5.0
    fetch_user_agent: str = "Mozilla/5.0 (compatible; LinkDrop/1.0)"
    fetch_follow_redirects: bool = True
    # Off by default: error pages are still parsed for metadata
    fetch_raise_for_status: bool = False

    # Drop handling
    drop_max_workers: Optional[int] = None
    drop_event_name: str = "link-dropped"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Environment
    environment: str = "development"  # development, staging, production

    model_config = SettingsConfigDict(
        env_prefix="LINKDROP_",
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


# Create a single instance of settings
settings = Settings()
