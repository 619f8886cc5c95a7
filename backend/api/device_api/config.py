"""
Configuration settings for the Device API.
"""

from pydantic_settings import BaseSettings

from . import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "device-api"
    app_version: str = __version__
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data.db"

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "*"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
