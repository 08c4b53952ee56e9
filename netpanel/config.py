"""Panel configuration from environment."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./netpanel.db"
    run_migrations: bool = True  # alembic upgrade on startup

    # Devices
    default_device_port: int = 8728  # RouterOS API
    device_probe_timeout: float = 3.0  # seconds

    # Activity log
    activity_log_max_limit: int = 1000

    # Server
    host: str = "0.0.0.0"
    port: int = 2022
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


settings = Settings()
