"""Alerting provisioning configuration — loaded from environment / .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ALERTPROV_", extra="ignore")

    env: str = "development"
    database_url: str = "sqlite+aiosqlite:///./alertprov.db"

    # File provisioning (relative to project root)
    provisioning_dir: Path = Path("provisioning")
    sync_on_startup: bool = True  # load provisioning files on FastAPI startup


settings = Settings()
