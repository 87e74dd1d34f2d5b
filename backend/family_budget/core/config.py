from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    db_host: str = "localhost"
    db_port: int = 3306
    db_name: str = "family_budget"
    db_user: str = "app_user"
    db_password: str = "app_password"

    # Full SQLAlchemy URL; wins over the DB_* parts when set (e.g. sqlite for local runs).
    database_url: str | None = None

    host: str = "0.0.0.0"
    port: int = 8080

    # 'development' | 'production'. GO_ENV is still honoured for older deployments.
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "GO_ENV", "environment"),
    )
    app_version: str = "1.0.0"
    log_level: str | None = None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
