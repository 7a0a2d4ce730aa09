"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from the environment, a .env file, or Secrets Manager
    - get_settings() is cached (lru_cache): one instance per process
    - database_url is derived once; handlers never read the environment

Design Decisions:
    - Field names match the deployed env vars (DB_HOST, DB_PASS, SERVER_PORT, ...)
    - An unset DB_HOST means local development: host, name and user fall back
      to localhost / museumdb / root
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    db_host: str = ""
    db_port: int = 3306
    db_user: str = ""
    db_pass: str = ""
    db_name: str = ""
    # DATABASE_URL: full SQLAlchemy URL, takes precedence over the DB_* parts
    database_url_override: str | None = Field(
        None,
        validation_alias=AliasChoices("database_url", "database_url_override"),
    )

    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_recycle_seconds: int = 180
    db_connect_timeout_seconds: float = 5.0
    skip_db_check: bool = False

    # AWS Secrets Manager
    use_secrets_manager: bool = False
    secret_name: str = ""
    aws_region: str = "ap-northeast-2"

    # Server
    server_port: int = 8080
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def apply_local_defaults(self) -> "Settings":
        if not self.db_host:
            self.db_host = "localhost"
            self.db_name = "museumdb"
            self.db_user = "root"
        return self

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_pass,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"charset": "utf8mb4"},
        ).render_as_string(hide_password=False)

    def with_credentials(self, username: str, password: str) -> "Settings":
        """Copy with database credentials replaced (Secrets Manager overlay)."""
        return self.model_copy(update={"db_user": username, "db_pass": password})


@lru_cache
def get_settings() -> Settings:
    return Settings()
