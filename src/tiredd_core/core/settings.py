"""Application settings and configuration.

This module defines all configuration options for the Tiredd core service.
Settings are loaded from environment variables with sensible defaults.
"""

from nacl.pwhash import argon2id
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Tiredd Core", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./tiredd.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    store_busy_timeout_seconds: float = Field(default=30.0, alias="STORE_BUSY_TIMEOUT_SECONDS")

    # Sessions and credentials
    session_ttl_minutes: int = Field(default=60 * 24 * 30, alias="SESSION_TTL_MINUTES")
    password_hash_opslimit: int = Field(
        default=argon2id.OPSLIMIT_INTERACTIVE,
        alias="PASSWORD_HASH_OPSLIMIT",
    )
    password_hash_memlimit: int = Field(
        default=argon2id.MEMLIMIT_INTERACTIVE,
        alias="PASSWORD_HASH_MEMLIMIT",
    )
    auto_register_on_login: bool = Field(default=True, alias="AUTO_REGISTER_ON_LOGIN")
    max_username_length: int = Field(default=50, alias="MAX_USERNAME_LENGTH")

    # Content submission rules
    allow_anonymous_content: bool = Field(default=True, alias="ALLOW_ANONYMOUS_CONTENT")
    max_title_length: int = Field(default=200, alias="MAX_TITLE_LENGTH")
    max_url_length: int = Field(default=200, alias="MAX_URL_LENGTH")
    max_sub_length: int = Field(default=50, alias="MAX_SUB_LENGTH")
    max_content_length: int = Field(default=3000, alias="MAX_CONTENT_LENGTH")

    # Voting
    enforce_single_vote: bool = Field(default=True, alias="ENFORCE_SINGLE_VOTE")

    # Feed partitioning (score thresholds are inclusive)
    hot_threshold: int = Field(default=2, alias="HOT_THRESHOLD")
    new_score_floor: int = Field(default=-20, alias="NEW_SCORE_FLOOR")
    feed_default_limit: int = Field(default=100, alias="FEED_DEFAULT_LIMIT")
    feed_max_limit: int = Field(default=1000, alias="FEED_MAX_LIMIT")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def new_score_ceiling(self) -> int:
        """Highest score that still places a post in the "new" view."""
        return self.hot_threshold - 1


settings = Settings()
