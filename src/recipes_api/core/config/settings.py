"""Application configuration using Pydantic Settings with YAML support.

This module provides centralized configuration management with:
- YAML-based configuration files organized by domain
- Environment-specific overrides (local, test, development, production)
- Environment variable loading for secrets
- Type validation and coercion
- Computed properties for derived values
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class AuthMode(StrEnum):
    """Authentication mode configuration.

    Determines how the caller identity is established:
    - LOCAL_JWT: Validate bearer JWTs locally using the shared secret
    - HEADER: Extract user from X-User-ID header (testing/development only)
    - DISABLED: Every caller is the anonymous user
    """

    LOCAL_JWT = "local_jwt"
    HEADER = "header"
    DISABLED = "disabled"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipes API"
    version: str = "2.0.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    v1_prefix: str = "/v1"
    v2_prefix: str = "/v2"
    cors_origins: list[str] = []


class JwtSettings(BaseModel):
    """JWT token settings."""

    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    issuer: str | None = None
    audience: list[str] = []


class AuthHeaderSettings(BaseModel):
    """Header-based auth settings."""

    user_id: str = "X-User-ID"


class AuthSettings(BaseModel):
    """Authentication configuration settings."""

    mode: str = "local_jwt"
    jwt: JwtSettings = JwtSettings()
    headers: AuthHeaderSettings = AuthHeaderSettings()


class DefaultUser(BaseModel):
    """A user allowed to obtain tokens from the token endpoint."""

    username: str
    password: str


class UsersSettings(BaseModel):
    """Built-in users configuration."""

    default_users: list[DefaultUser] = []


class DatabaseSettings(BaseModel):
    """Relational store configuration settings.

    ``url`` wins over the individual connection fields when it is set, which
    is how tests and local runs point the service at SQLite.
    ``create_schema`` creates missing tables at startup.
    """

    url: str | None = None
    host: str = "localhost"
    port: int = 5432
    name: str = "recipes"
    user: str | None = None
    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle: int = 3600
    echo: bool = False
    create_schema: bool = False


class RedisSettings(BaseModel):
    """Redis configuration settings."""

    enabled: bool = True
    host: str = "localhost"
    port: int = 6379
    user: str | None = None  # Redis ACL username (Redis 6.0+)
    cache_db: int = 0
    max_connections: int = 20


class CatalogSettings(BaseModel):
    """Ingredients catalog client configuration."""

    base_url: str = "http://localhost:8081"
    batch_get_path: str = "/ingredients/batch-get"
    timeout: float = 10.0
    ping_timeout: float = 2.0


class PricingSettings(BaseModel):
    """Ingredient pricing cache configuration."""

    cache_enabled: bool = True
    cache_ttl: int = 3600  # 0 keeps entries until evicted by Redis
    cache_prefix: str = "pricing:ingredient"


class PaginationSettings(BaseModel):
    """Search pagination defaults."""

    default_page_size: int = 20
    max_page_size: int = 100


class MetricsSettings(BaseModel):
    """Metrics configuration settings."""

    enabled: bool = True


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"
    file: str | None = None


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Configuration is loaded from multiple sources with the following priority
    (highest to lowest):
    1. Values passed to Settings()
    2. Environment variables
    3. .env file (secrets only)
    4. Environment-specific YAML files (config/environments/{APP_ENV}/)
    5. Base YAML files (config/base/)
    6. Default values in code

    Environment variables can override any setting using the nested delimiter '__'.
    For example: CATALOG__BASE_URL=http://catalog overrides catalog.base_url.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    auth: AuthSettings = AuthSettings()
    users: UsersSettings = UsersSettings()
    database: DatabaseSettings = DatabaseSettings()
    redis: RedisSettings = RedisSettings()
    catalog: CatalogSettings = CatalogSettings()
    pricing: PricingSettings = PricingSettings()
    pagination: PaginationSettings = PaginationSettings()
    logging: LoggingSettings = LoggingSettings()
    metrics: MetricsSettings = MetricsSettings()

    # =========================================================================
    # Secrets (from .env only - never in YAML)
    # =========================================================================
    JWT_SECRET_KEY: str = Field(default="", repr=False)
    REDIS_PASSWORD: str = Field(default="", repr=False)
    DATABASE_PASSWORD: str = Field(default="", repr=False)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings loading order."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Computed Fields
    # =========================================================================

    @property
    def auth_mode_enum(self) -> AuthMode:
        """Get auth mode as enum with validation."""
        try:
            return AuthMode(self.auth.mode.lower())
        except ValueError:
            msg = (
                f"Invalid auth mode: {self.auth.mode}. "
                f"Must be one of: {', '.join(m.value for m in AuthMode)}"
            )
            raise ValueError(msg) from None

    @property
    def database_url(self) -> str:
        """Build the SQLAlchemy async connection URL.

        URL format: postgresql+asyncpg://[user:password@]host:port/database
        """
        if self.database.url:
            return self.database.url

        auth_part = ""
        if self.database.user and self.DATABASE_PASSWORD:
            auth_part = f"{self.database.user}:{self.DATABASE_PASSWORD}@"
        elif self.database.user:
            auth_part = f"{self.database.user}@"

        return (
            f"postgresql+asyncpg://{auth_part}{self.database.host}:"
            f"{self.database.port}/{self.database.name}"
        )

    @property
    def redis_cache_url(self) -> str:
        """Build Redis cache connection URL.

        URL format: redis://[user:password@]host:port/db
        """
        auth_part = ""
        if self.redis.user and self.REDIS_PASSWORD:
            auth_part = f"{self.redis.user}:{self.REDIS_PASSWORD}@"
        elif self.REDIS_PASSWORD:
            auth_part = f":{self.REDIS_PASSWORD}@"
        elif self.redis.user:
            auth_part = f"{self.redis.user}@"

        return (
            f"redis://{auth_part}{self.redis.host}:{self.redis.port}/"
            f"{self.redis.cache_db}"
        )

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
