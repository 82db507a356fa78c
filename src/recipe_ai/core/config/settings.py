"""Application configuration using Pydantic Settings with YAML support.

This module provides centralized configuration management with:
- YAML-based configuration files organized by domain
- Environment-specific overrides (local, test, development, production)
- Environment variable loading for secrets (provider API keys, Redis password)
- Type validation and coercion
- Caching for performance
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class LLMProvider(StrEnum):
    """Supported hosted generation providers."""

    ANTHROPIC = "anthropic"
    GROQ = "groq"


class StorageBackend(StrEnum):
    """Backing store for the recipe cache and rate-limit windows.

    - MEMORY: process-local maps (single instance deployments, tests)
    - REDIS: shared Redis instance (multiple replicas)
    """

    MEMORY = "memory"
    REDIS = "redis"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipe AI Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    v1_prefix: str = "/api/v1/recipe-ai"
    cors_origins: list[str] = []


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class MetricsSettings(BaseModel):
    """Metrics configuration settings."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration settings."""

    metrics: MetricsSettings = MetricsSettings()


class RedisSettings(BaseModel):
    """Redis configuration settings."""

    host: str = "localhost"
    port: int = 6379
    user: str | None = None  # Redis ACL username (Redis 6.0+)
    db: int = 0
    max_connections: int = 20


class StorageSettings(BaseModel):
    """Shared state storage configuration."""

    backend: StorageBackend = StorageBackend.MEMORY


class RateLimitingSettings(BaseModel):
    """Per-caller generation budgets."""

    requests_per_minute: int = 10
    requests_per_hour: int = 100


class AnthropicSettings(BaseModel):
    """Anthropic Messages API configuration."""

    url: str = "https://api.anthropic.com"
    model: str = "claude-sonnet-4-20250514"
    api_version: str = "2023-06-01"
    timeout: float = 30.0
    max_retries: int = 2


class GroqSettings(BaseModel):
    """Groq LLM service configuration."""

    url: str = "https://api.groq.com/openai/v1"
    model: str = "llama-3.1-8b-instant"
    timeout: float = 30.0
    max_retries: int = 2
    requests_per_minute: float = 30.0  # Groq free tier rate limit


class LLMFallbackSettings(BaseModel):
    """Local fallback generator configuration."""

    enabled: bool = True


class LLMCacheSettings(BaseModel):
    """Generated recipe caching configuration."""

    enabled: bool = True
    ttl: int = 3600


class LLMQualitySettings(BaseModel):
    """Quality gate configuration."""

    threshold: float = 0.6


class LLMSettings(BaseModel):
    """LLM configuration settings."""

    enabled: bool = True
    provider: LLMProvider = LLMProvider.ANTHROPIC
    anthropic: AnthropicSettings = AnthropicSettings()
    groq: GroqSettings = GroqSettings()
    fallback: LLMFallbackSettings = LLMFallbackSettings()
    cache: LLMCacheSettings = LLMCacheSettings()
    quality: LLMQualitySettings = LLMQualitySettings()


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
    For example: LLM__PROVIDER=groq overrides llm.provider.
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
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    redis: RedisSettings = RedisSettings()
    storage: StorageSettings = StorageSettings()
    rate_limiting: RateLimitingSettings = RateLimitingSettings()
    llm: LLMSettings = LLMSettings()

    # =========================================================================
    # Secrets (from .env only - never in YAML)
    # =========================================================================
    ANTHROPIC_API_KEY: str = ""
    GROQ_API_KEY: str = ""
    REDIS_PASSWORD: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
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
    def provider_api_key(self) -> str:
        """API key of the configured generation provider."""
        if self.llm.provider == LLMProvider.GROQ:
            return self.GROQ_API_KEY
        return self.ANTHROPIC_API_KEY

    @property
    def redis_url(self) -> str:
        """Build Redis connection URL with optional authentication.

        URL format: redis://[user:password@]host:port/db
        """
        auth_part = ""
        if self.redis.user and self.REDIS_PASSWORD:
            auth_part = f"{self.redis.user}:{self.REDIS_PASSWORD}@"
        elif self.REDIS_PASSWORD:
            auth_part = f":{self.REDIS_PASSWORD}@"
        elif self.redis.user:
            auth_part = f"{self.redis.user}@"

        return f"redis://{auth_part}{self.redis.host}:{self.redis.port}/{self.redis.db}"

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
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
