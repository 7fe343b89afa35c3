"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from recipe_search.configs.base import BaseSettings
from recipe_search.configs.cosmos import CosmosSettings
from recipe_search.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    cosmos: CosmosSettings = Field(default_factory=CosmosSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached after the first call.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from recipe_search.configs import get_settings
        settings = get_settings()
    """
    return Settings()
