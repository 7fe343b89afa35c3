"""
Cosmos DB connection settings.

Manages account endpoint, key, database and container names, and the
client-side knobs used when provisioning and bulk-loading.

Dependencies: pydantic, pydantic_settings
System role: Backing store connection configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CosmosSettings(BaseSettings):
    """Azure Cosmos DB for NoSQL account configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COSMOS_",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default="https://localhost:8081/",
        description="Cosmos DB account endpoint (defaults to the local emulator)",
    )
    key: str | None = Field(default=None, description="Cosmos DB account key")
    database_name: str = Field(default="recipes", description="Database name")
    container_name: str = Field(default="recipes", description="Container name")

    consistency_level: str = Field(
        default="Eventual",
        description="Client consistency level (Strong, BoundedStaleness, Session, ConsistentPrefix, Eventual)",
    )
    throughput: int = Field(
        default=400,
        description="Manual throughput (RU/s) allocated at container creation",
        ge=400,
    )
    bulk_max_concurrency: int = Field(
        default=16,
        description="Maximum in-flight item operations during a bulk load",
        ge=1,
    )
