"""
Vector store configuration settings.

Describes the vector embedding policy and indexing policy applied when the
recipe container is created, plus the default search depth.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for similarity search
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_search.core.vector_policy import DistanceFunction, VectorDataType, VectorIndexType


class VectorStoreSettings(BaseSettings):
    """Vector embedding and indexing policy for the recipe container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    partition_key_path: str = Field(default="/id", description="Partition key path")
    embedding_path: str = Field(default="/embedding", description="Path of the embedding field")
    data_type: VectorDataType = Field(
        default=VectorDataType.FLOAT32,
        description="Element type of the embedding",
    )
    dimensions: int = Field(default=8, description="Embedding dimensionality", ge=1)
    distance_function: DistanceFunction = Field(
        default=DistanceFunction.COSINE,
        description="Distance function used by VectorDistance and the vector index",
    )
    index_type: VectorIndexType = Field(
        default=VectorIndexType.DISK_ANN,
        description="Vector index type bound to the embedding path",
    )

    # Scalar indexing
    included_paths: list[str] = Field(
        default=["/name/?", "/description/?"],
        description="Paths indexed for filtering",
    )
    excluded_paths: list[str] = Field(
        default=["/*"],
        description="Paths excluded from default indexing",
    )

    top_k: int = Field(default=3, description="Number of results returned by search", ge=1)
