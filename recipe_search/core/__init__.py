"""
Core business logic module.

Contains the exception hierarchy, vector policy vocabulary, identifier
derivation and ranking. Nothing here talks to Cosmos DB directly.
"""

from recipe_search.core.exceptions import (
    BulkIngestError,
    ConfigurationConflict,
    ConnectivityError,
    DuplicateIdentifier,
    IngestionError,
    MalformedScore,
    QueryExecutionError,
    RecipeSearchException,
    ValidationError,
)
from recipe_search.core.vector_policy import (
    DistanceFunction,
    ScoreOrder,
    VectorDataType,
    VectorIndexType,
)

__all__ = [
    "RecipeSearchException",
    "ConfigurationConflict",
    "ConnectivityError",
    "IngestionError",
    "DuplicateIdentifier",
    "ValidationError",
    "BulkIngestError",
    "QueryExecutionError",
    "MalformedScore",
    "DistanceFunction",
    "ScoreOrder",
    "VectorDataType",
    "VectorIndexType",
]
