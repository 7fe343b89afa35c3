"""
Azure Cosmos DB for NoSQL adapters.

- CollectionProvisioner: creates or validates the vector-indexed container
- BulkExecutor: concurrent create/upsert with per-item outcomes
- QueryExecutor: count and VectorDistance queries

Dependencies: azure-cosmos
System role: Backing store adapter
"""

from recipe_search.boundary.cosmos.bulk import BulkExecutor, BulkOperation
from recipe_search.boundary.cosmos.client import create_cosmos_client
from recipe_search.boundary.cosmos.container_definition import (
    ContainerDefinition,
    build_container_definition,
)
from recipe_search.boundary.cosmos.provisioner import CollectionProvisioner
from recipe_search.boundary.cosmos.queries import QueryExecutor

__all__ = [
    "BulkExecutor",
    "BulkOperation",
    "CollectionProvisioner",
    "ContainerDefinition",
    "QueryExecutor",
    "build_container_definition",
    "create_cosmos_client",
]
