"""
Container definition for the recipe collection.

Builds the partition key, vector embedding policy and indexing policy
documents passed to create_container_if_not_exists, and compares them
against the properties of an existing container.

Dependencies: azure-cosmos, recipe_search.configs
System role: Vector index and partitioning policy at container creation
"""

from dataclasses import dataclass
from typing import Any

from azure.cosmos import PartitionKey

from recipe_search.configs.vector_store import VectorStoreSettings


@dataclass(frozen=True)
class ContainerDefinition:
    """Everything the provisioner sends when creating the container."""

    partition_key_path: str
    vector_embedding_policy: dict[str, Any]
    indexing_policy: dict[str, Any]

    @property
    def partition_key(self) -> PartitionKey:
        return PartitionKey(path=self.partition_key_path)


def build_container_definition(settings: VectorStoreSettings) -> ContainerDefinition:
    """
    Build the container definition for the configured embedding policy.

    Args:
        settings: Vector store settings

    Returns:
        ContainerDefinition: Partition key, vector embedding and indexing policies
    """
    vector_embedding_policy = {
        "vectorEmbeddings": [
            {
                "path": settings.embedding_path,
                "dataType": settings.data_type.value,
                "dimensions": settings.dimensions,
                "distanceFunction": settings.distance_function.value,
            }
        ]
    }
    indexing_policy = {
        "indexingMode": "consistent",
        "automatic": True,
        "includedPaths": [{"path": path} for path in settings.included_paths],
        "excludedPaths": [{"path": path} for path in settings.excluded_paths],
        "vectorIndexes": [
            {"path": settings.embedding_path, "type": settings.index_type.value},
        ],
    }
    return ContainerDefinition(
        partition_key_path=settings.partition_key_path,
        vector_embedding_policy=vector_embedding_policy,
        indexing_policy=indexing_policy,
    )


def _normalize(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


def _vector_embeddings(policy: dict[str, Any] | None) -> dict[str, tuple]:
    embeddings = (policy or {}).get("vectorEmbeddings") or []
    return {
        entry.get("path"): (
            _normalize(entry.get("dataType")),
            entry.get("dimensions"),
            _normalize(entry.get("distanceFunction")),
        )
        for entry in embeddings
    }


def _vector_indexes(policy: dict[str, Any] | None) -> dict[str, Any]:
    indexes = (policy or {}).get("vectorIndexes") or []
    return {entry.get("path"): _normalize(entry.get("type")) for entry in indexes}


def _included_paths(policy: dict[str, Any] | None) -> set[str]:
    return {entry.get("path") for entry in (policy or {}).get("includedPaths") or []}


def find_mismatches(
    expected: ContainerDefinition,
    properties: dict[str, Any],
) -> dict[str, tuple[Any, Any]]:
    """
    Compare an existing container's properties with the required definition.

    Only settings that cannot be changed on a live container, or that search
    depends on, are compared: partition key paths, vector embeddings, vector
    indexes and the required included paths. Extra paths the service adds on
    its own (such as the _etag exclusion) are ignored.

    Args:
        expected: Required definition
        properties: Result of ContainerProxy.read()

    Returns:
        dict[str, tuple[Any, Any]]: Setting name to (expected, actual); empty
            when the container is compatible
    """
    mismatches: dict[str, tuple[Any, Any]] = {}

    actual_paths = (properties.get("partitionKey") or {}).get("paths") or []
    if actual_paths != [expected.partition_key_path]:
        mismatches["partitionKey"] = ([expected.partition_key_path], actual_paths)

    wanted_embeddings = _vector_embeddings(expected.vector_embedding_policy)
    actual_embeddings = _vector_embeddings(properties.get("vectorEmbeddingPolicy"))
    if wanted_embeddings != actual_embeddings:
        mismatches["vectorEmbeddings"] = (wanted_embeddings, actual_embeddings)

    actual_indexing = properties.get("indexingPolicy")
    wanted_indexes = _vector_indexes(expected.indexing_policy)
    actual_indexes = _vector_indexes(actual_indexing)
    if wanted_indexes != actual_indexes:
        mismatches["vectorIndexes"] = (wanted_indexes, actual_indexes)

    missing = _included_paths(expected.indexing_policy) - _included_paths(actual_indexing)
    if missing:
        mismatches["includedPaths"] = (sorted(missing), sorted(_included_paths(actual_indexing)))

    return mismatches
