"""
Shared test fixtures and configuration for entire test suite.

Provides: settings, an in-memory stand-in for a Cosmos DB container and
client, and sample recipes
Dependencies: pytest, azure-cosmos (exception types only)
System role: Test infrastructure and fixture management
"""

import copy
import math
import threading
from typing import Any

import pytest
from azure.cosmos.exceptions import CosmosResourceExistsError

from recipe_search.configs.cosmos import CosmosSettings
from recipe_search.configs.settings import Settings
from recipe_search.configs.vector_store import VectorStoreSettings
from recipe_search.models.recipe import Recipe


def cosine_similarity(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class FakeContainer:
    """
    In-memory container that understands the queries the service issues.

    Documents are kept in insertion order; VectorDistance is evaluated as
    cosine similarity like the real vector embedding policy.
    """

    def __init__(self, container_id: str = "recipes", properties: dict[str, Any] | None = None) -> None:
        self.id = container_id
        self.properties = properties or {}
        self.documents: dict[str, dict[str, Any]] = {}
        self.queries: list[tuple[str, list[dict[str, Any]]]] = []
        self._lock = threading.Lock()

    def read(self) -> dict[str, Any]:
        return copy.deepcopy(self.properties)

    def create_item(self, body: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        with self._lock:
            if body["id"] in self.documents:
                raise CosmosResourceExistsError(
                    status_code=409,
                    message="Entity with the specified id already exists in the system.",
                )
            self.documents[body["id"]] = copy.deepcopy(body)
        return copy.deepcopy(body)

    def upsert_item(self, body: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        with self._lock:
            self.documents[body["id"]] = copy.deepcopy(body)
        return copy.deepcopy(body)

    def query_items(self, query: str, parameters: list[dict[str, Any]], **kwargs: Any):
        self.queries.append((query, parameters))
        values = {p["name"]: p["value"] for p in parameters}
        docs = list(self.documents.values())

        if "COUNT" in query:
            status = values["@status"]
            return iter([sum(1 for d in docs if isinstance(d.get("embedding"), list) == status)])

        vector = values["@embedding"]
        rows = []
        for doc in docs:
            if not isinstance(doc.get("embedding"), list):
                continue
            row = copy.deepcopy(doc)
            row["score"] = cosine_similarity(doc["embedding"], vector)
            rows.append(row)
        return iter(rows)


class FakeDatabase:
    def __init__(self, database_id: str) -> None:
        self.id = database_id
        self.containers: dict[str, FakeContainer] = {}
        self.create_calls = 0

    def create_container_if_not_exists(self, id: str, partition_key: Any, **kwargs: Any) -> FakeContainer:
        if id not in self.containers:
            self.create_calls += 1
            self.containers[id] = FakeContainer(
                id,
                properties={
                    "id": id,
                    "partitionKey": {"paths": [partition_key["paths"][0]], "kind": "Hash"},
                    "indexingPolicy": copy.deepcopy(kwargs.get("indexing_policy")),
                    "vectorEmbeddingPolicy": copy.deepcopy(kwargs.get("vector_embedding_policy")),
                },
            )
        return self.containers[id]


class FakeCosmosClient:
    def __init__(self) -> None:
        self.databases: dict[str, FakeDatabase] = {}

    def create_database_if_not_exists(self, id: str, **kwargs: Any) -> FakeDatabase:
        return self.databases.setdefault(id, FakeDatabase(id))


@pytest.fixture
def settings() -> Settings:
    """Provide settings with a test key and default vector policy."""
    return Settings(
        cosmos=CosmosSettings(key="test-key", bulk_max_concurrency=4),
        vector_store=VectorStoreSettings(),
    )


@pytest.fixture
def fake_container() -> FakeContainer:
    """Provide an empty in-memory container."""
    return FakeContainer()


@pytest.fixture
def fake_client() -> FakeCosmosClient:
    """Provide an in-memory Cosmos client."""
    return FakeCosmosClient()


def unit_vector(position: int, dimensions: int = 8) -> list[float]:
    vector = [0.0] * dimensions
    vector[position] = 1.0
    return vector


@pytest.fixture
def sample_recipes() -> list[Recipe]:
    """Provide three recipes without ids, two sharing an embedding."""
    return [
        Recipe(name="Pad Thai", description="Stir-fried noodles", embedding=unit_vector(0), cuisine="Thai"),
        Recipe(name="Green Curry", description="Coconut curry", embedding=unit_vector(1), cuisine="Thai"),
        Recipe(name="Pad See Ew", description="Wide rice noodles", embedding=unit_vector(0), cuisine="Thai"),
    ]
