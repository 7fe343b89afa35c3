"""
Container queries.

Runs the count and VectorDistance queries against the recipe container and
returns raw rows. Ranking happens in recipe_search.core.ranking.

Dependencies: azure-cosmos
System role: Read path for counts and similarity search
"""

import logging
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

from recipe_search.boundary.cosmos.errors import TRANSPORT_ERRORS
from recipe_search.core.exceptions import QueryExecutionError
from recipe_search.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

PROJECTED_FIELDS = (
    "id",
    "name",
    "description",
    "embedding",
    "cuisine",
    "difficulty",
    "prepTime",
    "cookTime",
    "totalTime",
    "servings",
    "ingredients",
    "instructions",
)

COUNT_QUERY = "SELECT VALUE COUNT(c.id) FROM c WHERE IS_ARRAY({field}) = @status"


def field_reference(path: str) -> str:
    """Turn a JSON path such as /embedding into a query reference c.embedding."""
    return "c." + ".".join(part for part in path.split("/") if part)


def build_vector_search_query(embedding_path: str) -> str:
    """
    Build the similarity query text.

    Documents without an embedding are skipped; the query vector is bound
    as @embedding.
    """
    field = field_reference(embedding_path)
    projection = ", ".join(f"c.{name}" for name in PROJECTED_FIELDS)
    return (
        f"SELECT {projection}, VectorDistance({field}, @embedding) AS score "
        f"FROM c WHERE IS_ARRAY({field})"
    )


class QueryExecutor:
    """Executes parameterized queries against one container."""

    def __init__(self, container: ContainerProxy, embedding_path: str = "/embedding") -> None:
        self._container = container
        self._embedding_path = embedding_path
        self._search_query = build_vector_search_query(embedding_path)

    @property
    def search_query(self) -> str:
        return self._search_query

    def count(self, has_embedding: bool) -> int:
        """
        Count recipes with or without an embedding.

        Raises:
            QueryExecutionError: If the query fails
        """
        query = COUNT_QUERY.format(field=field_reference(self._embedding_path))
        rows = self._run(query, [{"name": "@status", "value": has_embedding}])
        return int(rows[0]) if rows else 0

    def vector_search(self, vector: list[float]) -> list[dict[str, Any]]:
        """
        Return every embedded recipe with its VectorDistance score.

        The result stream is collected in full, in the order the store
        returned it.

        Raises:
            QueryExecutionError: If the query fails
        """
        rows = self._run(self._search_query, [{"name": "@embedding", "value": vector}])
        logger.info(f"{__name__}:vector_search - Store returned {len(rows)} candidate rows")
        return rows

    def _run(self, query: str, parameters: list[dict[str, Any]]) -> list[Any]:
        try:
            return list(
                self._container.query_items(
                    query=query,
                    parameters=parameters,
                    enable_cross_partition_query=True,
                )
            )
        except TRANSPORT_ERRORS as e:
            error = QueryExecutionError(
                f"Could not reach Cosmos DB: {e}",
                query=query,
                details={"error_type": type(e).__name__},
            )
            log_exception_with_context(logger, f"{__name__}:_run - Transport failure", error)
            raise error from e
        except CosmosHttpResponseError as e:
            error = QueryExecutionError(
                f"Query failed: {e.message}",
                query=query,
                details={"status_code": e.status_code},
            )
            log_exception_with_context(logger, f"{__name__}:_run - Query failed", error)
            raise error from e
        except AzureError as e:
            error = QueryExecutionError(
                f"Query failed: {e}",
                query=query,
                details={"error_type": type(e).__name__},
            )
            log_exception_with_context(logger, f"{__name__}:_run - Query failed", error)
            raise error from e
