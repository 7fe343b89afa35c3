"""Tests for QueryExecutor and query text construction."""

from unittest.mock import MagicMock

import pytest
from azure.core.exceptions import AzureError, ServiceRequestError
from azure.cosmos.exceptions import CosmosClientTimeoutError, CosmosHttpResponseError

from recipe_search.boundary.cosmos.queries import (
    QueryExecutor,
    build_vector_search_query,
    field_reference,
)
from recipe_search.core.exceptions import QueryExecutionError


class TestQueryText:
    """Tests for query text helpers."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/embedding", "c.embedding"), ("/vectors/text", "c.vectors.text")],
    )
    def test_field_reference(self, path: str, expected: str) -> None:
        assert field_reference(path) == expected

    def test_vector_search_query(self) -> None:
        query = build_vector_search_query("/embedding")

        assert query.startswith("SELECT c.id, c.name, c.description, c.embedding, c.cuisine")
        assert "c.prepTime, c.cookTime, c.totalTime, c.servings, c.ingredients, c.instructions" in query
        assert "VectorDistance(c.embedding, @embedding) AS score" in query
        assert query.endswith("FROM c WHERE IS_ARRAY(c.embedding)")


class TestCount:
    """Tests for QueryExecutor.count."""

    def test_counts_by_embedding_presence(self, fake_container) -> None:
        fake_container.documents = {
            "a": {"id": "a", "embedding": [1.0]},
            "b": {"id": "b"},
            "c": {"id": "c", "embedding": [0.0]},
        }
        executor = QueryExecutor(fake_container)

        assert executor.count(True) == 2
        assert executor.count(False) == 1

    def test_binds_status_parameter(self, fake_container) -> None:
        QueryExecutor(fake_container).count(True)

        query, parameters = fake_container.queries[-1]
        assert query == "SELECT VALUE COUNT(c.id) FROM c WHERE IS_ARRAY(c.embedding) = @status"
        assert parameters == [{"name": "@status", "value": True}]

    def test_empty_result_is_zero(self) -> None:
        container = MagicMock()
        container.query_items.return_value = iter([])

        assert QueryExecutor(container).count(True) == 0


class TestVectorSearch:
    """Tests for QueryExecutor.vector_search."""

    def test_collects_rows_in_store_order(self) -> None:
        rows = [{"id": "b", "score": 0.1}, {"id": "a", "score": 0.9}]
        container = MagicMock()
        container.query_items.return_value = iter(rows)

        result = QueryExecutor(container).vector_search([1.0, 0.0])

        assert result == rows
        kwargs = container.query_items.call_args.kwargs
        assert kwargs["parameters"] == [{"name": "@embedding", "value": [1.0, 0.0]}]
        assert kwargs["enable_cross_partition_query"] is True

    def test_query_failure(self) -> None:
        container = MagicMock()
        container.query_items.side_effect = CosmosHttpResponseError(status_code=400, message="syntax error")

        with pytest.raises(QueryExecutionError) as exc_info:
            QueryExecutor(container).vector_search([1.0])

        assert exc_info.value.details["status_code"] == 400
        assert "VectorDistance" in exc_info.value.details["query"]

    def test_failure_while_paging(self) -> None:
        def pages():
            yield {"id": "a", "score": 0.5}
            raise ServiceRequestError("connection dropped")

        container = MagicMock()
        container.query_items.return_value = pages()

        with pytest.raises(QueryExecutionError):
            QueryExecutor(container).vector_search([1.0])

    def test_client_timeout(self) -> None:
        container = MagicMock()
        container.query_items.side_effect = CosmosClientTimeoutError()

        with pytest.raises(QueryExecutionError) as exc_info:
            QueryExecutor(container).vector_search([1.0])

        assert exc_info.value.details["error_type"] == "CosmosClientTimeoutError"

    def test_other_sdk_error_on_count(self) -> None:
        container = MagicMock()
        container.query_items.side_effect = AzureError("response could not be decoded")

        with pytest.raises(QueryExecutionError) as exc_info:
            QueryExecutor(container).count(True)

        assert exc_info.value.details["error_type"] == "AzureError"
        assert "COUNT" in exc_info.value.details["query"]
