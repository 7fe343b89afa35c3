"""
Bulk item executor.

Fans a batch of create or upsert operations out over a bounded thread pool
and blocks until every item has an outcome. A failed item never aborts its
siblings; every failure is returned to the caller.

Dependencies: azure-cosmos, concurrent.futures (stdlib)
System role: Batched writes for recipe ingestion
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

from recipe_search.boundary.cosmos.errors import (
    TRANSPORT_ERRORS,
    translate_item_error,
    transport_failure,
    unexpected_item_error,
)
from recipe_search.models.ingest import BulkIngestResult, ItemFailure, ItemOutcome, ItemSuccess
from recipe_search.models.recipe import Recipe

logger = logging.getLogger(__name__)


class BulkOperation(str, Enum):
    """Write semantics for a bulk batch."""

    CREATE = "create"
    UPSERT = "upsert"


class BulkExecutor:
    """Runs item writes concurrently and collects ordered outcomes."""

    def __init__(self, max_concurrency: int = 16) -> None:
        """
        Initialize bulk executor.

        Args:
            max_concurrency: Maximum number of in-flight item requests
        """
        self._max_concurrency = max_concurrency

    def execute(
        self,
        container: ContainerProxy,
        items: list[tuple[int, Recipe]],
        operation: BulkOperation = BulkOperation.CREATE,
    ) -> list[ItemOutcome]:
        """
        Write items and wait for all of them to finish.

        Each recipe is written to the partition named by its own id.

        Args:
            container: Target container
            items: (input index, recipe) pairs; every recipe must have an id
            operation: CREATE for create-only, UPSERT to overwrite

        Returns:
            list[ItemOutcome]: One outcome per item, in the order given
        """
        if not items:
            return []

        workers = min(self._max_concurrency, len(items))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="cosmos-bulk") as pool:
            futures = [
                pool.submit(self._write_one, container, index, recipe, operation)
                for index, recipe in items
            ]
            outcomes = [future.result() for future in futures]

        failures = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(
            f"{__name__}:execute - {operation.value} batch finished: "
            f"{len(outcomes) - failures} succeeded, {failures} failed"
        )
        return outcomes

    @staticmethod
    def _write_one(
        container: ContainerProxy,
        index: int,
        recipe: Recipe,
        operation: BulkOperation,
    ) -> ItemOutcome:
        body = recipe.to_document()
        try:
            if operation is BulkOperation.UPSERT:
                stored = container.upsert_item(body=body)
            else:
                stored = container.create_item(body=body)
        except TRANSPORT_ERRORS as e:
            return ItemFailure(index=index, recipe=recipe, error=transport_failure(e, operation.value))
        except CosmosHttpResponseError as e:
            logger.warning(
                f"{__name__}:_write_one - {operation.value} failed for {recipe.id} "
                f"with status {e.status_code}"
            )
            return ItemFailure(
                index=index,
                recipe=recipe,
                error=translate_item_error(e, recipe.id, operation.value),
            )
        except AzureError as e:
            logger.warning(
                f"{__name__}:_write_one - {operation.value} failed for {recipe.id}: "
                f"{type(e).__name__}"
            )
            return ItemFailure(
                index=index,
                recipe=recipe,
                error=unexpected_item_error(e, recipe.id, operation.value),
            )
        return ItemSuccess(index=index, recipe=recipe, document=stored)


def merge_outcomes(rejected: list[ItemFailure], written: list[ItemOutcome]) -> BulkIngestResult:
    """Combine locally rejected and written items back into input order."""
    outcomes = sorted([*rejected, *written], key=lambda outcome: outcome.index)
    return BulkIngestResult(outcomes=outcomes)
