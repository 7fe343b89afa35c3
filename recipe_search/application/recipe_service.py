"""
Recipe search service.

Entry point for callers: provision() builds the shared client, ensures the
container and returns a RecipeSearchService that counts, ingests and
searches recipes.

Dependencies: recipe_search.boundary.cosmos, recipe_search.core, recipe_search.configs
System role: Service orchestrator
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from azure.cosmos import ContainerProxy

from recipe_search.boundary.cosmos.bulk import BulkExecutor, BulkOperation, merge_outcomes
from recipe_search.boundary.cosmos.client import create_cosmos_client
from recipe_search.boundary.cosmos.provisioner import CollectionProvisioner
from recipe_search.boundary.cosmos.queries import QueryExecutor
from recipe_search.configs import Settings, get_settings
from recipe_search.core.exceptions import IngestionError, ValidationError
from recipe_search.core.identifiers import assign_ids
from recipe_search.core.ranking import rank_top_k, to_scored_recipe
from recipe_search.core.vectors import to_float32, validate_embedding
from recipe_search.models.ingest import BulkIngestResult, ItemFailure
from recipe_search.models.recipe import Recipe
from recipe_search.models.search import ScoredRecipe
from recipe_search.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class RecipeSearchService:
    """
    Recipe operations against one provisioned container.

    Holds the container handle and settings. Neither is replaced after
    construction, so one instance can be shared across threads.
    """

    def __init__(self, container: ContainerProxy, settings: Settings | None = None) -> None:
        """
        Initialize service.

        Args:
            container: Handle returned by CollectionProvisioner.ensure
            settings: Application settings (defaults to get_settings())
        """
        settings = settings or get_settings()
        self._container = container
        self._settings = settings
        self._queries = QueryExecutor(container, embedding_path=settings.vector_store.embedding_path)
        self._bulk = BulkExecutor(max_concurrency=settings.cosmos.bulk_max_concurrency)

    @property
    def container(self) -> ContainerProxy:
        return self._container

    @property
    def settings(self) -> Settings:
        return self._settings

    def count(self, has_embedding: bool) -> int:
        """
        Count stored recipes with (True) or without (False) an embedding.

        Raises:
            QueryExecutionError: If the count query fails
        """
        return self._queries.count(has_embedding)

    def ingest(self, recipes: Iterable[Recipe]) -> BulkIngestResult:
        """
        Create recipes in one concurrent batch.

        Recipes without an id get one derived from their name. Create-only:
        an id that already exists fails with DuplicateIdentifier for that
        item while the rest of the batch still completes.

        Args:
            recipes: Recipes in input order

        Returns:
            BulkIngestResult: One outcome per recipe, in input order
        """
        return self._write(recipes, BulkOperation.CREATE)

    def upsert(self, recipes: Iterable[Recipe]) -> BulkIngestResult:
        """
        Create or replace recipes in one concurrent batch.

        Same as ingest() except that existing ids are overwritten.
        """
        return self._write(recipes, BulkOperation.UPSERT)

    def search(self, vector: Sequence[float], k: int | None = None) -> list[ScoredRecipe]:
        """
        Return the k recipes most similar to a query vector.

        Scores come from the store's VectorDistance function; ordering follows
        the configured distance function, best match first.

        Args:
            vector: Query embedding with the configured dimensionality
            k: Number of results (defaults to settings.vector_store.top_k)

        Returns:
            list[ScoredRecipe]: min(k, eligible recipes) results, best first

        Raises:
            ValidationError: On a malformed query vector or k < 1
            QueryExecutionError: If the query fails or returns an unreadable row
            MalformedScore: If the store returns a non-numeric score
        """
        vector_settings = self._settings.vector_store
        k = vector_settings.top_k if k is None else k
        if k < 1:
            raise ValidationError(f"k must be at least 1, got {k}", field="k")
        validate_embedding(vector, vector_settings.dimensions, vector_settings.data_type)

        rows = self._queries.vector_search(to_float32(vector))
        results = rank_top_k(
            (to_scored_recipe(row) for row in rows),
            k,
            vector_settings.distance_function.score_order,
        )
        logger.info(f"{__name__}:search - Returning {len(results)} of {len(rows)} results (k={k})")
        return results

    def _write(self, recipes: Iterable[Recipe], operation: BulkOperation) -> BulkIngestResult:
        vector_settings = self._settings.vector_store
        rejected: list[ItemFailure] = []
        accepted: list[tuple[int, Recipe]] = []

        for index, recipe in enumerate(assign_ids(recipes)):
            if recipe.embedding is not None:
                try:
                    validate_embedding(
                        recipe.embedding,
                        vector_settings.dimensions,
                        vector_settings.data_type,
                        item_id=recipe.id,
                    )
                except IngestionError as e:
                    rejected.append(ItemFailure(index=index, recipe=recipe, error=e))
                    continue
            accepted.append((index, recipe))

        if rejected:
            logger.warning(
                f"{__name__}:_write - {len(rejected)} recipe(s) rejected before submission"
            )
        written = self._bulk.execute(self._container, accepted, operation)
        return merge_outcomes(rejected, written)


def provision(
    endpoint: str | None = None,
    credential: Any = None,
    database_name: str | None = None,
    collection_name: str | None = None,
    settings: Settings | None = None,
) -> RecipeSearchService:
    """
    Connect to Cosmos DB, ensure the recipe container and return the service.

    Arguments left as None fall back to the COSMOS_* settings.

    Args:
        endpoint: Account endpoint
        credential: Account key or azure-identity TokenCredential
        database_name: Database id
        collection_name: Container id
        settings: Application settings (defaults to get_settings())

    Returns:
        RecipeSearchService: Service bound to the container

    Raises:
        ConfigurationConflict: If the container exists with an incompatible policy
        ConnectivityError: On transport failure
    """
    settings = settings or get_settings()
    client = create_cosmos_client(settings.cosmos, endpoint=endpoint, credential=credential)
    provisioner = CollectionProvisioner(client, settings.cosmos, settings.vector_store)
    container = provisioner.ensure(
        database_name or settings.cosmos.database_name,
        collection_name or settings.cosmos.container_name,
    )
    log_with_context(
        logger,
        logging.INFO,
        f"{__name__}:provision - Recipe search service ready",
        environment=settings.environment,
        container=container.id,
        distance_function=settings.vector_store.distance_function.value,
    )
    return RecipeSearchService(container, settings)
