"""
Collection provisioner.

Idempotently ensures the database and the vector-indexed recipe container
exist, and refuses to reuse a container whose vector or partitioning
configuration differs from the required one.

Dependencies: azure-cosmos, recipe_search.boundary.cosmos, recipe_search.configs
System role: One-time container provisioning
"""

import logging

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy, CosmosClient
from azure.cosmos.exceptions import CosmosHttpResponseError

from recipe_search.boundary.cosmos.container_definition import (
    ContainerDefinition,
    build_container_definition,
    find_mismatches,
)
from recipe_search.boundary.cosmos.errors import (
    HTTP_BAD_REQUEST,
    TRANSPORT_ERRORS,
    transport_failure,
)
from recipe_search.configs.cosmos import CosmosSettings
from recipe_search.configs.vector_store import VectorStoreSettings
from recipe_search.core.exceptions import ConfigurationConflict, ConnectivityError
from recipe_search.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class CollectionProvisioner:
    """Creates or validates the recipe container."""

    def __init__(
        self,
        client: CosmosClient,
        cosmos_settings: CosmosSettings,
        vector_settings: VectorStoreSettings,
    ) -> None:
        """
        Initialize provisioner.

        Args:
            client: Shared Cosmos client
            cosmos_settings: Throughput and naming settings
            vector_settings: Embedding and indexing policy
        """
        self._client = client
        self._throughput = cosmos_settings.throughput
        self._definition = build_container_definition(vector_settings)

    @property
    def definition(self) -> ContainerDefinition:
        return self._definition

    def ensure(self, database_name: str, container_name: str) -> ContainerProxy:
        """
        Ensure the container exists with the required policies.

        Calling this again with the same arguments returns a handle to the
        same container and creates nothing new.

        Args:
            database_name: Database id
            container_name: Container id

        Returns:
            ContainerProxy: Handle to the container

        Raises:
            ConfigurationConflict: If an existing container has incompatible
                partitioning or vector configuration
            ConnectivityError: On transport failure
        """
        try:
            database = self._client.create_database_if_not_exists(id=database_name)
            container = database.create_container_if_not_exists(
                id=container_name,
                partition_key=self._definition.partition_key,
                indexing_policy=self._definition.indexing_policy,
                vector_embedding_policy=self._definition.vector_embedding_policy,
                offer_throughput=self._throughput,
            )
            properties = container.read()
        except TRANSPORT_ERRORS as e:
            raise transport_failure(e, "provision") from e
        except CosmosHttpResponseError as e:
            logger.error(
                f"{__name__}:ensure - Provisioning {database_name}/{container_name} "
                f"failed with status {e.status_code}"
            )
            if e.status_code == HTTP_BAD_REQUEST:
                raise ConfigurationConflict(
                    f"Container definition rejected by the store: {e.message}",
                    container=container_name,
                    details={"status_code": e.status_code},
                ) from e
            raise ConnectivityError(
                f"Provisioning failed: {e.message}",
                operation="provision",
                details={"status_code": e.status_code, "container": container_name},
            ) from e
        except AzureError as e:
            logger.error(
                f"{__name__}:ensure - Provisioning {database_name}/{container_name} "
                f"failed: {type(e).__name__}"
            )
            raise ConnectivityError(
                f"Provisioning failed: {e}",
                operation="provision",
                details={"error_type": type(e).__name__, "container": container_name},
            ) from e

        mismatches = find_mismatches(self._definition, properties)
        if mismatches:
            logger.error(
                f"{__name__}:ensure - Container {container_name} exists with an "
                f"incompatible configuration: {sorted(mismatches)}"
            )
            raise ConfigurationConflict(
                f"Container {container_name} exists with incompatible vector or partitioning configuration",
                container=container_name,
                mismatches=mismatches,
            )

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ensure - Container ready",
            database=database_name,
            container=container_name,
            throughput=self._throughput,
        )
        return container
