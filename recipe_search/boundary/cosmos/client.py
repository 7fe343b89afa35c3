"""
Cosmos DB client factory.

Dependencies: azure-cosmos, recipe_search.configs
System role: Builds the shared CosmosClient connection
"""

import logging
from typing import Any

from azure.cosmos import CosmosClient

from recipe_search.configs.cosmos import CosmosSettings

logger = logging.getLogger(__name__)


def create_cosmos_client(
    settings: CosmosSettings,
    endpoint: str | None = None,
    credential: Any = None,
) -> CosmosClient:
    """
    Create a CosmosClient for the configured account.

    Args:
        settings: Connection settings
        endpoint: Account endpoint, overriding settings.endpoint
        credential: Account key or azure-identity TokenCredential,
            overriding settings.key

    Returns:
        CosmosClient: Thread-safe client shared by all operations

    Raises:
        ValueError: If no credential is available
    """
    endpoint = endpoint or settings.endpoint
    credential = credential if credential is not None else settings.key
    if credential is None:
        raise ValueError("A Cosmos DB key or TokenCredential is required")

    logger.info(
        f"{__name__}:create_cosmos_client - Connecting to {endpoint} "
        f"(consistency={settings.consistency_level})"
    )
    return CosmosClient(
        endpoint,
        credential=credential,
        consistency_level=settings.consistency_level,
    )
