"""
Translation of Cosmos SDK exceptions into the domain taxonomy.

Dependencies: azure-cosmos, azure-core, recipe_search.core.exceptions
System role: Keeps SDK exception types out of the application layer
"""

from azure.core.exceptions import AzureError, ServiceRequestError, ServiceResponseError
from azure.cosmos.exceptions import CosmosClientTimeoutError, CosmosHttpResponseError

from recipe_search.core.exceptions import (
    ConnectivityError,
    DuplicateIdentifier,
    IngestionError,
    ValidationError,
)

# Raised when a request never got a usable HTTP response.
# CosmosClientTimeoutError derives from AzureError directly, not from the other two.
TRANSPORT_ERRORS = (ServiceRequestError, ServiceResponseError, CosmosClientTimeoutError)

HTTP_BAD_REQUEST = 400
HTTP_CONFLICT = 409


def translate_item_error(
    error: CosmosHttpResponseError,
    item_id: str | None,
    operation: str,
) -> IngestionError:
    """
    Map a failed create/upsert response to a per-item ingestion error.

    Args:
        error: SDK exception raised for the item
        item_id: Id of the item
        operation: "create" or "upsert"

    Returns:
        IngestionError: DuplicateIdentifier, ValidationError or IngestionError
    """
    details = {"status_code": error.status_code, "operation": operation}
    if error.status_code == HTTP_CONFLICT:
        return DuplicateIdentifier(
            f"Recipe id already exists: {item_id}",
            item_id=item_id,
            details=details,
        )
    if error.status_code == HTTP_BAD_REQUEST:
        return ValidationError(
            f"Recipe rejected by the store: {error.message}",
            item_id=item_id,
            details=details,
        )
    return IngestionError(
        f"Failed to {operation} recipe: {error.message}",
        item_id=item_id,
        details=details,
    )


def transport_failure(error: Exception, operation: str) -> ConnectivityError:
    """Wrap a transport-level SDK exception."""
    return ConnectivityError(
        f"Could not reach Cosmos DB during {operation}: {error}",
        operation=operation,
        details={"error_type": type(error).__name__},
    )


def unexpected_item_error(error: AzureError, item_id: str | None, operation: str) -> IngestionError:
    """Wrap an SDK exception that carries no HTTP status."""
    return IngestionError(
        f"Failed to {operation} recipe: {error}",
        item_id=item_id,
        details={"operation": operation, "error_type": type(error).__name__},
    )
