"""
Exception hierarchy for the recipe search application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RecipeSearchException(Exception):
    """Base exception for all recipe search errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationConflict(RecipeSearchException):
    """Raised when an existing container is incompatible with the required policy."""

    def __init__(
        self,
        message: str,
        container: str | None = None,
        mismatches: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration conflict.

        Args:
            message: Error message
            container: Name of the conflicting container
            mismatches: Setting name to (expected, actual) pairs
            details: Additional context
        """
        details = details or {}
        if container:
            details["container"] = container
        self.mismatches = mismatches or {}
        if self.mismatches:
            details["mismatches"] = self.mismatches
        super().__init__(message, details)


class ConnectivityError(RecipeSearchException):
    """Raised on transport failures talking to Cosmos DB. Safe to retry."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class IngestionError(RecipeSearchException):
    """Base exception for per-item ingestion failures."""

    def __init__(
        self,
        message: str,
        item_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            item_id: Identifier of the item that failed
            details: Additional context
        """
        details = details or {}
        if item_id:
            details["item_id"] = item_id
        self.item_id = item_id
        super().__init__(message, details)


class DuplicateIdentifier(IngestionError):
    """Raised when an item id already exists in its partition."""

    pass


class ValidationError(IngestionError):
    """Raised when an entity or query vector fails validation."""

    def __init__(
        self,
        message: str,
        item_id: str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, item_id, details)


class BulkIngestError(RecipeSearchException):
    """Raised on request when a bulk load finished with failed items."""

    def __init__(self, failures: list, details: dict[str, Any] | None = None) -> None:
        """
        Initialize bulk ingest error.

        Args:
            failures: Failed ItemOutcome entries, in input order
            details: Additional context
        """
        details = details or {}
        details["failed_count"] = len(failures)
        self.failures = failures
        super().__init__(f"{len(failures)} item(s) failed during bulk ingest", details)


class QueryExecutionError(RecipeSearchException):
    """Raised when a query against the container fails."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if query:
            details["query"] = query
        super().__init__(message, details)


class MalformedScore(RecipeSearchException):
    """Raised when a returned similarity score cannot be parsed as a number."""

    def __init__(self, raw_score: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["raw_score"] = repr(raw_score)
        self.raw_score = raw_score
        super().__init__("Similarity score is not a finite number", details)
