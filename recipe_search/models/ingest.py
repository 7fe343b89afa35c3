"""
Bulk ingest outcome models.

Each submitted item produces exactly one outcome, either ItemSuccess or
ItemFailure, and the outcomes are returned in input order.

Dependencies: dataclasses (stdlib)
System role: Return type for bulk create/upsert
"""

from dataclasses import dataclass, field
from typing import Any, Union

from recipe_search.core.exceptions import BulkIngestError, RecipeSearchException
from recipe_search.models.recipe import Recipe


@dataclass(frozen=True)
class ItemSuccess:
    """Item written by the store."""

    index: int
    recipe: Recipe
    document: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ItemFailure:
    """Item rejected locally or by the store."""

    index: int
    recipe: Recipe
    error: RecipeSearchException

    @property
    def ok(self) -> bool:
        return False


ItemOutcome = Union[ItemSuccess, ItemFailure]


@dataclass(frozen=True)
class BulkIngestResult:
    """Ordered per-item outcomes of one bulk operation."""

    outcomes: list[ItemOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[ItemSuccess]:
        return [o for o in self.outcomes if isinstance(o, ItemSuccess)]

    @property
    def failed(self) -> list[ItemFailure]:
        return [o for o in self.outcomes if isinstance(o, ItemFailure)]

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        """
        Raise if any item failed.

        Raises:
            BulkIngestError: Carrying the failed outcomes in input order
        """
        failures = self.failed
        if failures:
            raise BulkIngestError(
                failures,
                details={"failed_ids": [f.recipe.id for f in failures]},
            )

    def __len__(self) -> int:
        return len(self.outcomes)
