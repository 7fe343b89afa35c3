"""Pydantic and dataclass models for recipes, search results and ingest outcomes."""

from recipe_search.models.ingest import BulkIngestResult, ItemFailure, ItemOutcome, ItemSuccess
from recipe_search.models.recipe import Recipe
from recipe_search.models.search import ScoredRecipe

__all__ = [
    "Recipe",
    "ScoredRecipe",
    "ItemSuccess",
    "ItemFailure",
    "ItemOutcome",
    "BulkIngestResult",
]
