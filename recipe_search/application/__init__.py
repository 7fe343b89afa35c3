"""Service orchestrators."""

from .recipe_service import RecipeSearchService, provision

__all__ = ["RecipeSearchService", "provision"]
