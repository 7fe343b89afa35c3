"""
Recipe vector search on Azure Cosmos DB for NoSQL.

Provisions a vector-indexed container, bulk-loads recipes with embeddings,
and serves top-k similarity queries.
"""

from recipe_search.application.recipe_service import RecipeSearchService, provision

__all__ = ["RecipeSearchService", "provision"]
