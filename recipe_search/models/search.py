"""
Search result models.

Dependencies: pydantic
System role: Return type for similarity search
"""

from pydantic import BaseModel, Field

from recipe_search.models.recipe import Recipe


class ScoredRecipe(BaseModel):
    """A recipe returned by similarity search with its query-time score."""

    recipe: Recipe = Field(description="Stored recipe")
    score: float = Field(description="Similarity score from VectorDistance")
