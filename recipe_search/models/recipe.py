"""
Recipe domain model.

Represents a recipe document as stored in the container. Only id, name and
embedding matter to the search core; the descriptive fields pass through.

Dependencies: pydantic
System role: Recipe document data structure
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """Recipe document model."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, description="Document key and partition key")
    name: str = Field(description="Human-readable recipe name")
    description: str | None = Field(default="", description="Recipe description")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")

    # Descriptive fields are stored and returned as given, whatever their JSON type
    cuisine: Any = Field(default=None)
    difficulty: Any = Field(default=None)
    prep_time: Any = Field(default=None, alias="prepTime")
    cook_time: Any = Field(default=None, alias="cookTime")
    total_time: Any = Field(default=None, alias="totalTime")
    servings: Any = Field(default=None)
    ingredients: Any = Field(default_factory=list)
    instructions: Any = Field(default_factory=list)

    @property
    def has_embedding(self) -> bool:
        """True when the recipe carries an embedding vector."""
        return self.embedding is not None

    def to_document(self) -> dict[str, Any]:
        """
        Serialize to the JSON document written to Cosmos DB.

        Uses the stored field names (camelCase aliases) and omits unset
        optional fields, so recipes without an embedding have no embedding
        property at all.

        Returns:
            dict[str, Any]: Document body
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
