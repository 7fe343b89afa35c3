"""
Recipe identifier derivation.

Dependencies: recipe_search.models
System role: Assigns stable ids before documents are written
"""

import re
from collections.abc import Iterable

from recipe_search.models.recipe import Recipe

_WHITESPACE = re.compile(r"\s+")


def derive_recipe_id(name: str) -> str:
    """Derive a document id from a recipe name by removing all whitespace."""
    return _WHITESPACE.sub("", name)


def assign_ids(recipes: Iterable[Recipe]) -> list[Recipe]:
    """
    Return copies of recipes with a non-null id.

    Recipes that already carry an id are copied unchanged; the caller's
    objects are never mutated.

    Args:
        recipes: Recipes in ingest order

    Returns:
        list[Recipe]: Recipes in the same order, each with an id
    """
    assigned = []
    for recipe in recipes:
        if recipe.id is None:
            recipe = recipe.model_copy(update={"id": derive_recipe_id(recipe.name)})
        else:
            recipe = recipe.model_copy()
        assigned.append(recipe)
    return assigned
