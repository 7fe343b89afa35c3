"""
Similarity ranking.

Turns the unordered rows returned by a VectorDistance query into the
top-k ScoredRecipe list.

Dependencies: recipe_search.models, recipe_search.core.exceptions
System role: Score parsing, ordering and truncation for search results
"""

import math
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError as ModelValidationError

from recipe_search.core.exceptions import MalformedScore, QueryExecutionError, ValidationError
from recipe_search.core.vector_policy import ScoreOrder
from recipe_search.models.recipe import Recipe
from recipe_search.models.search import ScoredRecipe

SCORE_FIELD = "score"


def parse_score(raw: Any) -> float:
    """
    Parse a score returned by the store into a float.

    Scores may arrive as JSON numbers or as numeric strings. Booleans,
    non-numeric values and non-finite results are rejected.

    Raises:
        MalformedScore: If the value is not a finite number
    """
    if isinstance(raw, bool) or raw is None:
        raise MalformedScore(raw)
    try:
        score = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedScore(raw) from e
    if not math.isfinite(score):
        raise MalformedScore(raw)
    return score


def to_scored_recipe(row: dict[str, Any]) -> ScoredRecipe:
    """
    Split a query row into the stored recipe and its query-time score.

    Raises:
        QueryExecutionError: If the row lacks a usable id, name or embedding
        MalformedScore: If the score is not a finite number
    """
    fields = {key: value for key, value in row.items() if key != SCORE_FIELD}
    try:
        recipe = Recipe.model_validate(fields)
    except ModelValidationError as e:
        raise QueryExecutionError(
            f"Unexpected document shape in search results: {e.error_count()} invalid field(s)",
            details={
                "item_id": row.get("id"),
                "fields": sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]}),
            },
        ) from e
    return ScoredRecipe(recipe=recipe, score=parse_score(row.get(SCORE_FIELD)))


def rank_top_k(
    results: Iterable[ScoredRecipe],
    k: int,
    order: ScoreOrder = ScoreOrder.HIGHER_IS_BETTER,
) -> list[ScoredRecipe]:
    """
    Order results best-first and keep at most k of them.

    The sort is stable, so equal scores keep the order the store returned
    them in. Fewer than k results is not an error.

    Args:
        results: Scored recipes in store order
        k: Maximum number of results to keep
        order: Direction of the configured distance function

    Returns:
        list[ScoredRecipe]: min(k, len(results)) results, best first

    Raises:
        ValidationError: If k is less than 1
    """
    if k < 1:
        raise ValidationError(f"k must be at least 1, got {k}", field="k")
    ranked = sorted(
        results,
        key=lambda result: result.score,
        reverse=order is ScoreOrder.HIGHER_IS_BETTER,
    )
    return ranked[: min(k, len(ranked))]
