"""
Vector policy vocabulary.

Enumerations for the Cosmos DB vector embedding and indexing policy values,
and the ranking direction implied by each distance function.

Dependencies: None (pure domain layer)
System role: Couples distance-function choice to sort direction
"""

from enum import Enum


class ScoreOrder(str, Enum):
    """Which end of the score range means "more similar"."""

    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"


class DistanceFunction(str, Enum):
    """Distance functions supported by VectorDistance."""

    COSINE = "cosine"
    DOT_PRODUCT = "dotproduct"
    EUCLIDEAN = "euclidean"

    @property
    def score_order(self) -> ScoreOrder:
        """Ranking direction for scores produced by this function."""
        if self is DistanceFunction.EUCLIDEAN:
            return ScoreOrder.LOWER_IS_BETTER
        return ScoreOrder.HIGHER_IS_BETTER


class VectorDataType(str, Enum):
    """Embedding element types accepted by the vector embedding policy."""

    FLOAT32 = "float32"
    FLOAT16 = "float16"
    INT8 = "int8"
    UINT8 = "uint8"


class VectorIndexType(str, Enum):
    """Vector index kinds."""

    FLAT = "flat"
    QUANTIZED_FLAT = "quantizedFlat"
    DISK_ANN = "diskANN"
