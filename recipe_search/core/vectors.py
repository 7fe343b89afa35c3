"""
Embedding validation.

Checks vectors against the configured embedding policy before they are
written or used as a query, and rounds query vectors to float32 precision.

Dependencies: None (pure domain layer)
System role: Client-side enforcement of embedding dimension and element type
"""

import math
import struct
from collections.abc import Sequence

from recipe_search.core.exceptions import ValidationError
from recipe_search.core.vector_policy import VectorDataType

_FLOAT32_MAX = 3.4028234663852886e38
_FLOAT16_MAX = 65504.0
_INTEGER_RANGES = {
    VectorDataType.INT8: (-128, 127),
    VectorDataType.UINT8: (0, 255),
}


def validate_embedding(
    vector: Sequence[float],
    dimensions: int,
    data_type: VectorDataType = VectorDataType.FLOAT32,
    item_id: str | None = None,
) -> None:
    """
    Validate a vector against the embedding policy.

    Args:
        vector: Embedding values
        dimensions: Required length
        data_type: Required element type
        item_id: Id of the owning recipe, for error context

    Raises:
        ValidationError: On wrong length, non-numeric, non-finite or
            out-of-range elements
    """
    if len(vector) != dimensions:
        raise ValidationError(
            f"Embedding has {len(vector)} dimensions, expected {dimensions}",
            item_id=item_id,
            field="embedding",
        )

    for position, value in enumerate(vector):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"Embedding element {position} is not a number",
                item_id=item_id,
                field="embedding",
            )
        if not math.isfinite(value):
            raise ValidationError(
                f"Embedding element {position} is not finite",
                item_id=item_id,
                field="embedding",
            )
        if data_type in _INTEGER_RANGES:
            low, high = _INTEGER_RANGES[data_type]
            if value != int(value) or not low <= value <= high:
                raise ValidationError(
                    f"Embedding element {position} is not a valid {data_type.value}",
                    item_id=item_id,
                    field="embedding",
                )
        else:
            limit = _FLOAT16_MAX if data_type is VectorDataType.FLOAT16 else _FLOAT32_MAX
            if abs(value) > limit:
                raise ValidationError(
                    f"Embedding element {position} overflows {data_type.value}",
                    item_id=item_id,
                    field="embedding",
                )


def to_float32(vector: Sequence[float]) -> list[float]:
    """Round each element to the nearest float32 value."""
    return [struct.unpack("f", struct.pack("f", value))[0] for value in vector]
