"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "is_real_number"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]


def is_real_number(value: Any) -> bool:
    """Determine whether the given value may stand in as a real-valued coordinate."""
    # bool is an int subtype, but a truth value isn't a coordinate.
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))
