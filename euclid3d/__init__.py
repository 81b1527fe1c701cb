"""Small 3D geometry value types: points, lines, and cubes"""

from typing import *

from expression import Result, result

__all__ = [
    "EQUALITY_TOLERANCE",
    "PARALLEL_TOLERANCE",
    "unsafe_extract_result",
    ]


# Absolute, per-coordinate tolerance for point equality
EQUALITY_TOLERANCE = 1e-9
# Upper bound on the norm of the cross product of two directions considered parallel
PARALLEL_TOLERANCE = 1e-9

_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")
