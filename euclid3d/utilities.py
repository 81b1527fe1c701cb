"""Very general-purpose utilities"""

import functools
import logging
import math
from typing import Callable, NoReturn, Optional, ParamSpec, TypeVar

from expression import Result, curry_flip
from numpydoc_decorator import doc

from .exceptions import InvalidArgumentError

_A = TypeVar("_A")
_P = ParamSpec("_P")

_Exception = TypeVar("_Exception", bound=Exception)


# Courtesy of @Hugovdberg in Issues discussion on dbratti/Expression repo
@curry_flip(1)
def wrap_exception(
    fun: Callable[_P, _A],
    exc: type[_Exception] | tuple[type[_Exception], ...] = Exception,
) -> Callable[_P, Result[_A, _Exception]]:
    """Wrap a function that might raise an Exception in a Result monad

    Args:
        fun (Callable[P, a]):
            The function to be wrapped.
        exc (Union[Tuple[Type[Exception], ...], Type[Exception]], optional):
            The Exception types to be wrapped into the monad. Defaults to Exception.

    Returns:
        Callable[P, Result[a, Exception]]:
            The decorated function.

    Examples:
        >>> @wrap_exception(InvalidArgumentError)
        ... def build(start, end):
        ...     return Line3D(start, end)
        >>> t: Result[Line3D, InvalidArgumentError] = build(Point3D(), Point3D())
    """

    @functools.wraps(fun)
    def _wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, _Exception]:
        try:
            return Result[_A, _Exception].Ok(fun(*args, **kwargs))
        except exc as e:
            return Result[_A, _Exception].Error(e)

    return _wrapper


def fail_invalid_argument(message: str, *, logger: logging.Logger, log_message: Optional[str] = None) -> NoReturn:
    """Log at error level (the more specific log message if given) and then raise the message as an invalid argument."""
    logger.error(log_message or message)
    raise InvalidArgumentError(message)


@doc(
    summary="Emit a warning if the given value is NaN, passing the value through either way",
    parameters=dict(
        value="The number to check",
        logger="The logger on which to record the warning",
        message="Text of the warning",
    ),
    returns="The given value, untouched",
)
def warn_if_nan(value: float, logger: logging.Logger, message: str) -> float:
    if math.isnan(value):
        logger.warning(message)
    return value
