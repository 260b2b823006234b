"""
The @checked decorator for asserting a function's arguments and result.
"""

from functools import wraps
from typing import Any, Callable

from .type import Type, TupleType

_UNCHECKED = object()


def checked(*patterns: Any, returns: Any = _UNCHECKED) -> Callable:
    """
    Decorator that asserts positional arguments (and optionally the result).

    Arguments are matched as a Tuple, so trailing IfExists patterns may be
    left out by the caller. Keyword arguments are not checked.

    Usage:
        @checked(String, IfExists(Number), returns=String)
        def greet(name, times=1):
            return "hello " * times + name

    Args:
        *patterns: One pattern per positional argument
        returns: Pattern the return value must match

    Returns:
        Decorator producing a wrapper that raises MismatchError on bad input
        or output.
    """
    arguments = TupleType(*patterns)
    result_type = None if returns is _UNCHECKED else Type(returns)

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            arguments.assert_(*args)

            result = func(*args, **kwargs)

            if result_type is not None:
                result_type.assert_(result)
            return result

        return wrapper

    return decorator
