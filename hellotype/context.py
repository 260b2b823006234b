"""
Context manager for matching configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Strict mode forced by the caller for everything matched in a block
_forced_strict: ContextVar[bool] = ContextVar("forced_strict", default=False)

# Strict mode of the Type currently being matched
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if the match currently running uses strict mode."""
    return _strict_mode.get()


@contextmanager
def matching_context(*, strict: bool = False):
    """
    Context manager for matching configuration.

    Args:
        strict: If True, every Type asserted inside the block matches in
               strict mode: arrays must have exactly the declared length and
               objects exactly the declared keys.

    Example:
        from hellotype import Type, String, matching_context

        UserType = Type({"name": String})

        UserType.test({"name": "tomy", "age": 10})  # True

        with matching_context(strict=True):
            UserType.test({"name": "tomy", "age": 10})  # False
    """
    token = _forced_strict.set(strict)
    try:
        yield
    finally:
        _forced_strict.reset(token)


@contextmanager
def strict_scope(strict: bool):
    """Set the active mode for one Type's match, honoring matching_context."""
    token = _strict_mode.set(strict or _forced_strict.get())
    try:
        yield
    finally:
        _strict_mode.reset(token)
