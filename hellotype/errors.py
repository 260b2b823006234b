"""
Mismatch errors for hellotype.

Every failed match produces a MismatchError. As the error travels up through
nested containers each level attaches a Frame, so the error ends up holding
the chain of (value, rule, key) contexts from the innermost failure outwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _NoKey:
    def __repr__(self) -> str:
        return "NO_KEY"


# Marks a frame that is not reached through a key or index.
NO_KEY: Any = _NoKey()


@dataclass(frozen=True, slots=True)
class Frame:
    """One level of match context: the value, the rule, and the key it sits at."""

    value: Any
    rule: Any
    key: Any = NO_KEY


class MismatchError(TypeError):
    """Raised when a value does not conform to a Type."""

    def __init__(self, message: str, value: Any = None, rule: Any = None):
        super().__init__(message)
        self.message = message
        self.frames: list[Frame] = [Frame(value, rule)]

    @property
    def value(self) -> Any:
        """The innermost offending value."""
        return self.frames[0].value

    @property
    def rule(self) -> Any:
        """The innermost offending rule."""
        return self.frames[0].rule

    @property
    def path(self) -> tuple[Any, ...]:
        """Keys and indexes from the outermost argument down to the failure."""
        return tuple(
            frame.key for frame in reversed(self.frames) if frame.key is not NO_KEY
        )

    def __str__(self) -> str:
        if not self.path:
            return self.message
        location = "".join(
            f"[{key}]" if isinstance(key, int) else f".{key}" for key in self.path
        )
        return f"{self.message} (at {location.lstrip('.')})"


class StrictModeError(MismatchError):
    """Extra array items or foreign object keys under strict mode."""


class ArityError(MismatchError):
    """Argument count does not equal the number of declared rules."""


class RuleDefinitionError(TypeError):
    """A custom rule was declared without a callable factory."""


def xerror(error: MismatchError, value: Any, rule: Any, key: Any = NO_KEY) -> MismatchError:
    """Attach an outer context frame to a mismatch and return it."""
    error.frames.append(Frame(value, rule, key))
    return error
