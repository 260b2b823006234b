"""
Expectation helper: expect(value).to_match(SomeType).
"""

from typing import Any

from .type import Type


class Expectation:
    """Values waiting to be matched against a Type."""

    def __init__(self, *values: Any):
        self.values = values

    def __repr__(self) -> str:
        return f"expect({', '.join(repr(v) for v in self.values)})"

    def to_match(self, type_or_pattern: Any) -> None:
        """
        Assert the values against a Type, or against a bare pattern.

        Raises:
            MismatchError: If the values do not conform
        """
        if not isinstance(type_or_pattern, Type):
            type_or_pattern = Type(type_or_pattern)
        type_or_pattern.assert_(*self.values)


def expect(*values: Any) -> Expectation:
    """
    Usage:
        expect({"name": "tomy"}).to_match(UserType)
        expect("tomy", 10).to_match(Tuple(String, Number))
    """
    return Expectation(*values)
