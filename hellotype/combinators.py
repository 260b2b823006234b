"""
Factory functions for building composite patterns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any as AnyValue

from .errors import MismatchError
from .lib.classify import is_array, is_object, typename
from .matcher import validate
from .rules import AnyRule, CompiledRule, EnumRule, Rule
from .type import Type, TupleType, compile_nested

Any = AnyRule()


@dataclass(frozen=True, slots=True)
class PatternCheck:
    """Rule factory that matches a compiled pattern through the matcher."""

    rule: CompiledRule

    def __call__(
        self, value: AnyValue, key: AnyValue = None, container: AnyValue = None
    ) -> MismatchError | None:
        return validate(value, self.rule, key, container)

    def __repr__(self) -> str:
        return repr(self.rule)


def List(pattern: AnyValue) -> Type:
    """
    Type matching an array.

    Usage:
        List([String, Number])   # positional items, extras match either
        List(BookType)           # same as List([BookType])
    """
    if not is_array(pattern):
        pattern = [pattern]
    return Type(pattern)


def Dict(pattern: dict) -> Type:
    """
    Type matching an object.

    Usage:
        Dict({"name": String, "age": IfExists(Number)})
    """
    if not is_object(pattern):
        raise TypeError(f"Dict() requires a dict pattern, got {typename(pattern)}")
    return Type(pattern)


def Tuple(*patterns: AnyValue) -> TupleType:
    """
    Type matching a fixed set of positional arguments.

    Usage:
        Point = Tuple(Number, Number, IfExists(Number))
        Point.assert_(1, 2)         # ok, the third is optional
        Point.strict.assert_(1, 2)  # ArityError
    """
    return TupleType(*patterns)


def Enum(*patterns: AnyValue) -> EnumRule:
    """
    Rule passing when the value matches any one of the patterns.

    Candidates are tried in order; on failure the last candidate's mismatch
    is reported.

    Usage:
        Enum(String, Number)
        Enum("draft", "published")
    """
    if not patterns:
        raise TypeError("Enum() requires at least one pattern")
    return EnumRule(tuple(compile_nested(pattern) for pattern in patterns))


def IfExists(pattern: AnyValue) -> Rule:
    """
    Rule tolerating the complete absence of its key or trailing argument.

    When the key is present the value must match the pattern. A key present
    with None is not absent.

    Usage:
        Type({"name": String, "age": IfExists(Number)})
    """
    if isinstance(pattern, Rule):
        return pattern.if_exists()
    return Rule(PatternCheck(compile_nested(pattern)), optional=True)
