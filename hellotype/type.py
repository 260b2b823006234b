"""
The Type class: declared patterns, compiled rules, and the assertion surface.
"""

from __future__ import annotations

import asyncio
import enum
import itertools
import logging
import typing
from typing import Any, Callable

from .context import strict_scope
from .errors import ArityError, MismatchError, xerror
from .lib.classify import is_array, is_constructor, is_nan, is_object, to_shallow_object
from .matcher import validate
from .rules import (
    BUILTIN_KINDS,
    COMPILED_RULES,
    AnyRule,
    CompiledRule,
    DictRule,
    InstanceRule,
    Kind,
    KindRule,
    ListRule,
    LiteralRule,
    NaNRule,
    TypeRule,
    tolerates_absence,
)

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


class Mode(enum.Enum):
    NONE = "none"
    STRICT = "strict"


def compile_pattern(pattern: Any) -> CompiledRule:
    """
    Compile an authored pattern into a rule the matcher understands.

    Conversion rules:
        Rule | Enum(...) | Any -> pass through
        Type -> TypeRule, matched in that Type's own mode
        Number, String, ... and str, bool, list, dict -> KindRule
        dict -> DictRule with every value compiled by compile_nested
        list -> ListRule with every item compiled by compile_nested
        float("nan") -> NaNRule
        other classes -> InstanceRule
        anything else -> LiteralRule
    """
    if isinstance(pattern, COMPILED_RULES):
        return pattern

    if isinstance(pattern, Type):
        return TypeRule(pattern)

    if isinstance(pattern, Kind):
        return KindRule(pattern)

    if pattern is typing.Any:
        return AnyRule()

    if is_object(pattern):
        return DictRule(to_shallow_object(pattern, compile_nested))

    if is_array(pattern):
        return ListRule(tuple(compile_nested(item) for item in pattern))

    if is_nan(pattern):
        return NaNRule()

    if is_constructor(pattern):
        if pattern in BUILTIN_KINDS:
            return KindRule(BUILTIN_KINDS[pattern])
        return InstanceRule(pattern)

    return LiteralRule(pattern)


def compile_nested(pattern: Any) -> CompiledRule:
    """
    Compile a pattern that sits inside another pattern.

    Plain dicts and lists become a Type of their own, so they match in loose
    mode whatever the mode of the enclosing Type.
    """
    if is_object(pattern) or is_array(pattern):
        return TypeRule(Type(pattern))
    return compile_pattern(pattern)


class Type:
    """
    A runtime type built from one or more patterns.

    Each pattern describes one positional argument of assert_(). Patterns are
    compiled once, at construction; matching never changes them.

    Usage:
        BookType = Type({
            "name": String,
            "price": Number,
            "tags": [String],
        })

        BookType.assert_({"name": "Hamlet", "price": 120.34, "tags": []})
        BookType.test({"name": "Hamlet"})  # False, price is missing
    """

    def __init__(self, *patterns: Any):
        self.id = next(_ids)
        self.mode = Mode.NONE
        self.patterns = patterns
        self.rules: tuple[CompiledRule, ...] = tuple(
            compile_pattern(pattern) for pattern in patterns
        )

    def __repr__(self) -> str:
        body = ", ".join(repr(rule) for rule in self.rules)
        suffix = ".strict" if self.mode is Mode.STRICT else ""
        return f"{type(self).__name__}({body}){suffix}"

    @property
    def is_strict(self) -> bool:
        return self.mode is Mode.STRICT

    def assert_(self, *args: Any) -> None:
        """
        Check args against the declared rules, one rule per argument.

        Raises:
            ArityError: If the number of args differs from the number of rules
            MismatchError: On the first argument that does not conform
        """
        error = self.catch(*args)
        if error is not None:
            raise error

    def catch(self, *args: Any) -> MismatchError | None:
        """Like assert_(), but return the mismatch instead of raising it."""
        error = self._arity_error(args)
        if error is None:
            with strict_scope(self.is_strict):
                for arg, rule in zip(args, self.rules):
                    error = validate(arg, rule)
                    if error is not None:
                        break

        if error is None:
            return None
        logger.debug("Type %s rejected arguments: %s", self.id, error)
        return xerror(error, args, self.rules)

    def test(self, *args: Any) -> bool:
        return self.catch(*args) is None

    meet = test

    def trace(self, *args: Any) -> Trace:
        """
        Defer the check to a later turn of the running event loop.

        Usage:
            error = await BookType.trace(book).with_(report)
        """
        return Trace(self, args)

    def clone(self) -> Type:
        """New Type with the same patterns, its own identity, and default mode."""
        return type(self)(*self.patterns)

    def with_strict_mode(self) -> Type:
        """Strict copy of this Type; self is left untouched."""
        return self.clone().set_strict_mode(True)

    def set_strict_mode(self, strict: bool = True) -> Type:
        """Switch this Type's mode in place and return it."""
        self.mode = Mode.STRICT if strict else Mode.NONE
        return self

    to_be_strict = set_strict_mode

    @property
    def strict(self) -> Type:
        return self.with_strict_mode()

    Strict = strict

    def _arity_error(self, args: tuple[Any, ...]) -> ArityError | None:
        if len(args) == len(self.rules):
            return None
        return ArityError(
            f"arguments length does not match type: expected {len(self.rules)}, "
            f"received {len(args)}",
            args,
            self.rules,
        )


class TupleType(Type):
    """
    Fixed-arity positional Type.

    Trailing arguments whose rules tolerate absence (IfExists) may be left out,
    except in strict mode where the arity must be exact.
    """

    def _arity_error(self, args: tuple[Any, ...]) -> ArityError | None:
        missing = self.rules[len(args):]
        if len(args) <= len(self.rules) and not self.is_strict:
            if all(tolerates_absence(rule) for rule in missing):
                return None
        return super()._arity_error(args)


class Trace:
    """A deferred check, resolved on a later turn of the event loop."""

    def __init__(self, type_: Type, args: tuple[Any, ...]):
        self.type = type_
        self.args = args

    async def with_(
        self, callback: Callable[[MismatchError, tuple[Any, ...], Type], Any] | None = None
    ) -> MismatchError | None:
        """
        Run the check after yielding once to the event loop.

        Args:
            callback: Called as callback(error, args, type) on mismatch

        Returns:
            The mismatch, or None when the args conform
        """
        await asyncio.sleep(0)
        error = self.type.catch(*self.args)
        if error is not None:
            logger.debug("Trace on type %s failed: %s", self.type.id, error)
            if callback is not None:
                callback(error, self.args, self.type)
        return error

    def __await__(self):
        return self.with_().__await__()
