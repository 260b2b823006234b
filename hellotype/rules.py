"""
Compiled rule variants for hellotype.

A pattern authored by the caller is compiled into exactly one of the variants
below. The matcher dispatches over this closed set.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from .type import Type

Factory = Callable[..., Any]


class Kind(enum.Enum):
    """Built-in value kinds, matched by classification rather than by class."""

    NUMBER = "Number"
    BOOLEAN = "Boolean"
    STRING = "String"
    FUNCTION = "Function"
    ARRAY = "Array"
    OBJECT = "Object"
    SYMBOL = "Symbol"

    def __repr__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Custom predicate rule.

    The factory is called as factory(value, key, container) and returns a
    falsy value to pass. A truthy return is the mismatch: an exception or a
    string becomes the message.

    Factories receive the live container and may mutate it. Nothing prevents
    this, so keep factories free of side effects.
    """

    factory: Factory
    optional: bool = False

    def if_exists(self) -> Rule:
        """Copy of this rule that tolerates its key being absent."""
        return replace(self, optional=True)

    def __repr__(self) -> str:
        name = getattr(self.factory, "__name__", None) or repr(self.factory)
        prefix = "IfExists" if self.optional else "Rule"
        return f"{prefix}({name})"


@dataclass(frozen=True, slots=True)
class NaNRule:
    def __repr__(self) -> str:
        return "NaN"


@dataclass(frozen=True, slots=True)
class KindRule:
    kind: Kind

    def __repr__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class ListRule:
    """Positional element rules for an array value."""

    items: tuple[CompiledRule, ...] = ()

    def __repr__(self) -> str:
        return f"[{', '.join(repr(item) for item in self.items)}]"


@dataclass(frozen=True, slots=True)
class DictRule:
    """Per-key rules for an object value."""

    fields: dict[Any, CompiledRule] = field(default_factory=dict)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {rule!r}" for key, rule in self.fields.items())
        return f"{{{body}}}"


@dataclass(frozen=True, slots=True)
class LiteralRule:
    value: Any

    def __repr__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class InstanceRule:
    cls: type

    def __repr__(self) -> str:
        return self.cls.__name__


@dataclass(frozen=True, slots=True)
class TypeRule:
    """A nested Type, matched in its own mode."""

    type_: Type

    def __repr__(self) -> str:
        return repr(self.type_)


@dataclass(frozen=True, slots=True)
class EnumRule:
    """Alternative rules: a value passes when any candidate matches."""

    candidates: tuple[CompiledRule, ...]

    def __repr__(self) -> str:
        return f"Enum({', '.join(repr(c) for c in self.candidates)})"


@dataclass(frozen=True, slots=True)
class AnyRule:
    def __repr__(self) -> str:
        return "Any"


CompiledRule = Union[
    Rule,
    NaNRule,
    KindRule,
    ListRule,
    DictRule,
    LiteralRule,
    InstanceRule,
    TypeRule,
    EnumRule,
    AnyRule,
]

COMPILED_RULES = (
    Rule,
    NaNRule,
    KindRule,
    ListRule,
    DictRule,
    LiteralRule,
    InstanceRule,
    TypeRule,
    EnumRule,
    AnyRule,
)

# Python classes that compile to a kind rule
BUILTIN_KINDS: dict[type, Kind] = {
    str: Kind.STRING,
    bool: Kind.BOOLEAN,
    list: Kind.ARRAY,
    dict: Kind.OBJECT,
}


def tolerates_absence(rule: CompiledRule) -> bool:
    """Whether a rule accepts its key or position being entirely absent."""
    match rule:
        case Rule(optional=optional):
            return optional
        case EnumRule(candidates=candidates):
            return any(tolerates_absence(c) for c in candidates)
    return False
