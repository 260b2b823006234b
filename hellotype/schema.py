"""
Pydantic interop for hellotype.

Provides to_pydantic(), building a model class from a Dict-shaped pattern.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Callable, Literal, Union
from typing import Optional as TypingOptional

from pydantic import (
    ConfigDict,
    Strict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    create_model,
)

from .combinators import PatternCheck
from .rules import (
    AnyRule,
    CompiledRule,
    DictRule,
    EnumRule,
    InstanceRule,
    Kind,
    KindRule,
    ListRule,
    LiteralRule,
    NaNRule,
    Rule,
    TypeRule,
    tolerates_absence,
)
from .type import Type

# Strictness is set per field: in a strict model config nested models would
# refuse plain dicts.
_CONFIG = ConfigDict(arbitrary_types_allowed=True)

_KIND_ANNOTATIONS: dict[Kind, Any] = {
    Kind.NUMBER: Union[StrictInt, StrictFloat],
    Kind.BOOLEAN: StrictBool,
    Kind.STRING: StrictStr,
    Kind.FUNCTION: Callable,
    Kind.ARRAY: Annotated[list, Strict()],
    Kind.OBJECT: Annotated[dict, Strict()],
    Kind.SYMBOL: Any,
}


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile a Dict-shaped Type (or plain dict pattern) to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: A Type with a single dict pattern, or the dict pattern itself

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": String,
            "email": IfExists(String),
        })
        user = User(name="Alice")
    """
    type_ = schema if isinstance(schema, Type) else Type(schema)
    if len(type_.rules) != 1 or not isinstance(type_.rules[0], DictRule):
        raise TypeError("Schema must be a single dict pattern")

    return _model_from_dict(name, type_.rules[0])


def _model_from_dict(name: str, rule: DictRule) -> type:
    fields: dict[str, Any] = {}

    for key, field_rule in rule.fields.items():
        if not isinstance(key, str):
            raise TypeError(f"Model field names must be strings, got {key!r}")
        annotation = _extract_annotation(field_rule, f"{name}_{key}")
        if tolerates_absence(field_rule):
            fields[key] = (TypingOptional[annotation], None)
        else:
            fields[key] = (annotation, ...)

    return create_model(name, __config__=_CONFIG, **fields)


def _extract_annotation(rule: CompiledRule, name: str) -> Any:
    """Extract the Pydantic annotation for a compiled rule."""
    match rule:
        case KindRule(kind=kind):
            return _KIND_ANNOTATIONS[kind]
        case NaNRule():
            return StrictFloat
        case LiteralRule(value=None):
            return type(None)
        case LiteralRule(value=value) if isinstance(value, (str, int, bytes, enum.Enum)):
            return Literal[value]
        case InstanceRule(cls=cls):
            return cls
        case DictRule():
            return _model_from_dict(name, rule)
        case ListRule(items=items) if items:
            item_types = tuple(
                _extract_annotation(item, f"{name}_{i}") for i, item in enumerate(items)
            )
            return Annotated[list[Union[item_types]], Strict()]  # type: ignore[valid-type]
        case ListRule():
            return Annotated[list[Any], Strict()]
        case EnumRule(candidates=candidates):
            return Union[
                tuple(
                    _extract_annotation(c, f"{name}_{i}")
                    for i, c in enumerate(candidates)
                )
            ]
        case TypeRule(type_=nested) if len(nested.rules) == 1:
            return _extract_annotation(nested.rules[0], name)
        case Rule(factory=PatternCheck(rule=inner)):
            return _extract_annotation(inner, name)
        case AnyRule():
            return Any

    return Any
