"""
Recursive matcher for hellotype.

validate() decides whether one value conforms to one compiled rule. It
returns None on success and a MismatchError (not raised) on failure, so that
containers can attach their own context before handing the error upwards.
"""

from __future__ import annotations

import logging
from typing import Any

from .context import is_strict
from .errors import MismatchError, RuleDefinitionError, StrictModeError, xerror
from .lib.classify import (
    in_object,
    is_array,
    is_boolean,
    is_function,
    is_nan,
    is_number,
    is_object,
    is_string,
    is_symbol,
    typename,
)
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

logger = logging.getLogger(__name__)

_KIND_CHECKS = {
    Kind.NUMBER: is_number,
    Kind.BOOLEAN: is_boolean,
    Kind.STRING: is_string,
    Kind.FUNCTION: is_function,
    Kind.ARRAY: is_array,
    Kind.OBJECT: is_object,
    Kind.SYMBOL: is_symbol,
}


def validate(
    value: Any, rule: CompiledRule, key: Any = None, container: Any = None
) -> MismatchError | None:
    """
    Match a value against a compiled rule.

    Args:
        value: The value to check
        rule: A compiled rule (see hellotype.rules)
        key: Key or index the value sits at, passed to custom rule factories
        container: The dict or list holding the value, passed to factories

    Returns:
        None if the value conforms, otherwise the MismatchError

    Raises:
        RuleDefinitionError: If a custom Rule has no callable factory
    """
    match rule:
        case Rule():
            return _validate_rule(value, rule, key, container)

        case NaNRule():
            if is_nan(value):
                return None
            return MismatchError(f"{typename(value)} does not match NaN", value, rule)

        case KindRule(kind=kind):
            if _KIND_CHECKS[kind](value):
                return None
            return MismatchError(
                f"{typename(value)} does not match {kind.value}", value, rule
            )

        case ListRule():
            return _validate_list(value, rule)

        case DictRule():
            return _validate_dict(value, rule)

        case LiteralRule(value=expected):
            if _same_literal(value, expected):
                return None
            return MismatchError(
                f"{typename(value)} does not match {expected!r}", value, rule
            )

        case InstanceRule(cls=cls):
            if isinstance(value, cls):
                return None
            return MismatchError(
                f"{typename(value)} is not an instance of {cls.__name__}", value, rule
            )

        case TypeRule(type_=nested):
            error = nested.catch(value)
            if error is None:
                return None
            return xerror(error, value, rule)

        case EnumRule():
            return _validate_enum(value, rule, key, container)

        case AnyRule():
            return None

    raise TypeError(
        f"Cannot match against {type(rule).__name__}; compile the pattern with Type first"
    )


def _validate_rule(
    value: Any, rule: Rule, key: Any, container: Any
) -> MismatchError | None:
    factory = rule.factory
    if not callable(factory):
        raise RuleDefinitionError(
            f"Rule should receive a function, got {typename(factory)}"
        )

    try:
        outcome = factory(value, key, container)
    except RuleDefinitionError:
        raise
    except MismatchError as error:
        return xerror(error, value, rule)
    except Exception as e:
        logger.debug("Rule %r raised while checking %r", rule, value, exc_info=True)
        error = MismatchError(f"{rule!r} raised {e!r}", value, rule)
        error.__cause__ = e
        return error

    if not outcome:
        return None
    if isinstance(outcome, MismatchError):
        return xerror(outcome, value, rule)
    if isinstance(outcome, BaseException):
        message = str(outcome) or repr(outcome)
    elif isinstance(outcome, str):
        message = outcome
    else:
        message = f"{typename(value)} does not pass {rule!r}"
    return MismatchError(message, value, rule)


def _validate_list(value: Any, rule: ListRule) -> MismatchError | None:
    if not is_array(value):
        return MismatchError(f"{typename(value)} does not match Array", value, rule)

    rules = rule.items
    rule_len = len(rules)
    arg_len = len(value)

    if is_strict() and rule_len != arg_len:
        return StrictModeError(
            f"type requires array with {rule_len} items in strict mode, "
            f"but received {arg_len}",
            value,
            rule,
        )

    # Items beyond the declared rules must match any one of them
    if arg_len > rule_len:
        if rule_len > 1:
            overflow: CompiledRule = EnumRule(rules)
        elif rule_len == 1:
            overflow = rules[0]
        else:
            overflow = AnyRule()
        rules = rules + (overflow,) * (arg_len - rule_len)

    for index, (item, item_rule) in enumerate(zip(value, rules)):
        error = validate(item, item_rule, index, value)
        if error is not None:
            return xerror(error, value, rule, index)

    return None


def _validate_dict(value: Any, rule: DictRule) -> MismatchError | None:
    if not is_object(value):
        return MismatchError(f"{typename(value)} does not match Object", value, rule)

    strict = is_strict()
    rule_keys = sorted(rule.fields, key=str)

    if strict:
        for arg_key in sorted(value, key=str):
            if arg_key not in rule.fields:
                allowed = '","'.join(str(k) for k in rule_keys)
                return StrictModeError(
                    f'"{arg_key}" should not be in object, '
                    f'only "{allowed}" allowed in strict mode',
                    value,
                    rule,
                )

    for rule_key in rule_keys:
        field_rule = rule.fields[rule_key]
        if in_object(rule_key, value):
            error = validate(value[rule_key], field_rule, rule_key, value)
        else:
            error = _validate_absent(value, rule_key, field_rule, rule_keys, strict)
        if error is not None:
            return xerror(error, value, rule, rule_key)

    return None


def _validate_absent(
    value: dict,
    rule_key: Any,
    field_rule: CompiledRule,
    rule_keys: list[Any],
    strict: bool,
) -> MismatchError | None:
    """Decide a declared key that is missing from the object."""
    if not strict and tolerates_absence(field_rule):
        return None

    # A required factory sees the absence as None and may fill the key in
    if isinstance(field_rule, Rule) and not field_rule.optional:
        error = validate(None, field_rule, rule_key, value)
        if error is not None:
            return error
        if in_object(rule_key, value):
            return None

    needs = ",".join(str(k) for k in rule_keys)
    return MismatchError(
        f'"{rule_key}" is not in object, needs {needs}', None, field_rule
    )


def _validate_enum(
    value: Any, rule: EnumRule, key: Any, container: Any
) -> MismatchError | None:
    error = None
    for candidate in rule.candidates:
        error = validate(value, candidate, key, container)
        if error is None:
            return None

    if error is None:
        return MismatchError(f"{typename(value)} does not match empty Enum", value, rule)
    # Only the last candidate's failure is reported
    return xerror(error, value, rule)


def _same_literal(value: Any, expected: Any) -> bool:
    if value is expected:
        return True
    if is_number(value) and is_number(expected):
        return bool(value == expected)
    return type(value) is type(expected) and bool(value == expected)
