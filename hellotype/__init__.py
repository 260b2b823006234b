from .combinators import Any, Dict, Enum, IfExists, List, Tuple
from .context import is_strict, matching_context
from .decorator import checked
from .errors import (
    ArityError,
    MismatchError,
    RuleDefinitionError,
    StrictModeError,
    xerror,
)
from .expect import expect
from .matcher import validate
from .rules import Kind, Rule
from .schema import to_pydantic
from .type import Mode, Trace, TupleType, Type, compile_pattern

Number = Kind.NUMBER
Boolean = Kind.BOOLEAN
String = Kind.STRING
Function = Kind.FUNCTION
Array = Kind.ARRAY
Object = Kind.OBJECT
Symbol = Kind.SYMBOL

NaN = float("nan")

__all__ = [
    # Core
    "Type",
    "TupleType",
    "Mode",
    "Trace",
    "compile_pattern",
    "validate",
    # Kinds
    "Kind",
    "Number",
    "Boolean",
    "String",
    "Function",
    "Array",
    "Object",
    "Symbol",
    "NaN",
    # Combinators
    "Rule",
    "IfExists",
    "Any",
    "List",
    "Dict",
    "Tuple",
    "Enum",
    # Errors
    "MismatchError",
    "StrictModeError",
    "ArityError",
    "RuleDefinitionError",
    "xerror",
    # Configuration
    "matching_context",
    "is_strict",
    # Helpers
    "expect",
    "checked",
    "to_pydantic",
]
