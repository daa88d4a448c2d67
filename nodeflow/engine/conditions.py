# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Condition Evaluator

Field/operator/value predicates used by filter and condition nodes.

Operators:
- equals:       loose equality (numeric text equals the matching number)
- contains:     substring test on the text forms of both sides
- greaterThan:  numeric comparison
- lessThan:     numeric comparison

Unknown operators and non-numeric operands of ordering operators
evaluate to False rather than raising.
"""

from typing import Any, Callable, Dict, Optional

from .interpolation import format_value


def to_number(value: Any) -> Optional[float]:
    """Coerce a value to a number, or None when it has no numeric reading"""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return None
    return None


def _equals(value: Any, expected: Any) -> bool:
    if value == expected:
        return True
    if value is None or expected is None:
        return False
    if isinstance(value, (int, float)) or isinstance(expected, (int, float)):
        left, right = to_number(value), to_number(expected)
        return left is not None and right is not None and left == right
    return False


def _contains(value: Any, expected: Any) -> bool:
    return format_value(expected) in format_value(value)


def _greater_than(value: Any, expected: Any) -> bool:
    left, right = to_number(value), to_number(expected)
    return left is not None and right is not None and left > right


def _less_than(value: Any, expected: Any) -> bool:
    left, right = to_number(value), to_number(expected)
    return left is not None and right is not None and left < right


OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "equals": _equals,
    "contains": _contains,
    "greaterThan": _greater_than,
    "lessThan": _less_than,
}


def evaluate(value: Any, operator: str, expected: Any) -> bool:
    """
    Evaluate value <operator> expected.

    Examples:
        >>> evaluate(30, "greaterThan", 20)
        True
        >>> evaluate("72", "equals", 72)
        True
        >>> evaluate("hello world", "contains", "world")
        True
    """
    check = OPERATORS.get(operator)
    if check is None:
        return False
    return check(value, expected)


def field_value(data: Any, field: Optional[str]) -> Any:
    """Read a top-level field from a mapping (None for anything else)"""
    if field is None or not isinstance(data, dict):
        return None
    return data.get(field)
