# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Variable Interpolation

Substitutes {{...}} placeholders in node configuration strings with data
recorded in the execution context.

Supported references, applied in this order:
- {{previous}} / {{previous.path.to.field}}  output of the preceding node
- {{trigger}}                                 trigger data of the run
- {{nodeId}} / {{nodeId.path.to.field}}       output of a specific node

Paths are literal key lookups split on ".", so keys that themselves
contain dots cannot be addressed. Unknown placeholders are left as-is.
"""

import json
import re
from typing import Any, Optional

from .context import ExecutionContext


PREVIOUS_PATTERN = re.compile(r"\{\{previous(?:\.([^}]+))?\}\}")
TRIGGER_PATTERN = re.compile(r"\{\{trigger\}\}")


def get_nested_value(obj: Any, path: str) -> Any:
    """
    Get nested value using dot notation.

    Lists are indexed by numeric segments ("items.0.name").
    Returns None as soon as a segment cannot be followed.
    """
    current = obj
    for key in path.split("."):
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, (list, tuple)) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            return None
    return current


def format_value(value: Any) -> str:
    """Render a resolved value as text"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def _node_pattern(node_id: str) -> "re.Pattern[str]":
    return re.compile(r"\{\{" + re.escape(node_id) + r"(?:\.([^}]+))?\}\}")


def _substitute(pattern: "re.Pattern[str]", text: str, value: Any) -> str:
    def replace(match: "re.Match[str]") -> str:
        path = match.group(1) if pattern.groups else None
        if not path:
            return format_value(value)
        return format_value(get_nested_value(value, path))

    return pattern.sub(replace, text)


def interpolate(template: str, context: ExecutionContext, current_node_id: Optional[str] = None) -> str:
    """
    Resolve {{...}} placeholders in template.

    Args:
        template: Text possibly containing placeholders
        context: Execution context of the current run
        current_node_id: Node whose predecessor {{previous}} refers to

    Returns:
        Interpolated text
    """
    if not isinstance(template, str) or "{{" not in template:
        return template

    result = template

    if context.has_outputs():
        result = _substitute(PREVIOUS_PATTERN, result, context.previous_output(current_node_id))

    if context.trigger_data is not None:
        result = _substitute(TRIGGER_PATTERN, result, context.trigger_data)

    for node_id, output in context.node_outputs.items():
        result = _substitute(_node_pattern(node_id), result, output)

    return result
