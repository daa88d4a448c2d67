# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Logic nodes - filter, transform, condition and AI.

Filter, transform, condition and AI read the most recently recorded output
in execution order, not the output of the node's incoming connection. With
a linear workflow the two coincide; with fan-in they do not.

Condition results are informational: the engine runs downstream nodes
whichever branch is reported.
"""

import json
from typing import Any, Dict

from nodeflow.connectors import Connectors
from nodeflow.engine.conditions import evaluate, field_value
from nodeflow.engine.context import ExecutionContext, now_iso
from nodeflow.engine.models import NodeType, WorkflowNode
from .registry import executors

LOGIC = NodeType.LOGIC.value


def _as_fields(value: Any) -> Dict[str, Any]:
    """
    Spread a value into a field mapping.

    Mappings are copied and sequences (strings included) become index-keyed
    fields. None, numbers and booleans contribute no fields.
    """
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, (list, tuple, str)):
        return {str(index): item for index, item in enumerate(value)}
    return {}


@executors.register(LOGIC, "filter")
async def execute_filter(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """
    Filter the last output by field/operator/value.

    A list is filtered item by item; any other value is tested as a whole.
    """
    config = node.config
    field, operator, expected = config.get("field"), config.get("operator"), config.get("value")

    if not context.has_outputs():
        return {"filtered": [], "matched": False}

    last_output = context.last_output()

    if isinstance(last_output, list):
        filtered = [
            item for item in last_output
            if evaluate(field_value(item, field), operator, expected)
        ]
        return {"filtered": filtered, "matched": len(filtered) > 0, "count": len(filtered)}

    matched = evaluate(field_value(last_output, field), operator, expected)
    return {"matched": matched, "data": last_output if matched else None}


@executors.register(LOGIC, "transform")
async def execute_transform(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """
    Mark a shallow copy of the last output as transformed.

    Non-mapping outputs are spread into fields first (see _as_fields).

    transformExpression is accepted in config but not evaluated yet.
    """
    if not context.has_outputs():
        return {}

    return {**_as_fields(context.last_output()), "transformed": True, "transformedAt": now_iso()}


@executors.register(LOGIC, "condition")
async def execute_condition(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config

    if not context.has_outputs():
        return {"condition": False, "branch": "false", "output": config.get("falseOutput")}

    value = field_value(context.last_output(), config.get("field"))
    condition = evaluate(value, config.get("operator"), config.get("value"))

    return {
        "condition": condition,
        "branch": "true" if condition else "false",
        "output": config.get("trueOutput") if condition else config.get("falseOutput"),
    }


@executors.register(LOGIC, "ai")
async def execute_ai(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """
    Ask the configured AI provider.

    The prompt is sent verbatim ({{...}} placeholders are not resolved);
    the last output is appended as JSON context.
    """
    config = node.config
    prompt = config.get("prompt") or ""

    full_prompt = prompt
    if context.has_outputs():
        context_data = json.dumps(context.last_output(), separators=(",", ":"), ensure_ascii=False, default=str)
        full_prompt = f"{prompt}\n\nContext data: {context_data}"

    return await connectors.ai.generate(
        full_prompt,
        provider=config.get("provider"),
        model=config.get("model"),
        mock_prompt=prompt,
    )
