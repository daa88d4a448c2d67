# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Trigger nodes - workflow entry points.

Triggers never schedule or listen themselves; the caller has already
decided to run the workflow and passes whatever trigger data it has.
"""

from typing import Any

from nodeflow.connectors import Connectors
from nodeflow.engine.context import ExecutionContext, now_iso
from nodeflow.engine.models import NodeType, WorkflowNode
from .registry import executors

TRIGGER = NodeType.TRIGGER.value


def _triggered() -> dict:
    return {"triggered": True, "timestamp": now_iso()}


@executors.register(TRIGGER, "manual")
async def execute_manual(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """Pass trigger data through, or a bare triggered marker"""
    if context.trigger_data is not None:
        return context.trigger_data
    return _triggered()


@executors.register(TRIGGER, "webhook")
async def execute_webhook(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """Webhook payload arrives as trigger data; same shape as manual"""
    return await execute_manual(node, context, connectors)


@executors.register(TRIGGER, "schedule")
async def execute_schedule(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    output = _triggered()
    output["schedule"] = node.config.get("schedule")
    return output
