# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Action nodes - side effects (email, SMS, webhook, social, notification, sheet).

Templated fields are interpolated here, before the connector sees them.
"""

from typing import Any

from nodeflow.connectors import Connectors
from nodeflow.core.logging import get_engine_logger
from nodeflow.engine.context import ExecutionContext, now_iso
from nodeflow.engine.interpolation import interpolate
from nodeflow.engine.models import NodeType, WorkflowNode
from .registry import executors

logger = get_engine_logger("nodes.action")

ACTION = NodeType.ACTION.value

DEFAULT_EMAIL_BODY = "{{previous}}"
DEFAULT_EMAIL_SUBJECT = "Workflow Result"
DEFAULT_NOTIFICATION_TITLE = "Workflow Notification"


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


@executors.register(ACTION, "email")
async def execute_email(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """Send an email; an empty body sends the previous node's output"""
    config = node.config
    body = interpolate(_text_or(config.get("body"), DEFAULT_EMAIL_BODY), context)
    subject = interpolate(_text_or(config.get("subject"), DEFAULT_EMAIL_SUBJECT), context)

    return await connectors.email.send(
        config.get("to"),
        subject,
        body,
        sender=config.get("from"),
    )


@executors.register(ACTION, "sms")
async def execute_sms(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    return await connectors.sms.send(config.get("to"), config.get("message"))


@executors.register(ACTION, "webhook")
async def execute_webhook(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """POST every output recorded so far"""
    config = node.config
    payload = {
        "workflowId": context.workflow_id,
        "timestamp": now_iso(),
        "data": list(context.node_outputs.values()),
    }

    return await connectors.webhook.send(
        config.get("url"),
        payload,
        method=config.get("method") or "POST",
        headers=config.get("headers"),
    )


@executors.register(ACTION, "social")
async def execute_social(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    message = interpolate(config.get("message") or config.get("content") or "", context)
    return await connectors.social.post(config.get("platform") or "twitter", message)


@executors.register(ACTION, "notification")
async def execute_notification(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    """In-app notification: written to the log, no external delivery"""
    config = node.config
    title = config.get("title") or DEFAULT_NOTIFICATION_TITLE
    message = interpolate(config.get("message") or "", context)

    logger.info(f"[NOTIFICATION] {title}: {message}", extra={
        "workflow_id": context.workflow_id,
        "node_id": node.id,
    })

    return {"success": True, "title": title, "message": message, "timestamp": now_iso()}


@executors.register(ACTION, "sheet")
async def execute_sheet(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    values = [interpolate(str(value), context) for value in config.get("values") or []]

    return await connectors.sheets.write(
        config.get("spreadsheetId"),
        config.get("range"),
        values,
        action=config.get("action") or "append",
    )
