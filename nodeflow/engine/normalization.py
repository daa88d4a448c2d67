# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Normalization

Turns workflow source records into the entities the engine runs on.
Every node's config is parsed up front: one malformed config rejects the
whole workflow before any node runs, even if that node would never be
reached.
"""

import json
from typing import Any, Dict, Union

from pydantic import ValidationError as PydanticValidationError

from .models import (
    Position,
    RawWorkflow,
    RawWorkflowConnection,
    RawWorkflowNode,
    Workflow,
    WorkflowConnection,
    WorkflowNode,
)
from .exceptions import WorkflowValidationError


WorkflowInput = Union[Workflow, RawWorkflow, Dict[str, Any]]


def parse_node_config(node: RawWorkflowNode) -> Dict[str, Any]:
    """Parse a node's config into a mapping"""
    raw = node.config
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return dict(raw)

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise WorkflowValidationError(
            f"Invalid config for node '{node.id}': {e}",
            field=f"nodes[{node.id}].config",
            node_id=node.id
        )

    if not isinstance(parsed, dict):
        raise WorkflowValidationError(
            f"Invalid config for node '{node.id}': expected an object, got {type(parsed).__name__}",
            field=f"nodes[{node.id}].config",
            node_id=node.id
        )

    return parsed


def normalize_node(node: RawWorkflowNode) -> WorkflowNode:
    return WorkflowNode(
        id=node.id,
        type=node.type,
        sub_type=node.sub_type,
        label=node.label or None,
        config=parse_node_config(node),
        position=Position(x=node.position_x, y=node.position_y),
    )


def normalize_connection(conn: RawWorkflowConnection) -> WorkflowConnection:
    return WorkflowConnection(
        id=conn.id,
        source=conn.source_node_id,
        target=conn.target_node_id,
        source_handle=conn.source_handle or "output",
        target_handle=conn.target_handle or "input",
    )


def load_workflow(workflow: WorkflowInput) -> Workflow:
    """
    Normalize any accepted workflow shape.

    Accepts an already-normalized Workflow, a RawWorkflow, or a dict in
    raw record form.

    Raises WorkflowValidationError if records or any node config are malformed.
    """
    if isinstance(workflow, Workflow):
        return workflow

    if isinstance(workflow, dict):
        try:
            workflow = RawWorkflow.model_validate(workflow)
        except PydanticValidationError as e:
            raise WorkflowValidationError(f"Invalid workflow definition: {e}")

    return Workflow(
        id=workflow.id,
        name=workflow.name,
        nodes=[normalize_node(node) for node in workflow.nodes],
        connections=[normalize_connection(conn) for conn in workflow.connections],
    )
