# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Builders for workflow definitions used across tests.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from nodeflow.engine.context import ExecutionContext
from nodeflow.engine.models import WorkflowConnection, WorkflowNode


def make_node(node_id: str, node_type: str = "trigger", sub_type: str = "manual",
              config: Optional[Dict[str, Any]] = None) -> WorkflowNode:
    """Normalized node"""
    return WorkflowNode(id=node_id, type=node_type, sub_type=sub_type, config=config or {})


def make_edges(*pairs: Tuple[str, str]) -> List[WorkflowConnection]:
    """Normalized connections from (source, target) pairs"""
    return [
        WorkflowConnection(id=f"c{i}", source=source, target=target)
        for i, (source, target) in enumerate(pairs)
    ]


def raw_node(node_id: str, node_type: str, sub_type: str,
             config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Node record in workflow-source form (config as JSON text)"""
    return {
        "id": node_id,
        "type": node_type,
        "subType": sub_type,
        "config": json.dumps(config or {}),
        "positionX": 0,
        "positionY": 0,
    }


def raw_edge(source: str, target: str) -> Dict[str, Any]:
    return {"id": f"{source}->{target}", "sourceNodeId": source, "targetNodeId": target}


def raw_workflow(nodes: List[Dict[str, Any]], edges: List[Dict[str, Any]] = None,
                 workflow_id: str = "wf-test", **extra: Any) -> Dict[str, Any]:
    return {"id": workflow_id, "name": "Test", "nodes": nodes, "connections": edges or [], **extra}


def context_with(outputs: Dict[str, Any], trigger_data: Any = None,
                 workflow_id: str = "wf-test") -> ExecutionContext:
    """Context with outputs recorded in the given order"""
    context = ExecutionContext(workflow_id, trigger_data)
    for node_id, output in outputs.items():
        context.record(node_id, output)
    return context
