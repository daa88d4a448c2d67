# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Executor

Sequential execution in topological order. Nodes run one at a time even
when independent, because {{previous}} and the logic nodes address "the
last recorded output" and assume a single linear history.
"""

from typing import Any, Dict, List, Optional

from nodeflow.connectors import Connectors
from nodeflow.core.logging import get_engine_logger, log_event
from nodeflow.nodes import ExecutorRegistry, executors as default_executors

from .context import ExecutionContext
from .models import ExecutionResult, WorkflowNode
from .normalization import WorkflowInput, load_workflow
from .ordering import InvalidGraph, topological_order

logger = get_engine_logger("executor")

INVALID_GRAPH_ERROR = "Workflow contains cycles or invalid connections"


def get_label(node: WorkflowNode) -> str:
    """Human-readable node label"""
    if node.label:
        return f"{node.label} ({node.type}/{node.sub_type})"
    return f"{node.id} ({node.type}/{node.sub_type})"


class WorkflowEngine:
    """
    Runs workflows.

    One call to execute() is one run: a fresh ExecutionContext is created
    and dropped at the end, so concurrent runs never share state. The
    engine does not serialize runs of the same workflow.
    """

    def __init__(self, connectors: Connectors, registry: Optional[ExecutorRegistry] = None):
        self.connectors = connectors
        self.registry = registry if registry is not None else default_executors

    async def execute(self, workflow: WorkflowInput, trigger_data: Any = None) -> ExecutionResult:
        """
        Execute a workflow once.

        Args:
            workflow: Workflow, RawWorkflow or raw dict definition
            trigger_data: Optional data supplied by whatever triggered the run

        Returns:
            ExecutionResult (success, error, outputs, executed_nodes)

        Raises:
            WorkflowValidationError: the definition or any node config is
                malformed; nothing has run
        """
        definition = load_workflow(workflow)

        order = topological_order(definition.nodes, definition.connections)
        if isinstance(order, InvalidGraph):
            log_event(logger, "Workflow graph rejected", level="WARNING",
                      workflow_id=definition.id, ordered=order.ordered, total=order.total)
            return ExecutionResult(
                success=False,
                error=INVALID_GRAPH_ERROR,
                outputs={},
                executed_nodes=[],
            )

        context = ExecutionContext(definition.id, trigger_data)
        log_event(logger, f"Starting workflow: {definition.name or definition.id}",
                  workflow_id=definition.id, execution_id=context.execution_id,
                  execution_order=order)

        nodes_by_id: Dict[str, WorkflowNode] = {node.id: node for node in definition.nodes}
        outputs: Dict[str, Any] = {}
        executed: List[str] = []

        try:
            for node_id in order:
                node = nodes_by_id[node_id]
                output = await self._execute_node(node, context)

                context.record(node_id, output)
                outputs[node_id] = output
                executed.append(node_id)

        except Exception as e:
            message = str(e) or type(e).__name__
            log_event(logger, f"Workflow failed: {message}", level="ERROR",
                      workflow_id=definition.id, execution_id=context.execution_id,
                      executed_nodes=executed)
            return ExecutionResult(
                success=False,
                error=message,
                outputs=outputs,
                executed_nodes=executed,
            )

        log_event(logger, "Workflow completed",
                  workflow_id=definition.id, execution_id=context.execution_id,
                  executed_nodes=executed)

        return ExecutionResult(success=True, outputs=outputs, executed_nodes=executed)

    async def _execute_node(self, node: WorkflowNode, context: ExecutionContext) -> Any:
        """Dispatch a node to its registered executor"""
        log_event(logger, f"Executing node: {get_label(node)}", level="DEBUG",
                  workflow_id=context.workflow_id, node_id=node.id,
                  node_type=node.type, sub_type=node.sub_type)

        try:
            executor = self.registry.get(node.type, node.sub_type)
            result = await executor(node, context, self.connectors)
        except Exception as e:
            log_event(logger, f"Node {node.id} failed: {e}", level="ERROR",
                      workflow_id=context.workflow_id, node_id=node.id,
                      node_type=node.type, sub_type=node.sub_type)
            raise

        log_event(logger, f"Node {node.id} completed", level="DEBUG",
                  workflow_id=context.workflow_id, node_id=node.id)
        return result
