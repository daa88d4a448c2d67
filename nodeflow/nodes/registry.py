# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Node executor registry.

Maps (type, subType) to the coroutine that runs that kind of node. Adding a
node kind means registering one function:

    @executors.register("data", "weather")
    async def execute_weather(node, context, connectors):
        ...
"""

from typing import Any, Awaitable, Callable, Dict, Tuple

from nodeflow.connectors import Connectors
from nodeflow.engine.context import ExecutionContext
from nodeflow.engine.exceptions import UnknownNodeTypeError
from nodeflow.engine.models import WorkflowNode

NodeExecutor = Callable[[WorkflowNode, ExecutionContext, Connectors], Awaitable[Any]]


class ExecutorRegistry:
    """Executor lookup keyed by (type, subType)"""

    def __init__(self):
        self._executors: Dict[Tuple[str, str], NodeExecutor] = {}

    def register(self, node_type: str, sub_type: str) -> Callable[[NodeExecutor], NodeExecutor]:
        """Decorator registering an executor for (node_type, sub_type)"""
        def decorator(func: NodeExecutor) -> NodeExecutor:
            self.add(node_type, sub_type, func)
            return func
        return decorator

    def add(self, node_type: str, sub_type: str, func: NodeExecutor) -> None:
        self._executors[(str(node_type), str(sub_type))] = func

    def get(self, node_type: str, sub_type: str) -> NodeExecutor:
        """
        Resolve the executor for a node kind.

        Raises UnknownNodeTypeError naming the category when it is known but
        the subtype is not, or naming the type otherwise.
        """
        func = self._executors.get((node_type, sub_type))
        if func is not None:
            return func
        if any(registered_type == node_type for registered_type, _ in self._executors):
            raise UnknownNodeTypeError(node_type, sub_type)
        raise UnknownNodeTypeError(node_type)

    def copy(self) -> "ExecutorRegistry":
        clone = ExecutorRegistry()
        clone._executors = dict(self._executors)
        return clone

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._executors


# Built-in executors register themselves here on import of nodeflow.nodes
executors = ExecutorRegistry()
