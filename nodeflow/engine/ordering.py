# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Graph Ordering

Execution order via topological sort (Kahn's algorithm).
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Sequence, Union

from .models import WorkflowNode, WorkflowConnection


@dataclass(frozen=True)
class InvalidGraph:
    """
    Ordering failed: the graph has a cycle, or a connection references a
    node that is not part of the workflow. The two cases are not told apart.
    """
    ordered: int
    total: int

    def __bool__(self) -> bool:
        return False


OrderResult = Union[List[str], InvalidGraph]


def topological_order(
    nodes: Sequence[WorkflowNode],
    connections: Sequence[WorkflowConnection]
) -> OrderResult:
    """
    Order node ids so every connection's source precedes its target.

    Nodes that become ready at the same time keep their declaration order.

    Returns the list of node ids, or InvalidGraph (never raises).
    """
    # Build adjacency list and in-degree count
    graph: Dict[str, List[str]] = {node.id: [] for node in nodes}
    in_degree: Dict[str, int] = {node.id: 0 for node in nodes}

    for conn in connections:
        if conn.source not in graph or conn.target not in graph:
            return InvalidGraph(ordered=0, total=len(nodes))
        graph[conn.source].append(conn.target)
        in_degree[conn.target] += 1

    # Seed with start nodes (no incoming edges), in declaration order
    queue = deque(node_id for node_id, degree in in_degree.items() if degree == 0)

    order: List[str] = []

    while queue:
        node_id = queue.popleft()
        order.append(node_id)

        # Reduce in-degree for neighbors
        for neighbor in graph.get(node_id, []):
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) != len(nodes):
        return InvalidGraph(ordered=len(order), total=len(nodes))

    return order
