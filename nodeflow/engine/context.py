# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Execution Context

Tracks execution state for a single workflow run.
"""

from typing import Dict, Any, Optional
from datetime import datetime, timedelta, timezone
import uuid


def now_iso(hours: float = 0) -> str:
    """Current UTC time, shifted by hours, as an ISO-8601 string with millisecond precision"""
    moment = datetime.now(timezone.utc) + timedelta(hours=hours)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExecutionContext:
    """
    Execution context for a workflow run.

    Tracks:
    - Trigger data supplied by the caller
    - Node outputs, in execution order
    - Auxiliary variables (reserved, no executor reads them yet)

    Only the engine records outputs; node executors read.
    """

    def __init__(self, workflow_id: str, trigger_data: Any = None):
        self.execution_id = f"exec_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"
        self.workflow_id = workflow_id
        self.trigger_data = trigger_data

        self.node_outputs: Dict[str, Any] = {}  # node_id -> output, insertion = execution order
        self.variables: Dict[str, Any] = {}

    def record(self, node_id: str, output: Any) -> None:
        """Record a node's output"""
        self.node_outputs[node_id] = output

    def has_outputs(self) -> bool:
        return len(self.node_outputs) > 0

    def last_output(self) -> Any:
        """Most recently recorded output, regardless of graph edges"""
        if not self.node_outputs:
            return None
        return next(reversed(self.node_outputs.values()))

    def previous_output(self, current_node_id: Optional[str] = None) -> Any:
        """
        Output recorded immediately before current_node_id.

        Falls back to the last recorded output when current_node_id is
        omitted, not recorded, or is the first recorded node.
        """
        entries = list(self.node_outputs.items())
        if not entries:
            return None

        previous = entries[-1][1]
        if current_node_id and len(entries) > 1:
            ids = [node_id for node_id, _ in entries]
            if current_node_id in ids:
                index = ids.index(current_node_id)
                if index > 0:
                    previous = entries[index - 1][1]

        return previous
