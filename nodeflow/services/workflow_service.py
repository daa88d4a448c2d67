# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Service

Reads workflow definitions from a directory of JSON files and runs them.
Definitions are read-only here; authoring and storage belong to whatever
system writes the files.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from nodeflow.core.errors import NotFoundError, ValidationError
from nodeflow.core.logging import get_service_logger
from nodeflow.engine.executor import WorkflowEngine
from nodeflow.engine.models import ExecutionResult, RawWorkflow

logger = get_service_logger("workflow")


class WorkflowService:
    """
    Workflow source backed by <workflows_dir>/<workflow_id>.json.

    Responsibilities:
    - List and load workflow definitions
    - Run a stored workflow through the engine
    """

    def __init__(self, workflows_dir: Path, engine: WorkflowEngine):
        self.workflows_dir = workflows_dir
        self.workflows_dir.mkdir(parents=True, exist_ok=True)
        self.engine = engine

    def _path(self, workflow_id: str) -> Path:
        # Reject ids that would escape the workflows directory
        if not workflow_id or "/" in workflow_id or "\\" in workflow_id or workflow_id.startswith("."):
            raise ValidationError(f"Invalid workflow id: {workflow_id}", field="workflow_id")
        return self.workflows_dir / f"{workflow_id}.json"

    async def list_workflows(self) -> List[Dict[str, Any]]:
        """List all workflow definitions"""
        workflows = []

        for file in sorted(self.workflows_dir.glob("*.json")):
            try:
                workflow_data = json.loads(file.read_text())
                workflows.append({
                    "id": workflow_data.get("id"),
                    "name": workflow_data.get("name"),
                    "description": workflow_data.get("description"),
                    "isActive": workflow_data.get("isActive", True),
                    "node_count": len(workflow_data.get("nodes", [])),
                    "filename": file.name
                })
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Skipping invalid workflow file {file.name}: {e}")

        logger.info(f"Listed {len(workflows)} workflows")
        return workflows

    async def get_workflow(self, workflow_id: str) -> RawWorkflow:
        """Load a workflow definition"""
        file_path = self._path(workflow_id)

        if not file_path.exists():
            raise NotFoundError("Workflow", workflow_id)

        try:
            workflow = RawWorkflow.model_validate(json.loads(file_path.read_text()))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise ValidationError(f"Invalid workflow file for '{workflow_id}': {e}", field="workflow")

        logger.info(f"Retrieved workflow: {workflow_id}")
        return workflow

    async def run_workflow(self, workflow_id: str, trigger_data: Any = None) -> ExecutionResult:
        """
        Run a stored workflow.

        Raises NotFoundError for unknown ids and ValidationError for
        inactive workflows or malformed definitions.
        """
        workflow = await self.get_workflow(workflow_id)

        if not workflow.is_active:
            raise ValidationError("Workflow is not active", field="isActive")

        result = await self.engine.execute(workflow, trigger_data)
        logger.info(
            f"Workflow {workflow_id} finished: {'success' if result.success else 'failed'}",
            extra={"workflow_id": workflow_id, "executed_nodes": result.executed_nodes}
        )
        return result
