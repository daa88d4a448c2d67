# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow API Routes

Listing and execution of workflows.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from nodeflow.core.dependencies import get_workflow_engine, get_workflow_service
from nodeflow.core.errors import NotFoundError, ValidationError, sanitize_error_for_user
from nodeflow.core.logging import get_api_logger
from nodeflow.engine.executor import WorkflowEngine
from nodeflow.engine.models import ExecuteWorkflowRequest, ExecutionResult, TriggerRequest
from nodeflow.services.workflow_service import WorkflowService

router = APIRouter(prefix="/workflows", tags=["workflows"])
logger = get_api_logger()


@router.get("")
async def list_workflows(
    service: WorkflowService = Depends(get_workflow_service)
) -> List[Dict[str, Any]]:
    """List stored workflows"""
    return await service.list_workflows()


@router.post("/execute", response_model=ExecutionResult)
async def execute_workflow(
    request: ExecuteWorkflowRequest,
    engine: WorkflowEngine = Depends(get_workflow_engine)
) -> ExecutionResult:
    """Execute an inline workflow definition"""
    try:
        return await engine.execute(request.workflow, request.trigger_data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Workflow execution failed: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to execute workflow: {sanitize_error_for_user(e)}")


@router.get("/{workflow_id}")
async def get_workflow(
    workflow_id: str,
    service: WorkflowService = Depends(get_workflow_service)
) -> Dict[str, Any]:
    """Get a stored workflow definition"""
    try:
        workflow = await service.get_workflow(workflow_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return workflow.model_dump(by_alias=True)


@router.post("/{workflow_id}/execute", response_model=ExecutionResult)
async def execute_stored_workflow(
    workflow_id: str,
    request: Optional[TriggerRequest] = None,
    service: WorkflowService = Depends(get_workflow_service)
) -> ExecutionResult:
    """Execute a stored workflow by id"""
    trigger_data = request.trigger_data if request else None
    try:
        return await service.run_workflow(workflow_id, trigger_data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Workflow {workflow_id} execution failed: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to execute workflow: {sanitize_error_for_user(e)}")
