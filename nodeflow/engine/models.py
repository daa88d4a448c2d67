# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Models

Pydantic models for workflow definitions and execution results.

Two shapes exist for a definition:
- Raw*: records as supplied by a workflow source (config as JSON text,
  flat positionX/positionY, sourceNodeId/targetNodeId)
- Workflow*: normalized entities the engine runs on
"""

from enum import Enum
from typing import List, Dict, Any, Optional, Union
from pydantic import BaseModel, Field, ConfigDict


class NodeType(str, Enum):
    """Node categories"""
    TRIGGER = "trigger"
    DATA = "data"
    LOGIC = "logic"
    ACTION = "action"


# ============================================================================
# Normalized entities
# ============================================================================

class Position(BaseModel):
    """Canvas position (cosmetic, never read by the engine)"""
    x: float = 0
    y: float = 0


class WorkflowNode(BaseModel):
    """Single node in a workflow"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str  # NodeType value; unknown values fail at dispatch, not at load
    sub_type: str = Field(alias="subType")
    label: Optional[str] = None
    config: Dict[str, Any] = Field(default_factory=dict)
    position: Position = Field(default_factory=Position)


class WorkflowConnection(BaseModel):
    """Directed edge between two nodes"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    source: str
    target: str
    # Handles are carried through but not used for dispatch
    source_handle: str = Field(default="output", alias="sourceHandle")
    target_handle: str = Field(default="input", alias="targetHandle")


class Workflow(BaseModel):
    """Normalized workflow definition"""
    id: str
    name: Optional[str] = None
    nodes: List[WorkflowNode] = []
    connections: List[WorkflowConnection] = []


# ============================================================================
# Workflow source records
# ============================================================================

class RawWorkflowNode(BaseModel):
    """Node record as stored by a workflow source"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    sub_type: str = Field(alias="subType")
    label: Optional[str] = None
    config: Union[str, Dict[str, Any], None] = None  # JSON text or already-parsed mapping
    position_x: float = Field(default=0, alias="positionX")
    position_y: float = Field(default=0, alias="positionY")


class RawWorkflowConnection(BaseModel):
    """Connection record as stored by a workflow source"""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    source_node_id: str = Field(alias="sourceNodeId")
    target_node_id: str = Field(alias="targetNodeId")
    source_handle: Optional[str] = Field(default=None, alias="sourceHandle")
    target_handle: Optional[str] = Field(default=None, alias="targetHandle")


class RawWorkflow(BaseModel):
    """Workflow record with its nodes and connections"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")
    nodes: List[RawWorkflowNode] = []
    connections: List[RawWorkflowConnection] = []


# ============================================================================
# Execution Models
# ============================================================================

class ExecutionResult(BaseModel):
    """Result of one workflow execution"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    error: Optional[str] = None
    outputs: Dict[str, Any] = {}  # node_id -> output, in execution order
    executed_nodes: List[str] = Field(default=[], alias="executedNodes")


class ExecuteWorkflowRequest(BaseModel):
    """Request to execute an inline workflow definition"""
    model_config = ConfigDict(populate_by_name=True)

    workflow: RawWorkflow
    trigger_data: Optional[Any] = Field(default=None, alias="triggerData")


class TriggerRequest(BaseModel):
    """Request body for executing a stored workflow"""
    model_config = ConfigDict(populate_by_name=True)

    trigger_data: Optional[Any] = Field(default=None, alias="triggerData")
