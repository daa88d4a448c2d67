# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Dependency injection for nodeflow.

Provides FastAPI dependencies for services and utilities.
"""

from pathlib import Path
from fastapi import Depends, Request
from nodeflow.core.config import Config


# Configuration dependency
def get_current_config(request: Request) -> Config:
    """
    Get the configuration the application was created with.

    Returns:
        Config: Application configuration
    """
    return request.app.state.config


def get_workflow_engine(request: Request):
    """Get the WorkflowEngine created at startup."""
    return request.app.state.workflow_engine


def get_workflow_service(
    request: Request,
    config: Config = Depends(get_current_config)
):
    """Get WorkflowService instance."""
    from nodeflow.services.workflow_service import WorkflowService
    return WorkflowService(
        workflows_dir=Path(config.workflows_path),
        engine=get_workflow_engine(request)
    )
