# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
nodeflow HTTP application.

Run with:
    uvicorn nodeflow.main:app --host 0.0.0.0 --port 8000
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from nodeflow import __version__
from nodeflow.api import workflows
from nodeflow.connectors import Connectors, build_connectors
from nodeflow.core.config import Config, Credentials, get_config, load_credentials
from nodeflow.core.errors import NodeflowError
from nodeflow.core.logging import get_logger
from nodeflow.engine.executor import WorkflowEngine

# Secrets may live in a local .env next to the working directory
load_dotenv(Path.cwd() / ".env")


def create_app(
    config: Optional[Config] = None,
    credentials: Optional[Credentials] = None,
    connectors: Optional[Connectors] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration (loaded from YAML when omitted)
        credentials: Connector credentials (read from the environment when omitted)
        connectors: Prebuilt connectors, e.g. fakes in tests
    """
    config = config or get_config()
    logger = get_logger("nodeflow", log_level=config.log_level, log_format=config.log_format)

    if connectors is None:
        connectors = build_connectors(config, credentials or load_credentials())

    app = FastAPI(
        title="nodeflow",
        description="Workflow execution engine",
        version=__version__,
    )
    app.state.config = config
    app.state.connectors = connectors
    app.state.workflow_engine = WorkflowEngine(connectors)

    app.include_router(workflows.router)

    @app.exception_handler(NodeflowError)
    async def nodeflow_error_handler(request, exc: NodeflowError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.on_event("shutdown")
    async def close_connectors():
        await app.state.connectors.aclose()

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": __version__}

    logger.info(f"nodeflow initialized (workflows: {config.workflows_path})")
    return app


app = create_app()
