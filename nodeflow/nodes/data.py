# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""Data nodes - fetch external data through connectors."""

from typing import Any

from nodeflow.connectors import Connectors
from nodeflow.engine.context import ExecutionContext
from nodeflow.engine.models import NodeType, WorkflowNode
from .registry import executors

DATA = NodeType.DATA.value


@executors.register(DATA, "weather")
async def execute_weather(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    return await connectors.weather.fetch(
        config.get("location"),
        units=config.get("units") or "imperial",
    )


@executors.register(DATA, "github")
async def execute_github(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    return await connectors.github.fetch(
        config.get("owner"),
        config.get("repository"),
        data_type=config.get("type") or "commits",
    )


@executors.register(DATA, "calendar")
async def execute_calendar(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    return await connectors.calendar.list_events(
        config.get("calendarId"),
        time_min=config.get("timeMin"),
        time_max=config.get("timeMax"),
        max_results=config.get("maxResults"),
    )


@executors.register(DATA, "http")
async def execute_http(node: WorkflowNode, context: ExecutionContext, connectors: Connectors) -> Any:
    config = node.config
    return await connectors.http.fetch(
        config.get("url"),
        method=config.get("method") or "GET",
        headers=config.get("headers"),
        body=config.get("body"),
    )
