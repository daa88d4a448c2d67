# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Shared fixtures.

Connectors are built with empty credentials so nothing leaves the process;
tests that exercise real request paths inject an httpx.MockTransport.
"""

import pytest

from nodeflow.connectors import build_connectors
from nodeflow.core.config import Config, Credentials
from nodeflow.engine.executor import WorkflowEngine


@pytest.fixture
def config(tmp_path):
    """Default config with workflows under a temp directory"""
    return Config(workflows_path=str(tmp_path / "workflows"))


@pytest.fixture
def no_credentials():
    """Credentials with every secret missing"""
    return Credentials()


@pytest.fixture
def connectors(config, no_credentials):
    """Connectors that simulate every external call"""
    return build_connectors(config, no_credentials)


@pytest.fixture
def engine(connectors):
    """Engine with the built-in executors and simulated connectors"""
    return WorkflowEngine(connectors)
