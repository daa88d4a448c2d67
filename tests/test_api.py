# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
API tests for the workflow routes
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from nodeflow.main import create_app
from tests.helpers import raw_edge, raw_node, raw_workflow


@pytest.fixture
def client(config, connectors):
    app = create_app(config=config, connectors=connectors)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def workflows_dir(config):
    path = Path(config.workflows_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_execute_inline_workflow(client):
    definition = raw_workflow(
        [raw_node("t", "trigger", "manual"), raw_node("w", "data", "weather", {"location": "Oslo"})],
        [raw_edge("t", "w")],
    )

    response = client.post("/workflows/execute", json={"workflow": definition, "triggerData": {"k": 1}})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["executedNodes"] == ["t", "w"]
    assert body["outputs"]["t"] == {"k": 1}
    assert body["outputs"]["w"]["location"] == "Oslo"


def test_execute_cycle_reports_failure(client):
    definition = raw_workflow(
        [raw_node("a", "trigger", "manual"), raw_node("b", "logic", "transform")],
        [raw_edge("a", "b"), raw_edge("b", "a")],
    )

    response = client.post("/workflows/execute", json={"workflow": definition})

    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "error": "Workflow contains cycles or invalid connections",
        "outputs": {},
        "executedNodes": [],
    }


def test_execute_malformed_config_is_bad_request(client):
    definition = raw_workflow([raw_node("t", "trigger", "manual")])
    definition["nodes"][0]["config"] = "{oops"

    response = client.post("/workflows/execute", json={"workflow": definition})

    assert response.status_code == 400
    assert "Invalid config for node 't'" in response.json()["detail"]


def test_list_and_get_stored_workflow(client, workflows_dir):
    definition = raw_workflow([raw_node("t", "trigger", "manual")], workflow_id="daily")
    (workflows_dir / "daily.json").write_text(json.dumps(definition))

    listed = client.get("/workflows").json()
    assert [w["id"] for w in listed] == ["daily"]

    response = client.get("/workflows/daily")
    assert response.status_code == 200
    assert response.json()["nodes"][0]["subType"] == "manual"


def test_execute_stored_workflow(client, workflows_dir):
    definition = raw_workflow([raw_node("t", "trigger", "manual")], workflow_id="daily")
    (workflows_dir / "daily.json").write_text(json.dumps(definition))

    response = client.post("/workflows/daily/execute", json={"triggerData": "hello"})

    assert response.status_code == 200
    assert response.json()["outputs"] == {"t": "hello"}


def test_execute_stored_workflow_without_body(client, workflows_dir):
    definition = raw_workflow([raw_node("t", "trigger", "manual")], workflow_id="daily")
    (workflows_dir / "daily.json").write_text(json.dumps(definition))

    response = client.post("/workflows/daily/execute")

    assert response.status_code == 200
    assert response.json()["outputs"]["t"]["triggered"] is True


def test_missing_workflow_is_not_found(client):
    assert client.get("/workflows/unknown").status_code == 404
    assert client.post("/workflows/unknown/execute").status_code == 404


def test_inactive_workflow_is_bad_request(client, workflows_dir):
    definition = raw_workflow([raw_node("t", "trigger", "manual")], workflow_id="off", isActive=False)
    (workflows_dir / "off.json").write_text(json.dumps(definition))

    response = client.post("/workflows/off/execute")

    assert response.status_code == 400
    assert response.json()["detail"] == "Workflow is not active"
