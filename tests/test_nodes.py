# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Unit tests for trigger and logic node executors
"""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from nodeflow.engine.context import ExecutionContext
from nodeflow.engine.exceptions import UnknownNodeTypeError
from nodeflow.nodes import ExecutorRegistry, executors
from tests.helpers import context_with, make_node


async def run(node, context, connectors):
    executor = executors.get(node.type, node.sub_type)
    return await executor(node, context, connectors)


def is_iso_timestamp(value):
    return isinstance(value, str) and datetime.fromisoformat(value.replace("Z", "+00:00")) is not None


# ============================================================================
# Registry
# ============================================================================

def test_builtin_executors_registered():
    """Every built-in (type, subType) pair has an executor"""
    expected = {
        ("trigger", "manual"), ("trigger", "schedule"), ("trigger", "webhook"),
        ("data", "weather"), ("data", "github"), ("data", "calendar"), ("data", "http"),
        ("logic", "filter"), ("logic", "transform"), ("logic", "condition"), ("logic", "ai"),
        ("action", "email"), ("action", "sms"), ("action", "webhook"),
        ("action", "social"), ("action", "notification"), ("action", "sheet"),
    }
    assert all(kind in executors for kind in expected)


def test_unknown_subtype_names_category():
    with pytest.raises(UnknownNodeTypeError, match="Unknown logic node type: loop"):
        executors.get("logic", "loop")


def test_unknown_type():
    with pytest.raises(UnknownNodeTypeError, match="Unknown node type: storage"):
        executors.get("storage", "s3")


@pytest.mark.asyncio
async def test_register_custom_executor(connectors):
    """New node kinds plug in by registering one function"""
    registry = ExecutorRegistry()

    @registry.register("logic", "uppercase")
    async def uppercase(node, context, connectors):
        return str(context.last_output()).upper()

    node = make_node("u", "logic", "uppercase")
    result = await registry.get("logic", "uppercase")(node, context_with({"a": "hi"}), connectors)
    assert result == "HI"
    assert ("logic", "uppercase") not in executors


# ============================================================================
# Triggers
# ============================================================================

@pytest.mark.asyncio
async def test_manual_trigger_without_data(connectors):
    output = await run(make_node("t"), ExecutionContext("wf"), connectors)
    assert output["triggered"] is True
    assert is_iso_timestamp(output["timestamp"])


@pytest.mark.asyncio
async def test_manual_trigger_passes_data_through(connectors):
    output = await run(make_node("t"), ExecutionContext("wf", {"user": "ada"}), connectors)
    assert output == {"user": "ada"}


@pytest.mark.asyncio
async def test_webhook_trigger_same_as_manual(connectors):
    node = make_node("t", "trigger", "webhook")
    assert await run(node, ExecutionContext("wf", [1, 2]), connectors) == [1, 2]
    assert (await run(node, ExecutionContext("wf"), connectors))["triggered"] is True


@pytest.mark.asyncio
async def test_schedule_trigger_echoes_schedule(connectors):
    schedule = {"type": "daily", "time": "07:00"}
    node = make_node("t", "trigger", "schedule", {"schedule": schedule})
    output = await run(node, ExecutionContext("wf", {"ignored": True}), connectors)
    assert output["triggered"] is True
    assert output["schedule"] == schedule
    assert is_iso_timestamp(output["timestamp"])


# ============================================================================
# Filter
# ============================================================================

@pytest.mark.asyncio
async def test_filter_list(connectors):
    """[{t:10},{t:30}] filtered by t > 20"""
    node = make_node("f", "logic", "filter", {"field": "t", "operator": "greaterThan", "value": 20})
    context = context_with({"src": [{"t": 10}, {"t": 30}]})

    output = await run(node, context, connectors)

    assert output == {"filtered": [{"t": 30}], "matched": True, "count": 1}


@pytest.mark.asyncio
async def test_filter_list_no_match(connectors):
    node = make_node("f", "logic", "filter", {"field": "t", "operator": "equals", "value": 99})
    output = await run(node, context_with({"src": [{"t": 10}, "not-a-dict"]}), connectors)
    assert output == {"filtered": [], "matched": False, "count": 0}


@pytest.mark.asyncio
async def test_filter_single_object(connectors):
    node = make_node("f", "logic", "filter", {"field": "condition", "operator": "equals", "value": "Sunny"})
    weather = {"condition": "Sunny", "temperature": 72}

    assert await run(node, context_with({"w": weather}), connectors) == {"matched": True, "data": weather}

    rainy = {"condition": "Rain"}
    assert await run(node, context_with({"w": rainy}), connectors) == {"matched": False, "data": None}


@pytest.mark.asyncio
async def test_filter_uses_last_recorded_output(connectors):
    """Reads the most recent output, not an earlier one"""
    node = make_node("f", "logic", "filter", {"field": "t", "operator": "greaterThan", "value": 0})
    context = context_with({"first": [{"t": 1}, {"t": 2}], "second": [{"t": 5}]})
    output = await run(node, context, connectors)
    assert output["filtered"] == [{"t": 5}]


@pytest.mark.asyncio
async def test_filter_without_outputs(connectors):
    node = make_node("f", "logic", "filter", {"field": "t", "operator": "greaterThan", "value": 0})
    assert await run(node, ExecutionContext("wf"), connectors) == {"filtered": [], "matched": False}


# ============================================================================
# Transform
# ============================================================================

@pytest.mark.asyncio
async def test_transform_marks_copy(connectors):
    source = {"temperature": 72}
    node = make_node("x", "logic", "transform", {"transformExpression": "temperature * 2"})

    output = await run(node, context_with({"w": source}), connectors)

    assert output["temperature"] == 72
    assert output["transformed"] is True
    assert is_iso_timestamp(output["transformedAt"])
    assert source == {"temperature": 72}


@pytest.mark.asyncio
async def test_transform_without_outputs(connectors):
    assert await run(make_node("x", "logic", "transform"), ExecutionContext("wf"), connectors) == {}


@pytest.mark.asyncio
async def test_transform_list_becomes_index_keyed(connectors):
    """A list output is spread into "0", "1", ... fields before marking"""
    output = await run(make_node("x", "logic", "transform"), context_with({"a": [{"a": 1}, 2]}), connectors)

    assert output["0"] == {"a": 1}
    assert output["1"] == 2
    assert output["transformed"] is True
    assert is_iso_timestamp(output["transformedAt"])


@pytest.mark.asyncio
@pytest.mark.parametrize("last_output", [None, 42, True])
async def test_transform_scalar_yields_marker_only(connectors, last_output):
    output = await run(make_node("x", "logic", "transform"), context_with({"a": last_output}), connectors)
    assert set(output) == {"transformed", "transformedAt"}
    assert output["transformed"] is True


@pytest.mark.asyncio
async def test_transform_string_spreads_characters(connectors):
    output = await run(make_node("x", "logic", "transform"), context_with({"a": "hi"}), connectors)
    assert output["0"] == "h"
    assert output["1"] == "i"
    assert output["transformed"] is True


# ============================================================================
# Condition
# ============================================================================

@pytest.mark.asyncio
async def test_condition_true_branch(connectors):
    node = make_node("c", "logic", "condition", {
        "field": "temperature", "operator": "greaterThan", "value": 70,
        "trueOutput": "warm", "falseOutput": "cold",
    })
    output = await run(node, context_with({"w": {"temperature": 72}}), connectors)
    assert output == {"condition": True, "branch": "true", "output": "warm"}


@pytest.mark.asyncio
async def test_condition_false_branch(connectors):
    node = make_node("c", "logic", "condition", {
        "field": "temperature", "operator": "lessThan", "value": 70,
        "trueOutput": "cold", "falseOutput": "warm",
    })
    output = await run(node, context_with({"w": {"temperature": 72}}), connectors)
    assert output == {"condition": False, "branch": "false", "output": "warm"}


@pytest.mark.asyncio
async def test_condition_without_outputs(connectors):
    node = make_node("c", "logic", "condition", {"falseOutput": "nothing yet"})
    output = await run(node, ExecutionContext("wf"), connectors)
    assert output == {"condition": False, "branch": "false", "output": "nothing yet"}


# ============================================================================
# AI
# ============================================================================

@pytest.mark.asyncio
async def test_ai_mock_without_keys(connectors):
    node = make_node("ai", "logic", "ai", {"prompt": "Summarize {{previous}}"})
    output = await run(node, context_with({"w": {"t": 1}}), connectors)

    assert output["mock"] is True
    assert output["simulated"] is True
    assert output["response"] == "AI-generated response for: Summarize {{previous}}"


@pytest.mark.asyncio
async def test_ai_appends_last_output_as_context(connectors):
    """Prompt goes out verbatim with the last output as JSON context"""
    connectors.ai.generate = AsyncMock(return_value={"response": "ok"})
    node = make_node("ai", "logic", "ai", {"prompt": "Summarize", "provider": "gemini", "model": "m"})

    output = await run(node, context_with({"w": {"t": 1, "city": "Zürich"}}), connectors)

    assert output == {"response": "ok"}
    args, kwargs = connectors.ai.generate.call_args
    assert args[0] == 'Summarize\n\nContext data: {"t":1,"city":"Zürich"}'
    assert kwargs["provider"] == "gemini"
    assert kwargs["model"] == "m"


@pytest.mark.asyncio
async def test_ai_without_outputs_sends_bare_prompt(connectors):
    connectors.ai.generate = AsyncMock(return_value={"response": "ok"})
    await run(make_node("ai", "logic", "ai", {"prompt": "Hello"}), ExecutionContext("wf"), connectors)
    assert connectors.ai.generate.call_args[0][0] == "Hello"
