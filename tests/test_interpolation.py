# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Test {{...}} interpolation of node configuration strings
"""

import json

from nodeflow.engine.context import ExecutionContext
from nodeflow.engine.interpolation import format_value, get_nested_value, interpolate
from tests.helpers import context_with


class TestNodeReferences:
    """{{nodeId}} and {{nodeId.path}}"""

    def test_field_reference(self):
        context = context_with({"n1": {"temp": 72}})
        assert interpolate("Temp: {{n1.temp}}", context) == "Temp: 72"

    def test_full_output_is_pretty_json(self):
        context = context_with({"n1": {"temp": 72}})
        assert interpolate("{{n1}}", context) == json.dumps({"temp": 72}, indent=2)

    def test_nested_path(self):
        context = context_with({"weather": {"main": {"temp": {"max": 80}}}})
        assert interpolate("{{weather.main.temp.max}}F", context) == "80F"

    def test_list_index_segment(self):
        context = context_with({"gh": {"items": [{"message": "Initial commit"}]}})
        assert interpolate("{{gh.items.0.message}}", context) == "Initial commit"

    def test_missing_field_renders_empty(self):
        context = context_with({"n1": {"temp": 72}})
        assert interpolate("[{{n1.humidity}}]", context) == "[]"

    def test_path_through_scalar_renders_empty(self):
        context = context_with({"n1": {"temp": 72}})
        assert interpolate("[{{n1.temp.celsius}}]", context) == "[]"

    def test_unknown_node_left_verbatim(self):
        context = context_with({"n1": {"temp": 72}})
        assert interpolate("{{n2.temp}} and {{n1.temp}}", context) == "{{n2.temp}} and 72"

    def test_node_id_with_regex_characters(self):
        context = context_with({"node(1)+": "ok"})
        assert interpolate("{{node(1)+}}", context) == "ok"

    def test_multiple_references(self):
        context = context_with({"a": {"x": 1}, "b": {"y": "two"}})
        assert interpolate("{{a.x}}-{{b.y}}-{{a.x}}", context) == "1-two-1"


class TestPreviousReference:
    """{{previous}} resolves by recorded execution order"""

    def test_previous_defaults_to_last_output(self):
        context = context_with({"a": {"v": 1}, "b": {"v": 2}})
        assert interpolate("{{previous.v}}", context) == "2"

    def test_previous_relative_to_current_node(self):
        context = context_with({"a": {"v": 1}, "b": {"v": 2}, "c": {"v": 3}})
        assert interpolate("{{previous.v}}", context, current_node_id="b") == "1"

    def test_previous_of_first_node_falls_back_to_last(self):
        context = context_with({"a": {"v": 1}, "b": {"v": 2}})
        assert interpolate("{{previous.v}}", context, current_node_id="a") == "2"

    def test_previous_of_unrecorded_node_falls_back_to_last(self):
        context = context_with({"a": {"v": 1}, "b": {"v": 2}})
        assert interpolate("{{previous.v}}", context, current_node_id="zzz") == "2"

    def test_previous_full_output(self):
        context = context_with({"a": ["x", "y"]})
        assert interpolate("{{previous}}", context) == json.dumps(["x", "y"], indent=2)

    def test_previous_without_outputs_left_verbatim(self):
        context = ExecutionContext("wf")
        assert interpolate("Body: {{previous}}", context) == "Body: {{previous}}"


class TestTriggerReference:

    def test_trigger_whole_object(self):
        context = context_with({}, trigger_data={"user": "ada"})
        assert interpolate("{{trigger}}", context) == json.dumps({"user": "ada"}, indent=2)

    def test_trigger_string(self):
        context = context_with({}, trigger_data="push")
        assert interpolate("event={{trigger}}", context) == "event=push"

    def test_trigger_absent_left_verbatim(self):
        context = context_with({})
        assert interpolate("{{trigger}}", context) == "{{trigger}}"


class TestFormatting:

    def test_idempotent_without_placeholders(self):
        context = context_with({"n1": {"temp": 72}})
        for text in ["", "plain text", "{single braces}", "{{ not closed", "n1.temp"]:
            assert interpolate(text, context) == text

    def test_scalar_formatting(self):
        assert format_value(None) == ""
        assert format_value("s") == "s"
        assert format_value(3) == "3"
        assert format_value(2.5) == "2.5"
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_integral_floats_render_without_fraction(self):
        assert format_value(72.0) == "72"
        assert format_value(-3.0) == "-3"
        assert format_value(0.5) == "0.5"

        context = context_with({"n1": {"temp": 72.0}})
        assert interpolate("Temp: {{n1.temp}}", context) == "Temp: 72"

    def test_booleans_render_lowercase(self):
        context = context_with({"c": {"condition": False}})
        assert interpolate("{{c.condition}}", context) == "false"

    def test_get_nested_value_stops_on_missing_key(self):
        assert get_nested_value({"a": {"b": 1}}, "a.c.d") is None
        assert get_nested_value({"a": [1, 2]}, "a.5") is None
        assert get_nested_value("text", "a") is None
