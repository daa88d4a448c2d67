# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow execution engine.

Graph ordering, execution context, interpolation, condition evaluation and
the orchestrating WorkflowEngine (nodeflow.engine.executor).
"""
