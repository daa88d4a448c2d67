# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
nodeflow - sequential workflow execution engine.

Validates workflow graphs, runs typed nodes in topological order and
lets node configuration reference upstream outputs via {{...}} placeholders.
"""

__version__ = "1.0.0"
