# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Node executors, one per (type, subType).

Importing this package registers every built-in executor on `executors`.
"""

from .registry import ExecutorRegistry, NodeExecutor, executors
from . import trigger, data, logic, action  # noqa: F401  (registration side effects)

__all__ = ["ExecutorRegistry", "NodeExecutor", "executors"]
