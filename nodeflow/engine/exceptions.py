# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Workflow Engine Exceptions

Custom exceptions raised while loading and executing workflows.
"""

from nodeflow.core.errors import NodeflowError, ValidationError


class WorkflowValidationError(ValidationError):
    """Workflow definition could not be loaded (malformed records or node config)"""
    def __init__(self, message: str, field: str = None, node_id: str = None):
        self.node_id = node_id
        super().__init__(message, field=field)


class NodeExecutionError(NodeflowError):
    """Base class for failures raised while running a single node"""
    pass


class UnknownNodeTypeError(NodeExecutionError):
    """No executor registered for a node's (type, subType) pair"""
    def __init__(self, node_type: str, sub_type: str = None):
        self.node_type = node_type
        self.sub_type = sub_type
        if sub_type is None:
            message = f"Unknown node type: {node_type}"
        else:
            message = f"Unknown {node_type} node type: {sub_type}"
        super().__init__(message)


class ConnectorError(NodeExecutionError):
    """External connector call failed"""
    def __init__(self, connector: str, message: str, status_code: int = 502):
        self.connector = connector
        super().__init__(message, status_code=status_code, details={"connector": connector})
