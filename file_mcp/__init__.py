"""Workspace-scoped file operations served over MCP."""

from file_mcp.configuration import FileServerConfig
from file_mcp.dispatch import (
    DuplicateOperationError,
    Envelope,
    ErrorType,
    OperationDescriptor,
    ToolDispatcher,
    build_file_dispatcher,
)

__all__ = [
    "DuplicateOperationError",
    "Envelope",
    "ErrorType",
    "FileServerConfig",
    "OperationDescriptor",
    "ToolDispatcher",
    "build_file_dispatcher",
]
