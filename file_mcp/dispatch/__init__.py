from .operations import build_file_dispatcher, register_file_operations
from .outcome import Envelope, ErrorType, Failure, Outcome, Success
from .registry import DuplicateOperationError, OperationDescriptor, ToolDispatcher

__all__ = [
    "DuplicateOperationError",
    "Envelope",
    "ErrorType",
    "Failure",
    "OperationDescriptor",
    "Outcome",
    "Success",
    "ToolDispatcher",
    "build_file_dispatcher",
    "register_file_operations",
]
