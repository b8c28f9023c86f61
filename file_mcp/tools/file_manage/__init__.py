from .editor import EditOutcome, LineEdit, apply_line_edits
from .errors import (
    FileManageError,
    FileNotFoundInWorkspaceError,
    InvalidLineNumberError,
    WorkspaceViolationError,
)
from .service import FileManager
from .workspace import WorkspaceGuard

__all__ = [
    "EditOutcome",
    "FileManageError",
    "FileManager",
    "FileNotFoundInWorkspaceError",
    "InvalidLineNumberError",
    "LineEdit",
    "WorkspaceGuard",
    "WorkspaceViolationError",
    "apply_line_edits",
]
