class FileManageError(Exception):
    """Base exception for file_manage."""


class WorkspaceViolationError(FileManageError):
    """Raised when a path escapes the configured workspace."""


class FileNotFoundInWorkspaceError(FileManageError):
    """Raised when the target file does not exist under the workspace root."""


class InvalidLineNumberError(FileManageError):
    """Raised when a line edit targets a line outside [1, line_count]."""

    def __init__(self, line: int, line_count: int):
        super().__init__(f"Invalid line number: {line}. File has {line_count} lines.")
        self.line = line
        self.line_count = line_count
