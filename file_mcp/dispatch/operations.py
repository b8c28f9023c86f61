"""The five workspace file operations and the dispatcher that serves them."""

from pathlib import Path
from typing import Callable, TypeVar

from file_mcp.tools.file_manage import (
    FileManager,
    FileManageError,
    FileNotFoundInWorkspaceError,
    InvalidLineNumberError,
    LineEdit,
    WorkspaceViolationError,
)

from .outcome import ErrorType, Failure, Outcome, Success
from .registry import ToolDispatcher
from .schemas import (
    DeleteFileInput,
    EditFileInput,
    FileContentOutput,
    FileListOutput,
    ListFilesInput,
    ReadFileInput,
    StatusOutput,
    WriteFileInput,
)

T = TypeVar("T")

_ERROR_TYPES: dict[type[FileManageError], ErrorType] = {
    FileNotFoundInWorkspaceError: ErrorType.FILE_NOT_FOUND,
    InvalidLineNumberError: ErrorType.INVALID_LINE_NUMBER,
    WorkspaceViolationError: ErrorType.PATH_OUTSIDE_WORKSPACE,
}


def _attempt(action: Callable[[], T], on_success: Callable[[T], dict]) -> Outcome:
    """Run a FileManager call and tag its failure instead of raising it."""
    try:
        value = action()
    except FileManageError as exc:
        return Failure(_ERROR_TYPES.get(type(exc), ErrorType.IO_FAILURE), str(exc))
    except OSError as exc:
        return Failure(ErrorType.IO_FAILURE, str(exc))
    return Success(on_success(value))


def list_files(files: FileManager, params: ListFilesInput) -> Outcome:
    return _attempt(files.list_files, lambda names: {"files": names})


def read_file(files: FileManager, params: ReadFileInput) -> Outcome:
    return _attempt(
        lambda: files.read_file(params.filename),
        lambda content: {"content": content},
    )


def write_file(files: FileManager, params: WriteFileInput) -> Outcome:
    return _attempt(
        lambda: files.write_file(params.filename, params.content),
        lambda _: {"success": True, "message": f"File '{params.filename}' written successfully"},
    )


def edit_file(files: FileManager, params: EditFileInput) -> Outcome:
    edits = [LineEdit(line=item.line, new_text=item.new_text) for item in params.edits]
    return _attempt(
        lambda: files.edit_file(params.filename, edits),
        lambda outcome: {
            "success": True,
            "message": f"Edited {outcome.applied} line(s) in '{params.filename}'",
        },
    )


def delete_file(files: FileManager, params: DeleteFileInput) -> Outcome:
    return _attempt(
        lambda: files.delete_file(params.filename),
        lambda _: {"success": True, "message": f"File '{params.filename}' deleted successfully"},
    )


def register_file_operations(dispatcher: ToolDispatcher) -> ToolDispatcher:
    dispatcher.register(
        "list_files",
        ListFilesInput,
        FileListOutput,
        list_files,
        description="List all files inside the workspace folder",
    )
    dispatcher.register(
        "read_file",
        ReadFileInput,
        FileContentOutput,
        read_file,
        description="Read content of a file",
    )
    dispatcher.register(
        "write_file",
        WriteFileInput,
        StatusOutput,
        write_file,
        description="Create or overwrite a file with given content",
    )
    dispatcher.register(
        "edit_file",
        EditFileInput,
        StatusOutput,
        edit_file,
        description="Edit specific lines in an existing file",
    )
    dispatcher.register(
        "delete_file",
        DeleteFileInput,
        StatusOutput,
        delete_file,
        description="Delete a file by name",
    )
    return dispatcher


def build_file_dispatcher(workspace_root: str | Path, encoding: str = "utf-8") -> ToolDispatcher:
    """Create a dispatcher bound to `workspace_root` with all file operations registered."""
    return register_file_operations(ToolDispatcher(workspace_root, encoding=encoding))
