from pathlib import Path
from typing import Iterable

from .editor import EditOutcome, LineEdit, edit_file_in_workspace
from .listing import list_files_in_workspace
from .reader import read_file_in_workspace
from .workspace import WorkspaceGuard
from .writer import delete_file_in_workspace, write_file_in_workspace


class FileManager:
    """
    Workspace-scoped file manager behind the dispatcher's operations.
    Supports list/read/write/edit/delete while refusing paths outside the workspace.
    """

    def __init__(self, workspace_root: str | Path, encoding: str = "utf-8"):
        self.guard = WorkspaceGuard(workspace_root)
        self.encoding = encoding

    @property
    def root(self) -> Path:
        return self.guard.root

    def list_files(self) -> list[str]:
        return list_files_in_workspace(guard=self.guard)

    def read_file(self, filename: str) -> str:
        return read_file_in_workspace(guard=self.guard, filename=filename, encoding=self.encoding)

    def write_file(self, filename: str, content: str) -> str:
        return write_file_in_workspace(
            guard=self.guard,
            filename=filename,
            content=content,
            encoding=self.encoding,
        )

    def edit_file(self, filename: str, edits: Iterable[LineEdit]) -> EditOutcome:
        return edit_file_in_workspace(
            guard=self.guard,
            filename=filename,
            edits=edits,
            encoding=self.encoding,
        )

    def delete_file(self, filename: str) -> str:
        return delete_file_in_workspace(guard=self.guard, filename=filename)
