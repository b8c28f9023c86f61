from pathlib import Path

from .errors import FileNotFoundInWorkspaceError, WorkspaceViolationError


class WorkspaceGuard:
    """Resolves and validates all file paths inside a fixed workspace root."""

    def __init__(self, workspace_root: str | Path):
        self.root = Path(workspace_root).expanduser().resolve()
        if not self.root.exists():
            self.root.mkdir(parents=True, exist_ok=True)

    def resolve_path(self, filename: str | Path) -> Path:
        resolved = (self.root / filename).resolve(strict=False)
        if not resolved.is_relative_to(self.root):
            raise WorkspaceViolationError(
                f"Path '{filename}' is outside workspace '{self.root}'."
            )
        return resolved

    def existing_path(self, filename: str | Path) -> Path:
        """Resolve `filename` and require that something exists there."""
        resolved = self.resolve_path(filename)
        if not resolved.exists():
            raise FileNotFoundInWorkspaceError(f"File not found: {filename}")
        return resolved
