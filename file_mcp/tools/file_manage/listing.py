from .workspace import WorkspaceGuard


def list_files_in_workspace(guard: WorkspaceGuard) -> list[str]:
    """Entry names directly under the workspace root, files and directories alike."""
    return sorted(item.name for item in guard.root.iterdir())
