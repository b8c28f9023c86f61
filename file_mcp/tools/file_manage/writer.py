from .workspace import WorkspaceGuard


def write_file_in_workspace(
    guard: WorkspaceGuard,
    filename: str,
    content: str,
    encoding: str = "utf-8",
) -> str:
    """Create or truncate `filename` and write `content` verbatim."""
    abs_path = guard.resolve_path(filename)
    with abs_path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return abs_path.relative_to(guard.root).as_posix()


def delete_file_in_workspace(guard: WorkspaceGuard, filename: str) -> str:
    """Remove the entry named `filename`; a symlink is removed, not its target."""
    guard.existing_path(filename)
    entry = guard.root / filename
    entry.unlink()
    return entry.relative_to(guard.root).as_posix()
