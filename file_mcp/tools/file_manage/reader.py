from .workspace import WorkspaceGuard


def read_file_in_workspace(guard: WorkspaceGuard, filename: str, encoding: str = "utf-8") -> str:
    abs_path = guard.existing_path(filename)
    with abs_path.open("r", encoding=encoding, errors="replace", newline="") as handle:
        return handle.read()
