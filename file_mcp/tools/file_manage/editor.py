from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidLineNumberError
from .workspace import WorkspaceGuard


@dataclass(frozen=True)
class LineEdit:
    line: int
    new_text: str


@dataclass(frozen=True)
class EditOutcome:
    path: str
    applied: int
    changed: bool


def apply_line_edits(content: str, edits: Iterable[LineEdit]) -> str:
    """
    Replace whole lines of `content` by 1-indexed line number.

    Lines are split on "\\n" only, so a trailing newline yields an empty last line.
    Every edit is checked before any line is touched; later edits to the same
    line win.
    """
    edits = list(edits)
    lines = content.split("\n")
    for edit in edits:
        if edit.line < 1 or edit.line > len(lines):
            raise InvalidLineNumberError(edit.line, len(lines))

    for edit in edits:
        lines[edit.line - 1] = edit.new_text
    return "\n".join(lines)


def edit_file_in_workspace(
    guard: WorkspaceGuard,
    filename: str,
    edits: Iterable[LineEdit],
    encoding: str = "utf-8",
) -> EditOutcome:
    edits = list(edits)
    abs_path = guard.existing_path(filename)

    with abs_path.open("r", encoding=encoding, errors="replace", newline="") as handle:
        original = handle.read()
    updated = apply_line_edits(original, edits)
    with abs_path.open("w", encoding=encoding, newline="") as handle:
        handle.write(updated)

    return EditOutcome(
        path=abs_path.relative_to(guard.root).as_posix(),
        applied=len(edits),
        changed=updated != original,
    )
