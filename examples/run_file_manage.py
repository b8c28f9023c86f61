import json
import shutil
from pathlib import Path

from file_mcp.dispatch import build_file_dispatcher


def show(dispatcher, name: str, **args) -> None:
    envelope = dispatcher.dispatch(name, args)
    print(f"{name}: {json.dumps(envelope.to_dict(), ensure_ascii=False)}")


def main() -> None:
    workspace = Path("tmp_file_manage_demo")
    if workspace.exists():
        shutil.rmtree(workspace)

    dispatcher = build_file_dispatcher(workspace)

    print("== 1) write ==")
    show(dispatcher, "write_file", filename="hello.py", content="def greet(name):\n    return f'hello, {name}'\n")

    print("\n== 2) list ==")
    show(dispatcher, "list_files")

    print("\n== 3) edit line 2 ==")
    show(dispatcher, "edit_file", filename="hello.py", edits=[{"line": 2, "newText": "    return f'hi, {name}!'"}])
    show(dispatcher, "read_file", filename="hello.py")

    print("\n== 4) out-of-range edit is rejected ==")
    show(dispatcher, "edit_file", filename="hello.py", edits=[{"line": 9, "newText": "nope"}])

    print("\n== 5) traversal is rejected ==")
    show(dispatcher, "write_file", filename="../escaped.txt", content="should fail\n")

    print("\n== 6) delete ==")
    show(dispatcher, "delete_file", filename="hello.py")
    show(dispatcher, "read_file", filename="hello.py")

    print("\nDone. workspace:", workspace.resolve())


if __name__ == "__main__":
    main()
