"""Single entry CLI for the file server."""

import argparse
import json
import sys
from typing import Sequence

from file_mcp.configuration import FileServerConfig
from file_mcp.dispatch import build_file_dispatcher


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser for the server and one-shot operations."""
    parser = argparse.ArgumentParser(prog="file-mcp", description="Workspace file MCP server")
    parser.add_argument("--workspace", help="Workspace directory (default: $WORKSPACE_ROOT or ./workspace)")
    subparsers = parser.add_subparsers(dest="cmd")

    subparsers.add_parser("serve", help="Run the MCP server over stdio")
    subparsers.add_parser("tools", help="Print the operation catalog as JSON")

    call = subparsers.add_parser("call", help="Run one operation and print its envelope")
    call.add_argument("name", help="Operation name, e.g. read_file")
    call.add_argument("--args", default="{}", help="JSON object of operation arguments")

    return parser


def load_config(args: argparse.Namespace) -> FileServerConfig:
    config = FileServerConfig.from_env()
    if args.workspace:
        config = config.model_copy(update={"workspace_root": args.workspace})
    return config


def run_command(args: argparse.Namespace) -> int:
    """Execute `tools` or `call` and return the process exit code."""
    config = load_config(args)
    dispatcher = build_file_dispatcher(config.workspace_root, encoding=config.encoding)

    if args.cmd == "tools":
        catalog = [item.to_dict() for item in dispatcher.list_operations()]
        print(json.dumps(catalog, ensure_ascii=False, indent=2))
        return 0

    try:
        call_args = json.loads(args.args)
    except json.JSONDecodeError as exc:
        print(f"Invalid --args JSON: {exc}", file=sys.stderr)
        return 2
    if not isinstance(call_args, dict):
        print("--args must be a JSON object.", file=sys.stderr)
        return 2

    envelope = dispatcher.dispatch(args.name, call_args)
    print(json.dumps(envelope.to_dict(), ensure_ascii=False, indent=2))
    return 0 if envelope.ok else 1


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry."""
    args = build_parser().parse_args(argv)
    if args.cmd in (None, "serve"):
        from file_mcp.server import run

        run(load_config(args))
        return
    sys.exit(run_command(args))


if __name__ == "__main__":
    main()
