"""MCP stdio transport in front of the file dispatcher."""

from __future__ import annotations

import json
from typing import Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from file_mcp.configuration import FileServerConfig
from file_mcp.dispatch import Envelope, ToolDispatcher, build_file_dispatcher
from file_mcp.utils.logs import logger

SERVER_INSTRUCTIONS = "A simple MCP server to read, write, edit, and list files inside a folder."


class ToolCallFailed(Exception):
    """Carries an error envelope out of a tool call so MCP marks it with isError."""

    def __init__(self, envelope: Envelope):
        super().__init__(json.dumps(envelope.to_dict(), ensure_ascii=False))
        self.envelope = envelope


def describe_tools(dispatcher: ToolDispatcher) -> list[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema(),
        )
        for descriptor in dispatcher.list_operations()
    ]


def call_tool(dispatcher: ToolDispatcher, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    envelope = dispatcher.dispatch(name, arguments or {})
    if not envelope.ok:
        raise ToolCallFailed(envelope)
    return [
        types.TextContent(
            type="text",
            text=json.dumps(envelope.to_dict(), ensure_ascii=False, indent=2),
        )
    ]


def create_server(dispatcher: ToolDispatcher, config: FileServerConfig) -> Server:
    server = Server(config.server_name, version=config.server_version, instructions=SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return describe_tools(dispatcher)

    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return call_tool(dispatcher, name, arguments)

    return server


async def serve(config: FileServerConfig) -> None:
    dispatcher = build_file_dispatcher(config.workspace_root, encoding=config.encoding)
    server = create_server(dispatcher, config)
    logger.info(f"Serving {config.server_name} over stdio, workspace={dispatcher.workspace_root}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run(config: FileServerConfig | None = None) -> None:
    anyio.run(serve, config or FileServerConfig.from_env())
