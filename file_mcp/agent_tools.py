from __future__ import annotations

import json
from typing import Any, Sequence

from langchain_core.tools import BaseTool, StructuredTool

from file_mcp.dispatch import OperationDescriptor, ToolDispatcher


def _as_agent_tool(dispatcher: ToolDispatcher, descriptor: OperationDescriptor) -> BaseTool:
    def run(**kwargs: Any) -> str:
        envelope = dispatcher.dispatch(descriptor.name, kwargs)
        return json.dumps(envelope.to_dict(), ensure_ascii=False)

    return StructuredTool.from_function(
        func=run,
        name=descriptor.name,
        description=descriptor.description or descriptor.name,
        args_schema=descriptor.input_model,
    )


def build_agent_tools(
    dispatcher: ToolDispatcher,
    only_tools: Sequence[str] | None = None,
) -> list[BaseTool]:
    """
    Expose every registered operation as a LangChain tool returning the JSON envelope.

    only_tools: if given, keep only the operations with these names.
    """
    descriptors = dispatcher.list_operations()
    if only_tools is not None:
        allowed = frozenset(only_tools)
        descriptors = [item for item in descriptors if item.name in allowed]
    return [_as_agent_tool(dispatcher, item) for item in descriptors]
