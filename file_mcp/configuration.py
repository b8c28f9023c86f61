import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class FileServerConfig(BaseModel):
    """Runtime configuration for the file server."""

    workspace_root: str = Field(
        default_factory=lambda: str(Path.cwd() / "workspace"),
        description="Directory all file operations are confined to.",
    )
    server_name: str = Field(
        default="File MCP Server",
        description="Server name announced during MCP initialization.",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Server version announced during MCP initialization.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read and write workspace files.",
    )

    @classmethod
    def from_env(cls, overrides: Mapping[str, Any] | None = None) -> "FileServerConfig":
        """Build config from env vars, falling back to `overrides`, then defaults."""
        overrides = overrides or {}
        field_names = list(cls.model_fields.keys())
        values: dict[str, Any] = {
            field_name: os.environ.get(field_name.upper(), overrides.get(field_name))
            for field_name in field_names
        }
        return cls(**{key: value for key, value in values.items() if value is not None})
