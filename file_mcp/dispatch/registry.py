from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from file_mcp.tools.file_manage import FileManager
from file_mcp.utils.logs import logger

from .outcome import Envelope, ErrorType, Failure, Outcome

Handler = Callable[[FileManager, BaseModel], Outcome]


class DuplicateOperationError(Exception):
    """Raised when an operation name is registered twice."""


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def output_schema(self) -> dict[str, Any]:
        return self.output_model.model_json_schema(by_alias=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
            "outputSchema": self.output_schema(),
        }


def format_validation_error(exc: ValidationError) -> str:
    """Render pydantic errors as `field.path: message` pairs."""
    parts = []
    for item in exc.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    """
    Routes named operations to handlers bound to one workspace root.

    Every call comes back as an Envelope; nothing raised by a handler escapes
    `dispatch`.
    """

    def __init__(self, workspace_root: str | Path, encoding: str = "utf-8"):
        self.files = FileManager(workspace_root, encoding=encoding)
        self._operations: dict[str, OperationDescriptor] = {}

    @property
    def workspace_root(self) -> Path:
        return self.files.root

    def register(
        self,
        name: str,
        input_model: type[BaseModel],
        output_model: type[BaseModel],
        handler: Handler,
        description: str = "",
    ) -> OperationDescriptor:
        if name in self._operations:
            raise DuplicateOperationError(f"Operation already registered: {name}")
        descriptor = OperationDescriptor(
            name=name,
            description=description,
            input_model=input_model,
            output_model=output_model,
            handler=handler,
        )
        self._operations[name] = descriptor
        return descriptor

    def list_operations(self) -> list[OperationDescriptor]:
        return list(self._operations.values())

    def get(self, name: str) -> OperationDescriptor | None:
        return self._operations.get(name)

    def dispatch(self, name: str, args: Mapping[str, Any] | None = None) -> Envelope:
        descriptor = self._operations.get(name)
        if descriptor is None:
            logger.warning(f"Unknown tool requested: {name}")
            return Envelope.failure(ErrorType.UNKNOWN_OPERATION, f"Unknown tool: {name}")

        if args is None:
            args = {}
        if not isinstance(args, Mapping):
            message = f"arguments: Input should be an object, got {type(args).__name__}"
            logger.warning(f"{name}: invalid arguments: {message}")
            return Envelope.failure(ErrorType.VALIDATION_ERROR, message)

        logger.debug(f"Dispatching {name} with args={dict(args)!r}")
        try:
            params = descriptor.input_model.model_validate(dict(args))
        except ValidationError as exc:
            message = format_validation_error(exc)
            logger.warning(f"{name}: invalid arguments: {message}")
            return Envelope.failure(ErrorType.VALIDATION_ERROR, message)

        try:
            outcome = descriptor.handler(self.files, params)
        except OSError as exc:
            logger.exception(f"{name}: filesystem failure")
            return Envelope.failure(ErrorType.IO_FAILURE, str(exc))
        except Exception as exc:
            logger.exception(f"{name}: handler crashed")
            return Envelope.failure(ErrorType.INTERNAL_ERROR, f"{type(exc).__name__}: {exc}")

        if isinstance(outcome, Failure):
            logger.warning(f"{name} failed: {outcome.error.value}: {outcome.message}")
            return Envelope.failure(outcome.error, outcome.message)

        try:
            result = descriptor.output_model.model_validate(outcome.payload)
        except ValidationError as exc:
            logger.error(f"{name}: result does not match output shape: {exc}")
            return Envelope.failure(
                ErrorType.INTERNAL_ERROR,
                f"Invalid result from {name}: {format_validation_error(exc)}",
            )
        logger.info(f"{name} succeeded")
        return Envelope.success(result.model_dump(by_alias=True))
