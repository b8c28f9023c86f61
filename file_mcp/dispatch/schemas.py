"""Static input/output shapes for the file operations."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class LineEditInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    line: StrictInt = Field(ge=1, description="Line number to edit (1-indexed)")
    new_text: StrictStr = Field(alias="newText", description="New text for this line")


class ListFilesInput(BaseModel):
    pass


class ReadFileInput(BaseModel):
    filename: StrictStr = Field(min_length=1, description="Name of the file to read")


class WriteFileInput(BaseModel):
    filename: StrictStr = Field(min_length=1, description="Name of the file to write")
    content: StrictStr = Field(description="Content to write to the file")


class EditFileInput(BaseModel):
    filename: StrictStr = Field(min_length=1, description="Name of the file to edit")
    edits: list[LineEditInput] = Field(description="Array of line edits to apply")


class DeleteFileInput(BaseModel):
    filename: StrictStr = Field(min_length=1, description="Name of the file to delete")


class FileListOutput(BaseModel):
    files: list[str]


class FileContentOutput(BaseModel):
    content: str


class StatusOutput(BaseModel):
    success: bool
    message: str
