"""Request and response bodies of the HTTP API."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class FileEntryModel(BaseModel):
    name: str
    path: str
    kind: Literal["file", "directory"]
    extension: str = ""
    size: int = Field(default=0, ge=0)
    modifiedAt: datetime
    children: Optional[List["FileEntryModel"]] = None
    hasMoreChildren: Optional[bool] = None


FileEntryModel.model_rebuild()


class InitResponse(BaseModel):
    cwd: str
    platform: str
    arch: str
    runtimeVersion: str


class FilesResponse(BaseModel):
    files: List[FileEntryModel]
    currentPath: str
    root: str


class ParentResponse(BaseModel):
    files: List[FileEntryModel]
    currentPath: str
    isRoot: bool


class FileContentResponse(BaseModel):
    content: str
    path: str


class WriteFileRequest(BaseModel):
    # Both optional so a missing field is reported as 400 by the handler
    path: Optional[str] = None
    content: Optional[str] = None


class SelectFolderRequest(BaseModel):
    folderPath: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True


class SelectFolderResponse(BaseModel):
    success: bool = True
    files: List[FileEntryModel]
    currentPath: str


class ErrorResponse(BaseModel):
    error: str
