"""Request/response bodies for the tasks API."""

from typing import Optional

from pydantic import BaseModel


class CreateTaskRequest(BaseModel):
    title: str
    description: str = ""
    priority: str = "normal"


class CreateTaskResponse(BaseModel):
    id: str


class UpdateTaskRequest(BaseModel):
    """Only the fields that are present change. The version may come from If-Match instead."""

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    expected_version: Optional[int] = None


class ChangeStatusRequest(BaseModel):
    status: str


class AddChecklistItemRequest(BaseModel):
    text: str


class DeleteTaskResponse(BaseModel):
    success: bool
