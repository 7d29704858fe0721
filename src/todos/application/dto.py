"""
Todos Application DTOs
======================

Pydantic models for request/response validation.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.todos.domain import Todo


# ========== Request DTOs ==========

class CreateTodoRequest(BaseModel):
    """
    Request model for todo creation.

    `body` defaults to empty so a missing body gets the 400 "required"
    response instead of a validation error. `completed` is accepted for
    compatibility but new todos always start incomplete.
    """
    body: str = Field(default="", description="Todo text")
    completed: Optional[bool] = Field(default=None, description="Ignored on create")

    @field_validator("body", mode="before")
    @classmethod
    def null_body_as_empty(cls, v):
        """Treat `"body": null` like a missing body."""
        return "" if v is None else v


# ========== Response DTOs ==========

class TodoResponse(BaseModel):
    """A todo as returned by the API."""
    id: int = Field(..., serialization_alias="_id")
    completed: bool
    body: str

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoResponse":
        return cls(id=todo.id, completed=todo.completed, body=todo.body)


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    msg: str
