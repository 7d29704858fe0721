"""
Todos Application Layer
=======================

Contains:
- Services: Business logic orchestration
- DTOs: Data transfer objects for API serialization
"""

from src.todos.application.dto import (
    CreateTodoRequest,
    TodoResponse,
    DeleteResponse,
    ErrorResponse,
    MessageResponse,
)
from src.todos.application.services import (
    TodoService,
    ITodoRepository,
)

__all__ = [
    # DTOs
    "CreateTodoRequest",
    "TodoResponse",
    "DeleteResponse",
    "ErrorResponse",
    "MessageResponse",
    # Services
    "TodoService",
    # Repository Interfaces
    "ITodoRepository",
]
