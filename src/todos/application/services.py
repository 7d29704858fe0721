"""
Todos Application Services
==========================

Orchestrates input validation and repository calls for the todos module.
"""

from abc import ABC, abstractmethod
from typing import List

from src.todos.domain import Todo
from src.core import ValidationException


# ========== Repository Interfaces ==========

class ITodoRepository(ABC):
    """
    Interface for todo data access.

    Implementations raise `TodoNotFoundException` when an id-addressed
    statement matches no row and `RepositoryException` for any other
    storage failure.
    """

    @abstractmethod
    async def list_all(self) -> List[Todo]:
        """List todos, most recently created first."""

    @abstractmethod
    async def create(self, body: str) -> Todo:
        """Insert a new, incomplete todo."""

    @abstractmethod
    async def mark_completed(self, todo_id: int) -> Todo:
        """Set completed for the todo and return it."""

    @abstractmethod
    async def delete(self, todo_id: int) -> None:
        """Remove the todo."""


# ========== Application Services ==========

class TodoService:
    """Thin coordinator between the HTTP layer and the repository."""

    def __init__(self, repository: ITodoRepository):
        self._repository = repository

    async def list_todos(self) -> List[Todo]:
        return await self._repository.list_all()

    async def create_todo(self, body: str) -> Todo:
        """
        Create a todo.

        Raises:
            ValidationException: If body is empty. Storage is not touched.
        """
        if not body:
            raise ValidationException("Todo body is required")
        return await self._repository.create(body)

    async def complete_todo(self, todo_id: int) -> Todo:
        return await self._repository.mark_completed(todo_id)

    async def delete_todo(self, todo_id: int) -> None:
        await self._repository.delete(todo_id)
