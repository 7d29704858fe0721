"""
Todos Infrastructure Layer
==========================

Contains:
- Models: SQLAlchemy ORM models
- Repositories: Data access implementations
"""

from src.todos.infrastructure.models import TodoModel
from src.todos.infrastructure.repositories import SQLAlchemyTodoRepository

__all__ = [
    "TodoModel",
    "SQLAlchemyTodoRepository",
]
