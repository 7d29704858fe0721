"""
Todos Domain Layer
==================

Framework-agnostic business objects for the todos module.
"""

from src.todos.domain.entities import Todo

__all__ = ["Todo"]
