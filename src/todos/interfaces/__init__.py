"""
Todos Interfaces Layer
======================

Interface adapters (controllers) for the todos module.

This is the outermost layer - handles HTTP requests/responses and
delegates to application services.
"""

from src.todos.interfaces.controllers import router as todo_router

__all__ = ["todo_router"]
