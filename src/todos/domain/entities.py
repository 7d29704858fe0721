"""
Todos Domain Entities
=====================

Pure Python business objects for the todos module.
"""

from dataclasses import dataclass


@dataclass
class Todo:
    """
    A single task.

    `id` is assigned by the database. `body` never changes after creation
    and `completed` only ever moves from False to True. Non-empty bodies
    are enforced when a todo is created, not when rows are read back.
    """
    id: int
    body: str
    completed: bool = False

    def mark_completed(self) -> None:
        """Mark the todo as done. Calling it again is a no-op."""
        self.completed = True
