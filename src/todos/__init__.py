"""
Todos Module
============

Bounded context for the todo list: create, list, complete and delete
todos stored in the `todos` table.
"""

__version__ = "1.0.0"
