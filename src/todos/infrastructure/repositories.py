"""
Todos Infrastructure Repositories
=================================

SQLAlchemy implementation of the todo repository.

Each operation is a single statement run in its own session. Values are
always passed as bound parameters.
"""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError

from src.infrastructure.database import Database
from src.todos.application import ITodoRepository
from src.todos.domain import Todo
from src.todos.infrastructure.models import TodoModel
from src.core import RepositoryException, TodoNotFoundException
from src.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)

_TODO_COLUMNS = (TodoModel.id, TodoModel.body, TodoModel.completed)


def _to_domain(row: Row) -> Todo:
    return Todo(id=row.id, body=row.body, completed=bool(row.completed))


class SQLAlchemyTodoRepository(ITodoRepository):
    """
    SQLAlchemy implementation of the todo repository.

    Driver errors are logged and re-raised as RepositoryException.
    """

    def __init__(self, database: Database):
        self._database = database

    async def list_all(self) -> List[Todo]:
        """List todos, newest first."""
        stmt = select(*_TODO_COLUMNS).order_by(
            TodoModel.created_at.desc(), TodoModel.id.desc()
        )
        try:
            with log_latency(logger, "list_todos"):
                async with self._database.session() as session:
                    result = await session.execute(stmt)
                    rows = result.all()
        except SQLAlchemyError as e:
            logger.error("Failed to list todos", extra={"error": str(e)})
            raise RepositoryException("Failed to fetch todos") from e

        return [_to_domain(row) for row in rows]

    async def create(self, body: str) -> Todo:
        """Insert a todo and return it with its generated id."""
        stmt = insert(TodoModel).values(body=body).returning(*_TODO_COLUMNS)
        try:
            with log_latency(logger, "create_todo"):
                async with self._database.session() as session:
                    result = await session.execute(stmt)
                    row = result.one()
        except SQLAlchemyError as e:
            logger.error("Failed to create todo", extra={"error": str(e)})
            raise RepositoryException("Failed to create todo") from e

        logger.info("Todo created", extra={"todo_id": row.id})
        return _to_domain(row)

    async def mark_completed(self, todo_id: int) -> Todo:
        """Set completed = TRUE. Already-completed todos are returned unchanged."""
        stmt = (
            update(TodoModel)
            .where(TodoModel.id == todo_id)
            .values(completed=True)
            .returning(*_TODO_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        try:
            with log_latency(logger, "complete_todo", todo_id=todo_id):
                async with self._database.session() as session:
                    result = await session.execute(stmt)
                    row = result.one_or_none()
        except SQLAlchemyError as e:
            logger.error("Failed to update todo", extra={"todo_id": todo_id, "error": str(e)})
            raise RepositoryException("Failed to update todo") from e

        if row is None:
            raise TodoNotFoundException(todo_id)
        return _to_domain(row)

    async def delete(self, todo_id: int) -> None:
        stmt = (
            delete(TodoModel)
            .where(TodoModel.id == todo_id)
            .execution_options(synchronize_session=False)
        )
        try:
            with log_latency(logger, "delete_todo", todo_id=todo_id):
                async with self._database.session() as session:
                    result = await session.execute(stmt)
                    deleted = result.rowcount
        except SQLAlchemyError as e:
            logger.error("Failed to delete todo", extra={"todo_id": todo_id, "error": str(e)})
            raise RepositoryException("Failed to delete todo") from e

        if deleted == 0:
            raise TodoNotFoundException(todo_id)
        logger.info("Todo deleted", extra={"todo_id": todo_id})
