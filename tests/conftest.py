"""Shared fixtures for the todo API tests."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core import RepositoryException, TodoNotFoundException
from src.main import create_app
from src.todos.application import ITodoRepository, TodoService
from src.todos.domain import Todo
from src.todos.interfaces.controllers import get_todo_service


class InMemoryTodoRepository(ITodoRepository):
    """Keeps todos in a list, newest first, and counts calls."""

    def __init__(self):
        self.todos: List[Todo] = []
        self.calls = 0
        self._next_id = 1

    async def list_all(self) -> List[Todo]:
        self.calls += 1
        return [Todo(id=t.id, body=t.body, completed=t.completed) for t in self.todos]

    async def create(self, body: str) -> Todo:
        self.calls += 1
        todo = Todo(id=self._next_id, body=body)
        self._next_id += 1
        self.todos.insert(0, todo)
        return Todo(id=todo.id, body=todo.body, completed=todo.completed)

    async def mark_completed(self, todo_id: int) -> Todo:
        self.calls += 1
        for todo in self.todos:
            if todo.id == todo_id:
                todo.mark_completed()
                return Todo(id=todo.id, body=todo.body, completed=todo.completed)
        raise TodoNotFoundException(todo_id)

    async def delete(self, todo_id: int) -> None:
        self.calls += 1
        for index, todo in enumerate(self.todos):
            if todo.id == todo_id:
                del self.todos[index]
                return
        raise TodoNotFoundException(todo_id)


class BrokenTodoRepository(ITodoRepository):
    """Every operation fails like an unreachable database."""

    async def list_all(self):
        raise RepositoryException("connection refused")

    async def create(self, body):
        raise RepositoryException("connection refused")

    async def mark_completed(self, todo_id):
        raise RepositoryException("connection refused")

    async def delete(self, todo_id):
        raise RepositoryException("connection refused")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, env="", cors_origins=[])


@pytest.fixture
def repository() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


def _client_for(settings: Settings, repository: ITodoRepository) -> TestClient:
    # Lifespan is not entered, so no database is opened
    app = create_app(settings)
    app.dependency_overrides[get_todo_service] = lambda: TodoService(repository)
    return TestClient(app)


@pytest.fixture
def client(settings, repository) -> TestClient:
    return _client_for(settings, repository)


@pytest.fixture
def broken_client(settings) -> TestClient:
    return _client_for(settings, BrokenTodoRepository())
