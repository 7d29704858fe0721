"""Service and domain behaviour independent of HTTP."""

import pytest

from src.core import ValidationException
from src.todos.application import TodoService, TodoResponse
from src.todos.domain import Todo
from src.todos.interfaces.controllers import parse_todo_id
from tests.conftest import InMemoryTodoRepository


@pytest.mark.asyncio
async def test_create_rejects_empty_body_before_storage():
    repository = InMemoryTodoRepository()
    service = TodoService(repository)

    with pytest.raises(ValidationException) as exc_info:
        await service.create_todo("")

    assert exc_info.value.message == "Todo body is required"
    assert repository.calls == 0


@pytest.mark.asyncio
async def test_create_then_complete():
    service = TodoService(InMemoryTodoRepository())

    todo = await service.create_todo("Buy milk")
    completed = await service.complete_todo(todo.id)

    assert completed == Todo(id=todo.id, body="Buy milk", completed=True)


def test_todo_from_storage_accepts_empty_body():
    assert Todo(id=1, body="").body == ""


def test_mark_completed_only_moves_forward():
    todo = Todo(id=1, body="Buy milk")

    todo.mark_completed()
    todo.mark_completed()

    assert todo.completed is True


def test_todo_response_uses_underscore_id():
    payload = TodoResponse.from_domain(Todo(id=7, body="x")).model_dump(by_alias=True)

    assert payload == {"_id": 7, "completed": False, "body": "x"}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        ("+3", 3),
        ("-3", -3),
        ("007", 7),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("", None),
        (" 1", None),
        ("1_000", None),
        ("12abc", None),
        ("5\n", None),
        ("١٢", None),
    ],
)
def test_parse_todo_id(raw, expected):
    assert parse_todo_id(raw) == expected
