"""
Todos Controllers (API Routes)
==============================

FastAPI routes for the todo endpoints.

Controllers are thin: they parse input, call the service once, and map
the outcome (or the exception kind) to a status code and JSON body.
"""

import re
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.infrastructure.database import Database
from src.todos.application import (
    TodoService,
    CreateTodoRequest,
    TodoResponse,
    DeleteResponse,
    ErrorResponse,
    MessageResponse,
)
from src.todos.infrastructure import SQLAlchemyTodoRepository
from src.core import RepositoryException, TodoNotFoundException, ValidationException
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/todos", tags=["Todos"])

# ids are SERIAL (32-bit signed) columns
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_ID = 2**31 - 1
_MIN_ID = -(2**31)


# ========== Example payloads for Swagger ==========

TODO_EXAMPLE = {"_id": 1, "completed": False, "body": "Buy milk"}


# ========== Dependencies ==========

def get_database(request: Request) -> Database:
    """Database created by the application lifespan."""
    return request.app.state.database


def get_todo_service(database: Database = Depends(get_database)) -> TodoService:
    """Get todo service instance."""
    return TodoService(SQLAlchemyTodoRepository(database))


# ========== Helpers ==========

def parse_todo_id(raw: str) -> int | None:
    """
    Parse a path id as a decimal integer.

    Returns None for anything that is not an optionally signed run of
    digits or does not fit the id column.
    """
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _MIN_ID <= value <= _MAX_ID:
        return None
    return value


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _invalid_id() -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid ID Format")


# ========== Route Handlers ==========

@router.get(
    "",
    response_model=List[TodoResponse],
    summary="List todos",
    responses={
        200: {"content": {"application/json": {"example": [TODO_EXAMPLE]}}},
        500: {"model": ErrorResponse},
    },
)
async def list_todos(service: TodoService = Depends(get_todo_service)):
    """List all todos, most recently created first."""
    try:
        todos = await service.list_todos()
    except RepositoryException:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch todos")

    return [TodoResponse.from_domain(todo) for todo in todos]


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a todo",
    responses={
        201: {"content": {"application/json": {"example": TODO_EXAMPLE}}},
        400: {"model": MessageResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_todo(
    request: CreateTodoRequest,
    service: TodoService = Depends(get_todo_service)
):
    """
    Create a todo from `{"body": "..."}`.

    Any `completed` value in the request is ignored.
    """
    try:
        todo = await service.create_todo(request.body)
    except ValidationException as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"msg": e.message})
    except RepositoryException:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create todo")

    return TodoResponse.from_domain(todo)


@router.patch(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Mark a todo as completed",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def complete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service)
):
    """Mark the todo completed. Completing a completed todo succeeds."""
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None:
        return _invalid_id()

    try:
        todo = await service.complete_todo(parsed_id)
    except TodoNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Todo not found!")
    except RepositoryException:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update todo")

    return TodoResponse.from_domain(todo)


@router.delete(
    "/{todo_id}",
    response_model=DeleteResponse,
    summary="Delete a todo",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service)
):
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None:
        return _invalid_id()

    try:
        await service.delete_todo(parsed_id)
    except TodoNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Todo not found")
    except RepositoryException:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete todo")

    return DeleteResponse(success=True)
