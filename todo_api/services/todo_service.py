"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from todo_api.exceptions import TodoNotFoundError
from todo_api.models.todo import Todo, TodoCreate
from todo_api.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic.

    Request bodies are taken as they come: no field is required and values are
    not type-checked. The only failure is :class:`TodoNotFoundError` for an
    id that matches nothing.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def get_todos(self) -> List[Todo]:
        """Get all todo items."""
        return self.repository.get_all()

    def get_todo(self, todo_id: str) -> Todo:
        """Get a specific todo by ID."""
        todo = self.repository.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, todo_data: Optional[TodoCreate] = None) -> Todo:
        """Create a new todo item."""
        todo = self.repository.create(todo_data or TodoCreate())
        logger.info("Created todo id=%s", todo.id)
        return todo

    def update_todo(self, todo_id: str, changes: Optional[Mapping[str, Any]] = None) -> Todo:
        """Merge ``changes`` into an existing todo item."""
        todo = self.repository.update(todo_id, changes or {})
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("Updated todo id=%s fields=%s", todo_id, sorted(changes or {}))
        return todo

    def delete_todo(self, todo_id: str) -> None:
        """Delete a todo item."""
        if not self.repository.delete(todo_id):
            raise TodoNotFoundError(todo_id)
        logger.info("Deleted todo id=%s", todo_id)
