"""API dependencies for todo management."""

from fastapi import Depends, Request

from todo_api.database import TodoCollection
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.services.todo_service import TodoService


def get_todo_collection(request: Request) -> TodoCollection:
    """Dependency returning the collection owned by the running application."""
    return request.app.state.collection


def get_todo_repository(
    collection: TodoCollection = Depends(get_todo_collection),
) -> TodoRepository:
    """Dependency for getting todo repository instance."""
    return TodoRepository(collection)


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
