"""API routes for todo management."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from todo_api.api.dependencies import get_todo_service
from todo_api.models.todo import Todo, TodoCreate
from todo_api.services.todo_service import TodoService

router = APIRouter(tags=["Todos"])

NOT_FOUND_RESPONSE = {404: {"description": "Todo not found"}}


@router.get(
    "/todos",
    response_model=List[Todo],
    response_model_exclude_unset=True,
    summary="Lists all the todos",
)
async def get_todos(service: TodoService = Depends(get_todo_service)) -> List[Todo]:
    """Return every todo in collection order."""
    return service.get_todos()


@router.post(
    "/todos",
    response_model=Todo,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new todo",
)
async def create_todo(
    todo_data: Optional[TodoCreate] = Body(None),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a todo from ``title`` and ``completed``; the id and timestamp are assigned here."""
    return service.create_todo(todo_data)


@router.get(
    "/todos/{todo_id}",
    response_model=Todo,
    response_model_exclude_unset=True,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a todo by id",
)
async def get_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    return service.get_todo(todo_id)


@router.put(
    "/todos/{todo_id}",
    response_model=Todo,
    response_model_exclude_unset=True,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a todo by id",
)
async def update_todo(
    todo_id: str,
    changes: Optional[Dict[str, Any]] = Body(None),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Shallow-merge the body into the stored todo."""
    try:
        return service.update_todo(todo_id, changes)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.delete(
    "/todos/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a todo by id",
)
async def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
