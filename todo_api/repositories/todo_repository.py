"""Todo repository - data access layer."""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Sequence

from todo_api.database import TodoCollection
from todo_api.models.todo import Todo, TodoCreate, utc_timestamp

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """Read the integer prefix of ``value`` (``"12abc"`` -> 12), or None when there is none."""
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def next_todo_id(todos: Sequence[Todo]) -> str:
    """Return the id for a todo appended to ``todos``.

    The id is one more than the numeric value of the last todo's id, or "1"
    for an empty sequence. When the last id has no numeric prefix, counting
    continues from the largest numeric id present. A candidate already taken
    by an earlier todo is skipped.
    """
    if not todos:
        return "1"
    base = parse_leading_int(todos[-1].id)
    if base is None:
        numeric_ids = [n for n in (parse_leading_int(todo.id) for todo in todos) if n is not None]
        base = max(numeric_ids, default=0)
    taken = {todo.id for todo in todos}
    candidate = base + 1
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


class TodoRepository:
    """Repository over a todo collection, scanning it in sequence order."""

    def __init__(self, collection: TodoCollection) -> None:
        self._collection = collection

    @property
    def _todos(self) -> List[Todo]:
        return self._collection.todos

    def _index_of(self, todo_id: str) -> Optional[int]:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None

    def get_all(self) -> List[Todo]:
        """Get all todos in their current order."""
        return list(self._todos)

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get the first todo with the given ID."""
        index = self._index_of(todo_id)
        return None if index is None else self._todos[index]

    def create(self, todo_data: TodoCreate) -> Todo:
        """Append a new todo."""
        fields = todo_data.model_dump(exclude_unset=True)
        todo = Todo.model_validate(
            {"id": next_todo_id(self._todos), **fields, "createdAt": utc_timestamp()}
        )
        self._todos.append(todo)
        return todo

    def update(self, todo_id: str, changes: Mapping[str, Any]) -> Optional[Todo]:
        """Replace the matching todo with its shallow merge with ``changes``."""
        index = self._index_of(todo_id)
        if index is None:
            return None
        updated = self._todos[index].merged(changes)
        self._todos[index] = updated
        return updated

    def delete(self, todo_id: str) -> bool:
        """Delete the first todo with the given ID."""
        index = self._index_of(todo_id)
        if index is None:
            return False
        del self._todos[index]
        return True
