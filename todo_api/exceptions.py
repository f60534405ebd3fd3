"""Errors raised by the todo service."""


class TodoNotFoundError(LookupError):
    """No todo in the collection carries the requested id."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id
