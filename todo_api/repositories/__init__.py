from .todo_repository import TodoRepository, next_todo_id

__all__ = ["TodoRepository", "next_todo_id"]
