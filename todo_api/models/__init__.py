from .todo import Todo, TodoCreate, utc_timestamp

__all__ = ["Todo", "TodoCreate", "utc_timestamp"]
