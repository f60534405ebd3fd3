"""Service layer tests."""

import logging

from pytest import raises

from todo_api.database import TodoCollection
from todo_api.exceptions import TodoNotFoundError
from todo_api.models.todo import TodoCreate
from todo_api.services.todo_service import TodoService


class TestTodoService:
    """Test suite for TodoService."""

    def test_create_and_get_todo(self, todo_service: TodoService) -> None:
        created_todo = todo_service.create_todo(TodoCreate(title="Test todo", completed=False))

        assert created_todo.id == "1"
        assert created_todo.title == "Test todo"
        assert created_todo.completed is False

        assert todo_service.get_todo(created_todo.id) == created_todo

    def test_create_without_data(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo()
        assert todo.to_payload().keys() == {"id", "createdAt"}

    def test_ids_are_distinct(self, todo_service: TodoService) -> None:
        ids = [todo_service.create_todo(TodoCreate(title=f"Todo {i}")).id for i in range(20)]
        assert len(set(ids)) == 20
        assert ids == [str(i) for i in range(1, 21)]

    def test_get_todos_in_order(self, todo_service: TodoService) -> None:
        todo_service.create_todo(TodoCreate(title="Todo 1"))
        todo_service.create_todo(TodoCreate(title="Todo 2"))

        todos = todo_service.get_todos()
        assert [todo.title for todo in todos] == ["Todo 1", "Todo 2"]

    def test_update_preserves_untouched_fields(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo(TodoCreate(title="Original", completed=False))

        updated = todo_service.update_todo(todo.id, {"completed": True})

        assert updated.completed is True
        assert updated.title == "Original"
        assert updated.id == todo.id
        assert updated.created_at == todo.created_at
        assert todo_service.get_todo(todo.id) == updated

    def test_update_can_override_created_at(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo(TodoCreate(title="Original"))
        updated = todo_service.update_todo(todo.id, {"createdAt": "2000-01-01T00:00:00.000Z"})
        assert updated.created_at == "2000-01-01T00:00:00.000Z"

    def test_delete_todo(self, todo_service: TodoService, collection: TodoCollection) -> None:
        todo_service.create_todo(TodoCreate(title="Keep"))
        todo = todo_service.create_todo(TodoCreate(title="To delete"))
        todo_service.create_todo(TodoCreate(title="Keep too"))

        todo_service.delete_todo(todo.id)

        assert len(collection) == 2
        assert [t.title for t in todo_service.get_todos()] == ["Keep", "Keep too"]
        with raises(TodoNotFoundError):
            todo_service.get_todo(todo.id)

    def test_not_found_leaves_collection_untouched(
        self, todo_service: TodoService, collection: TodoCollection
    ) -> None:
        todo_service.create_todo(TodoCreate(title="Only"))
        snapshot = list(collection.todos)

        with raises(TodoNotFoundError) as exc_info:
            todo_service.get_todo("999")
        assert exc_info.value.todo_id == "999"
        with raises(TodoNotFoundError):
            todo_service.update_todo("999", {"title": "Nope"})
        with raises(TodoNotFoundError):
            todo_service.delete_todo("999")

        assert collection.todos == snapshot

    def test_mutations_are_logged(self, todo_service: TodoService, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="todo_api.services.todo_service"):
            todo = todo_service.create_todo(TodoCreate(title="Logged"))
            todo_service.update_todo(todo.id, {"completed": True})
            todo_service.delete_todo(todo.id)

        messages = [record.getMessage() for record in caplog.records]
        assert "Created todo id=1" in messages
        assert "Updated todo id=1 fields=['completed']" in messages
        assert "Deleted todo id=1" in messages
