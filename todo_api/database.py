"""In-memory todo collection and its startup seed."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Union

from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


@dataclass
class TodoCollection:
    """Ordered sequence of todos owned by one application instance."""

    todos: List[Todo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.todos)

    def reset(self) -> None:
        """Drop every stored todo."""
        self.todos.clear()

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "TodoCollection":
        return cls(todos=[Todo.model_validate(record) for record in records])

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TodoCollection":
        """Build a collection from a JSON array of todo objects, keeping file order."""
        return cls.from_records(load_seed(path))


def load_seed(path: Union[str, Path]) -> List[dict]:
    seed_path = Path(path)
    with seed_path.open("r", encoding="utf-8") as fh:
        try:
            payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Seed file {seed_path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise ValueError(f"Seed file {seed_path} must contain a JSON array of objects")
    logger.info("Loaded %d todos from %s", len(payload), seed_path)
    return payload
