"""Todo data models using Pydantic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format ``moment`` (default: now) as UTC ISO 8601 with milliseconds and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TodoCreate(BaseModel):
    """Body accepted when creating a todo. Only ``title`` and ``completed`` are read."""

    title: Any = Field(None, description="The title of the todo item")
    completed: Any = Field(None, description="Indicates whether the todo item is completed")

    model_config = ConfigDict(extra="ignore")


class Todo(BaseModel):
    """A stored todo.

    The record is open: an update merges arbitrary keys into it, and those keys
    are kept and serialized alongside the named fields. Fields that were never
    supplied stay unset and are left out of the JSON payload.
    """

    id: str = Field(..., description="The unique identifier of the todo item")
    title: Any = Field(None, description="The title of the todo item")
    completed: Any = Field(None, description="Indicates whether the todo item is completed")
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="The date and time when the todo item was created",
        json_schema_extra={"format": "date-time"},
    )

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON shape of this todo, without fields that were never set."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def merged(self, changes: Mapping[str, Any]) -> "Todo":
        """Shallow-merge ``changes`` over this todo; incoming keys win, ``id`` and ``createdAt`` included."""
        return Todo.model_validate({**self.to_payload(), **changes})
