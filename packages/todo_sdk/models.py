"""Task value objects and their JSON wire codec."""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


def _id_to_str(value: object) -> object:
    """Accept integer ids from the public service; leave strings untouched."""
    if isinstance(value, bool):
        raise ValueError("id must be a string or an integer")
    if isinstance(value, int):
        return str(value)
    return value


WireId = Annotated[str, BeforeValidator(_id_to_str)]


class NewTask(BaseModel):
    """Create payload for one task; the server assigns the id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    user_id: WireId = Field(..., alias="userId")
    title: str
    completed: bool = False

    def to_json(self) -> bytes:
        """Encode as compact JSON with wire field names in wire order."""
        return _compact(self.model_dump(mode="json", by_alias=True))


class Task(BaseModel):
    """One TODO item as returned by the API.

    Only ``userId`` and ``id`` tolerate integers; every other field must
    already carry its JSON type.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    user_id: WireId = Field(..., alias="userId")
    id: WireId
    title: str
    completed: bool

    def to_json(self) -> bytes:
        """Encode as compact JSON with wire field names in wire order."""
        return _compact(self.model_dump(mode="json", by_alias=True))


_TASK_LIST = TypeAdapter(list[Task])


def decode_task(body: bytes) -> Task:
    """Decode one JSON task object; raise ``ValueError`` on any mismatch."""
    return Task.model_validate_json(body)


def decode_task_list(body: bytes) -> list[Task]:
    """Decode one JSON array of task objects, preserving server order."""
    return _TASK_LIST.validate_json(body)


def _compact(payload: dict[str, Any]) -> bytes:
    """Serialize without whitespace so Content-Length is stable."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
