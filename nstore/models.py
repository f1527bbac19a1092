from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


__all__ = (
    "Note",
    "State",
)


class Note(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    content: Optional[str] = None


class State(BaseModel):
    """Snapshot of every note held by a store.

    Instances are never changed in place. A transition builds a new
    ``State`` with ``model_copy(update=...)`` so untouched fields, and the
    ``Note`` objects inside ``notes``, are shared with the previous snapshot.
    """

    model_config = ConfigDict(frozen=True)

    next_note_id: int = 0
    notes: dict[int, Note] = Field(default_factory=dict)

    @classmethod
    def initial(cls) -> State:
        return cls()
