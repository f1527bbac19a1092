from __future__ import annotations

import logging

from collections.abc import Mapping
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from ._errors import InvalidAction


__all__ = (
    "CREATE_NOTE",
    "DELETE_NOTE",
    "UPDATE_NOTE",

    "Action",
    "CreateNote",
    "DeleteNote",
    "UnknownAction",
    "UpdateNote",

    "create_note",
    "delete_note",
    "update_note",
    "validate_action"
)


logger = logging.getLogger(__name__)


CREATE_NOTE = "CREATE_NOTE"
UPDATE_NOTE = "UPDATE_NOTE"
DELETE_NOTE = "DELETE_NOTE"


class CreateNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["CREATE_NOTE"] = "CREATE_NOTE"
    content: Optional[str] = None


class UpdateNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["UPDATE_NOTE"] = "UPDATE_NOTE"
    id: StrictInt
    content: Optional[str] = None


class DeleteNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["DELETE_NOTE"] = "DELETE_NOTE"
    id: StrictInt


class UnknownAction(BaseModel):
    """An action whose type tag no reducer in this package understands.

    The type tag and any payload fields are kept as given.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Any


Action = Union[CreateNote, UpdateNote, DeleteNote, UnknownAction]


_NOTE_ACTIONS = (CreateNote, UpdateNote, DeleteNote)

_MODELS_BY_TYPE: dict[str, type[BaseModel]] = {
    CREATE_NOTE: CreateNote,
    UPDATE_NOTE: UpdateNote,
    DELETE_NOTE: DeleteNote
}


def create_note(content: Optional[str] = None) -> CreateNote:
    return CreateNote(content=content)


def update_note(id: int, content: Optional[str] = None) -> UpdateNote:
    return UpdateNote(id=id, content=content)


def delete_note(id: int) -> DeleteNote:
    return DeleteNote(id=id)


def _as_record(action: Any) -> dict[str, Any]:
    if isinstance(action, BaseModel):
        fields = action.model_dump()
    elif isinstance(action, Mapping):
        fields = dict(action)
    elif hasattr(action, "__dict__") and not callable(action):
        fields = vars(action)
    else:
        raise InvalidAction("Action must be an object")

    # Payload fields are named; other keys cannot be carried by a model.
    return {
        key: value
        for key, value in fields.items()
        if isinstance(key, str)
    }


def validate_action(action: Any) -> Action:
    """Turn a mapping, model or attribute record into a typed ``Action``."""
    if isinstance(action, _NOTE_ACTIONS):
        return action

    try:
        data = _as_record(action)
    except InvalidAction:
        logger.debug("Rejected action of type %s", type(action).__name__)
        raise

    action_type = data.get("type")

    if action_type is None:
        logger.debug("Rejected action without a type: %r", data)
        raise InvalidAction("Action must have a type")

    model = _MODELS_BY_TYPE.get(action_type) \
        if isinstance(action_type, str) else None

    if model is None:
        return UnknownAction.model_validate(data)

    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError as e:
        logger.debug("Rejected %s action: %s", action_type, e)
        raise InvalidAction(f"Action payload is invalid: {e}") from e
